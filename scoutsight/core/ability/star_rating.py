"""
Star ratings for current and potential ability.

Internal ability lives on a 1-200 scale. Scouts report it as half stars
from 0.5 to 5.0:

    CA   1-20  -> 0.5     CA 101-120 -> 3.0
    CA  21-40  -> 1.0     CA 121-140 -> 3.5
    CA  41-60  -> 1.5     CA 141-160 -> 4.0
    CA  61-80  -> 2.0     CA 161-180 -> 4.5
    CA  81-100 -> 2.5     CA 181-200 -> 5.0

CA reads follow the same Gaussian pattern as attribute reads, driven by
player judgment. PA reads are driven by potential assessment and also
depend on the player's age: youngsters are hard to project, veterans are
not.
"""

import math
from dataclasses import dataclass
from typing import Sequence

from scoutsight.core.enums import ObservationContext as C
from scoutsight.core.enums import ObservationContext
from scoutsight.core.models.observation import AbilityReading, Observation
from scoutsight.core.models.player import GroundTruthPlayer
from scoutsight.core.models.scout import Scout, ScoutSkill
from scoutsight.core.numeric import clamp, round_half_up, snap_to_half
from scoutsight.core.rng import RNG

MIN_ABILITY = 1
MAX_ABILITY = 200
MIN_STARS = 0.5
MAX_STARS = 5.0

CA_FORM_BIAS_MULTIPLIER = 3  # +-9 CA points at extreme form
CA_MIN_STDDEV = 5.0
PA_MIN_STDDEV = 7.5

YOUTH_AGE = 21
VETERAN_AGE = 28
VETERAN_AGE_FACTOR = 0.7

CA_CONTEXT_NOISE: dict[ObservationContext, float] = {
    C.LIVE_MATCH: 1.0,
    C.VIDEO_ANALYSIS: 1.3,
    C.TRAINING_GROUND: 0.8,
    C.YOUTH_TOURNAMENT: 1.1,
    C.ACADEMY_VISIT: 0.9,
    C.SCHOOL_MATCH: 1.2,
    C.GRASSROOTS_TOURNAMENT: 1.3,
    C.STREET_FOOTBALL: 1.4,
    C.ACADEMY_TRIAL_DAY: 0.85,
    C.YOUTH_FESTIVAL: 1.1,
    C.FOLLOW_UP_SESSION: 0.9,
    C.PARENT_COACH_MEETING: 2.0,
    # First team: good for current ability
    C.RESERVE_MATCH: 0.85,
    C.OPPOSITION_ANALYSIS: 1.0,
    C.AGENT_SHOWCASE: 1.1,
    C.TRIAL_MATCH: 0.7,
    # Data: stats-based estimation
    C.DATABASE_QUERY: 1.5,
    C.STATS_BRIEFING: 1.4,
    C.DEEP_VIDEO_ANALYSIS: 1.0,
}

PA_CONTEXT_NOISE: dict[ObservationContext, float] = {
    C.LIVE_MATCH: 1.0,
    C.VIDEO_ANALYSIS: 1.5,
    C.TRAINING_GROUND: 1.0,
    C.YOUTH_TOURNAMENT: 0.75,
    C.ACADEMY_VISIT: 0.8,
    C.SCHOOL_MATCH: 1.1,
    C.GRASSROOTS_TOURNAMENT: 1.0,
    C.STREET_FOOTBALL: 0.9,
    C.ACADEMY_TRIAL_DAY: 0.8,
    C.YOUTH_FESTIVAL: 0.85,
    C.FOLLOW_UP_SESSION: 0.85,
    C.PARENT_COACH_MEETING: 2.0,
    # First team: focus is current readiness, projection suffers
    C.RESERVE_MATCH: 1.2,
    C.OPPOSITION_ANALYSIS: 1.4,
    C.AGENT_SHOWCASE: 1.3,
    C.TRIAL_MATCH: 1.1,
    # Data: trend data helps projection
    C.DATABASE_QUERY: 1.3,
    C.STATS_BRIEFING: 1.2,
    C.DEEP_VIDEO_ANALYSIS: 1.1,
}

# Youth contexts where projection is the whole point
PA_CONFIDENCE_BONUS_CONTEXTS = frozenset({C.ACADEMY_VISIT, C.YOUTH_TOURNAMENT})


@dataclass(frozen=True)
class CAPerception:
    perceived_ca: float
    confidence: float


@dataclass(frozen=True)
class PAPerception:
    low: float
    high: float
    confidence: float


def ability_to_stars(ability: float) -> float:
    """Map a 1-200 ability to 0.5-5.0 stars, snapped to the nearest half."""
    clamped = clamp(ability, MIN_ABILITY, MAX_ABILITY)
    return snap_to_half(MIN_STARS + (clamped - MIN_ABILITY) / 199 * 4.5)


def stars_to_ability(stars: float) -> int:
    """Midpoint 1-200 ability for a star rating."""
    clamped = clamp(stars, MIN_STARS, MAX_STARS)
    return round_half_up((clamped - MIN_STARS) / 4.5 * 199 + MIN_ABILITY)


def age_factor(age: int, potential_skill: int) -> float:
    """
    PA uncertainty multiplier by age.

    Up to 21 the factor is 1.2 reduced by skill (1.17 at skill 1, 0.9 at
    skill 20). From 28 it is a flat 0.7. In between it falls linearly from
    1.0 at 22.
    """
    if age <= YOUTH_AGE:
        return 1.2 - potential_skill / 20 * 0.3
    if age >= VETERAN_AGE:
        return VETERAN_AGE_FACTOR
    return 1.0 - (age - 22) / 6 * 0.3


def _diversity_factor(context_diversity: float) -> float:
    return 1 - min(0.3, context_diversity * 0.3)


def _ability_skill(scout: Scout, skill: ScoutSkill) -> int:
    return int(clamp(scout.skill(skill), 1, 20))


def perceive_ca(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    observation_count: int,
    context_diversity: float,
    context: ObservationContext,
) -> CAPerception:
    skill = _ability_skill(scout, ScoutSkill.PLAYER_JUDGMENT)
    count = max(1, observation_count)

    base = max(CA_MIN_STDDEV, (20 - skill) * 1.5)
    stddev = (base / math.sqrt(count)) * _diversity_factor(context_diversity) * CA_CONTEXT_NOISE[context]

    raw = rng.gaussian(player.current_ability + player.form * CA_FORM_BIAS_MULTIPLIER, stddev)
    clamped = clamp(round_half_up(raw), MIN_ABILITY, MAX_ABILITY)

    adjustment = 0.0
    if context == C.TRAINING_GROUND:
        adjustment = 0.05
    elif context == C.VIDEO_ANALYSIS:
        adjustment = -0.05
    raw_confidence = (
        skill / 20 * 0.5
        + min(0.35, (1 - 1 / math.sqrt(count)) * 0.35)
        + context_diversity * 0.1
        + adjustment
    )
    return CAPerception(
        perceived_ca=ability_to_stars(clamped),
        confidence=clamp(raw_confidence, 0.0, 1.0),
    )


def perceive_pa(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    observation_count: int,
    context_diversity: float,
    context: ObservationContext,
) -> PAPerception:
    skill = _ability_skill(scout, ScoutSkill.POTENTIAL_ASSESSMENT)
    count = max(1, observation_count)
    factor = age_factor(player.age, skill)

    base = max(PA_MIN_STDDEV, (20 - skill) * 2.0)
    stddev = (base * factor / math.sqrt(count)) * _diversity_factor(context_diversity) * PA_CONTEXT_NOISE[context]

    raw = rng.gaussian(player.potential_ability, stddev)
    midpoint = ability_to_stars(clamp(round_half_up(raw), MIN_ABILITY, MAX_ABILITY))

    range_width = max(0.5, (20 - skill) / 3 * factor / (1 + count * 0.2))
    half_range = round_half_up(range_width * 2) / 4  # quarter stars
    low = max(MIN_STARS, snap_to_half(midpoint - half_range))
    high = min(MAX_STARS, snap_to_half(midpoint + half_range))

    raw_confidence = (
        skill / 20 * 0.45
        + min(0.3, (1 - 1 / math.sqrt(count)) * 0.3)
        + context_diversity * 0.1
        + (0.05 if context in PA_CONFIDENCE_BONUS_CONTEXTS else 0.0)
        + (0.1 if player.age >= VETERAN_AGE else 0.0)
    )
    return PAPerception(low=low, high=high, confidence=clamp(raw_confidence, 0.0, 1.0))


def generate_ability_reading(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    existing_observations: Sequence[Observation],
    context: ObservationContext,
) -> AbilityReading:
    """
    Perceive CA and PA for one observation.

    The PA window is raised so its low bound never sits below the
    perceived CA.
    """
    prior = sum(1 for o in existing_observations if o.player_id == player.id)
    count = prior + 1
    diversity = min(1.0, prior / 10)

    ca = perceive_ca(rng, player, scout, count, diversity, context)
    pa = perceive_pa(rng, player, scout, count, diversity, context)

    pa_low = max(pa.low, ca.perceived_ca)
    pa_high = max(pa.high, pa_low)

    return AbilityReading(
        perceived_ca=ca.perceived_ca,
        ca_confidence=ca.confidence,
        perceived_pa_low=pa_low,
        perceived_pa_high=pa_high,
        pa_confidence=pa.confidence,
        observation_count=count,
    )
