"""
Observation pipelines.

Turns ground truth into an Observation record: which phases were watched,
which attributes were visible in each, and one noisy read per visible
attribute per phase. Reads of the same attribute are averaged at the end.

Two entry points:
- observe_player: match-based, driven by match phases
- observe_player_light: calendar activities with no match phases
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from scoutsight.core.ability.star_rating import generate_ability_reading
from scoutsight.core.attributes import ATTRIBUTE_DOMAINS, PlayerAttribute
from scoutsight.core.enums import LensType, ObservationContext
from scoutsight.core.models.match import MatchPhase
from scoutsight.core.models.observation import (
    AttributeReading,
    FlaggedMoment,
    Observation,
)
from scoutsight.core.models.player import GroundTruthPlayer
from scoutsight.core.models.scout import Scout, ScoutSkills
from scoutsight.core.numeric import round_half_up
from scoutsight.core.perception.accuracy import perceive_attribute
from scoutsight.core.perception.confidence import calculate_confidence_range
from scoutsight.core.perception.tables import CONTEXT_LABELS
from scoutsight.core.perception.visibility import (
    get_context_visible_attributes,
    get_passive_attributes,
    get_visible_attributes,
)
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)

# Penalty factor for reads of a player away from the action
PASSIVE_EXTRA_NOISE = 1.5

STANDOUT_QUALITY = 8
CONCERN_QUALITY = 2
DEFAULT_MOMENT_ATTRIBUTE = PlayerAttribute.COMPOSURE

LIGHT_MIN_ATTRIBUTES = 4
LIGHT_MAX_ATTRIBUTES = 7


@dataclass(frozen=True)
class PhaseRead:
    """How the scout watches one phase: with which skills and how much extra noise."""

    phase_index: int
    skills: ScoutSkills
    extra_noise: float = 1.0


@dataclass
class _ReadingBucket:
    values: list[int] = field(default_factory=list)
    confidences: list[float] = field(default_factory=list)


def prior_reading_counts(
    existing_observations: Iterable[Observation],
    player_id: str,
) -> dict[PlayerAttribute, int]:
    """Total prior reads per attribute for a player."""
    counts: dict[PlayerAttribute, int] = {}
    for obs in existing_observations:
        if obs.player_id != player_id:
            continue
        for reading in obs.attribute_readings:
            counts[reading.attribute] = counts.get(reading.attribute, 0) + reading.observation_count
    return counts


def context_diversity(existing_observations: Iterable[Observation], player_id: str) -> float:
    """0-1: distinct prior observations of the player, saturating at 10."""
    prior = sum(1 for o in existing_observations if o.player_id == player_id)
    return min(1.0, prior / 10)


def effective_skill(skill: int, extra_noise: float) -> int:
    """Skill after an extra-noise penalty; 1.5 costs three points."""
    if extra_noise <= 1:
        return skill
    return max(1, skill - round_half_up((extra_noise - 1) * 5))


def _observation_id(rng: RNG, player_id: str) -> str:
    return f"obs_{player_id[:8]}_{rng.next_int(100000, 999999):x}"


class _ReadingCollector:
    """Accumulates per-attribute reads for one player within one observation."""

    def __init__(
        self,
        rng: RNG,
        player: GroundTruthPlayer,
        context: ObservationContext,
        existing_observations: Sequence[Observation],
    ) -> None:
        self.rng = rng
        self.player = player
        self.context = context
        self.prior_counts = prior_reading_counts(existing_observations, player.id)
        self.diversity = context_diversity(existing_observations, player.id)
        self._buckets: dict[PlayerAttribute, _ReadingBucket] = {}

    def add(self, attribute: PlayerAttribute, skills: ScoutSkills, extra_noise: float = 1.0) -> None:
        skill = skills.for_domain(ATTRIBUTE_DOMAINS[attribute])
        perception = perceive_attribute(
            self.rng,
            self.player.attribute(attribute),
            effective_skill(skill, extra_noise),
            self.prior_counts.get(attribute, 0) + 1,
            self.diversity,
            self.player.form,
            self.context,
        )
        bucket = self._buckets.setdefault(attribute, _ReadingBucket())
        bucket.values.append(perception.perceived_value)
        bucket.confidences.append(perception.confidence)

    def readings(self, range_skills: ScoutSkills) -> tuple[AttributeReading, ...]:
        """Average the collected reads and attach a confidence range."""
        results = []
        for attribute, bucket in self._buckets.items():
            perceived = round_half_up(sum(bucket.values) / len(bucket.values))
            confidence = sum(bucket.confidences) / len(bucket.confidences)
            total = self.prior_counts.get(attribute, 0) + len(bucket.values)
            low, high = calculate_confidence_range(
                perceived,
                confidence,
                range_skills.for_domain(ATTRIBUTE_DOMAINS[attribute]),
                total,
            )
            results.append(AttributeReading(
                attribute=attribute,
                perceived_value=perceived,
                confidence=confidence,
                observation_count=total,
                range_low=low,
                range_high=high,
            ))
        return tuple(results)


def _notable_moments(phase: MatchPhase, phase_index: int, player_id: str) -> list[FlaggedMoment]:
    moments = []
    for event in phase.events_for(player_id):
        if STANDOUT_QUALITY > event.quality > CONCERN_QUALITY:
            continue
        attribute = event.attributes_revealed[0] if event.attributes_revealed else DEFAULT_MOMENT_ATTRIBUTE
        moments.append(FlaggedMoment(
            phase=phase_index,
            description=event.description,
            attribute=attribute,
            positive=event.quality >= STANDOUT_QUALITY,
        ))
    return moments


def _match_notes(player: GroundTruthPlayer, reading_count: int, moments: list[FlaggedMoment]) -> list[str]:
    notes = [f"Observed {player.full_name}: {reading_count} attributes assessed."]
    positive = sum(1 for m in moments if m.positive)
    negative = len(moments) - positive
    if positive:
        notes.append(f"{positive} standout moment{'s' if positive > 1 else ''}.")
    if negative:
        notes.append(f"{negative} concern{'s' if negative > 1 else ''}.")
    return notes


def observe_phases(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    match_phases: Sequence[MatchPhase],
    plan: Sequence[PhaseRead],
    context: ObservationContext,
    existing_observations: Sequence[Observation],
    lens: Optional[LensType] = None,
    week: int = 0,
    season: int = 0,
    match_id: Optional[str] = None,
) -> Observation:
    """
    Observe a player across a plan of phases.

    Phases the player is involved in yield the phase's visible attributes.
    Phases without the player yield only the passive off-ball reads, at a
    skill penalty. Phase indexes outside match_phases are skipped.
    """
    collector = _ReadingCollector(rng, player, context, existing_observations)
    flagged: list[FlaggedMoment] = []

    for step in plan:
        if not 0 <= step.phase_index < len(match_phases):
            continue
        phase = match_phases[step.phase_index]

        if not phase.involves(player.id):
            for attribute in get_passive_attributes():
                collector.add(attribute, step.skills, step.extra_noise * PASSIVE_EXTRA_NOISE)
            continue

        for attribute in get_visible_attributes(phase, step.skills):
            collector.add(attribute, step.skills, step.extra_noise)
        flagged.extend(_notable_moments(phase, step.phase_index, player.id))

    readings = collector.readings(scout.skills)
    obs_id = _observation_id(rng, player.id)
    ability = generate_ability_reading(rng, player, scout, existing_observations, context)

    logger.debug(
        "Observed %s across %d phases: %d readings, %d moments",
        player.id, len(plan), len(readings), len(flagged),
    )
    return Observation(
        id=obs_id,
        player_id=player.id,
        scout_id=scout.id,
        context=context,
        attribute_readings=readings,
        ability_reading=ability,
        flagged_moments=tuple(flagged),
        notes=tuple(_match_notes(player, len(readings), flagged)),
        week=week,
        season=season,
        match_id=match_id,
        focus_lens=lens,
    )


def observe_player(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    match_phases: Sequence[MatchPhase],
    focused_phases: Iterable[int],
    context: ObservationContext,
    existing_observations: Sequence[Observation],
    lens: Optional[LensType] = None,
    week: int = 0,
    season: int = 0,
    match_id: Optional[str] = None,
) -> Observation:
    """Full pipeline: observe a player over the given match phase indexes."""
    plan = [PhaseRead(index, scout.skills) for index in focused_phases]
    return observe_phases(
        rng, player, scout, match_phases, plan, context, existing_observations,
        lens=lens, week=week, season=season, match_id=match_id,
    )


def observe_player_light(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    context: ObservationContext,
    existing_observations: Sequence[Observation],
    week: int = 0,
    season: int = 0,
) -> Observation:
    """
    Light pipeline for calendar activities without match phases.

    Reads 4-7 attributes drawn from the context's visible set, one read each.
    """
    collector = _ReadingCollector(rng, player, context, existing_observations)

    pool = get_context_visible_attributes(context, scout.skills)
    count = min(len(pool), rng.next_int(LIGHT_MIN_ATTRIBUTES, LIGHT_MAX_ATTRIBUTES))
    for _ in range(count):
        collector.add(pool.pop(rng.next_int(0, len(pool) - 1)), scout.skills)

    readings = collector.readings(scout.skills)
    obs_id = _observation_id(rng, player.id)
    label = CONTEXT_LABELS.get(context, "observation")
    ability = generate_ability_reading(rng, player, scout, existing_observations, context)

    return Observation(
        id=obs_id,
        player_id=player.id,
        scout_id=scout.id,
        context=context,
        attribute_readings=readings,
        ability_reading=ability,
        notes=(f"Observed {player.full_name} during {label}: {len(readings)} attributes assessed.",),
        week=week,
        season=season,
    )
