"""
Focused observation through a lens.

A lens transiently boosts the scout skill behind its domain. The boost is
scaled by how dialled-in the scout is on that phase: half strength during
warm-up, full strength once settled, fading with fatigue. Readings in the
lens domain also get a small confidence bonus.
"""

from dataclasses import replace
from typing import Mapping, Optional, Sequence

from scoutsight.core.attributes import ATTRIBUTE_DOMAINS, AttributeDomain
from scoutsight.core.enums import LensType, ObservationContext
from scoutsight.core.models.match import MatchPhase
from scoutsight.core.models.observation import Observation
from scoutsight.core.models.player import GroundTruthPlayer
from scoutsight.core.models.scout import Scout, ScoutSkill, ScoutSkills
from scoutsight.core.numeric import clamp, round_half_up
from scoutsight.core.perception.pipeline import PhaseRead, observe_phases
from scoutsight.core.rng import RNG

LENS_SKILL_BOOST: dict[LensType, dict[ScoutSkill, int]] = {
    LensType.TECHNICAL: {ScoutSkill.TECHNICAL_EYE: 3},
    LensType.PHYSICAL: {ScoutSkill.PHYSICAL_ASSESSMENT: 3},
    LensType.MENTAL: {ScoutSkill.PSYCHOLOGICAL_READ: 3},
    LensType.TACTICAL: {ScoutSkill.TACTICAL_UNDERSTANDING: 3, ScoutSkill.PSYCHOLOGICAL_READ: 1},
    LensType.GENERAL: {},
}

LENS_DOMAIN: dict[LensType, Optional[AttributeDomain]] = {
    LensType.TECHNICAL: AttributeDomain.TECHNICAL,
    LensType.PHYSICAL: AttributeDomain.PHYSICAL,
    LensType.MENTAL: AttributeDomain.MENTAL,
    LensType.TACTICAL: AttributeDomain.TACTICAL,
    LensType.GENERAL: None,
}

LENS_CONFIDENCE_BONUS = 0.05


def lens_phase_read(
    phase_index: int,
    skills: ScoutSkills,
    lens: LensType,
    effectiveness: float,
) -> PhaseRead:
    """
    Skills and extra noise for one phase watched through a lens.

    Effectiveness 1.0 gives the full boost and no extra noise. Lower values
    scale the boost down and add noise of 2 - effectiveness, so the warm-up
    phase (0.5) reads at 1.5x noise.
    """
    effectiveness = clamp(effectiveness, 0.0, 1.0)
    boosts = {
        skill: round_half_up(amount * effectiveness)
        for skill, amount in LENS_SKILL_BOOST[lens].items()
    }
    return PhaseRead(
        phase_index=phase_index,
        skills=skills.with_boosts(boosts),
        extra_noise=2.0 - effectiveness,
    )


def apply_lens_confidence_bonus(observation: Observation, lens: LensType) -> Observation:
    """Raise confidence on readings in the lens domain, capped at 1.0."""
    domain = LENS_DOMAIN[lens]
    if domain is None:
        return observation

    readings = tuple(
        replace(r, confidence=min(1.0, r.confidence + LENS_CONFIDENCE_BONUS))
        if ATTRIBUTE_DOMAINS[r.attribute] == domain
        else r
        for r in observation.attribute_readings
    )
    return replace(observation, attribute_readings=readings)


def observe_focused_player(
    rng: RNG,
    player: GroundTruthPlayer,
    scout: Scout,
    match_phases: Sequence[MatchPhase],
    lens: LensType,
    phase_effectiveness: Mapping[int, float],
    context: ObservationContext,
    existing_observations: Sequence[Observation],
    week: int = 0,
    season: int = 0,
    match_id: Optional[str] = None,
) -> Observation:
    """
    Observe a focused player through a lens.

    Args:
        phase_effectiveness: Phase index to lens effectiveness (0-1) for
            every phase the focus covered, as computed by the attention
            helpers.
    """
    plan = [
        lens_phase_read(index, scout.skills, lens, phase_effectiveness[index])
        for index in sorted(phase_effectiveness)
    ]
    observation = observe_phases(
        rng, player, scout, match_phases, plan, context, existing_observations,
        lens=lens, week=week, season=season, match_id=match_id,
    )
    return apply_lens_confidence_bonus(observation, lens)
