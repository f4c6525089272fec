"""
Turning a finished session into perception observations.

Each player who received focus gets one Observation. Every phase the
focus covered is read through the lens that owned it, at that phase's
lens effectiveness.
"""

import logging
from typing import Mapping, Sequence

from scoutsight.core.enums import ActivityType, LensType, ObservationContext
from scoutsight.core.models.match import MatchPhase
from scoutsight.core.models.observation import Observation
from scoutsight.core.models.player import GroundTruthPlayer
from scoutsight.core.models.scout import Scout
from scoutsight.core.observation.attention import allocation_phase_effectiveness
from scoutsight.core.observation.constants import ACTIVITY_CONTEXT_MAP
from scoutsight.core.observation.types import ObservationSession
from scoutsight.core.perception import apply_lens_confidence_bonus, lens_phase_read, observe_phases
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)


def context_for_activity(activity_type: ActivityType) -> ObservationContext:
    return ACTIVITY_CONTEXT_MAP.get(activity_type, ObservationContext.LIVE_MATCH)


def _primary_lens(session: ObservationSession, player_id: str) -> LensType:
    """The lens of the player's most recent allocation."""
    for allocation in reversed(session.focus_tokens.allocations):
        if allocation.player_id == player_id:
            return allocation.lens
    return LensType.GENERAL


def collect_session_observations(
    rng: RNG,
    session: ObservationSession,
    players: Mapping[str, GroundTruthPlayer],
    scout: Scout,
    match_phases: Sequence[MatchPhase],
    context: ObservationContext,
    existing_observations: Sequence[Observation],
) -> list[Observation]:
    """
    One Observation per focused player, in the order focus was first given.

    Players missing from the ground-truth mapping are skipped. Readings in
    the domain of the player's latest lens get the lens confidence bonus.
    """
    focused_ids = list(dict.fromkeys(a.player_id for a in session.focus_tokens.allocations))
    observations: list[Observation] = []

    for player_id in focused_ids:
        player = players.get(player_id)
        if player is None:
            logger.debug("No ground truth for focused player %s, skipping", player_id)
            continue

        by_lens = allocation_phase_effectiveness(session.focus_tokens, player_id)
        plan = sorted(
            (
                lens_phase_read(phase_index, scout.skills, lens, effectiveness)
                for lens, phases in by_lens.items()
                for phase_index, effectiveness in phases.items()
            ),
            key=lambda read: read.phase_index,
        )
        lens = _primary_lens(session, player_id)

        observation = observe_phases(
            rng, player, scout, match_phases, plan, context, existing_observations,
            lens=lens,
            week=session.started_at_week,
            season=session.started_at_season,
            match_id=session.activity_instance_id,
        )
        observations.append(apply_lens_confidence_bonus(observation, lens))

    logger.debug("Collected %d observations from session %s", len(observations), session.id)
    return observations
