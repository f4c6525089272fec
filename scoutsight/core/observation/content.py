"""
Filling skeleton session phases with generated content.

The engine does not write narrative itself. Content generators hand back
phases, and the description table is supplied by the caller.
"""

import logging
from dataclasses import replace
from typing import Mapping, Optional, Sequence

from scoutsight.core.enums import ActivityType, SessionState
from scoutsight.core.observation.types import ObservationSession, SessionPhase
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)

PhaseDescriptionTable = Mapping[ActivityType, Sequence[str]]

GENERIC_PHASE_DESCRIPTION = "Phase {number}: you take in what unfolds in front of you."

DEFAULT_PHASE_DESCRIPTIONS: dict[ActivityType, tuple[str, ...]] = {
    ActivityType.ATTEND_MATCH: (
        "The home side push high from the restart.",
        "A spell of patient possession in midfield.",
        "The tempo lifts as both sides chase the game.",
        "Set pieces start to dominate the contest.",
    ),
    ActivityType.SCHOOL_MATCH: (
        "Parents line the touchline as the game kicks off.",
        "The pitch is bobbly and passes skip off the surface.",
        "Staff on the sideline bark instructions at every stoppage.",
    ),
    ActivityType.TRAINING_VISIT: (
        "Players work through a rondo in tight groups.",
        "The coach sets up a small-sided game.",
        "A finishing drill runs at the far end.",
    ),
    ActivityType.WATCH_VIDEO: (
        "You scrub back to the first half build-up.",
        "A wide camera angle shows the team's shape.",
        "You slow the footage around a key transition.",
    ),
    ActivityType.FOLLOW_UP_SESSION: (
        "The coach walks you through the player's week.",
        "You ask about the player's habits away from the pitch.",
    ),
}


def populate_phases(session: ObservationSession, phases: Sequence[SessionPhase]) -> ObservationSession:
    """
    Install generated phase content into a session in setup.

    The phase count must match the skeleton. Each phase keeps the
    skeleton's index, minute and half-time flag so timeline structure
    cannot drift from what the session was created with.
    """
    if session.state != SessionState.SETUP:
        logger.debug("populate_phases ignored: session %s is %s", session.id, session.state.value)
        return session
    if len(phases) != len(session.phases):
        logger.debug(
            "populate_phases ignored: %d phases for a %d phase session",
            len(phases), len(session.phases),
        )
        return session

    merged = tuple(
        replace(generated, index=skeleton.index, minute=skeleton.minute, is_half_time=skeleton.is_half_time)
        for skeleton, generated in zip(session.phases, phases)
    )
    return replace(session, phases=merged)


def apply_phase_descriptions(
    session: ObservationSession,
    rng: RNG,
    templates: Optional[PhaseDescriptionTable] = None,
) -> ObservationSession:
    """Give every phase without a description one from the table."""
    if templates is None:
        templates = DEFAULT_PHASE_DESCRIPTIONS
    options = templates.get(session.activity_type, ())

    phases = []
    for phase in session.phases:
        if phase.description:
            phases.append(phase)
            continue
        if options:
            description = rng.pick(options)
        else:
            description = GENERIC_PHASE_DESCRIPTION.format(number=phase.index + 1)
        phases.append(replace(phase, description=description))
    return replace(session, phases=tuple(phases))


def get_current_phase(session: ObservationSession) -> Optional[SessionPhase]:
    return session.current_phase
