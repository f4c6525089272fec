"""
Visibility layer: which attributes a scout can read at all.

Ordering matters for determinism. Results keep insertion order (phase set,
then event reveals, then skill bonuses) and never go through a set.
"""

from typing import Iterable

from scoutsight.core.attributes import HIDDEN_ATTRIBUTES, PlayerAttribute
from scoutsight.core.enums import ObservationContext
from scoutsight.core.models.match import MatchPhase
from scoutsight.core.models.scout import ScoutSkills
from scoutsight.core.perception.tables import (
    BONUS_VISIBILITY,
    CONTEXT_VISIBLE_ATTRIBUTES,
    PASSIVE_ATTRIBUTES,
    PHASE_VISIBLE_ATTRIBUTES,
)


def _with_bonuses(
    base: Iterable[PlayerAttribute],
    skills: ScoutSkills,
) -> list[PlayerAttribute]:
    visible = dict.fromkeys(base)
    for bonus in BONUS_VISIBILITY:
        if bonus.attribute not in visible and skills.get(bonus.skill) >= bonus.min_level:
            visible[bonus.attribute] = None
    return [attr for attr in visible if attr not in HIDDEN_ATTRIBUTES]


def get_visible_attributes(phase: MatchPhase, skills: ScoutSkills) -> list[PlayerAttribute]:
    """
    Attributes observable in a match phase.

    The union of the phase type's natural set, anything the phase's events
    reveal, and the skill-gated bonus attributes. Hidden attributes are
    always removed, whatever the events claim to reveal.
    """
    base: list[PlayerAttribute] = list(PHASE_VISIBLE_ATTRIBUTES[phase.phase_type])
    for event in phase.events:
        base.extend(event.attributes_revealed)
    return _with_bonuses(base, skills)


def get_context_visible_attributes(
    context: ObservationContext,
    skills: ScoutSkills,
) -> list[PlayerAttribute]:
    """Attributes observable in a context without match phases."""
    return _with_bonuses(CONTEXT_VISIBLE_ATTRIBUTES.get(context, ()), skills)


def get_passive_attributes() -> list[PlayerAttribute]:
    """Off-ball attributes readable while the player is not involved."""
    return [attr for attr in PASSIVE_ATTRIBUTES if attr not in HIDDEN_ATTRIBUTES]
