"""
Personality trait reveal during observation.

Each observation event gives the scout one chance to discover a trait the
player has kept hidden so far. The probability depends on:
- Base chance (8%)
- The scout's psychological read
- Whether the scout is watching through the mental lens
- Whether the setting offers close personal contact

Settings have an affinity list: a youth tournament exposes flair and
temperament, a training visit exposes professionalism. A successful roll
picks from the player's hidden traits that the setting can expose, falling
back to any hidden trait so the roll is never wasted.
"""

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Union

from scoutsight.core.enums import ActivityType, LensType, ObservationContext
from scoutsight.core.models.scout import ScoutSkill
from scoutsight.core.personality.traits import PersonalityTrait as T
from scoutsight.core.personality.traits import PersonalityTrait
from scoutsight.core.rng import RNG

if TYPE_CHECKING:
    from scoutsight.core.models.player import GroundTruthPlayer
    from scoutsight.core.models.scout import Scout

logger = logging.getLogger(__name__)

BASE_REVEAL_CHANCE = 0.08
PSYCHOLOGICAL_READ_THRESHOLD = 3
PSYCHOLOGICAL_READ_BONUS = 0.05
MENTAL_LENS_BONUS = 0.05
CLOSE_CONTACT_BONUS = 0.03

# Keyed by setting value so activity types and observation contexts that
# share a name share an entry.
_TRAINING = (T.PROFESSIONAL, T.DETERMINED, T.EASYGOING, T.MODEL_CITIZEN, T.AMBITIOUS, T.INTROVERT)
_TRIAL = (T.AMBITIOUS, T.FLAIR, T.LATE_DEVELOPER, T.PRESSURE_PLAYER, T.EASYGOING)
_TOURNAMENT = (T.FLAIR, T.BIG_GAME_PLAYER, T.PRESSURE_PLAYER, T.TEMPERAMENTAL, T.INCONSISTENT, T.DETERMINED)

CONTEXT_TRAIT_AFFINITY: dict[str, tuple[PersonalityTrait, ...]] = {
    ObservationContext.LIVE_MATCH.value: (
        T.BIG_GAME_PLAYER,
        T.PRESSURE_PLAYER,
        T.TEMPERAMENTAL,
        T.LEADER,
        T.INCONSISTENT,
        T.FLAIR,
        T.CONTROVERSIAL_CHARACTER,
    ),
    ActivityType.TRAINING_VISIT.value: _TRAINING,
    ObservationContext.TRAINING_GROUND.value: _TRAINING,
    ActivityType.YOUTH_TRIAL.value: _TRIAL,
    ActivityType.ACADEMY_TRIAL_DAY.value: _TRIAL,
    ActivityType.FOLLOW_UP_SESSION.value: (
        T.PROFESSIONAL,
        T.DETERMINED,
        T.LOYAL,
        T.AMBITIOUS,
        T.EASYGOING,
        T.INTROVERT,
    ),
    ObservationContext.YOUTH_TOURNAMENT.value: _TOURNAMENT,
    ActivityType.YOUTH_FESTIVAL.value: _TOURNAMENT,
}

# Settings that put the scout close to the player
CLOSE_CONTACT_SETTINGS: frozenset[str] = frozenset({
    ActivityType.TRAINING_VISIT.value,
    ObservationContext.TRAINING_GROUND.value,
    ActivityType.YOUTH_TRIAL.value,
    ActivityType.ACADEMY_TRIAL_DAY.value,
    ActivityType.FOLLOW_UP_SESSION.value,
    ActivityType.PARENT_COACH_MEETING.value,
})


@dataclass(frozen=True)
class RevealContext:
    """Where the observation happened and which lens was in use."""

    setting: Union[ActivityType, ObservationContext]
    lens: Optional[LensType] = None


def reveal_chance(scout: "Scout", context: RevealContext) -> float:
    """Probability that one observation event reveals a trait."""
    chance = BASE_REVEAL_CHANCE
    if scout.skill(ScoutSkill.PSYCHOLOGICAL_READ) >= PSYCHOLOGICAL_READ_THRESHOLD:
        chance += PSYCHOLOGICAL_READ_BONUS
    if context.lens == LensType.MENTAL:
        chance += MENTAL_LENS_BONUS
    if context.setting.value in CLOSE_CONTACT_SETTINGS:
        chance += CLOSE_CONTACT_BONUS
    return chance


def eligible_traits(
    hidden: list[PersonalityTrait],
    context: RevealContext,
) -> list[PersonalityTrait]:
    """Hidden traits this setting can expose, or all hidden traits if none match."""
    affinity = CONTEXT_TRAIT_AFFINITY.get(context.setting.value)
    if affinity is None:
        return hidden
    matching = [t for t in hidden if t in affinity]
    return matching or hidden


def check_personality_reveal(
    rng: RNG,
    scout: "Scout",
    player: "GroundTruthPlayer",
    context: RevealContext,
    revealed: Iterable[PersonalityTrait] = (),
) -> Optional[PersonalityTrait]:
    """
    Roll once for a personality reveal.

    Evaluate once per observation event, not once per phase.

    Args:
        rng: Random source
        scout: The observing scout
        player: The observed player (true traits)
        context: Setting and lens
        revealed: Traits this scout already knows about the player

    Returns:
        The newly revealed trait, or None
    """
    hidden = player.hidden_traits(revealed)
    if not hidden:
        return None

    if rng.next() >= reveal_chance(scout, context):
        return None

    trait = rng.pick(eligible_traits(hidden, context))
    logger.debug("Revealed trait %s for player %s", trait.value, player.id)
    return trait
