"""
Personality trait generation.

Each player receives 2-4 traits, weighted by position group and
development profile, drawn without replacement.
"""

from scoutsight.core.enums import DevelopmentProfile, Position, PositionGroup
from scoutsight.core.personality.traits import ALL_TRAITS, PersonalityTrait
from scoutsight.core.personality.traits import PersonalityTrait as T
from scoutsight.core.rng import RNG

MIN_TRAITS = 2
MAX_TRAITS = 4

# Multipliers on a base weight of 1.0; omitted traits stay at 1.0
POSITION_TRAIT_WEIGHTS: dict[PositionGroup, dict[PersonalityTrait, float]] = {
    PositionGroup.GOALKEEPER: {
        T.PROFESSIONAL: 2.0,
        T.PRESSURE_PLAYER: 1.5,
        T.LEADER: 1.3,
        T.DETERMINED: 1.2,
    },
    PositionGroup.DEFENDER: {
        T.DETERMINED: 2.0,
        T.LEADER: 1.5,
        T.PROFESSIONAL: 1.5,
        T.LOYAL: 1.3,
        T.INTROVERT: 1.1,
    },
    PositionGroup.MIDFIELDER: {
        T.FLAIR: 1.5,
        T.PROFESSIONAL: 1.5,
        T.EASYGOING: 1.2,
        T.DETERMINED: 1.2,
        T.LEADER: 1.1,
    },
    PositionGroup.FORWARD: {
        T.AMBITIOUS: 2.0,
        T.FLAIR: 1.5,
        T.TEMPERAMENTAL: 1.3,
        T.BIG_GAME_PLAYER: 1.5,
        T.CONTROVERSIAL_CHARACTER: 1.2,
        T.PRESSURE_PLAYER: 1.2,
    },
}

DEVELOPMENT_TRAIT_WEIGHTS: dict[DevelopmentProfile, dict[PersonalityTrait, float]] = {
    DevelopmentProfile.EARLY_BLOOMER: {
        T.AMBITIOUS: 1.5,
        T.PRESSURE_PLAYER: 1.3,
        T.TEMPERAMENTAL: 1.2,
    },
    DevelopmentProfile.LATE_BLOOMER: {
        T.DETERMINED: 2.0,
        T.LATE_DEVELOPER: 3.0,
        T.PROFESSIONAL: 1.5,
        T.LOYAL: 1.2,
    },
    DevelopmentProfile.STEADY_GROWER: {
        T.PROFESSIONAL: 2.0,
        T.MODEL_CITIZEN: 1.5,
        T.LOYAL: 1.5,
        T.EASYGOING: 1.2,
    },
    DevelopmentProfile.VOLATILE: {
        T.INCONSISTENT: 2.5,
        T.TEMPERAMENTAL: 1.5,
        T.FLAIR: 1.5,
        T.CONTROVERSIAL_CHARACTER: 1.3,
    },
}


def trait_weights(
    position: Position,
    development_profile: DevelopmentProfile,
) -> list[tuple[PersonalityTrait, float]]:
    """Weight for every trait: position multiplier times development multiplier."""
    pos_weights = POSITION_TRAIT_WEIGHTS[position.group]
    dev_weights = DEVELOPMENT_TRAIT_WEIGHTS[development_profile]
    return [
        (trait, pos_weights.get(trait, 1.0) * dev_weights.get(trait, 1.0))
        for trait in ALL_TRAITS
    ]


def generate_personality_traits(
    rng: RNG,
    position: Position,
    development_profile: DevelopmentProfile,
) -> list[PersonalityTrait]:
    """
    Generate 2-4 personality traits for a player.

    The count is drawn evenly from {2, 3, 4}. No trait appears twice.
    """
    count = rng.next_int(MIN_TRAITS, MAX_TRAITS)
    pool = trait_weights(position, development_profile)

    traits: list[PersonalityTrait] = []
    for _ in range(count):
        if not pool:
            break
        picked = rng.pick_weighted(pool)
        traits.append(picked)
        pool = [(trait, weight) for trait, weight in pool if trait != picked]
    return traits
