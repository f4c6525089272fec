"""Ability estimation: perceived CA/PA as half-star ratings."""

from scoutsight.core.ability.star_rating import (
    ability_to_stars,
    age_factor,
    generate_ability_reading,
    perceive_ca,
    perceive_pa,
    stars_to_ability,
)
from scoutsight.core.ability.perceived import PerceivedAbility, get_perceived_ability

__all__ = [
    "PerceivedAbility",
    "ability_to_stars",
    "age_factor",
    "generate_ability_reading",
    "get_perceived_ability",
    "perceive_ca",
    "perceive_pa",
    "stars_to_ability",
]
