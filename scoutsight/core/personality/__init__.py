"""
Personality System.

Players carry hidden personality traits. Scouts discover them one at a
time, and only when an observation happens to expose them.
"""

from scoutsight.core.personality.traits import ALL_TRAITS, PersonalityTrait
from scoutsight.core.personality.generation import generate_personality_traits
from scoutsight.core.personality.reveal import (
    RevealContext,
    check_personality_reveal,
    reveal_chance,
)

__all__ = [
    "ALL_TRAITS",
    "PersonalityTrait",
    "RevealContext",
    "check_personality_reveal",
    "generate_personality_traits",
    "reveal_chance",
]
