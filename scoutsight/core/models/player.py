"""Ground-truth player record."""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from scoutsight.core.attributes import PlayerAttribute, PlayerAttributes
from scoutsight.core.enums import Position
from scoutsight.core.personality.traits import PersonalityTrait

MIN_ABILITY = 1
MAX_ABILITY = 200
MIN_FORM = -3
MAX_FORM = 3


@dataclass(frozen=True)
class GroundTruthPlayer:
    """
    The objective truth about a player.

    Treated as immutable for the duration of a session. The scout never
    reads these values directly - only through the perception model.

    Current and potential ability are on a 1-200 scale; potential is
    always at least current ability. Form runs from -3 (terrible) to +3
    (flying) and biases what a scout perceives.
    """

    id: str
    first_name: str
    last_name: str
    position: Position
    age: int
    current_ability: int
    potential_ability: int
    attributes: PlayerAttributes = field(default_factory=PlayerAttributes)
    form: int = 0
    personality_traits: tuple[PersonalityTrait, ...] = ()
    club: Optional[str] = None

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError(f"Player age cannot be negative, got {self.age}")
        if not MIN_ABILITY <= self.current_ability <= MAX_ABILITY:
            raise ValueError(f"Current ability out of range: {self.current_ability}")
        if not MIN_ABILITY <= self.potential_ability <= MAX_ABILITY:
            raise ValueError(f"Potential ability out of range: {self.potential_ability}")
        if self.potential_ability < self.current_ability:
            raise ValueError(
                f"Potential ability ({self.potential_ability}) cannot be below "
                f"current ability ({self.current_ability})"
            )
        if not MIN_FORM <= self.form <= MAX_FORM:
            raise ValueError(f"Form must be within {MIN_FORM}..{MAX_FORM}, got {self.form}")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def attribute(self, attribute: PlayerAttribute) -> int:
        return self.attributes.get(attribute)

    def hidden_traits(self, revealed: Iterable[PersonalityTrait] = ()) -> list[PersonalityTrait]:
        """Traits the scout has not discovered yet, in the player's own order."""
        known = set(revealed)
        return [t for t in self.personality_traits if t not in known]
