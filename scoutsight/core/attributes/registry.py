"""Attribute registry and player attribute container."""

from dataclasses import dataclass, field
from typing import Iterator, Mapping

from scoutsight.core.attributes.base import (
    ALL_ATTRIBUTES,
    AttributeDefinition,
    AttributeDomain,
    PlayerAttribute,
)


class AttributeRegistry:
    """
    Central registry for all attribute definitions.

    Attributes are registered at module load time from base.py.
    """

    _attributes: dict[PlayerAttribute, AttributeDefinition] = {}
    _initialized: bool = False

    @classmethod
    def initialize(cls) -> None:
        """Initialize registry with default attributes."""
        if cls._initialized:
            return
        for attr in ALL_ATTRIBUTES:
            cls.register(attr)
        cls._initialized = True

    @classmethod
    def register(cls, attr_def: AttributeDefinition) -> None:
        cls._attributes[attr_def.attribute] = attr_def

    @classmethod
    def get(cls, attribute: PlayerAttribute) -> AttributeDefinition:
        """Get an attribute definition."""
        cls.initialize()
        if attribute not in cls._attributes:
            raise KeyError(f"Unknown attribute: {attribute}")
        return cls._attributes[attribute]

    @classmethod
    def get_all(cls) -> list[AttributeDefinition]:
        cls.initialize()
        return list(cls._attributes.values())

    @classmethod
    def get_by_domain(cls, domain: AttributeDomain) -> list[AttributeDefinition]:
        """Get all attributes in a domain."""
        cls.initialize()
        return [a for a in cls._attributes.values() if a.domain == domain]

    @classmethod
    def domain_of(cls, attribute: PlayerAttribute) -> AttributeDomain:
        return cls.get(attribute).domain


@dataclass
class PlayerAttributes:
    """
    Container for a player's ground-truth attribute values.

    Values are clamped to the 1-20 scale on write. Attributes that were never
    set read as 10, the middle of the scale.
    """

    _values: dict[PlayerAttribute, int] = field(default_factory=dict)

    DEFAULT_VALUE = 10

    def get(self, attribute: PlayerAttribute, default: int = DEFAULT_VALUE) -> int:
        return self._values.get(attribute, default)

    def set(self, attribute: PlayerAttribute, value: int) -> None:
        """Set an attribute value, clamping to valid range."""
        attr_def = AttributeRegistry.get(attribute)
        self._values[attribute] = attr_def.clamp(int(value))

    def __getitem__(self, attribute: PlayerAttribute) -> int:
        return self.get(attribute)

    def __setitem__(self, attribute: PlayerAttribute, value: int) -> None:
        self.set(attribute, value)

    def __iter__(self) -> Iterator[PlayerAttribute]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def items(self) -> Iterator[tuple[PlayerAttribute, int]]:
        return iter(self._values.items())

    def domain_average(self, domain: AttributeDomain) -> float:
        """Average of the set attributes in a domain, or the default if none are set."""
        values = [
            v for a, v in self._values.items() if AttributeRegistry.domain_of(a) == domain
        ]
        if not values:
            return float(self.DEFAULT_VALUE)
        return sum(values) / len(values)

    def to_dict(self) -> dict[str, int]:
        """Convert to plain dictionary for serialization."""
        return {attr.value: value for attr, value in self._values.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, int]) -> "PlayerAttributes":
        attrs = cls()
        for name, value in data.items():
            attrs.set(PlayerAttribute(name), value)
        return attrs

    def copy(self) -> "PlayerAttributes":
        return PlayerAttributes(dict(self._values))


# Initialize registry on module load
AttributeRegistry.initialize()
