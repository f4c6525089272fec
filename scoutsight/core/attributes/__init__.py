"""Player attribute system."""

from scoutsight.core.attributes.base import (
    ALL_ATTRIBUTES,
    ATTRIBUTE_DOMAINS,
    HIDDEN_ATTRIBUTES,
    AttributeDefinition,
    AttributeDomain,
    PlayerAttribute,
)
from scoutsight.core.attributes.registry import AttributeRegistry, PlayerAttributes

__all__ = [
    "ALL_ATTRIBUTES",
    "ATTRIBUTE_DOMAINS",
    "HIDDEN_ATTRIBUTES",
    "AttributeDefinition",
    "AttributeDomain",
    "AttributeRegistry",
    "PlayerAttribute",
    "PlayerAttributes",
]
