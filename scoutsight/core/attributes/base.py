"""Base attribute definitions."""

from dataclasses import dataclass
from enum import Enum


class AttributeDomain(str, Enum):
    """Attribute domains. Each maps to the scout skill that reads it."""

    TECHNICAL = "technical"
    PHYSICAL = "physical"
    MENTAL = "mental"
    TACTICAL = "tactical"
    HIDDEN = "hidden"  # Never directly observable


class PlayerAttribute(str, Enum):
    """Every ground-truth player attribute (1-20 scale)."""

    # Technical
    FIRST_TOUCH = "first_touch"
    PASSING = "passing"
    DRIBBLING = "dribbling"
    CROSSING = "crossing"
    SHOOTING = "shooting"
    HEADING = "heading"

    # Physical
    PACE = "pace"
    STRENGTH = "strength"
    STAMINA = "stamina"
    AGILITY = "agility"

    # Mental
    COMPOSURE = "composure"
    POSITIONING = "positioning"
    WORK_RATE = "work_rate"
    DECISION_MAKING = "decision_making"
    LEADERSHIP = "leadership"
    ANTICIPATION = "anticipation"
    VISION = "vision"

    # Tactical
    OFF_THE_BALL = "off_the_ball"
    PRESSING = "pressing"
    DEFENSIVE_AWARENESS = "defensive_awareness"
    MARKING = "marking"

    # Hidden
    INJURY_PRONENESS = "injury_proneness"
    CONSISTENCY = "consistency"
    BIG_GAME_TEMPERAMENT = "big_game_temperament"
    PROFESSIONALISM = "professionalism"


@dataclass(frozen=True)
class AttributeDefinition:
    """
    Defines an attribute type (not a value).

    Attributes are defined once and registered globally.
    Each player then has values for these attributes.
    """

    attribute: PlayerAttribute
    domain: AttributeDomain
    abbreviation: str
    description: str = ""
    min_value: int = 1
    max_value: int = 20

    @property
    def name(self) -> str:
        return self.attribute.value

    @property
    def is_hidden(self) -> bool:
        return self.domain == AttributeDomain.HIDDEN

    def clamp(self, value: int) -> int:
        """Clamp a value to valid range."""
        return max(self.min_value, min(self.max_value, value))


def _define(
    attribute: PlayerAttribute,
    domain: AttributeDomain,
    abbreviation: str,
    description: str,
) -> AttributeDefinition:
    return AttributeDefinition(
        attribute=attribute,
        domain=domain,
        abbreviation=abbreviation,
        description=description,
    )


# ============================================================================
# Technical
# ============================================================================

FIRST_TOUCH = _define(PlayerAttribute.FIRST_TOUCH, AttributeDomain.TECHNICAL, "FTC", "Control of the ball on receipt")
PASSING = _define(PlayerAttribute.PASSING, AttributeDomain.TECHNICAL, "PAS", "Range and accuracy of passing")
DRIBBLING = _define(PlayerAttribute.DRIBBLING, AttributeDomain.TECHNICAL, "DRI", "Running with the ball under control")
CROSSING = _define(PlayerAttribute.CROSSING, AttributeDomain.TECHNICAL, "CRO", "Delivery from wide areas")
SHOOTING = _define(PlayerAttribute.SHOOTING, AttributeDomain.TECHNICAL, "SHO", "Finishing and shot technique")
HEADING = _define(PlayerAttribute.HEADING, AttributeDomain.TECHNICAL, "HEA", "Aerial technique")

# ============================================================================
# Physical
# ============================================================================

PACE = _define(PlayerAttribute.PACE, AttributeDomain.PHYSICAL, "PAC", "Top speed")
STRENGTH = _define(PlayerAttribute.STRENGTH, AttributeDomain.PHYSICAL, "STR", "Physical power in duels")
STAMINA = _define(PlayerAttribute.STAMINA, AttributeDomain.PHYSICAL, "STA", "Ability to sustain effort")
AGILITY = _define(PlayerAttribute.AGILITY, AttributeDomain.PHYSICAL, "AGI", "Balance and change of direction")

# ============================================================================
# Mental
# ============================================================================

COMPOSURE = _define(PlayerAttribute.COMPOSURE, AttributeDomain.MENTAL, "CMP", "Calm under pressure")
POSITIONING = _define(PlayerAttribute.POSITIONING, AttributeDomain.MENTAL, "POS", "Taking up the right position")
WORK_RATE = _define(PlayerAttribute.WORK_RATE, AttributeDomain.MENTAL, "WRK", "Willingness to run")
DECISION_MAKING = _define(PlayerAttribute.DECISION_MAKING, AttributeDomain.MENTAL, "DEC", "Choosing the right option")
LEADERSHIP = _define(PlayerAttribute.LEADERSHIP, AttributeDomain.MENTAL, "LDR", "Influence on teammates")
ANTICIPATION = _define(PlayerAttribute.ANTICIPATION, AttributeDomain.MENTAL, "ANT", "Reading what happens next")
VISION = _define(PlayerAttribute.VISION, AttributeDomain.MENTAL, "VIS", "Seeing passing options")

# ============================================================================
# Tactical
# ============================================================================

OFF_THE_BALL = _define(PlayerAttribute.OFF_THE_BALL, AttributeDomain.TACTICAL, "OTB", "Movement without the ball")
PRESSING = _define(PlayerAttribute.PRESSING, AttributeDomain.TACTICAL, "PRS", "Coordinated pressure on the ball")
DEFENSIVE_AWARENESS = _define(PlayerAttribute.DEFENSIVE_AWARENESS, AttributeDomain.TACTICAL, "DAW", "Shape and cover")
MARKING = _define(PlayerAttribute.MARKING, AttributeDomain.TACTICAL, "MAR", "Tracking an opponent")

# ============================================================================
# Hidden - inferred only, never read directly
# ============================================================================

INJURY_PRONENESS = _define(PlayerAttribute.INJURY_PRONENESS, AttributeDomain.HIDDEN, "INJ", "Susceptibility to injury")
CONSISTENCY = _define(PlayerAttribute.CONSISTENCY, AttributeDomain.HIDDEN, "CON", "Match-to-match reliability")
BIG_GAME_TEMPERAMENT = _define(PlayerAttribute.BIG_GAME_TEMPERAMENT, AttributeDomain.HIDDEN, "BGT", "Performance on big occasions")
PROFESSIONALISM = _define(PlayerAttribute.PROFESSIONALISM, AttributeDomain.HIDDEN, "PRO", "Dedication off the pitch")


ALL_ATTRIBUTES: list[AttributeDefinition] = [
    FIRST_TOUCH,
    PASSING,
    DRIBBLING,
    CROSSING,
    SHOOTING,
    HEADING,
    PACE,
    STRENGTH,
    STAMINA,
    AGILITY,
    COMPOSURE,
    POSITIONING,
    WORK_RATE,
    DECISION_MAKING,
    LEADERSHIP,
    ANTICIPATION,
    VISION,
    OFF_THE_BALL,
    PRESSING,
    DEFENSIVE_AWARENESS,
    MARKING,
    INJURY_PRONENESS,
    CONSISTENCY,
    BIG_GAME_TEMPERAMENT,
    PROFESSIONALISM,
]

ATTRIBUTE_DOMAINS: dict[PlayerAttribute, AttributeDomain] = {
    definition.attribute: definition.domain for definition in ALL_ATTRIBUTES
}

HIDDEN_ATTRIBUTES: frozenset[PlayerAttribute] = frozenset(
    definition.attribute for definition in ALL_ATTRIBUTES if definition.is_hidden
)
