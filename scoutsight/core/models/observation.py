"""
Observation output records.

These are the engine's externally visible product: what a scout believes
about a player after watching them, with the uncertainty attached.
"""

from dataclasses import dataclass
from typing import Optional

from scoutsight.core.attributes import PlayerAttribute
from scoutsight.core.enums import LensType, ObservationContext


@dataclass(frozen=True)
class AttributeReading:
    """A perceived attribute value (1-20) with confidence (0-1)."""

    attribute: PlayerAttribute
    perceived_value: int
    confidence: float
    observation_count: int
    range_low: Optional[int] = None
    range_high: Optional[int] = None

    @property
    def range_width(self) -> Optional[int]:
        if self.range_low is None or self.range_high is None:
            return None
        return self.range_high - self.range_low

    def to_dict(self) -> dict:
        return {
            "attribute": self.attribute.value,
            "perceived_value": self.perceived_value,
            "confidence": self.confidence,
            "observation_count": self.observation_count,
            "range_low": self.range_low,
            "range_high": self.range_high,
        }


@dataclass(frozen=True)
class AbilityReading:
    """
    Perceived current and potential ability in half-star units (0.5-5.0).

    perceived_pa_low is never below perceived_ca.
    """

    perceived_ca: float
    ca_confidence: float
    perceived_pa_low: float
    perceived_pa_high: float
    pa_confidence: float
    observation_count: int = 1

    def to_dict(self) -> dict:
        return {
            "perceived_ca": self.perceived_ca,
            "ca_confidence": self.ca_confidence,
            "perceived_pa_low": self.perceived_pa_low,
            "perceived_pa_high": self.perceived_pa_high,
            "pa_confidence": self.pa_confidence,
            "observation_count": self.observation_count,
        }


@dataclass(frozen=True)
class FlaggedMoment:
    """A notable event the perception pipeline picked out of a match phase."""

    phase: int
    description: str
    attribute: PlayerAttribute
    positive: bool

    def to_dict(self) -> dict:
        return {
            "phase": self.phase,
            "description": self.description,
            "attribute": self.attribute.value,
            "positive": self.positive,
        }


@dataclass(frozen=True)
class Observation:
    """Everything one scout took away about one player from one encounter."""

    id: str
    player_id: str
    scout_id: str
    context: ObservationContext
    attribute_readings: tuple[AttributeReading, ...] = ()
    ability_reading: Optional[AbilityReading] = None
    flagged_moments: tuple[FlaggedMoment, ...] = ()
    notes: tuple[str, ...] = ()
    week: int = 0
    season: int = 0
    match_id: Optional[str] = None
    focus_lens: Optional[LensType] = None

    def reading_for(self, attribute: PlayerAttribute) -> Optional[AttributeReading]:
        for reading in self.attribute_readings:
            if reading.attribute == attribute:
                return reading
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "scout_id": self.scout_id,
            "context": self.context.value,
            "attribute_readings": [r.to_dict() for r in self.attribute_readings],
            "ability_reading": self.ability_reading.to_dict() if self.ability_reading else None,
            "flagged_moments": [m.to_dict() for m in self.flagged_moments],
            "notes": list(self.notes),
            "week": self.week,
            "season": self.season,
            "match_id": self.match_id,
            "focus_lens": self.focus_lens.value if self.focus_lens else None,
        }
