"""Aggregate ability readings into a single perceived-ability summary."""

from dataclasses import dataclass
from typing import Optional, Sequence

from scoutsight.core.models.observation import Observation
from scoutsight.core.numeric import clamp, snap_to_half

RECENT_READINGS = 3
MIN_STARS = 0.5
MAX_STARS = 5.0


@dataclass(frozen=True)
class PerceivedAbility:
    """What a scout currently believes about a player's CA and PA, in stars."""

    ca: float
    ca_low: float
    ca_high: float
    ca_confidence: float
    pa_low: float
    pa_high: float
    pa_confidence: float
    observation_count: int

    def to_dict(self) -> dict:
        return {
            "ca": self.ca,
            "ca_low": self.ca_low,
            "ca_high": self.ca_high,
            "ca_confidence": self.ca_confidence,
            "pa_low": self.pa_low,
            "pa_high": self.pa_high,
            "pa_confidence": self.pa_confidence,
            "observation_count": self.observation_count,
        }


def _mean(values: list[float]) -> float:
    return sum(values) / len(values)


def get_perceived_ability(
    observations: Sequence[Observation],
    player_id: str,
) -> Optional[PerceivedAbility]:
    """
    Average the three most recent ability readings for a player.

    The CA window comes from confidence: (1 - confidence) * 2 stars either
    side. Returns None if the player has no ability readings.
    """
    readings = [
        o.ability_reading
        for o in observations
        if o.player_id == player_id and o.ability_reading is not None
    ]
    if not readings:
        return None

    recent = readings[-RECENT_READINGS:]
    ca = snap_to_half(_mean([r.perceived_ca for r in recent]))
    ca_confidence = _mean([r.ca_confidence for r in recent])
    spread = (1 - ca_confidence) * 2.0

    return PerceivedAbility(
        ca=ca,
        ca_low=clamp(snap_to_half(ca - spread), MIN_STARS, MAX_STARS),
        ca_high=clamp(snap_to_half(ca + spread), MIN_STARS, MAX_STARS),
        ca_confidence=ca_confidence,
        pa_low=snap_to_half(_mean([r.perceived_pa_low for r in recent])),
        pa_high=min(MAX_STARS, snap_to_half(_mean([r.perceived_pa_high for r in recent]))),
        pa_confidence=_mean([r.pa_confidence for r in recent]),
        observation_count=len(readings),
    )
