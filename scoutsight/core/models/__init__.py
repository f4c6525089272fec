"""Engine entities and output records."""

from scoutsight.core.models.scout import (
    DOMAIN_SKILL_MAP,
    Scout,
    ScoutSkill,
    ScoutSkills,
)
from scoutsight.core.models.player import GroundTruthPlayer
from scoutsight.core.models.match import MatchEvent, MatchPhase
from scoutsight.core.models.observation import (
    AbilityReading,
    AttributeReading,
    FlaggedMoment,
    Observation,
)

__all__ = [
    "DOMAIN_SKILL_MAP",
    "AbilityReading",
    "AttributeReading",
    "FlaggedMoment",
    "GroundTruthPlayer",
    "MatchEvent",
    "MatchPhase",
    "Observation",
    "Scout",
    "ScoutSkill",
    "ScoutSkills",
]
