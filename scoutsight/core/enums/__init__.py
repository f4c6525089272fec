"""Engine enumerations."""

from scoutsight.core.enums.activities import ActivityType, Specialization
from scoutsight.core.enums.observation import (
    ChoiceOutcome,
    DataPointCategory,
    EvidenceDirection,
    EvidenceStrength,
    FlagReaction,
    HypothesisState,
    LensType,
    MatchPhaseType,
    MomentType,
    ObservationContext,
    ObservationMode,
    ObservationQuality,
    QualityTier,
    RiskLevel,
    SessionState,
)
from scoutsight.core.enums.positions import DevelopmentProfile, Position, PositionGroup

__all__ = [
    "ActivityType",
    "ChoiceOutcome",
    "DataPointCategory",
    "DevelopmentProfile",
    "EvidenceDirection",
    "EvidenceStrength",
    "FlagReaction",
    "HypothesisState",
    "LensType",
    "MatchPhaseType",
    "MomentType",
    "ObservationContext",
    "ObservationMode",
    "ObservationQuality",
    "Position",
    "PositionGroup",
    "QualityTier",
    "RiskLevel",
    "SessionState",
    "Specialization",
]
