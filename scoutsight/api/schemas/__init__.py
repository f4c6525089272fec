"""Pydantic schemas for engine inputs and outputs."""

from scoutsight.api.schemas.observation import (
    AbilityReadingSchema,
    AttributeReadingSchema,
    FocusAllocationSchema,
    FocusTokenStateSchema,
    GutFeelingSchema,
    HypothesisEvidenceSchema,
    HypothesisSchema,
    ObservationSchema,
    ObservationSessionSchema,
    PlayerPoolEntrySchema,
    ReflectionSchema,
    SessionConfigSchema,
    SessionFlaggedMomentSchema,
    SessionPlayerSchema,
    SessionResultSchema,
)

__all__ = [
    # Requests
    "PlayerPoolEntrySchema",
    "SessionConfigSchema",
    # Sessions
    "FocusAllocationSchema",
    "FocusTokenStateSchema",
    "HypothesisEvidenceSchema",
    "HypothesisSchema",
    "ObservationSessionSchema",
    "SessionFlaggedMomentSchema",
    "SessionPlayerSchema",
    "SessionResultSchema",
    # Reflection
    "GutFeelingSchema",
    "ReflectionSchema",
    # Perception
    "AbilityReadingSchema",
    "AttributeReadingSchema",
    "ObservationSchema",
]
