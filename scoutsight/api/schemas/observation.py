"""Pydantic schemas for observation sessions and perception output."""

from typing import Optional

from pydantic import BaseModel, Field

from scoutsight.core.enums import ActivityType, Specialization
from scoutsight.core.observation.types import PlayerPoolEntry, SessionConfig


# === Request schemas ===


class PlayerPoolEntrySchema(BaseModel):
    """A player available to the session."""

    player_id: str = Field(..., min_length=1)
    name: str
    position: str


class SessionConfigSchema(BaseModel):
    """Request to create an observation session."""

    activity_type: ActivityType
    specialization: Specialization
    player_pool: list[PlayerPoolEntrySchema] = Field(default_factory=list)
    seed: str = Field(..., min_length=1)
    week: int = Field(..., ge=1)
    season: int = Field(..., ge=1)
    target_player_id: Optional[str] = None
    activity_instance_id: Optional[str] = None

    def to_config(self) -> SessionConfig:
        """Convert to the engine's SessionConfig."""
        return SessionConfig(
            activity_type=self.activity_type,
            specialization=self.specialization,
            player_pool=tuple(
                PlayerPoolEntry(player_id=p.player_id, name=p.name, position=p.position)
                for p in self.player_pool
            ),
            seed=self.seed,
            week=self.week,
            season=self.season,
            target_player_id=self.target_player_id,
            activity_instance_id=self.activity_instance_id,
        )


# === Response schemas ===


class FocusAllocationSchema(BaseModel):
    player_id: str
    lens: str
    start_phase: int
    phases_active: int

    @classmethod
    def from_model(cls, allocation) -> "FocusAllocationSchema":
        """Create from FocusAllocation."""
        return cls(
            player_id=allocation.player_id,
            lens=allocation.lens.value,
            start_phase=allocation.start_phase,
            phases_active=allocation.phases_active,
        )


class FocusTokenStateSchema(BaseModel):
    """Focus token budget."""

    available: int
    total: int
    allocations: list[FocusAllocationSchema] = []
    # "player_id:lens" -> phases since allocation
    warmup_phases: dict[str, int] = {}

    @classmethod
    def from_model(cls, state) -> "FocusTokenStateSchema":
        """Create from FocusTokenState."""
        return cls(
            available=state.available,
            total=state.total,
            allocations=[FocusAllocationSchema.from_model(a) for a in state.allocations],
            warmup_phases={
                f"{player_id}:{lens.value}": count
                for (player_id, lens), count in state.warmup_phases.items()
            },
        )


class SessionPlayerSchema(BaseModel):
    player_id: str
    name: str
    position: str
    is_focused: bool = False
    focused_phases: list[int] = []
    current_lens: Optional[str] = None

    @classmethod
    def from_model(cls, player) -> "SessionPlayerSchema":
        """Create from SessionPlayer."""
        return cls(
            player_id=player.player_id,
            name=player.name,
            position=player.position,
            is_focused=player.is_focused,
            focused_phases=list(player.focused_phases),
            current_lens=player.current_lens.value if player.current_lens else None,
        )


class SessionFlaggedMomentSchema(BaseModel):
    id: str
    phase_index: int
    minute: int
    reaction: str
    note: Optional[str] = None
    moment: dict = {}

    @classmethod
    def from_model(cls, flagged) -> "SessionFlaggedMomentSchema":
        """Create from SessionFlaggedMoment."""
        return cls(
            id=flagged.id,
            phase_index=flagged.phase_index,
            minute=flagged.minute,
            reaction=flagged.reaction.value,
            note=flagged.note,
            moment=flagged.moment.to_dict(),
        )


class HypothesisEvidenceSchema(BaseModel):
    week: int
    direction: str
    description: str
    strength: str

    @classmethod
    def from_model(cls, evidence) -> "HypothesisEvidenceSchema":
        return cls(
            week=evidence.week,
            direction=evidence.direction.value,
            description=evidence.description,
            strength=evidence.strength.value,
        )


class HypothesisSchema(BaseModel):
    """A scouting hypothesis and its evidence."""

    id: str
    player_id: str
    text: str
    domain: str
    state: str
    created_at_week: int
    evidence: list[HypothesisEvidenceSchema] = []
    is_resolved: bool = False

    @classmethod
    def from_model(cls, hypothesis) -> "HypothesisSchema":
        """Create from Hypothesis."""
        return cls(
            id=hypothesis.id,
            player_id=hypothesis.player_id,
            text=hypothesis.text,
            domain=hypothesis.domain.value,
            state=hypothesis.state.value,
            created_at_week=hypothesis.created_at_week,
            evidence=[HypothesisEvidenceSchema.from_model(e) for e in hypothesis.evidence],
            is_resolved=hypothesis.is_resolved,
        )


class ObservationSessionSchema(BaseModel):
    """Full session state after a transition."""

    id: str
    activity_instance_id: Optional[str] = None
    mode: str
    activity_type: str
    specialization: str
    state: str
    current_phase_index: int
    total_phases: int = 0
    # Phase content is mode-specific; passed through as plain dicts
    phases: list[dict] = []
    focus_tokens: FocusTokenStateSchema
    players: list[SessionPlayerSchema] = []
    flagged_moments: list[SessionFlaggedMomentSchema] = []
    hypotheses: list[HypothesisSchema] = []
    insight_points_earned: int = 0
    reflection_notes: list[str] = []
    started_at_week: int
    started_at_season: int

    @classmethod
    def from_session(cls, session) -> "ObservationSessionSchema":
        """Create from ObservationSession."""
        return cls(
            id=session.id,
            activity_instance_id=session.activity_instance_id,
            mode=session.mode.value,
            activity_type=session.activity_type.value,
            specialization=session.specialization.value,
            state=session.state.value,
            current_phase_index=session.current_phase_index,
            total_phases=len(session.phases),
            phases=[p.to_dict() for p in session.phases],
            focus_tokens=FocusTokenStateSchema.from_model(session.focus_tokens),
            players=[SessionPlayerSchema.from_model(p) for p in session.players],
            flagged_moments=[SessionFlaggedMomentSchema.from_model(f) for f in session.flagged_moments],
            hypotheses=[HypothesisSchema.from_model(h) for h in session.hypotheses],
            insight_points_earned=session.insight_points_earned,
            reflection_notes=list(session.reflection_notes),
            started_at_week=session.started_at_week,
            started_at_season=session.started_at_season,
        )


class SessionResultSchema(BaseModel):
    """Summary of a session."""

    session_id: str
    activity_instance_id: Optional[str] = None
    mode: str
    activity_type: str
    quality_tier: str
    insight_points_earned: int
    phases_completed: int
    total_phases: int
    focused_player_ids: list[str] = []
    flagged_moments: list[SessionFlaggedMomentSchema] = []
    hypotheses_updated: list[HypothesisSchema] = []
    reflection_notes: list[str] = []

    @classmethod
    def from_result(cls, result) -> "SessionResultSchema":
        """Create from SessionResult."""
        return cls(
            session_id=result.session_id,
            activity_instance_id=result.activity_instance_id,
            mode=result.mode.value,
            activity_type=result.activity_type.value,
            quality_tier=result.quality_tier.value,
            insight_points_earned=result.insight_points_earned,
            phases_completed=result.phases_completed,
            total_phases=result.total_phases,
            focused_player_ids=list(result.focused_player_ids),
            flagged_moments=[SessionFlaggedMomentSchema.from_model(f) for f in result.flagged_moments],
            hypotheses_updated=[HypothesisSchema.from_model(h) for h in result.hypotheses_updated],
            reflection_notes=list(result.reflection_notes),
        )


class GutFeelingSchema(BaseModel):
    """A hunch surfaced in reflection."""

    player_id: str
    player_name: str
    domain: str
    narrative: str
    reliability: float = Field(..., ge=0, le=1)
    trigger_reason: str

    @classmethod
    def from_model(cls, gut_feeling) -> "GutFeelingSchema":
        return cls(
            player_id=gut_feeling.player_id,
            player_name=gut_feeling.player_name,
            domain=gut_feeling.domain.value,
            narrative=gut_feeling.narrative,
            reliability=gut_feeling.reliability,
            trigger_reason=gut_feeling.trigger_reason,
        )


class ReflectionSchema(BaseModel):
    """What a scout takes away from reflecting on a session."""

    summary: str
    insight_points: int = Field(..., ge=0)
    suggested_hypotheses: list[HypothesisSchema] = []
    gut_feeling: Optional[GutFeelingSchema] = None
    prompts: list[str] = []

    @classmethod
    def from_result(cls, result) -> "ReflectionSchema":
        """Create from ReflectionResult."""
        return cls(
            summary=result.summary,
            insight_points=result.insight_points,
            suggested_hypotheses=[HypothesisSchema.from_model(h) for h in result.suggested_hypotheses],
            gut_feeling=GutFeelingSchema.from_model(result.gut_feeling) if result.gut_feeling else None,
            prompts=list(result.prompts),
        )


class AttributeReadingSchema(BaseModel):
    """A perceived attribute with its uncertainty."""

    attribute: str
    perceived_value: int = Field(..., ge=1, le=20)
    confidence: float = Field(..., ge=0, le=1)
    observation_count: int
    range_low: Optional[int] = None
    range_high: Optional[int] = None

    @classmethod
    def from_model(cls, reading) -> "AttributeReadingSchema":
        return cls(
            attribute=reading.attribute.value,
            perceived_value=reading.perceived_value,
            confidence=reading.confidence,
            observation_count=reading.observation_count,
            range_low=reading.range_low,
            range_high=reading.range_high,
        )


class AbilityReadingSchema(BaseModel):
    """Perceived CA and PA in stars."""

    perceived_ca: float
    ca_confidence: float
    perceived_pa_low: float
    perceived_pa_high: float
    pa_confidence: float
    observation_count: int

    @classmethod
    def from_model(cls, reading) -> "AbilityReadingSchema":
        return cls(
            perceived_ca=reading.perceived_ca,
            ca_confidence=reading.ca_confidence,
            perceived_pa_low=reading.perceived_pa_low,
            perceived_pa_high=reading.perceived_pa_high,
            pa_confidence=reading.pa_confidence,
            observation_count=reading.observation_count,
        )


class ObservationSchema(BaseModel):
    """One scout's observation of one player."""

    id: str
    player_id: str
    scout_id: str
    context: str
    attribute_readings: list[AttributeReadingSchema] = []
    ability_reading: Optional[AbilityReadingSchema] = None
    flagged_moments: list[dict] = []
    notes: list[str] = []
    week: int = 0
    season: int = 0
    match_id: Optional[str] = None
    focus_lens: Optional[str] = None

    @classmethod
    def from_observation(cls, observation) -> "ObservationSchema":
        """Create from Observation."""
        return cls(
            id=observation.id,
            player_id=observation.player_id,
            scout_id=observation.scout_id,
            context=observation.context.value,
            attribute_readings=[AttributeReadingSchema.from_model(r) for r in observation.attribute_readings],
            ability_reading=(
                AbilityReadingSchema.from_model(observation.ability_reading)
                if observation.ability_reading
                else None
            ),
            flagged_moments=[m.to_dict() for m in observation.flagged_moments],
            notes=list(observation.notes),
            week=observation.week,
            season=observation.season,
            match_id=observation.match_id,
            focus_lens=observation.focus_lens.value if observation.focus_lens else None,
        )
