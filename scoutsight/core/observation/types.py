"""
Observation session types.

Every record is a frozen dataclass. Transition functions build new values
with dataclasses.replace; nothing here is mutated in place.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Union

from scoutsight.core.attributes import AttributeDomain, PlayerAttribute
from scoutsight.core.enums import (
    ActivityType,
    ChoiceOutcome,
    DataPointCategory,
    EvidenceDirection,
    EvidenceStrength,
    FlagReaction,
    HypothesisState,
    LensType,
    MomentType,
    ObservationMode,
    QualityTier,
    RiskLevel,
    SessionState,
    Specialization,
)

WarmupKey = tuple[str, LensType]


# =============================================================================
# Focus tokens
# =============================================================================

@dataclass(frozen=True)
class FocusAllocation:
    """
    One focus token spent on a player with a lens.

    phases_active counts phase advances while the allocation stayed live,
    so the allocation covers phases start_phase..start_phase + phases_active.
    """

    player_id: str
    lens: LensType
    start_phase: int
    phases_active: int = 0

    @property
    def last_phase(self) -> int:
        return self.start_phase + self.phases_active

    def covers(self, phase_index: int) -> bool:
        return self.start_phase <= phase_index <= self.last_phase

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "lens": self.lens.value,
            "start_phase": self.start_phase,
            "phases_active": self.phases_active,
        }


@dataclass(frozen=True)
class FocusTokenState:
    """
    Token budget for a session. available never goes below zero.

    warmup_phases is copied into a read-only mapping on construction.
    """

    available: int
    total: int
    allocations: tuple[FocusAllocation, ...] = ()
    warmup_phases: Mapping[WarmupKey, int] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "warmup_phases", MappingProxyType(dict(self.warmup_phases)))

    def warmup(self, player_id: str, lens: LensType) -> Optional[int]:
        return self.warmup_phases.get((player_id, lens))

    def to_dict(self) -> dict:
        return {
            "available": self.available,
            "total": self.total,
            "allocations": [a.to_dict() for a in self.allocations],
            "warmup_phases": {
                f"{player_id}:{lens.value}": count
                for (player_id, lens), count in self.warmup_phases.items()
            },
        }


# =============================================================================
# Phase content
# =============================================================================

@dataclass(frozen=True)
class PlayerMoment:
    """An observable moment involving one player within a phase."""

    id: str
    player_id: str
    moment_type: MomentType
    quality: int  # 1-10
    attributes_hinted: tuple[PlayerAttribute, ...] = ()
    description: str = ""
    vague_description: str = ""  # What an unfocused scout sees
    pressure_context: bool = False
    is_standout: bool = False

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "moment_type": self.moment_type.value,
            "quality": self.quality,
            "attributes_hinted": [a.value for a in self.attributes_hinted],
            "description": self.description,
            "vague_description": self.vague_description,
            "pressure_context": self.pressure_context,
            "is_standout": self.is_standout,
        }


@dataclass(frozen=True)
class DialogueConsequence:
    narrative_text: str
    relationship_delta: Optional[int] = None
    hypothesis_id: Optional[str] = None
    hypothesis_direction: Optional[EvidenceDirection] = None
    insight_bonus: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "narrative_text": self.narrative_text,
            "relationship_delta": self.relationship_delta,
            "hypothesis_id": self.hypothesis_id,
            "hypothesis_direction": (
                self.hypothesis_direction.value if self.hypothesis_direction else None
            ),
            "insight_bonus": self.insight_bonus,
        }


@dataclass(frozen=True)
class DialogueOption:
    id: str
    text: str
    risk_level: RiskLevel
    outcome: DialogueConsequence
    requires_relationship: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "risk_level": self.risk_level.value,
            "outcome": self.outcome.to_dict(),
            "requires_relationship": self.requires_relationship,
        }


@dataclass(frozen=True)
class DialogueNode:
    """One conversational beat in an investigation session."""

    id: str
    speaker: str
    text: str
    options: tuple[DialogueOption, ...] = ()
    consequence: Optional[DialogueConsequence] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "speaker": self.speaker,
            "text": self.text,
            "options": [o.to_dict() for o in self.options],
            "consequence": self.consequence.to_dict() if self.consequence else None,
        }


@dataclass(frozen=True)
class DataPoint:
    """A unit of data shown in an analysis session."""

    id: str
    label: str
    value: Union[float, str]
    category: DataPointCategory
    player_id: Optional[str] = None
    is_highlighted: bool = False
    related_attributes: tuple[PlayerAttribute, ...] = ()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "label": self.label,
            "value": self.value,
            "category": self.category.value,
            "player_id": self.player_id,
            "is_highlighted": self.is_highlighted,
            "related_attributes": [a.value for a in self.related_attributes],
        }


@dataclass(frozen=True)
class StrategicChoice:
    """A single option in a quick-interaction session."""

    id: str
    text: str
    description: str
    effect: str
    outcome_type: ChoiceOutcome

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "text": self.text,
            "description": self.description,
            "effect": self.effect,
            "outcome_type": self.outcome_type.value,
        }


@dataclass(frozen=True)
class SessionPhase:
    """
    One step of a session.

    minute is the approximate match minute for full observation and a
    1-based step counter otherwise. Each mode fills its own content field.
    """

    index: int
    minute: int
    description: str = ""
    moments: tuple[PlayerMoment, ...] = ()
    dialogue_nodes: tuple[DialogueNode, ...] = ()
    data_points: tuple[DataPoint, ...] = ()
    choices: tuple[StrategicChoice, ...] = ()
    is_half_time: bool = False

    def moment(self, moment_id: str) -> Optional[PlayerMoment]:
        for m in self.moments:
            if m.id == moment_id:
                return m
        return None

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "minute": self.minute,
            "description": self.description,
            "moments": [m.to_dict() for m in self.moments],
            "dialogue_nodes": [n.to_dict() for n in self.dialogue_nodes],
            "data_points": [d.to_dict() for d in self.data_points],
            "choices": [c.to_dict() for c in self.choices],
            "is_half_time": self.is_half_time,
        }


# =============================================================================
# Players, flags, hypotheses
# =============================================================================

@dataclass(frozen=True)
class SessionPlayer:
    """Lightweight session view of a player."""

    player_id: str
    name: str
    position: str
    is_focused: bool = False
    focused_phases: tuple[int, ...] = ()
    current_lens: Optional[LensType] = None

    def to_dict(self) -> dict:
        return {
            "player_id": self.player_id,
            "name": self.name,
            "position": self.position,
            "is_focused": self.is_focused,
            "focused_phases": list(self.focused_phases),
            "current_lens": self.current_lens.value if self.current_lens else None,
        }


@dataclass(frozen=True)
class SessionFlaggedMoment:
    """A moment the scout flagged. At most one per phase."""

    id: str
    phase_index: int
    moment: PlayerMoment
    reaction: FlagReaction
    minute: int
    note: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "phase_index": self.phase_index,
            "moment": self.moment.to_dict(),
            "reaction": self.reaction.value,
            "minute": self.minute,
            "note": self.note,
        }


@dataclass(frozen=True)
class HypothesisEvidence:
    week: int
    direction: EvidenceDirection
    description: str
    strength: EvidenceStrength = EvidenceStrength.MODERATE

    def to_dict(self) -> dict:
        return {
            "week": self.week,
            "direction": self.direction.value,
            "description": self.description,
            "strength": self.strength.value,
        }


@dataclass(frozen=True)
class Hypothesis:
    """A scout's working theory about a player, with an append-only evidence list."""

    id: str
    player_id: str
    text: str
    domain: AttributeDomain
    state: HypothesisState = HypothesisState.OPEN
    created_at_week: int = 0
    evidence: tuple[HypothesisEvidence, ...] = ()

    @property
    def for_count(self) -> int:
        return sum(1 for e in self.evidence if e.direction == EvidenceDirection.FOR)

    @property
    def against_count(self) -> int:
        return sum(1 for e in self.evidence if e.direction == EvidenceDirection.AGAINST)

    @property
    def is_resolved(self) -> bool:
        return self.state.is_terminal

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "player_id": self.player_id,
            "text": self.text,
            "domain": self.domain.value,
            "state": self.state.value,
            "created_at_week": self.created_at_week,
            "evidence": [e.to_dict() for e in self.evidence],
        }


# =============================================================================
# Session
# =============================================================================

@dataclass(frozen=True)
class ObservationSession:
    """The aggregate root for one scouting encounter."""

    id: str
    mode: ObservationMode
    activity_type: ActivityType
    specialization: Specialization
    state: SessionState
    phases: tuple[SessionPhase, ...]
    focus_tokens: FocusTokenState
    players: tuple[SessionPlayer, ...] = ()
    current_phase_index: int = 0
    flagged_moments: tuple[SessionFlaggedMoment, ...] = ()
    hypotheses: tuple[Hypothesis, ...] = ()
    insight_points_earned: int = 0
    reflection_notes: tuple[str, ...] = ()
    started_at_week: int = 0
    started_at_season: int = 0
    activity_instance_id: Optional[str] = None

    @property
    def current_phase(self) -> Optional[SessionPhase]:
        if 0 <= self.current_phase_index < len(self.phases):
            return self.phases[self.current_phase_index]
        return None

    def player(self, player_id: str) -> Optional[SessionPlayer]:
        for p in self.players:
            if p.player_id == player_id:
                return p
        return None

    def hypothesis(self, hypothesis_id: str) -> Optional[Hypothesis]:
        for h in self.hypotheses:
            if h.id == hypothesis_id:
                return h
        return None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "activity_instance_id": self.activity_instance_id,
            "mode": self.mode.value,
            "activity_type": self.activity_type.value,
            "specialization": self.specialization.value,
            "state": self.state.value,
            "phases": [p.to_dict() for p in self.phases],
            "current_phase_index": self.current_phase_index,
            "focus_tokens": self.focus_tokens.to_dict(),
            "flagged_moments": [m.to_dict() for m in self.flagged_moments],
            "hypotheses": [h.to_dict() for h in self.hypotheses],
            "insight_points_earned": self.insight_points_earned,
            "reflection_notes": list(self.reflection_notes),
            "players": [p.to_dict() for p in self.players],
            "started_at_week": self.started_at_week,
            "started_at_season": self.started_at_season,
        }


@dataclass(frozen=True)
class PlayerPoolEntry:
    player_id: str
    name: str
    position: str


@dataclass(frozen=True)
class SessionConfig:
    """Inbound configuration for create_session."""

    activity_type: ActivityType
    specialization: Specialization
    player_pool: tuple[PlayerPoolEntry, ...]
    seed: str
    week: int
    season: int
    target_player_id: Optional[str] = None
    activity_instance_id: Optional[str] = None


@dataclass(frozen=True)
class SessionResult:
    """Summary of a session, computed on demand."""

    session_id: str
    mode: ObservationMode
    activity_type: ActivityType
    flagged_moments: tuple[SessionFlaggedMoment, ...]
    hypotheses_updated: tuple[Hypothesis, ...]
    insight_points_earned: int
    reflection_notes: tuple[str, ...]
    quality_tier: QualityTier
    phases_completed: int
    total_phases: int
    focused_player_ids: tuple[str, ...]
    activity_instance_id: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "activity_instance_id": self.activity_instance_id,
            "mode": self.mode.value,
            "activity_type": self.activity_type.value,
            "flagged_moments": [m.to_dict() for m in self.flagged_moments],
            "hypotheses_updated": [h.to_dict() for h in self.hypotheses_updated],
            "insight_points_earned": self.insight_points_earned,
            "reflection_notes": list(self.reflection_notes),
            "quality_tier": self.quality_tier.value,
            "phases_completed": self.phases_completed,
            "total_phases": self.total_phases,
            "focused_player_ids": list(self.focused_player_ids),
        }
