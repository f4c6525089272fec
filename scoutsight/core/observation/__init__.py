"""
Interactive observation sessions.

A session frames one scouting encounter: the scout spends focus tokens on
players, flags standout moments, then reflects on what they saw and
works hypotheses.
"""

from scoutsight.core.observation.attention import (
    allocation_phase_effectiveness,
    create_focus_token_state,
    get_lens_accuracy_bonus,
    get_lens_effectiveness,
    get_observation_quality,
    is_player_focused,
    lens_effectiveness,
    tokens_per_half,
)
from scoutsight.core.observation.collection import (
    collect_session_observations,
    context_for_activity,
)
from scoutsight.core.observation.content import (
    apply_phase_descriptions,
    get_current_phase,
    populate_phases,
)
from scoutsight.core.observation.hypothesis import (
    evaluate_hypothesis,
    generate_hypothesis,
    get_open_hypotheses,
    get_resolved_hypotheses,
    hypothesis_insight_bonus,
    resolve_hypothesis,
)
from scoutsight.core.observation.reflection import (
    GutFeelingCandidate,
    ReflectionResult,
    check_gut_feeling,
    generate_reflection,
    generate_reflection_prompts,
    generate_session_summary,
    suggest_hypotheses,
)
from scoutsight.core.observation.session import (
    add_hypothesis,
    add_reflection_note,
    advance_session_phase,
    allocate_focus,
    complete_session,
    create_session,
    flag_moment,
    get_phase_token_refresh,
    get_session_result,
    is_half_time_phase,
    remove_focus,
    start_session,
    update_hypothesis,
)
from scoutsight.core.observation.types import (
    DataPoint,
    DialogueConsequence,
    DialogueNode,
    DialogueOption,
    FocusAllocation,
    FocusTokenState,
    Hypothesis,
    HypothesisEvidence,
    ObservationSession,
    PlayerMoment,
    PlayerPoolEntry,
    SessionConfig,
    SessionFlaggedMoment,
    SessionPhase,
    SessionPlayer,
    SessionResult,
    StrategicChoice,
)

__all__ = [
    # Types
    "DataPoint",
    "DialogueConsequence",
    "DialogueNode",
    "DialogueOption",
    "FocusAllocation",
    "FocusTokenState",
    "Hypothesis",
    "HypothesisEvidence",
    "ObservationSession",
    "PlayerMoment",
    "PlayerPoolEntry",
    "SessionConfig",
    "SessionFlaggedMoment",
    "SessionPhase",
    "SessionPlayer",
    "SessionResult",
    "StrategicChoice",
    # Session lifecycle
    "add_hypothesis",
    "add_reflection_note",
    "advance_session_phase",
    "allocate_focus",
    "complete_session",
    "create_session",
    "flag_moment",
    "get_phase_token_refresh",
    "get_session_result",
    "is_half_time_phase",
    "remove_focus",
    "start_session",
    "update_hypothesis",
    # Content
    "apply_phase_descriptions",
    "get_current_phase",
    "populate_phases",
    # Attention
    "allocation_phase_effectiveness",
    "create_focus_token_state",
    "get_lens_accuracy_bonus",
    "get_lens_effectiveness",
    "get_observation_quality",
    "is_player_focused",
    "lens_effectiveness",
    "tokens_per_half",
    # Hypotheses
    "evaluate_hypothesis",
    "generate_hypothesis",
    "get_open_hypotheses",
    "get_resolved_hypotheses",
    "hypothesis_insight_bonus",
    "resolve_hypothesis",
    # Collection
    "collect_session_observations",
    "context_for_activity",
    # Reflection
    "GutFeelingCandidate",
    "ReflectionResult",
    "check_gut_feeling",
    "generate_reflection",
    "generate_reflection_prompts",
    "generate_session_summary",
    "suggest_hypotheses",
]
