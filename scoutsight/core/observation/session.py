"""
Observation session state machine.

    setup -> active -> reflection -> complete

Every transition is a pure function returning a new session. A call whose
precondition fails (wrong state, unknown player, no tokens left, phase
already flagged, resolved hypothesis) returns the input session unchanged
rather than raising, so UI callers can fire them freely.
"""

import logging
import re
import uuid
from dataclasses import replace
from typing import Optional

from scoutsight.config import EngineConfig, get_config
from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import (
    ActivityType,
    EvidenceDirection,
    EvidenceStrength,
    FlagReaction,
    HypothesisState,
    LensType,
    ObservationMode,
    QualityTier,
    SessionState,
)
from scoutsight.core.observation.attention import create_focus_token_state, tokens_per_half
from scoutsight.core.observation.constants import (
    ACTIVITY_MODE_MAP,
    QUALITY_TIER_THRESHOLDS,
    VENUE_PHASE_RANGES,
)
from scoutsight.core.observation.hypothesis import add_evidence
from scoutsight.core.observation.types import (
    FocusAllocation,
    Hypothesis,
    HypothesisEvidence,
    ObservationSession,
    SessionConfig,
    SessionFlaggedMoment,
    SessionPhase,
    SessionPlayer,
    SessionResult,
)
from scoutsight.core.numeric import round_half_up
from scoutsight.core.rng import RNG

logger = logging.getLogger(__name__)

MATCH_MINUTES = 90
MIN_PHASES_FOR_HALF_TIME = 3

_ID_NAMESPACE = uuid.UUID("6f1c2d8e-4b7a-5e39-9c0d-3a8f1e2b7c64")


def make_id(seed: str, suffix: str) -> str:
    """Deterministic id for a seed and suffix: same inputs, same id."""
    digest = uuid.uuid5(_ID_NAMESPACE, f"{seed}:{suffix}").hex[:8]
    tag = re.sub(r"[^a-zA-Z0-9]", "", suffix)[:8]
    return f"{digest}-{tag}"


# =============================================================================
# Construction
# =============================================================================

def mode_for_activity(activity_type: ActivityType) -> ObservationMode:
    return ACTIVITY_MODE_MAP.get(activity_type, ObservationMode.FULL_OBSERVATION)


def resolve_phase_count(
    activity_type: ActivityType,
    rng: RNG,
    config: Optional[EngineConfig] = None,
) -> int:
    """Draw a phase count from the activity's range, or the fallback range."""
    phase_range = VENUE_PHASE_RANGES.get(activity_type)
    if phase_range is None:
        config = config or get_config()
        logger.debug("No phase range for %s, using fallback", activity_type.value)
        phase_range = (config.fallback_min_phases, config.fallback_max_phases)
    return rng.next_int(*phase_range)


def build_empty_phases(phase_count: int, mode: ObservationMode) -> tuple[SessionPhase, ...]:
    """
    Skeleton phases with no content.

    Full observation spreads phases over 90 minutes and marks the phase at
    len // 2 as half-time when there are at least three phases. Other modes
    number their steps from 1 and have no half-time.
    """
    full = mode == ObservationMode.FULL_OBSERVATION
    half_index = phase_count // 2 if full and phase_count >= MIN_PHASES_FOR_HALF_TIME else None

    phases = []
    for i in range(phase_count):
        if full:
            minute = round_half_up(i / (phase_count - 1) * MATCH_MINUTES) if phase_count > 1 else 0
        else:
            minute = i + 1
        phases.append(SessionPhase(index=i, minute=minute, is_half_time=i == half_index))
    return tuple(phases)


def build_session_players(config: SessionConfig) -> tuple[SessionPlayer, ...]:
    """Session roster from the pool, with the target player moved to the front."""
    players = [
        SessionPlayer(player_id=p.player_id, name=p.name, position=p.position)
        for p in config.player_pool
    ]
    if config.target_player_id:
        for i, player in enumerate(players):
            if player.player_id == config.target_player_id:
                players.insert(0, players.pop(i))
                break
    return tuple(players)


def create_session(
    config: SessionConfig,
    rng: RNG,
    engine_config: Optional[EngineConfig] = None,
) -> ObservationSession:
    """
    Create a session in setup state with skeleton phases.

    Phase content is filled in afterwards by a content generator.
    """
    mode = mode_for_activity(config.activity_type)
    phases = build_empty_phases(resolve_phase_count(config.activity_type, rng, engine_config), mode)

    if config.activity_instance_id:
        identity = f"instance-{config.activity_instance_id}"
    else:
        identity = f"session-{config.week}-{config.season}"

    session = ObservationSession(
        id=make_id(config.seed, identity),
        activity_instance_id=config.activity_instance_id,
        mode=mode,
        activity_type=config.activity_type,
        specialization=config.specialization,
        state=SessionState.SETUP,
        phases=phases,
        focus_tokens=create_focus_token_state(mode),
        players=build_session_players(config),
        started_at_week=config.week,
        started_at_season=config.season,
    )
    logger.debug(
        "Created %s session %s with %d phases", mode.value, session.id, len(phases),
    )
    return session


# =============================================================================
# Lifecycle
# =============================================================================

def start_session(session: ObservationSession) -> ObservationSession:
    """setup -> active. Needs at least one phase."""
    if session.state != SessionState.SETUP:
        logger.debug("start_session ignored: session %s is %s", session.id, session.state.value)
        return session
    if not session.phases:
        logger.debug("start_session ignored: session %s has no phases", session.id)
        return session
    logger.info("Session %s started", session.id)
    return replace(session, state=SessionState.ACTIVE)


def is_half_time_phase(session: ObservationSession, phase_index: int) -> bool:
    """
    Whether a phase is the half-time break.

    The per-phase flag wins. Phases without it fall back to the structural
    midpoint, for full observation only.
    """
    if not 0 <= phase_index < len(session.phases):
        return False
    if session.phases[phase_index].is_half_time:
        return True
    if session.mode != ObservationMode.FULL_OBSERVATION:
        return False
    if len(session.phases) < MIN_PHASES_FOR_HALF_TIME:
        return False
    return phase_index == len(session.phases) // 2


def get_phase_token_refresh(mode: ObservationMode) -> int:
    """Tokens restored at half-time for a mode."""
    return tokens_per_half(mode)


def live_allocation_indexes(session: ObservationSession) -> list[int]:
    """
    Indexes of allocations that are still live.

    An allocation is live when it is the latest one for its player and the
    player is still focused with the same lens.
    """
    latest: dict[str, int] = {}
    for i, allocation in enumerate(session.focus_tokens.allocations):
        latest[allocation.player_id] = i

    live = []
    for player_id, index in latest.items():
        player = session.player(player_id)
        allocation = session.focus_tokens.allocations[index]
        if player is not None and player.is_focused and player.current_lens == allocation.lens:
            live.append(index)
    return sorted(live)


def advance_session_phase(session: ObservationSession) -> ObservationSession:
    """
    Move to the next phase.

    Live allocations gain a phase and their warm-up counter ticks. Entering
    a half-time phase resets available tokens to the total (unused tokens
    do not carry over). Advancing past the last phase moves to reflection.
    """
    if session.state != SessionState.ACTIVE:
        logger.debug("advance ignored: session %s is %s", session.id, session.state.value)
        return session

    tokens = session.focus_tokens
    allocations = list(tokens.allocations)
    warmup = dict(tokens.warmup_phases)
    for index in live_allocation_indexes(session):
        allocation = allocations[index]
        allocations[index] = replace(allocation, phases_active=allocation.phases_active + 1)
        key = (allocation.player_id, allocation.lens)
        warmup[key] = warmup.get(key, 0) + 1
    tokens = replace(tokens, allocations=tuple(allocations), warmup_phases=warmup)

    next_index = session.current_phase_index + 1
    if next_index >= len(session.phases):
        logger.info("Session %s entering reflection", session.id)
        return replace(
            session,
            state=SessionState.REFLECTION,
            current_phase_index=len(session.phases) - 1,
            focus_tokens=tokens,
        )

    if is_half_time_phase(session, next_index):
        logger.info("Session %s half-time: tokens refreshed to %d", session.id, tokens.total)
        tokens = replace(tokens, available=tokens.total)

    return replace(session, current_phase_index=next_index, focus_tokens=tokens)


def complete_session(session: ObservationSession) -> ObservationSession:
    """reflection -> complete."""
    if session.state != SessionState.REFLECTION:
        logger.debug("complete ignored: session %s is %s", session.id, session.state.value)
        return session
    logger.info("Session %s complete", session.id)
    return replace(session, state=SessionState.COMPLETE)


# =============================================================================
# Focus
# =============================================================================

def allocate_focus(
    session: ObservationSession,
    player_id: str,
    lens: LensType,
) -> ObservationSession:
    """
    Spend a token to focus on a player through a lens.

    Active state only, with a token available, for a player on the roster.
    Focusing the same player again (even with the same lens) costs another
    token and restarts warm-up.
    """
    if session.state != SessionState.ACTIVE:
        logger.debug("allocate_focus ignored: session %s is %s", session.id, session.state.value)
        return session
    tokens = session.focus_tokens
    if tokens.available <= 0:
        logger.debug("allocate_focus ignored: no tokens left in session %s", session.id)
        return session
    if session.player(player_id) is None:
        logger.debug("allocate_focus ignored: unknown player %s", player_id)
        return session

    phase = session.current_phase_index
    allocation = FocusAllocation(player_id=player_id, lens=lens, start_phase=phase)
    warmup = dict(tokens.warmup_phases)
    warmup[(player_id, lens)] = 0

    players = tuple(
        replace(
            p,
            is_focused=True,
            current_lens=lens,
            focused_phases=p.focused_phases if phase in p.focused_phases else p.focused_phases + (phase,),
        )
        if p.player_id == player_id
        else p
        for p in session.players
    )
    return replace(
        session,
        focus_tokens=replace(
            tokens,
            available=tokens.available - 1,
            allocations=tokens.allocations + (allocation,),
            warmup_phases=warmup,
        ),
        players=players,
    )


def remove_focus(session: ObservationSession, player_id: str) -> ObservationSession:
    """
    Stop focusing on a player. The spent token is not refunded.

    Unknown players leave the session unchanged.
    """
    if session.player(player_id) is None:
        logger.debug("remove_focus ignored: unknown player %s", player_id)
        return session
    players = tuple(
        replace(p, is_focused=False, current_lens=None) if p.player_id == player_id else p
        for p in session.players
    )
    return replace(session, players=players)


# =============================================================================
# Flags
# =============================================================================

def flag_moment(
    session: ObservationSession,
    moment_id: str,
    reaction: FlagReaction,
    note: Optional[str] = None,
    config: Optional[EngineConfig] = None,
) -> ObservationSession:
    """
    Flag a moment from the current phase. One flag per phase.

    The moment must belong to the current phase.
    """
    if session.state != SessionState.ACTIVE:
        logger.debug("flag_moment ignored: session %s is %s", session.id, session.state.value)
        return session

    phase_index = session.current_phase_index
    if any(f.phase_index == phase_index for f in session.flagged_moments):
        logger.debug("flag_moment ignored: phase %d already flagged", phase_index)
        return session

    phase = session.current_phase
    moment = phase.moment(moment_id) if phase is not None else None
    if phase is None or moment is None:
        logger.debug("flag_moment ignored: moment %s not in phase %d", moment_id, phase_index)
        return session

    config = config or get_config()
    flagged = SessionFlaggedMoment(
        id=make_id(session.id, f"flag-{phase_index}-{moment_id}"),
        phase_index=phase_index,
        moment=moment,
        reaction=reaction,
        minute=phase.minute,
        note=note,
    )
    return replace(
        session,
        flagged_moments=session.flagged_moments + (flagged,),
        insight_points_earned=session.insight_points_earned + config.ip_per_flagged_moment,
    )


# =============================================================================
# Reflection
# =============================================================================

def add_hypothesis(
    session: ObservationSession,
    player_id: str,
    text: str,
    domain: AttributeDomain,
    week: int,
) -> ObservationSession:
    """Open a new hypothesis. Reflection state only."""
    if session.state != SessionState.REFLECTION:
        logger.debug("add_hypothesis ignored: session %s is %s", session.id, session.state.value)
        return session

    hypothesis = Hypothesis(
        id=make_id(session.id, f"hyp-{player_id}-{week}-{len(session.hypotheses)}"),
        player_id=player_id,
        text=text,
        domain=domain,
        state=HypothesisState.OPEN,
        created_at_week=week,
    )
    return replace(session, hypotheses=session.hypotheses + (hypothesis,))


def update_hypothesis(
    session: ObservationSession,
    hypothesis_id: str,
    direction: EvidenceDirection,
    description: str,
    week: int,
    strength: EvidenceStrength = EvidenceStrength.MODERATE,
    config: Optional[EngineConfig] = None,
) -> ObservationSession:
    """
    Add evidence to a hypothesis and recompute its state.

        3+ for      -> confirmed
        3+ against  -> debunked
        2+ for      -> supported
        2+ against  -> contradicted
        otherwise   -> open

    Reflection state only. Resolved hypotheses take no more evidence.
    Resolving one awards insight points, once.
    """
    if session.state != SessionState.REFLECTION:
        logger.debug("update_hypothesis ignored: session %s is %s", session.id, session.state.value)
        return session

    hypothesis = session.hypothesis(hypothesis_id)
    if hypothesis is None:
        logger.debug("update_hypothesis ignored: unknown hypothesis %s", hypothesis_id)
        return session
    if hypothesis.is_resolved:
        logger.debug("update_hypothesis ignored: %s already %s", hypothesis_id, hypothesis.state.value)
        return session

    evidence = HypothesisEvidence(week=week, direction=direction, description=description, strength=strength)
    updated = add_evidence(hypothesis, evidence)

    insight = session.insight_points_earned
    if updated.is_resolved:
        config = config or get_config()
        insight += config.ip_per_hypothesis_resolved
        logger.info("Hypothesis %s resolved as %s", hypothesis_id, updated.state.value)

    hypotheses = tuple(updated if h.id == hypothesis_id else h for h in session.hypotheses)
    return replace(session, hypotheses=hypotheses, insight_points_earned=insight)


def add_reflection_note(
    session: ObservationSession,
    note: str,
    config: Optional[EngineConfig] = None,
) -> ObservationSession:
    """Append a trimmed, non-empty note. Reflection state only."""
    if session.state != SessionState.REFLECTION:
        logger.debug("add_reflection_note ignored: session %s is %s", session.id, session.state.value)
        return session
    trimmed = note.strip()
    if not trimmed:
        return session
    config = config or get_config()
    return replace(
        session,
        reflection_notes=session.reflection_notes + (trimmed,),
        insight_points_earned=session.insight_points_earned + config.ip_per_reflection_note,
    )


# =============================================================================
# Result
# =============================================================================

def quality_tier_for(insight_per_phase: float) -> QualityTier:
    for threshold, tier in QUALITY_TIER_THRESHOLDS:
        if insight_per_phase >= threshold:
            return tier
    return QualityTier.POOR


def get_session_result(session: ObservationSession) -> SessionResult:
    """
    Summarise a session.

    Not gated on state, so a partial result can be taken at any point.
    """
    focused_ids = tuple(dict.fromkeys(a.player_id for a in session.focus_tokens.allocations))

    if session.state in (SessionState.REFLECTION, SessionState.COMPLETE):
        phases_completed = len(session.phases)
    else:
        phases_completed = session.current_phase_index + 1

    per_phase = session.insight_points_earned / phases_completed if phases_completed > 0 else 0

    return SessionResult(
        session_id=session.id,
        activity_instance_id=session.activity_instance_id,
        mode=session.mode,
        activity_type=session.activity_type,
        flagged_moments=session.flagged_moments,
        hypotheses_updated=session.hypotheses,
        insight_points_earned=session.insight_points_earned,
        reflection_notes=session.reflection_notes,
        quality_tier=quality_tier_for(per_phase),
        phases_completed=phases_completed,
        total_phases=len(session.phases),
        focused_player_ids=focused_ids,
    )
