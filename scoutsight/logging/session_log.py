"""In-memory session log for accumulating transition history."""

from dataclasses import dataclass
from typing import Optional

from scoutsight.core.enums import SessionState
from scoutsight.core.observation.types import ObservationSession


@dataclass
class SessionLogEntry:
    """Single transition in the session log."""

    action: str  # "allocate_focus", "advance", "flag_moment", ...
    phase_index: int
    state_before: SessionState
    state_after: SessionState
    tokens_available: int
    insight_delta: int
    is_no_op: bool = False
    detail: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "phase_index": self.phase_index,
            "state_before": self.state_before.value,
            "state_after": self.state_after.value,
            "tokens_available": self.tokens_available,
            "insight_delta": self.insight_delta,
            "is_no_op": self.is_no_op,
            "detail": self.detail,
        }


@dataclass
class SessionLogStats:
    """Accumulated statistics for one session."""

    tokens_spent: int = 0
    moments_flagged: int = 0
    hypotheses_opened: int = 0
    hypotheses_resolved: int = 0
    reflection_notes: int = 0
    insight_points: int = 0
    rejected_calls: int = 0
    total_calls: int = 0

    @property
    def accepted_ratio(self) -> float:
        if self.total_calls == 0:
            return 0.0
        return 1 - self.rejected_calls / self.total_calls

    def to_dict(self) -> dict:
        return {
            "tokens_spent": self.tokens_spent,
            "moments_flagged": self.moments_flagged,
            "hypotheses_opened": self.hypotheses_opened,
            "hypotheses_resolved": self.hypotheses_resolved,
            "reflection_notes": self.reflection_notes,
            "insight_points": self.insight_points,
            "rejected_calls": self.rejected_calls,
            "total_calls": self.total_calls,
        }


def _resolved_count(session: ObservationSession) -> int:
    return sum(1 for h in session.hypotheses if h.is_resolved)


class SessionLog:
    """
    In-memory accumulator for session transitions.

    Feed it the session before and after each transition call. Transitions
    that reject their input return the same session object, which is how
    a no-op is detected. Entries carry no wall-clock time so the log of a
    replayed session is identical to the original.

    Usage:
        log = SessionLog(session.id)
        after = allocate_focus(session, "p1", LensType.TECHNICAL)
        log.record("allocate_focus", session, after)
    """

    def __init__(self, session_id: str) -> None:
        self.session_id = session_id
        self.entries: list[SessionLogEntry] = []
        self.stats = SessionLogStats()

    def record(
        self,
        action: str,
        before: ObservationSession,
        after: ObservationSession,
        detail: Optional[str] = None,
    ) -> SessionLogEntry:
        """Record one transition and update the running stats."""
        is_no_op = before is after
        insight_delta = after.insight_points_earned - before.insight_points_earned

        entry = SessionLogEntry(
            action=action,
            phase_index=after.current_phase_index,
            state_before=before.state,
            state_after=after.state,
            tokens_available=after.focus_tokens.available,
            insight_delta=insight_delta,
            is_no_op=is_no_op,
            detail=detail,
        )
        self.entries.append(entry)

        stats = self.stats
        stats.total_calls += 1
        if is_no_op:
            stats.rejected_calls += 1
            return entry

        stats.tokens_spent += len(after.focus_tokens.allocations) - len(before.focus_tokens.allocations)
        stats.moments_flagged += len(after.flagged_moments) - len(before.flagged_moments)
        stats.hypotheses_opened += len(after.hypotheses) - len(before.hypotheses)
        stats.hypotheses_resolved += _resolved_count(after) - _resolved_count(before)
        stats.reflection_notes += len(after.reflection_notes) - len(before.reflection_notes)
        stats.insight_points += insight_delta
        return entry

    def get_entries_by_phase(self) -> dict[int, list[SessionLogEntry]]:
        """Group entries by phase index."""
        by_phase: dict[int, list[SessionLogEntry]] = {}
        for entry in self.entries:
            by_phase.setdefault(entry.phase_index, []).append(entry)
        return by_phase

    def get_rejected(self) -> list[SessionLogEntry]:
        return [e for e in self.entries if e.is_no_op]

    @property
    def entry_count(self) -> int:
        return len(self.entries)

    def to_dict(self) -> dict:
        return {
            "session_id": self.session_id,
            "entries": [e.to_dict() for e in self.entries],
            "stats": self.stats.to_dict(),
        }
