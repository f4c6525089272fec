"""Tests for the in-memory session log."""

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import EvidenceDirection, FlagReaction, LensType, SessionState
from scoutsight.core.observation import (
    add_hypothesis,
    add_reflection_note,
    advance_session_phase,
    allocate_focus,
    flag_moment,
    update_hypothesis,
)
from scoutsight.logging import SessionLog


def _step(log, action, session, transition, *args):
    after = transition(session, *args)
    log.record(action, session, after)
    return after


class TestSessionLog:
    def test_records_accepted_calls(self, active_session):
        log = SessionLog(active_session.id)
        session = _step(log, "allocate_focus", active_session, allocate_focus, "player-0001", LensType.TECHNICAL)
        session = _step(log, "flag_moment", session, flag_moment, "m-0", FlagReaction.PROMISING)

        assert log.entry_count == 2
        assert log.stats.tokens_spent == 1
        assert log.stats.moments_flagged == 1
        assert log.stats.insight_points == 5
        assert log.entries[0].tokens_available == 2
        assert log.entries[1].insight_delta == 5
        assert log.stats.accepted_ratio == 1.0

    def test_rejected_calls_are_no_ops(self, active_session):
        log = SessionLog(active_session.id)
        session = _step(log, "flag_moment", active_session, flag_moment, "m-0", FlagReaction.PROMISING)
        _step(log, "flag_moment", session, flag_moment, "m-0", FlagReaction.CONCERNING)

        rejected = log.get_rejected()
        assert len(rejected) == 1
        assert rejected[0].is_no_op
        assert rejected[0].insight_delta == 0
        assert log.stats.moments_flagged == 1
        assert log.stats.rejected_calls == 1
        assert log.stats.accepted_ratio == 0.5

    def test_reflection_stats(self, active_session):
        log = SessionLog(active_session.id)
        session = active_session
        while session.state == SessionState.ACTIVE:
            session = _step(log, "advance", session, advance_session_phase)
        assert log.entries[-1].state_before == SessionState.ACTIVE
        assert log.entries[-1].state_after == SessionState.REFLECTION

        session = _step(log, "add_hypothesis", session, add_hypothesis,
                        "player-0001", "Strong in the air?", AttributeDomain.TECHNICAL, 5)
        hyp_id = session.hypotheses[0].id
        for _ in range(3):
            session = _step(log, "update_hypothesis", session, update_hypothesis,
                            hyp_id, EvidenceDirection.FOR, "won a header", 5)
        session = _step(log, "add_reflection_note", session, add_reflection_note, "Good session.")

        assert log.stats.hypotheses_opened == 1
        assert log.stats.hypotheses_resolved == 1
        assert log.stats.reflection_notes == 1
        assert log.stats.insight_points == 13

    def test_entries_by_phase(self, active_session):
        log = SessionLog(active_session.id)
        session = _step(log, "allocate_focus", active_session, allocate_focus, "player-0001", LensType.MENTAL)
        session = _step(log, "advance", session, advance_session_phase)
        _step(log, "allocate_focus", session, allocate_focus, "player-0002", LensType.PHYSICAL)

        by_phase = log.get_entries_by_phase()
        assert [e.action for e in by_phase[0]] == ["allocate_focus"]
        assert [e.action for e in by_phase[1]] == ["advance", "allocate_focus"]

    def test_empty_log(self):
        log = SessionLog("s-1")
        assert log.entry_count == 0
        assert log.stats.accepted_ratio == 0.0

    def test_to_dict(self, active_session):
        log = SessionLog(active_session.id)
        log.record("advance", active_session, advance_session_phase(active_session), detail="next")
        data = log.to_dict()
        assert data["session_id"] == active_session.id
        assert data["entries"][0]["state_before"] == "active"
        assert data["entries"][0]["detail"] == "next"
        assert data["stats"]["total_calls"] == 1
