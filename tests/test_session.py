"""Tests for the observation session state machine."""

import pytest

from scoutsight.config import EngineConfig
from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import (
    ActivityType,
    EvidenceDirection,
    FlagReaction,
    HypothesisState,
    LensType,
    ObservationContext,
    ObservationMode,
    QualityTier,
    SessionState,
    Specialization,
)
from scoutsight.core.observation import (
    FocusTokenState,
    PlayerPoolEntry,
    SessionConfig,
    SessionPhase,
    add_hypothesis,
    add_reflection_note,
    advance_session_phase,
    allocate_focus,
    apply_phase_descriptions,
    collect_session_observations,
    complete_session,
    context_for_activity,
    create_session,
    flag_moment,
    get_current_phase,
    get_phase_token_refresh,
    get_session_result,
    is_half_time_phase,
    populate_phases,
    remove_focus,
    start_session,
    update_hypothesis,
)
from scoutsight.core.observation.content import GENERIC_PHASE_DESCRIPTION
from scoutsight.core.observation.session import quality_tier_for
from scoutsight.core.rng import SeededRNG

P1 = "player-0001"
P2 = "player-0002"


def _config(activity: ActivityType, **overrides) -> SessionConfig:
    values = dict(
        activity_type=activity,
        specialization=Specialization.YOUTH,
        player_pool=(PlayerPoolEntry(P1, "Jamie Okafor", "CM"), PlayerPoolEntry(P2, "Sam Reyes", "ST")),
        seed="config-seed",
        week=2,
        season=1,
    )
    values.update(overrides)
    return SessionConfig(**values)


def _to_reflection(session):
    while session.state == SessionState.ACTIVE:
        session = advance_session_phase(session)
    return session


def _advance(session, times: int):
    for _ in range(times):
        session = advance_session_phase(session)
    return session


class TestCreateSession:
    def test_full_observation_skeleton(self, setup_session):
        session = setup_session
        n = len(session.phases)
        assert session.state == SessionState.SETUP
        assert session.mode == ObservationMode.FULL_OBSERVATION
        assert 12 <= n <= 18
        assert session.phases[0].minute == 0
        assert session.phases[-1].minute == 90
        assert [p.index for p in session.phases] == list(range(n))
        assert [p.index for p in session.phases if p.is_half_time] == [n // 2]
        assert session.focus_tokens.available == session.focus_tokens.total == 3

    def test_target_player_first(self, setup_session):
        assert setup_session.players[0].player_id == P1
        assert [p.player_id for p in setup_session.players] == [P1, P2]

    def test_deterministic_id(self, session_config):
        a = create_session(session_config, SeededRNG("x"))
        b = create_session(session_config, SeededRNG("x"))
        assert a.id == b.id
        assert a == b

    def test_instance_id_changes_session_id(self, session_config):
        from dataclasses import replace
        a = create_session(session_config, SeededRNG("x"))
        b = create_session(replace(session_config, activity_instance_id="act-9"), SeededRNG("x"))
        assert a.id != b.id
        assert b.activity_instance_id == "act-9"

    def test_quick_interaction(self):
        session = create_session(_config(ActivityType.STATS_BRIEFING), SeededRNG("q"))
        assert session.mode == ObservationMode.QUICK_INTERACTION
        assert session.focus_tokens.total == 0
        assert [p.minute for p in session.phases] == list(range(1, len(session.phases) + 1))
        assert not any(p.is_half_time for p in session.phases)

    def test_unmapped_activity_uses_fallback_range(self, engine_config):
        from dataclasses import replace
        config = replace(engine_config, fallback_min_phases=5, fallback_max_phases=5)
        for activity in (ActivityType.YOUTH_TRIAL, ActivityType.AGENT_SHOWCASE):
            session = create_session(_config(activity), SeededRNG("fb"), config)
            assert session.mode == ObservationMode.FULL_OBSERVATION
            assert len(session.phases) == 5

    def test_default_fallback_range(self):
        for i in range(30):
            session = create_session(_config(ActivityType.YOUTH_TRIAL), SeededRNG(f"fb-{i}"))
            assert 4 <= len(session.phases) <= 8


class TestLifecycle:
    def test_start(self, setup_session):
        active = start_session(setup_session)
        assert active.state == SessionState.ACTIVE
        assert start_session(active) is active

    def test_cannot_start_without_phases(self, setup_session):
        from dataclasses import replace
        empty = replace(setup_session, phases=())
        assert start_session(empty) is empty

    def test_advance_requires_active(self, setup_session):
        assert advance_session_phase(setup_session) is setup_session

    def test_advance_to_reflection(self, active_session):
        n = len(active_session.phases)
        session = _advance(active_session, n - 1)
        assert session.state == SessionState.ACTIVE
        assert session.current_phase_index == n - 1
        session = advance_session_phase(session)
        assert session.state == SessionState.REFLECTION
        assert session.current_phase_index == n - 1
        assert advance_session_phase(session) is session

    def test_complete_only_from_reflection(self, active_session):
        assert complete_session(active_session) is active_session
        done = complete_session(_to_reflection(active_session))
        assert done.state == SessionState.COMPLETE

    def test_current_phase(self, active_session):
        session = advance_session_phase(active_session)
        assert get_current_phase(session).index == 1

    def test_input_never_mutated(self, active_session):
        snapshot = active_session.to_dict()
        allocate_focus(active_session, P1, LensType.TECHNICAL)
        advance_session_phase(active_session)
        flag_moment(active_session, "m-0", FlagReaction.PROMISING)
        assert active_session.to_dict() == snapshot


class TestFocus:
    def test_allocate(self, active_session):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        assert session.focus_tokens.available == 2
        allocation = session.focus_tokens.allocations[0]
        assert (allocation.player_id, allocation.lens, allocation.start_phase, allocation.phases_active) == (
            P1, LensType.TECHNICAL, 0, 0,
        )
        assert session.focus_tokens.warmup(P1, LensType.TECHNICAL) == 0
        player = session.player(P1)
        assert player.is_focused
        assert player.current_lens == LensType.TECHNICAL
        assert player.focused_phases == (0,)

    def test_rejected_calls(self, setup_session, active_session):
        assert allocate_focus(setup_session, P1, LensType.TECHNICAL) is setup_session
        assert allocate_focus(active_session, "nobody", LensType.TECHNICAL) is active_session

    def test_tokens_exhaust(self, active_session):
        session = active_session
        for lens in (LensType.TECHNICAL, LensType.PHYSICAL, LensType.MENTAL):
            session = allocate_focus(session, P1, lens)
        assert session.focus_tokens.available == 0
        assert allocate_focus(session, P2, LensType.GENERAL) is session

    def test_token_conservation(self, active_session):
        """Before half-time, available plus allocations always equals the total."""
        session = active_session
        steps = [P1, None, P2, None, P1]
        for step in steps:
            if step is None:
                session = advance_session_phase(session)
            else:
                session = allocate_focus(session, step, LensType.GENERAL)
            tokens = session.focus_tokens
            assert tokens.available + len(tokens.allocations) == tokens.total
            assert tokens.available >= 0

    def test_half_time_refresh(self, active_session):
        """Three tokens spent in the first phase come back at half-time."""
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        session = allocate_focus(session, P2, LensType.PHYSICAL)
        session = allocate_focus(session, P1, LensType.MENTAL)
        assert session.focus_tokens.available == 0

        half = len(session.phases) // 2
        session = _advance(session, half - 1)
        assert session.focus_tokens.available == 0
        session = advance_session_phase(session)
        assert session.current_phase_index == half
        assert session.focus_tokens.available == 3

    def test_unused_tokens_do_not_carry_over(self, active_session):
        half = len(active_session.phases) // 2
        session = allocate_focus(active_session, P1, LensType.GENERAL)
        session = _advance(session, half)
        assert session.focus_tokens.available == 3

    def test_only_live_allocations_advance(self, active_session):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        session = allocate_focus(session, P2, LensType.PHYSICAL)
        session = allocate_focus(session, P1, LensType.MENTAL)
        session = advance_session_phase(session)

        technical, physical, mental = session.focus_tokens.allocations
        assert technical.phases_active == 0  # superseded by the mental lens
        assert physical.phases_active == 1
        assert mental.phases_active == 1
        assert session.focus_tokens.warmup(P1, LensType.MENTAL) == 1
        assert session.focus_tokens.warmup(P1, LensType.TECHNICAL) == 0

    def test_remove_focus_stops_growth_without_refund(self, active_session):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        session = advance_session_phase(session)
        session = remove_focus(session, P1)
        assert session.focus_tokens.available == 2
        assert not session.player(P1).is_focused
        assert session.player(P1).current_lens is None

        session = advance_session_phase(session)
        assert session.focus_tokens.allocations[0].phases_active == 1

    def test_remove_focus_unknown_player(self, active_session):
        assert remove_focus(active_session, "nobody") is active_session

    def test_refocus_costs_a_token(self, active_session):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        session = allocate_focus(session, P1, LensType.TECHNICAL)
        assert session.focus_tokens.available == 1
        assert len(session.focus_tokens.allocations) == 2
        assert session.player(P1).focused_phases == (0,)

    def test_warmup_counters_are_read_only(self, active_session):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        with pytest.raises(TypeError):
            session.focus_tokens.warmup_phases[(P1, LensType.TECHNICAL)] = 9
        assert session.focus_tokens.warmup(P1, LensType.TECHNICAL) == 0

    def test_token_state_copies_warmup_input(self):
        counters = {(P1, LensType.MENTAL): 2}
        state = FocusTokenState(available=3, total=3, warmup_phases=counters)
        counters[(P1, LensType.MENTAL)] = 7
        assert state.warmup(P1, LensType.MENTAL) == 2
        assert state == FocusTokenState(available=3, total=3, warmup_phases={(P1, LensType.MENTAL): 2})

    def test_phase_token_refresh(self):
        assert get_phase_token_refresh(ObservationMode.FULL_OBSERVATION) == 3
        assert get_phase_token_refresh(ObservationMode.QUICK_INTERACTION) == 0


class TestHalfTime:
    def test_flagged_phase(self, active_session):
        half = len(active_session.phases) // 2
        assert is_half_time_phase(active_session, half)
        assert not is_half_time_phase(active_session, 0)
        assert not is_half_time_phase(active_session, 99)

    def test_structural_fallback_full_observation_only(self, active_session):
        from dataclasses import replace
        unflagged = replace(
            active_session,
            phases=tuple(replace(p, is_half_time=False) for p in active_session.phases),
        )
        half = len(unflagged.phases) // 2
        assert is_half_time_phase(unflagged, half)
        analysis = replace(unflagged, mode=ObservationMode.ANALYSIS)
        assert not is_half_time_phase(analysis, half)


class TestFlagMoment:
    def test_flag_awards_insight(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING, note="Lovely turn")
        assert len(session.flagged_moments) == 1
        flagged = session.flagged_moments[0]
        assert flagged.phase_index == 0
        assert flagged.minute == 0
        assert flagged.moment.id == "m-0"
        assert flagged.note == "Lovely turn"
        assert session.insight_points_earned == 5

    def test_one_flag_per_phase(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING)
        assert flag_moment(session, "m-0", FlagReaction.CONCERNING) is session

    def test_moment_must_be_in_current_phase(self, active_session):
        assert flag_moment(active_session, "m-1", FlagReaction.PROMISING) is active_session
        assert flag_moment(active_session, "missing", FlagReaction.PROMISING) is active_session

    def test_flag_each_phase(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING)
        session = advance_session_phase(session)
        session = flag_moment(session, "m-1", FlagReaction.INTERESTING)
        assert [f.phase_index for f in session.flagged_moments] == [0, 1]
        assert session.insight_points_earned == 10

    def test_flag_requires_active(self, setup_session):
        assert flag_moment(setup_session, "m-0", FlagReaction.PROMISING) is setup_session

    def test_custom_reward(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING, config=EngineConfig(ip_per_flagged_moment=7))
        assert session.insight_points_earned == 7


class TestReflection:
    def test_hypothesis_only_in_reflection(self, active_session):
        assert add_hypothesis(active_session, P1, "Calm?", AttributeDomain.MENTAL, 2) is active_session

    def test_hypothesis_confirmation_awards_once(self, active_session):
        session = _to_reflection(active_session)
        session = add_hypothesis(session, P1, "Is he calm under pressure?", AttributeDomain.MENTAL, 2)
        hyp_id = session.hypotheses[0].id
        assert session.hypotheses[0].state == HypothesisState.OPEN

        for i in range(3):
            session = update_hypothesis(session, hyp_id, EvidenceDirection.FOR, f"calm #{i}", 2)
        assert session.hypothesis(hyp_id).state == HypothesisState.CONFIRMED
        assert session.insight_points_earned == 10

        after = update_hypothesis(session, hyp_id, EvidenceDirection.AGAINST, "panicked", 3)
        assert after is session

    def test_hypothesis_debunked(self, active_session):
        session = add_hypothesis(_to_reflection(active_session), P1, "Quick?", AttributeDomain.PHYSICAL, 2)
        hyp_id = session.hypotheses[0].id
        session = update_hypothesis(session, hyp_id, EvidenceDirection.AGAINST, "slow", 2)
        session = update_hypothesis(session, hyp_id, EvidenceDirection.AGAINST, "slow", 2)
        assert session.hypothesis(hyp_id).state == HypothesisState.CONTRADICTED
        session = update_hypothesis(session, hyp_id, EvidenceDirection.AGAINST, "slow", 2)
        assert session.hypothesis(hyp_id).state == HypothesisState.DEBUNKED

    def test_unknown_hypothesis(self, active_session):
        session = _to_reflection(active_session)
        assert update_hypothesis(session, "nope", EvidenceDirection.FOR, "x", 2) is session

    def test_hypothesis_ids_unique(self, active_session):
        session = _to_reflection(active_session)
        session = add_hypothesis(session, P1, "A?", AttributeDomain.MENTAL, 2)
        session = add_hypothesis(session, P1, "B?", AttributeDomain.MENTAL, 2)
        assert session.hypotheses[0].id != session.hypotheses[1].id

    def test_reflection_note(self, active_session):
        session = _to_reflection(active_session)
        assert add_reflection_note(session, "   ") is session
        session = add_reflection_note(session, "  Worth a second look.  ")
        assert session.reflection_notes == ("Worth a second look.",)
        assert session.insight_points_earned == 3

    def test_note_requires_reflection(self, active_session):
        assert add_reflection_note(active_session, "early") is active_session


class TestSessionResult:
    def test_partial_result(self, active_session):
        session = allocate_focus(active_session, P2, LensType.GENERAL)
        session = advance_session_phase(session)
        session = allocate_focus(session, P1, LensType.GENERAL)
        session = allocate_focus(session, P2, LensType.PHYSICAL)
        result = get_session_result(session)
        assert result.phases_completed == 2
        assert result.total_phases == len(session.phases)
        assert result.focused_player_ids == (P2, P1)

    def test_completed_result(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING)
        session = complete_session(_to_reflection(session))
        result = get_session_result(session)
        assert result.phases_completed == result.total_phases
        assert result.insight_points_earned == 5
        assert result.quality_tier == QualityTier.POOR

    def test_tier_thresholds(self):
        assert quality_tier_for(0) == QualityTier.POOR
        assert quality_tier_for(2) == QualityTier.AVERAGE
        assert quality_tier_for(5) == QualityTier.GOOD
        assert quality_tier_for(8) == QualityTier.EXCELLENT
        assert quality_tier_for(12) == QualityTier.EXCEPTIONAL

    def test_flag_every_phase_is_good(self, active_session):
        session = active_session
        while session.state == SessionState.ACTIVE:
            session = flag_moment(session, f"m-{session.current_phase_index}", FlagReaction.PROMISING)
            session = advance_session_phase(session)
        assert get_session_result(session).quality_tier == QualityTier.GOOD


class TestDeterminism:
    def _run(self, session_config):
        session = create_session(session_config, SeededRNG("replay"))
        session = start_session(session)
        session = allocate_focus(session, P1, LensType.TECHNICAL)
        session = advance_session_phase(session)
        session = remove_focus(session, P1)
        session = _to_reflection(session)
        session = add_hypothesis(session, P1, "Good touch?", AttributeDomain.TECHNICAL, 5)
        session = update_hypothesis(session, session.hypotheses[0].id, EvidenceDirection.FOR, "yes", 5)
        return session

    def test_replay_identical(self, session_config):
        assert self._run(session_config) == self._run(session_config)


class TestContent:
    def test_populate_keeps_skeleton_structure(self, session_config, rng):
        session = create_session(session_config, rng)
        generated = [SessionPhase(index=99, minute=-1, description=f"d{i}") for i in range(len(session.phases))]
        populated = populate_phases(session, generated)
        assert [p.index for p in populated.phases] == [p.index for p in session.phases]
        assert [p.minute for p in populated.phases] == [p.minute for p in session.phases]
        assert [p.is_half_time for p in populated.phases] == [p.is_half_time for p in session.phases]
        assert populated.phases[0].description == "d0"

    def test_populate_rejects_wrong_count(self, session_config, rng):
        session = create_session(session_config, rng)
        assert populate_phases(session, [SessionPhase(index=0, minute=0)]) is session

    def test_populate_requires_setup(self, active_session):
        assert populate_phases(active_session, list(active_session.phases)) is active_session

    def test_descriptions_from_table(self, setup_session, rng):
        table = {ActivityType.ATTEND_MATCH: ("A quiet spell.",)}
        session = apply_phase_descriptions(setup_session, rng, table)
        assert all(p.description == "A quiet spell." for p in session.phases)

    def test_generic_description_fallback(self, setup_session, rng):
        session = apply_phase_descriptions(setup_session, rng, {})
        assert session.phases[0].description == GENERIC_PHASE_DESCRIPTION.format(number=1)


class TestCollection:
    def test_context_for_activity(self):
        assert context_for_activity(ActivityType.TRAINING_VISIT) == ObservationContext.TRAINING_GROUND
        assert context_for_activity(ActivityType.YOUTH_TRIAL) == ObservationContext.ACADEMY_TRIAL_DAY
        assert context_for_activity(ActivityType.NETWORK_MEETING) == ObservationContext.LIVE_MATCH

    def test_one_observation_per_focused_player(self, active_session, player, teammate, scout, match_phases):
        session = allocate_focus(active_session, P1, LensType.TECHNICAL)
        session = _advance(session, 2)
        session = allocate_focus(session, P1, LensType.MENTAL)
        session = allocate_focus(session, P2, LensType.PHYSICAL)
        session = _advance(session, 2)

        observations = collect_session_observations(
            SeededRNG("collect"), session, {P1: player, P2: teammate}, scout, match_phases,
            ObservationContext.LIVE_MATCH, [],
        )
        assert [o.player_id for o in observations] == [P1, P2]
        assert observations[0].focus_lens == LensType.MENTAL
        assert observations[1].focus_lens == LensType.PHYSICAL
        assert all(o.week == session.started_at_week for o in observations)

    def test_unknown_ground_truth_skipped(self, active_session, player, scout, match_phases):
        session = allocate_focus(active_session, P2, LensType.GENERAL)
        observations = collect_session_observations(
            SeededRNG("collect"), session, {P1: player}, scout, match_phases, ObservationContext.LIVE_MATCH, [],
        )
        assert observations == []
