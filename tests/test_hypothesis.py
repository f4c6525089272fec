"""Tests for hypothesis generation, evaluation and resolution."""

import pytest

from scoutsight.core.attributes import AttributeDomain
from scoutsight.core.enums import (
    EvidenceDirection,
    EvidenceStrength,
    HypothesisState,
    MomentType,
)
from scoutsight.core.observation import (
    Hypothesis,
    HypothesisEvidence,
    PlayerMoment,
    evaluate_hypothesis,
    generate_hypothesis,
    get_open_hypotheses,
    get_resolved_hypotheses,
    hypothesis_insight_bonus,
    resolve_hypothesis,
)
from scoutsight.core.observation.hypothesis import (
    add_evidence,
    classify_evidence_strength,
    state_from_counts,
)
from scoutsight.core.rng import SeededRNG


def _moment(index: int, quality: int, moment_type: MomentType = MomentType.MENTAL_RESPONSE,
            player_id: str = "p1") -> PlayerMoment:
    return PlayerMoment(id=f"m{index}", player_id=player_id, moment_type=moment_type, quality=quality)


def _hypothesis(state: HypothesisState = HypothesisState.OPEN, evidence=()) -> Hypothesis:
    return Hypothesis(
        id="h1",
        player_id="p1",
        text="Does he stay calm?",
        domain=AttributeDomain.MENTAL,
        state=state,
        evidence=tuple(evidence),
    )


def _evidence(direction: EvidenceDirection, strength=EvidenceStrength.MODERATE) -> HypothesisEvidence:
    return HypothesisEvidence(week=1, direction=direction, description="seen", strength=strength)


FOR = EvidenceDirection.FOR
AGAINST = EvidenceDirection.AGAINST


class TestCountThresholds:
    @pytest.mark.parametrize("for_count,against_count,expected", [
        (0, 0, HypothesisState.OPEN),
        (1, 1, HypothesisState.OPEN),
        (2, 0, HypothesisState.SUPPORTED),
        (0, 2, HypothesisState.CONTRADICTED),
        (2, 2, HypothesisState.SUPPORTED),
        (3, 0, HypothesisState.CONFIRMED),
        (0, 3, HypothesisState.DEBUNKED),
        (3, 3, HypothesisState.CONFIRMED),
    ])
    def test_state_from_counts(self, for_count, against_count, expected):
        assert state_from_counts(for_count, against_count) == expected

    def test_add_evidence_progression(self):
        h = _hypothesis()
        h = add_evidence(h, _evidence(FOR))
        assert h.state == HypothesisState.OPEN
        h = add_evidence(h, _evidence(FOR))
        assert h.state == HypothesisState.SUPPORTED
        h = add_evidence(h, _evidence(FOR))
        assert h.state == HypothesisState.CONFIRMED
        assert len(h.evidence) == 3

    def test_resolved_is_absorbing(self):
        h = _hypothesis(HypothesisState.DEBUNKED)
        assert add_evidence(h, _evidence(FOR)) is h


class TestEvidenceStrength:
    def test_classification(self):
        assert classify_evidence_strength(9) == EvidenceStrength.STRONG
        assert classify_evidence_strength(8) == EvidenceStrength.STRONG
        assert classify_evidence_strength(6) == EvidenceStrength.MODERATE
        assert classify_evidence_strength(3) == EvidenceStrength.WEAK


class TestGenerateHypothesis:
    def test_needs_two_moments(self):
        for i in range(50):
            assert generate_hypothesis(SeededRNG(f"one-{i}"), "p1", "Ada", [_moment(0, 9)], 3) is None

    def test_forms_roughly_thirty_percent(self):
        moments = [_moment(0, 9), _moment(1, 8)]
        formed = [
            generate_hypothesis(SeededRNG(f"gen-{i}"), "p1", "Ada Nwosu", moments, 3)
            for i in range(300)
        ]
        hits = [h for h in formed if h is not None]
        assert 50 < len(hits) < 130
        for h in hits:
            assert h.domain == AttributeDomain.MENTAL
            assert "Ada Nwosu" in h.text
            assert "{player_name}" not in h.text
            assert h.state == HypothesisState.OPEN
            assert h.created_at_week == 3

    def test_other_players_moments_ignored(self):
        moments = [_moment(0, 9, player_id="p2"), _moment(1, 9, player_id="p2")]
        for i in range(50):
            assert generate_hypothesis(SeededRNG(f"other-{i}"), "p1", "Ada", moments, 3) is None


class TestEvaluateHypothesis:
    def test_domain_moments_become_evidence(self):
        h = evaluate_hypothesis(_hypothesis(), [_moment(0, 9), _moment(1, 3)], week=4)
        assert [e.direction for e in h.evidence] == [FOR, AGAINST]
        assert [e.strength for e in h.evidence] == [EvidenceStrength.STRONG, EvidenceStrength.WEAK]
        assert h.state == HypothesisState.SUPPORTED

    def test_inconclusive_and_off_domain_skipped(self):
        moments = [_moment(0, 6), _moment(1, 9, MomentType.PHYSICAL_TEST)]
        h = _hypothesis()
        assert evaluate_hypothesis(h, moments, week=4) is h

    def test_weighted_tie_leaves_state(self):
        h = evaluate_hypothesis(_hypothesis(), [_moment(0, 7), _moment(1, 2), _moment(2, 1)], week=4)
        # for: moderate 1.0, against: weak 0.5 + weak 0.5
        assert len(h.evidence) == 3
        assert h.state == HypothesisState.OPEN

    def test_terminal_unchanged(self):
        h = _hypothesis(HypothesisState.CONFIRMED)
        assert evaluate_hypothesis(h, [_moment(0, 1)], week=4) is h


class TestResolveHypothesis:
    def test_confirm_by_weight(self):
        h = _hypothesis(evidence=[_evidence(FOR, EvidenceStrength.STRONG), _evidence(AGAINST)])
        assert resolve_hypothesis(h).state == HypothesisState.CONFIRMED

    def test_debunk_by_weight(self):
        h = _hypothesis(evidence=[_evidence(AGAINST)])
        assert resolve_hypothesis(h).state == HypothesisState.DEBUNKED

    def test_tie_unchanged(self):
        h = _hypothesis(evidence=[_evidence(FOR), _evidence(AGAINST)])
        assert resolve_hypothesis(h) is h

    def test_insight_bonus(self):
        assert hypothesis_insight_bonus(_hypothesis(HypothesisState.CONFIRMED)) == 5
        assert hypothesis_insight_bonus(_hypothesis(HypothesisState.DEBUNKED)) == 2
        assert hypothesis_insight_bonus(_hypothesis(HypothesisState.SUPPORTED)) == 0

    def test_open_and_resolved_filters(self):
        hypotheses = [
            _hypothesis(HypothesisState.OPEN),
            _hypothesis(HypothesisState.SUPPORTED),
            _hypothesis(HypothesisState.DEBUNKED),
        ]
        assert len(get_open_hypotheses(hypotheses)) == 2
        assert len(get_resolved_hypotheses(hypotheses)) == 1
