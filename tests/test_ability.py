"""Tests for CA/PA star ratings."""

import pytest

from scoutsight.core.ability import (
    ability_to_stars,
    age_factor,
    generate_ability_reading,
    get_perceived_ability,
    stars_to_ability,
)
from scoutsight.core.enums import ObservationContext
from scoutsight.core.models import AbilityReading, Observation
from scoutsight.core.rng import SeededRNG

HALF_STARS = [x / 2 for x in range(1, 11)]


def _obs(
    index: int,
    ca: float,
    ca_conf: float = 0.5,
    pa_low: float = 3.0,
    pa_high: float = 4.0,
    player_id: str = "p1",
) -> Observation:
    return Observation(
        id=f"o{index}",
        player_id=player_id,
        scout_id="s1",
        context=ObservationContext.LIVE_MATCH,
        ability_reading=AbilityReading(
            perceived_ca=ca,
            ca_confidence=ca_conf,
            perceived_pa_low=pa_low,
            perceived_pa_high=pa_high,
            pa_confidence=0.4,
        ),
    )


class TestStarConversion:
    def test_endpoints(self):
        assert ability_to_stars(1) == 0.5
        assert ability_to_stars(200) == 5.0

    def test_clamped(self):
        assert ability_to_stars(-50) == 0.5
        assert ability_to_stars(500) == 5.0

    def test_half_star_steps(self):
        for ability in range(1, 201):
            assert ability_to_stars(ability) in HALF_STARS

    def test_monotonic(self):
        stars = [ability_to_stars(a) for a in range(1, 201)]
        assert stars == sorted(stars)

    def test_inverse(self):
        for stars in HALF_STARS:
            assert ability_to_stars(stars_to_ability(stars)) == stars

    def test_inverse_endpoints(self):
        assert stars_to_ability(0.5) == 1
        assert stars_to_ability(5.0) == 200


class TestAgeFactor:
    def test_youth_depends_on_skill(self):
        assert age_factor(19, 20) == pytest.approx(0.9)
        assert age_factor(19, 10) == pytest.approx(1.05)

    def test_veteran_flat(self):
        assert age_factor(28, 5) == 0.7
        assert age_factor(34, 20) == 0.7

    def test_prime_linear(self):
        assert age_factor(22, 10) == pytest.approx(1.0)
        assert age_factor(25, 10) == pytest.approx(0.85)


class TestAbilityReading:
    """Invariants over many seeds and contexts."""

    def test_pa_window_never_below_ca(self, player, novice_scout, expert_scout):
        for scout in (novice_scout, expert_scout):
            for context in ObservationContext:
                for i in range(10):
                    reading = generate_ability_reading(
                        SeededRNG(f"ability-{context.value}-{i}"), player, scout, [], context,
                    )
                    assert reading.perceived_pa_low >= reading.perceived_ca
                    assert reading.perceived_pa_high >= reading.perceived_pa_low
                    assert 0.5 <= reading.perceived_ca <= 5.0
                    assert 0.5 <= reading.perceived_pa_low <= 5.0
                    assert 0.5 <= reading.perceived_pa_high <= 5.0
                    assert 0.0 <= reading.ca_confidence <= 1.0
                    assert 0.0 <= reading.pa_confidence <= 1.0

    def test_observation_count_from_history(self, player, scout):
        context = ObservationContext.LIVE_MATCH
        history = [_obs(i, 2.5, player_id=player.id) for i in range(3)]
        first = generate_ability_reading(SeededRNG("h"), player, scout, [], context)
        repeat = generate_ability_reading(SeededRNG("h"), player, scout, history, context)
        assert first.observation_count == 1
        assert repeat.observation_count == 4
        assert repeat.ca_confidence > first.ca_confidence
        assert repeat.pa_confidence > first.pa_confidence

    def test_history_for_other_players_ignored(self, rng, player, scout):
        history = [_obs(i, 2.5, player_id="someone-else") for i in range(3)]
        reading = generate_ability_reading(rng, player, scout, history, ObservationContext.LIVE_MATCH)
        assert reading.observation_count == 1

    def test_expert_more_confident(self, player, novice_scout, expert_scout):
        context = ObservationContext.LIVE_MATCH
        novice = generate_ability_reading(SeededRNG("a"), player, novice_scout, [], context)
        expert = generate_ability_reading(SeededRNG("a"), player, expert_scout, [], context)
        assert expert.ca_confidence > novice.ca_confidence
        assert expert.pa_confidence > novice.pa_confidence


class TestPerceivedAbility:
    def test_none_without_readings(self):
        assert get_perceived_ability([], "p1") is None

    def test_uses_three_most_recent(self):
        observations = [_obs(0, 0.5), _obs(1, 3.0), _obs(2, 3.0), _obs(3, 3.0)]
        perceived = get_perceived_ability(observations, "p1")
        assert perceived.ca == 3.0
        assert perceived.observation_count == 4

    def test_ca_window_from_confidence(self):
        perceived = get_perceived_ability([_obs(0, 3.0, ca_conf=0.75)], "p1")
        assert perceived.ca_low == 2.5
        assert perceived.ca_high == 3.5

    def test_other_players_ignored(self):
        assert get_perceived_ability([_obs(0, 3.0)], "someone-else") is None
