"""Tests for the pydantic request and response schemas."""

import pytest
from pydantic import ValidationError

from scoutsight.api.schemas import (
    ObservationSchema,
    ObservationSessionSchema,
    ReflectionSchema,
    SessionConfigSchema,
    SessionResultSchema,
)
from scoutsight.core.enums import (
    ActivityType,
    FlagReaction,
    LensType,
    ObservationContext,
    SessionState,
    Specialization,
)
from scoutsight.core.observation import (
    advance_session_phase,
    allocate_focus,
    create_session,
    flag_moment,
    generate_reflection,
    get_session_result,
)
from scoutsight.core.perception import observe_player
from scoutsight.core.rng import SeededRNG


def _request(**overrides) -> dict:
    data = {
        "activity_type": "attendMatch",
        "specialization": "firstTeam",
        "player_pool": [
            {"player_id": "p1", "name": "Jamie Okafor", "position": "CM"},
            {"player_id": "p2", "name": "Sam Reyes", "position": "ST"},
        ],
        "seed": "abc",
        "week": 3,
        "season": 1,
        "target_player_id": "p2",
    }
    data.update(overrides)
    return data


class TestSessionConfigSchema:
    def test_to_config(self):
        config = SessionConfigSchema(**_request()).to_config()
        assert config.activity_type == ActivityType.ATTEND_MATCH
        assert config.specialization == Specialization.FIRST_TEAM
        assert [p.player_id for p in config.player_pool] == ["p1", "p2"]
        assert config.target_player_id == "p2"

    def test_config_creates_session(self):
        config = SessionConfigSchema(**_request()).to_config()
        session = create_session(config, SeededRNG("abc"))
        assert session.players[0].player_id == "p2"

    @pytest.mark.parametrize("overrides", [
        {"seed": ""},
        {"week": 0},
        {"season": 0},
        {"activity_type": "notAnActivity"},
        {"player_pool": [{"player_id": "", "name": "X", "position": "CM"}]},
    ])
    def test_rejects_invalid(self, overrides):
        with pytest.raises(ValidationError):
            SessionConfigSchema(**_request(**overrides))


class TestResponseSchemas:
    def test_session_schema(self, active_session):
        session = allocate_focus(active_session, "player-0001", LensType.TECHNICAL)
        session = flag_moment(session, "m-0", FlagReaction.INTERESTING)
        session = advance_session_phase(session)

        schema = ObservationSessionSchema.from_session(session)
        assert schema.state == SessionState.ACTIVE.value
        assert schema.total_phases == len(session.phases)
        assert schema.current_phase_index == 1
        assert schema.focus_tokens.available == 2
        assert schema.focus_tokens.warmup_phases == {"player-0001:technical": 1}
        assert schema.flagged_moments[0].reaction == "interesting"
        assert schema.players[0].current_lens == "technical"

        dumped = schema.model_dump()
        assert dumped["phases"][0]["moments"][0]["id"] == "m-0"

    def test_result_schema(self, active_session):
        session = allocate_focus(active_session, "player-0002", LensType.GENERAL)
        schema = SessionResultSchema.from_result(get_session_result(session))
        assert schema.focused_player_ids == ["player-0002"]
        assert schema.phases_completed == 1
        assert schema.quality_tier == "poor"

    def test_reflection_schema(self, active_session):
        session = flag_moment(active_session, "m-0", FlagReaction.PROMISING)
        session = advance_session_phase(session)
        session = flag_moment(session, "m-1", FlagReaction.PROMISING)
        result = generate_reflection(session, SeededRNG("reflect"), scout_intuition=12, scout_spec_level=2)

        schema = ReflectionSchema.from_result(result)
        assert schema.insight_points == result.insight_points
        assert [h.player_id for h in schema.suggested_hypotheses] == ["player-0001"]
        assert schema.suggested_hypotheses[0].domain == "technical"
        assert (schema.gut_feeling is None) == (result.gut_feeling is None)
        assert schema.model_dump()["summary"] == result.summary

    def test_observation_schema(self, rng, player, scout, match_phases):
        observation = observe_player(
            rng, player, scout, match_phases, [0, 2], ObservationContext.LIVE_MATCH, [],
            lens=LensType.MENTAL, week=4, season=1,
        )
        schema = ObservationSchema.from_observation(observation)
        assert schema.player_id == player.id
        assert schema.context == "liveMatch"
        assert schema.focus_lens == "mental"
        assert len(schema.attribute_readings) == len(observation.attribute_readings)
        assert all(1 <= r.perceived_value <= 20 for r in schema.attribute_readings)
        assert schema.ability_reading is not None
