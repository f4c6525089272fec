"""Shared pytest fixtures for ScoutSight tests."""

import pytest

from scoutsight.config import EngineConfig, reset_config, set_config
from scoutsight.core.attributes import PlayerAttribute, PlayerAttributes
from scoutsight.core.enums import (
    ActivityType,
    MatchPhaseType,
    MomentType,
    Position,
    Specialization,
)
from scoutsight.core.models import (
    GroundTruthPlayer,
    MatchEvent,
    MatchPhase,
    Scout,
    ScoutSkills,
)
from scoutsight.core.observation import (
    PlayerMoment,
    PlayerPoolEntry,
    SessionConfig,
    SessionPhase,
    create_session,
    populate_phases,
    start_session,
)
from scoutsight.core.personality import PersonalityTrait
from scoutsight.core.rng import SeededRNG


# =============================================================================
# Config
# =============================================================================


@pytest.fixture(autouse=True)
def engine_config():
    """Pin the engine config to defaults, whatever the environment says."""
    config = EngineConfig(
        ip_per_flagged_moment=5,
        ip_per_hypothesis_resolved=10,
        ip_per_reflection_note=3,
        fallback_min_phases=4,
        fallback_max_phases=8,
    )
    set_config(config)
    yield config
    reset_config()


@pytest.fixture
def rng() -> SeededRNG:
    return SeededRNG("test-seed")


# =============================================================================
# Scouts and players
# =============================================================================


@pytest.fixture
def scout() -> Scout:
    """An average scout (all skills 10)."""
    return Scout(id="scout-1", name="Average Scout", skills=ScoutSkills.uniform(10))


@pytest.fixture
def expert_scout() -> Scout:
    return Scout(id="scout-2", name="Expert Scout", skills=ScoutSkills.uniform(18))


@pytest.fixture
def novice_scout() -> Scout:
    return Scout(id="scout-3", name="Novice Scout", skills=ScoutSkills.uniform(3))


@pytest.fixture
def player_attributes() -> PlayerAttributes:
    """Every attribute at 12."""
    attrs = PlayerAttributes()
    for attr in PlayerAttribute:
        attrs.set(attr, 12)
    return attrs


@pytest.fixture
def player(player_attributes) -> GroundTruthPlayer:
    """A 19-year-old midfielder with two hidden traits."""
    return GroundTruthPlayer(
        id="player-0001",
        first_name="Jamie",
        last_name="Okafor",
        position=Position.CM,
        age=19,
        current_ability=90,
        potential_ability=150,
        attributes=player_attributes,
        personality_traits=(PersonalityTrait.FLAIR, PersonalityTrait.PROFESSIONAL),
    )


@pytest.fixture
def teammate(player_attributes) -> GroundTruthPlayer:
    return GroundTruthPlayer(
        id="player-0002",
        first_name="Sam",
        last_name="Reyes",
        position=Position.ST,
        age=24,
        current_ability=110,
        potential_ability=120,
        attributes=player_attributes,
    )


# =============================================================================
# Match content
# =============================================================================


@pytest.fixture
def match_phases(player, teammate) -> list[MatchPhase]:
    """Eight match phases; the player is involved in the even ones."""
    phase_types = list(MatchPhaseType)
    phases = []
    for i in range(8):
        involved = {teammate.id}
        events = []
        if i % 2 == 0:
            involved.add(player.id)
            events.append(MatchEvent(
                player_id=player.id,
                description=f"Phase {i} action",
                quality=9 if i == 0 else 5,
                attributes_revealed=(PlayerAttribute.VISION,),
            ))
        phases.append(MatchPhase(
            index=i,
            phase_type=phase_types[i % len(phase_types)],
            minute=i * 12,
            events=tuple(events),
            involved_player_ids=frozenset(involved),
        ))
    return phases


# =============================================================================
# Sessions
# =============================================================================


@pytest.fixture
def session_config(player, teammate) -> SessionConfig:
    return SessionConfig(
        activity_type=ActivityType.ATTEND_MATCH,
        specialization=Specialization.FIRST_TEAM,
        player_pool=(
            PlayerPoolEntry(player_id=teammate.id, name=teammate.full_name, position="ST"),
            PlayerPoolEntry(player_id=player.id, name=player.full_name, position="CM"),
        ),
        seed="session-seed",
        week=5,
        season=1,
        target_player_id=player.id,
    )


def make_moment(phase_index: int, player_id: str, quality: int = 8) -> PlayerMoment:
    return PlayerMoment(
        id=f"m-{phase_index}",
        player_id=player_id,
        moment_type=MomentType.TECHNICAL_ACTION,
        quality=quality,
        description=f"Moment in phase {phase_index}",
    )


@pytest.fixture
def setup_session(session_config, rng):
    """A full-observation session in setup with one moment per phase."""
    session = create_session(session_config, rng)
    phases = [
        SessionPhase(
            index=p.index,
            minute=p.minute,
            moments=(make_moment(p.index, "player-0001"),),
        )
        for p in session.phases
    ]
    return populate_phases(session, phases)


@pytest.fixture
def active_session(setup_session):
    return start_session(setup_session)
