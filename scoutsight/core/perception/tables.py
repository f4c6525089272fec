"""
Perception lookup tables.

Read-only module-level registries. Callers treat them as configuration;
nothing in the engine mutates them.
"""

from dataclasses import dataclass

from scoutsight.core.attributes import PlayerAttribute as A
from scoutsight.core.attributes import PlayerAttribute
from scoutsight.core.enums import MatchPhaseType, ObservationContext as C
from scoutsight.core.enums import ObservationContext
from scoutsight.core.models.scout import ScoutSkill


# ============================================================================
# Visibility
# ============================================================================

PHASE_VISIBLE_ATTRIBUTES: dict[MatchPhaseType, tuple[PlayerAttribute, ...]] = {
    MatchPhaseType.BUILD_UP: (
        A.PASSING, A.FIRST_TOUCH, A.DRIBBLING, A.COMPOSURE, A.POSITIONING, A.DECISION_MAKING,
    ),
    MatchPhaseType.TRANSITION: (
        A.PACE, A.STAMINA, A.AGILITY, A.DECISION_MAKING, A.PASSING, A.OFF_THE_BALL,
    ),
    MatchPhaseType.SET_PIECE: (
        A.HEADING, A.STRENGTH, A.CROSSING, A.COMPOSURE, A.POSITIONING, A.DEFENSIVE_AWARENESS,
    ),
    MatchPhaseType.PRESSING_SEQUENCE: (
        A.STAMINA, A.WORK_RATE, A.PRESSING, A.DEFENSIVE_AWARENESS, A.AGILITY, A.DECISION_MAKING,
    ),
    MatchPhaseType.COUNTER_ATTACK: (
        A.PACE, A.AGILITY, A.DRIBBLING, A.SHOOTING, A.COMPOSURE, A.OFF_THE_BALL,
    ),
    MatchPhaseType.POSSESSION: (
        A.PASSING, A.FIRST_TOUCH, A.POSITIONING, A.DECISION_MAKING, A.OFF_THE_BALL, A.COMPOSURE,
    ),
}


@dataclass(frozen=True)
class BonusVisibility:
    """An attribute only a sufficiently skilled scout notices."""

    attribute: PlayerAttribute
    skill: ScoutSkill
    min_level: int


BONUS_VISIBILITY: tuple[BonusVisibility, ...] = (
    BonusVisibility(A.FIRST_TOUCH, ScoutSkill.TECHNICAL_EYE, 12),
    BonusVisibility(A.OFF_THE_BALL, ScoutSkill.TACTICAL_UNDERSTANDING, 10),
    BonusVisibility(A.COMPOSURE, ScoutSkill.PSYCHOLOGICAL_READ, 11),
    BonusVisibility(A.LEADERSHIP, ScoutSkill.PSYCHOLOGICAL_READ, 13),
    BonusVisibility(A.PRESSING, ScoutSkill.TACTICAL_UNDERSTANDING, 11),
    BonusVisibility(A.DECISION_MAKING, ScoutSkill.PSYCHOLOGICAL_READ, 10),
)

# Off-ball attributes readable while the player is away from the action
PASSIVE_ATTRIBUTES: tuple[PlayerAttribute, ...] = (A.POSITIONING, A.WORK_RATE, A.OFF_THE_BALL)

# Base sets for observations without match phases. Live matches go through
# the phase pipeline instead, so they only pick up skill bonuses here.
CONTEXT_VISIBLE_ATTRIBUTES: dict[ObservationContext, tuple[PlayerAttribute, ...]] = {
    C.LIVE_MATCH: (),
    C.TRAINING_GROUND: (
        A.FIRST_TOUCH, A.PASSING, A.DRIBBLING, A.SHOOTING, A.PACE,
        A.STRENGTH, A.STAMINA, A.AGILITY, A.COMPOSURE, A.WORK_RATE,
    ),
    C.VIDEO_ANALYSIS: (
        A.PASSING, A.SHOOTING, A.CROSSING, A.POSITIONING,
        A.DECISION_MAKING, A.OFF_THE_BALL, A.PRESSING, A.DEFENSIVE_AWARENESS,
    ),
    C.YOUTH_TOURNAMENT: (
        A.PACE, A.DRIBBLING, A.SHOOTING, A.AGILITY, A.COMPOSURE, A.HEADING, A.STRENGTH,
    ),
    C.ACADEMY_VISIT: (
        A.FIRST_TOUCH, A.PASSING, A.DRIBBLING, A.PACE, A.AGILITY, A.COMPOSURE, A.WORK_RATE,
    ),
    # Youth
    C.SCHOOL_MATCH: (
        A.PACE, A.DRIBBLING, A.SHOOTING, A.PASSING, A.COMPOSURE, A.WORK_RATE, A.AGILITY,
    ),
    C.GRASSROOTS_TOURNAMENT: (
        A.PACE, A.DRIBBLING, A.SHOOTING, A.STRENGTH, A.STAMINA, A.COMPOSURE, A.WORK_RATE,
    ),
    C.STREET_FOOTBALL: (
        A.DRIBBLING, A.FIRST_TOUCH, A.AGILITY, A.COMPOSURE, A.PACE, A.SHOOTING,
    ),
    C.ACADEMY_TRIAL_DAY: (
        A.FIRST_TOUCH, A.PASSING, A.DRIBBLING, A.PACE, A.AGILITY,
        A.COMPOSURE, A.DECISION_MAKING, A.POSITIONING,
    ),
    C.YOUTH_FESTIVAL: (
        A.PACE, A.DRIBBLING, A.SHOOTING, A.AGILITY, A.COMPOSURE, A.PASSING, A.STAMINA,
    ),
    C.FOLLOW_UP_SESSION: (
        A.WORK_RATE, A.COMPOSURE, A.DECISION_MAKING, A.LEADERSHIP,
        A.POSITIONING, A.FIRST_TOUCH, A.PASSING,
    ),
    C.PARENT_COACH_MEETING: (
        A.WORK_RATE, A.LEADERSHIP, A.COMPOSURE, A.DECISION_MAKING,
    ),
    # First team
    C.RESERVE_MATCH: (
        A.PASSING, A.POSITIONING, A.DECISION_MAKING, A.OFF_THE_BALL, A.PACE,
        A.STRENGTH, A.STAMINA, A.DEFENSIVE_AWARENESS, A.PRESSING,
    ),
    C.OPPOSITION_ANALYSIS: (
        A.POSITIONING, A.OFF_THE_BALL, A.PRESSING, A.DEFENSIVE_AWARENESS,
        A.DECISION_MAKING, A.MARKING,
    ),
    C.AGENT_SHOWCASE: (
        A.DRIBBLING, A.SHOOTING, A.PACE, A.AGILITY, A.FIRST_TOUCH, A.CROSSING,
    ),
    C.TRIAL_MATCH: (
        A.PASSING, A.FIRST_TOUCH, A.DRIBBLING, A.PACE, A.STRENGTH,
        A.COMPOSURE, A.DECISION_MAKING, A.POSITIONING, A.WORK_RATE,
    ),
    # Data
    C.DATABASE_QUERY: (
        A.PASSING, A.SHOOTING, A.CROSSING, A.PACE, A.STAMINA, A.PRESSING,
    ),
    C.STATS_BRIEFING: (
        A.PASSING, A.SHOOTING, A.STAMINA, A.WORK_RATE, A.PRESSING,
    ),
    C.DEEP_VIDEO_ANALYSIS: (
        A.PASSING, A.SHOOTING, A.CROSSING, A.POSITIONING, A.DECISION_MAKING, A.OFF_THE_BALL,
        A.PRESSING, A.DEFENSIVE_AWARENESS, A.MARKING, A.ANTICIPATION, A.VISION,
    ),
}


# ============================================================================
# Noise
# ============================================================================

# Attribute-read noise multiplier per context. Lower is more accurate.
CONTEXT_NOISE: dict[ObservationContext, float] = {
    C.LIVE_MATCH: 1.0,
    C.VIDEO_ANALYSIS: 1.5,
    C.TRAINING_GROUND: 0.7,
    C.YOUTH_TOURNAMENT: 1.1,
    C.ACADEMY_VISIT: 0.8,
    C.SCHOOL_MATCH: 1.2,
    C.GRASSROOTS_TOURNAMENT: 1.3,
    C.STREET_FOOTBALL: 1.4,
    C.ACADEMY_TRIAL_DAY: 0.85,
    C.YOUTH_FESTIVAL: 1.1,
    C.FOLLOW_UP_SESSION: 0.9,
    C.PARENT_COACH_MEETING: 2.0,
    C.RESERVE_MATCH: 0.85,
    C.OPPOSITION_ANALYSIS: 1.0,
    C.AGENT_SHOWCASE: 1.1,
    C.TRIAL_MATCH: 0.7,
    C.DATABASE_QUERY: 1.5,
    C.STATS_BRIEFING: 1.4,
    C.DEEP_VIDEO_ANALYSIS: 1.0,
}

# Small additive confidence adjustment; contexts not listed get 0
CONTEXT_CONFIDENCE_ADJUSTMENT: dict[ObservationContext, float] = {
    C.TRAINING_GROUND: 0.05,
    C.VIDEO_ANALYSIS: -0.05,
}

CONTEXT_LABELS: dict[ObservationContext, str] = {
    C.LIVE_MATCH: "a live match",
    C.TRAINING_GROUND: "training",
    C.VIDEO_ANALYSIS: "video analysis",
    C.YOUTH_TOURNAMENT: "a youth tournament",
    C.ACADEMY_VISIT: "an academy visit",
    C.SCHOOL_MATCH: "a school match",
    C.GRASSROOTS_TOURNAMENT: "a grassroots tournament",
    C.STREET_FOOTBALL: "street football",
    C.ACADEMY_TRIAL_DAY: "an academy trial day",
    C.YOUTH_FESTIVAL: "a youth festival",
    C.FOLLOW_UP_SESSION: "a follow-up session",
    C.PARENT_COACH_MEETING: "a parent and coach meeting",
    C.RESERVE_MATCH: "a reserve match",
    C.OPPOSITION_ANALYSIS: "opposition analysis",
    C.AGENT_SHOWCASE: "an agent showcase",
    C.TRIAL_MATCH: "a trial match",
    C.DATABASE_QUERY: "a database query",
    C.STATS_BRIEFING: "a stats briefing",
    C.DEEP_VIDEO_ANALYSIS: "deep video analysis",
}
