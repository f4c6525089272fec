"""
Activity-level lookup tables for observation sessions.

Activity types missing from a table fall back to the defaults in
scoutsight.config: full observation mode and a 4-8 phase range.
"""

from scoutsight.core.enums import ActivityType as AT
from scoutsight.core.enums import ActivityType, ObservationContext, ObservationMode, QualityTier

ACTIVITY_MODE_MAP: dict[ActivityType, ObservationMode] = {
    # Full observation
    AT.SCHOOL_MATCH: ObservationMode.FULL_OBSERVATION,
    AT.GRASSROOTS_TOURNAMENT: ObservationMode.FULL_OBSERVATION,
    AT.STREET_FOOTBALL: ObservationMode.FULL_OBSERVATION,
    AT.ACADEMY_TRIAL_DAY: ObservationMode.FULL_OBSERVATION,
    AT.YOUTH_FESTIVAL: ObservationMode.FULL_OBSERVATION,
    AT.ATTEND_MATCH: ObservationMode.FULL_OBSERVATION,
    AT.RESERVE_MATCH: ObservationMode.FULL_OBSERVATION,
    AT.TRAINING_VISIT: ObservationMode.FULL_OBSERVATION,
    AT.TRIAL_MATCH: ObservationMode.FULL_OBSERVATION,
    AT.SCOUTING_MISSION: ObservationMode.FULL_OBSERVATION,
    # Investigation
    AT.FOLLOW_UP_SESSION: ObservationMode.INVESTIGATION,
    AT.PARENT_COACH_MEETING: ObservationMode.INVESTIGATION,
    AT.CONTRACT_NEGOTIATION: ObservationMode.INVESTIGATION,
    AT.NETWORK_MEETING: ObservationMode.INVESTIGATION,
    # Analysis
    AT.DATABASE_QUERY: ObservationMode.ANALYSIS,
    AT.WATCH_VIDEO: ObservationMode.ANALYSIS,
    AT.DEEP_VIDEO_ANALYSIS: ObservationMode.ANALYSIS,
    AT.ALGORITHM_CALIBRATION: ObservationMode.ANALYSIS,
    AT.MARKET_INEFFICIENCY: ObservationMode.ANALYSIS,
    AT.OPPOSITION_ANALYSIS: ObservationMode.ANALYSIS,
    # Quick interaction
    AT.STATS_BRIEFING: ObservationMode.QUICK_INTERACTION,
    AT.DATA_CONFERENCE: ObservationMode.QUICK_INTERACTION,
    AT.ASSIGN_TERRITORY: ObservationMode.QUICK_INTERACTION,
    AT.ANALYTICS_TEAM_MEETING: ObservationMode.QUICK_INTERACTION,
}

# Inclusive (min, max) phase counts
VENUE_PHASE_RANGES: dict[ActivityType, tuple[int, int]] = {
    # Youth
    AT.SCHOOL_MATCH: (8, 12),
    AT.GRASSROOTS_TOURNAMENT: (10, 14),
    AT.STREET_FOOTBALL: (6, 8),
    AT.ACADEMY_TRIAL_DAY: (8, 10),
    AT.YOUTH_FESTIVAL: (10, 14),
    AT.FOLLOW_UP_SESSION: (4, 6),
    AT.PARENT_COACH_MEETING: (3, 5),
    # First team
    AT.ATTEND_MATCH: (12, 18),
    AT.RESERVE_MATCH: (8, 12),
    AT.TRAINING_VISIT: (6, 8),
    AT.TRIAL_MATCH: (8, 12),
    AT.SCOUTING_MISSION: (10, 14),
    AT.CONTRACT_NEGOTIATION: (4, 8),
    AT.NETWORK_MEETING: (3, 5),
    # Analysis
    AT.DATABASE_QUERY: (3, 5),
    AT.WATCH_VIDEO: (6, 8),
    AT.DEEP_VIDEO_ANALYSIS: (8, 10),
    AT.ALGORITHM_CALIBRATION: (3, 4),
    AT.MARKET_INEFFICIENCY: (4, 6),
    AT.OPPOSITION_ANALYSIS: (4, 6),
    # Quick interaction
    AT.STATS_BRIEFING: (2, 3),
    AT.DATA_CONFERENCE: (2, 3),
    AT.ASSIGN_TERRITORY: (2, 3),
    AT.ANALYTICS_TEAM_MEETING: (2, 3),
}

INTERACTIVE_ACTIVITIES: frozenset[ActivityType] = frozenset(ACTIVITY_MODE_MAP)

TOKENS_PER_HALF: dict[ObservationMode, int] = {
    ObservationMode.FULL_OBSERVATION: 3,
    ObservationMode.INVESTIGATION: 2,
    ObservationMode.ANALYSIS: 1,
    ObservationMode.QUICK_INTERACTION: 0,
}

# Where the perception pipeline considers each activity to take place
ACTIVITY_CONTEXT_MAP: dict[ActivityType, ObservationContext] = {
    AT.SCHOOL_MATCH: ObservationContext.SCHOOL_MATCH,
    AT.GRASSROOTS_TOURNAMENT: ObservationContext.GRASSROOTS_TOURNAMENT,
    AT.STREET_FOOTBALL: ObservationContext.STREET_FOOTBALL,
    AT.ACADEMY_TRIAL_DAY: ObservationContext.ACADEMY_TRIAL_DAY,
    AT.YOUTH_FESTIVAL: ObservationContext.YOUTH_FESTIVAL,
    AT.FOLLOW_UP_SESSION: ObservationContext.FOLLOW_UP_SESSION,
    AT.PARENT_COACH_MEETING: ObservationContext.PARENT_COACH_MEETING,
    AT.YOUTH_TRIAL: ObservationContext.ACADEMY_TRIAL_DAY,
    AT.ATTEND_MATCH: ObservationContext.LIVE_MATCH,
    AT.SCOUTING_MISSION: ObservationContext.LIVE_MATCH,
    AT.RESERVE_MATCH: ObservationContext.RESERVE_MATCH,
    AT.TRAINING_VISIT: ObservationContext.TRAINING_GROUND,
    AT.TRIAL_MATCH: ObservationContext.TRIAL_MATCH,
    AT.AGENT_SHOWCASE: ObservationContext.AGENT_SHOWCASE,
    AT.WATCH_VIDEO: ObservationContext.VIDEO_ANALYSIS,
    AT.DEEP_VIDEO_ANALYSIS: ObservationContext.DEEP_VIDEO_ANALYSIS,
    AT.OPPOSITION_ANALYSIS: ObservationContext.OPPOSITION_ANALYSIS,
    AT.DATABASE_QUERY: ObservationContext.DATABASE_QUERY,
    AT.STATS_BRIEFING: ObservationContext.STATS_BRIEFING,
}

# Insight points per phase needed for each tier, highest first
QUALITY_TIER_THRESHOLDS: tuple[tuple[float, QualityTier], ...] = (
    (12, QualityTier.EXCEPTIONAL),
    (8, QualityTier.EXCELLENT),
    (5, QualityTier.GOOD),
    (2, QualityTier.AVERAGE),
)
