"""Scheduled activity types and scout specializations."""

from enum import Enum


class Specialization(str, Enum):
    """A scout's specialization."""
    YOUTH = "youth"
    FIRST_TEAM = "firstTeam"
    REGIONAL = "regional"
    DATA = "data"


class ActivityType(str, Enum):
    """
    Calendar activities that can launch an observation session.

    Most map to a session mode and a phase-count range. AGENT_SHOWCASE and
    YOUTH_TRIAL have neither and fall back to the defaults.
    """
    # Youth
    SCHOOL_MATCH = "schoolMatch"
    GRASSROOTS_TOURNAMENT = "grassrootsTournament"
    STREET_FOOTBALL = "streetFootball"
    ACADEMY_TRIAL_DAY = "academyTrialDay"
    YOUTH_FESTIVAL = "youthFestival"
    FOLLOW_UP_SESSION = "followUpSession"
    PARENT_COACH_MEETING = "parentCoachMeeting"
    YOUTH_TRIAL = "youthTrial"

    # First team
    ATTEND_MATCH = "attendMatch"
    RESERVE_MATCH = "reserveMatch"
    TRAINING_VISIT = "trainingVisit"
    TRIAL_MATCH = "trialMatch"
    SCOUTING_MISSION = "scoutingMission"
    CONTRACT_NEGOTIATION = "contractNegotiation"
    NETWORK_MEETING = "networkMeeting"
    AGENT_SHOWCASE = "agentShowcase"

    # Data
    DATABASE_QUERY = "databaseQuery"
    WATCH_VIDEO = "watchVideo"
    DEEP_VIDEO_ANALYSIS = "deepVideoAnalysis"
    ALGORITHM_CALIBRATION = "algorithmCalibration"
    MARKET_INEFFICIENCY = "marketInefficiency"
    OPPOSITION_ANALYSIS = "oppositionAnalysis"

    # Quick interaction
    STATS_BRIEFING = "statsBriefing"
    DATA_CONFERENCE = "dataConference"
    ASSIGN_TERRITORY = "assignTerritory"
    ANALYTICS_TEAM_MEETING = "analyticsTeamMeeting"
