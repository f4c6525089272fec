"""Enumerations for observation sessions and perception."""

from enum import Enum


class ObservationMode(str, Enum):
    """The four interactive session modes."""
    FULL_OBSERVATION = "fullObservation"  # Live watching with focus tokens
    INVESTIGATION = "investigation"  # Dialogue-driven information gathering
    ANALYSIS = "analysis"  # Data exploration
    QUICK_INTERACTION = "quickInteraction"  # Single-screen strategic choice


class SessionState(str, Enum):
    """Session lifecycle. Linear: no cycles and no skipping."""
    SETUP = "setup"
    ACTIVE = "active"
    REFLECTION = "reflection"
    COMPLETE = "complete"


class LensType(str, Enum):
    """Attribute domain a scout's focus token is directed at."""
    TECHNICAL = "technical"
    PHYSICAL = "physical"
    MENTAL = "mental"
    TACTICAL = "tactical"
    GENERAL = "general"


class HypothesisState(str, Enum):
    """Resolution state of a hypothesis. CONFIRMED and DEBUNKED are terminal."""
    OPEN = "open"
    SUPPORTED = "supported"
    CONTRADICTED = "contradicted"
    CONFIRMED = "confirmed"
    DEBUNKED = "debunked"

    @property
    def is_terminal(self) -> bool:
        return self in (HypothesisState.CONFIRMED, HypothesisState.DEBUNKED)


class EvidenceDirection(str, Enum):
    FOR = "for"
    AGAINST = "against"


class EvidenceStrength(str, Enum):
    WEAK = "weak"
    MODERATE = "moderate"
    STRONG = "strong"


class FlagReaction(str, Enum):
    """A scout's immediate reaction when flagging a moment."""
    PROMISING = "promising"
    CONCERNING = "concerning"
    INTERESTING = "interesting"
    NEEDS_MORE_DATA = "needs_more_data"


class MomentType(str, Enum):
    """Category of an observable player moment within a session phase."""
    TECHNICAL_ACTION = "technicalAction"
    PHYSICAL_TEST = "physicalTest"
    MENTAL_RESPONSE = "mentalResponse"
    TACTICAL_DECISION = "tacticalDecision"
    CHARACTER_REVEAL = "characterReveal"


class ObservationContext(str, Enum):
    """
    Where an observation takes place.

    Selects a noise multiplier and the base set of visible attributes.
    The first five are the general contexts; the rest are exclusive to
    particular scout specializations.
    """
    LIVE_MATCH = "liveMatch"
    VIDEO_ANALYSIS = "videoAnalysis"
    TRAINING_GROUND = "trainingGround"
    YOUTH_TOURNAMENT = "youthTournament"
    ACADEMY_VISIT = "academyVisit"

    # Youth
    SCHOOL_MATCH = "schoolMatch"
    GRASSROOTS_TOURNAMENT = "grassrootsTournament"
    STREET_FOOTBALL = "streetFootball"
    ACADEMY_TRIAL_DAY = "academyTrialDay"
    YOUTH_FESTIVAL = "youthFestival"
    FOLLOW_UP_SESSION = "followUpSession"
    PARENT_COACH_MEETING = "parentCoachMeeting"

    # First team
    RESERVE_MATCH = "reserveMatch"
    OPPOSITION_ANALYSIS = "oppositionAnalysis"
    AGENT_SHOWCASE = "agentShowcase"
    TRIAL_MATCH = "trialMatch"

    # Data
    DATABASE_QUERY = "databaseQuery"
    STATS_BRIEFING = "statsBriefing"
    DEEP_VIDEO_ANALYSIS = "deepVideoAnalysis"


class MatchPhaseType(str, Enum):
    """Type of a match phase supplied by upstream match generation."""
    BUILD_UP = "buildUp"
    TRANSITION = "transition"
    SET_PIECE = "setpiece"
    PRESSING_SEQUENCE = "pressingSequence"
    COUNTER_ATTACK = "counterAttack"
    POSSESSION = "possession"


class ObservationQuality(str, Enum):
    """How much attention a player is receiving at a given phase."""
    FOCUSED = "focused"
    PERIPHERAL = "peripheral"
    UNFOCUSED = "unfocused"


class QualityTier(str, Enum):
    """Qualitative session tier derived from insight points per phase."""
    POOR = "poor"
    AVERAGE = "average"
    GOOD = "good"
    EXCELLENT = "excellent"
    EXCEPTIONAL = "exceptional"


class RiskLevel(str, Enum):
    """How risky a dialogue approach is."""
    SAFE = "safe"
    MODERATE = "moderate"
    BOLD = "bold"


class DataPointCategory(str, Enum):
    STATISTICAL = "statistical"
    COMPARISON = "comparison"
    TREND = "trend"
    ANOMALY = "anomaly"


class ChoiceOutcome(str, Enum):
    """The kind of real-world impact a quick-interaction choice produces."""
    TERRITORY = "territory"
    PRIORITY = "priority"
    NETWORK = "network"
    TECHNIQUE = "technique"
