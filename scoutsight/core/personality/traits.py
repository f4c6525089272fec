"""
Personality traits.

A player carries two to four of these as hidden ground truth. Scouts
discover them one at a time through observation.
"""

from enum import Enum


class PersonalityTrait(str, Enum):
    """Individual personality traits."""

    AMBITIOUS = "ambitious"
    """Wants more - bigger club, bigger wage, bigger stage."""

    LOYAL = "loyal"
    """Values the club and relationships over a move."""

    PROFESSIONAL = "professional"
    """Looks after themselves, trains properly."""

    TEMPERAMENTAL = "temperamental"
    """Prone to outbursts and emotional swings."""

    DETERMINED = "determined"
    """Refuses to give up on a match or a career goal."""

    EASYGOING = "easygoing"
    """Relaxed, sometimes to a fault."""

    LEADER = "leader"
    """Organises and lifts those around them."""

    INTROVERT = "introvert"
    """Quiet, keeps to themselves."""

    FLAIR = "flair"
    """Tries the unexpected."""

    CONTROVERSIAL_CHARACTER = "controversialCharacter"
    """Attracts trouble on and off the pitch."""

    MODEL_CITIZEN = "modelCitizen"
    """Exemplary conduct."""

    PRESSURE_PLAYER = "pressurePlayer"
    """Thrives when the stakes are high."""

    BIG_GAME_PLAYER = "bigGamePlayer"
    """Saves the best for the biggest occasions."""

    INCONSISTENT = "inconsistent"
    """Brilliant one week, anonymous the next."""

    INJURY_PRONE = "injuryProne"
    """Picks up knocks regularly."""

    LATE_DEVELOPER = "lateDeveloper"
    """Matures later than peers."""


ALL_TRAITS: tuple[PersonalityTrait, ...] = tuple(PersonalityTrait)
