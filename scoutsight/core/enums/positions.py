"""Football positions and development profiles."""

from enum import Enum


class Position(str, Enum):
    GK = "GK"
    CB = "CB"
    LB = "LB"
    RB = "RB"
    CDM = "CDM"
    CM = "CM"
    CAM = "CAM"
    LW = "LW"
    RW = "RW"
    ST = "ST"

    @property
    def group(self) -> "PositionGroup":
        return POSITION_TO_GROUP[self]


class PositionGroup(str, Enum):
    """Broad position category used for trait weighting."""
    GOALKEEPER = "GK"
    DEFENDER = "DEF"
    MIDFIELDER = "MID"
    FORWARD = "FWD"


POSITION_TO_GROUP: dict[Position, PositionGroup] = {
    Position.GK: PositionGroup.GOALKEEPER,
    Position.CB: PositionGroup.DEFENDER,
    Position.LB: PositionGroup.DEFENDER,
    Position.RB: PositionGroup.DEFENDER,
    Position.CDM: PositionGroup.MIDFIELDER,
    Position.CM: PositionGroup.MIDFIELDER,
    Position.CAM: PositionGroup.MIDFIELDER,
    Position.LW: PositionGroup.FORWARD,
    Position.RW: PositionGroup.FORWARD,
    Position.ST: PositionGroup.FORWARD,
}


class DevelopmentProfile(str, Enum):
    """How a player's ability grows over time."""
    EARLY_BLOOMER = "earlyBloomer"
    LATE_BLOOMER = "lateBloomer"
    STEADY_GROWER = "steadyGrower"
    VOLATILE = "volatile"
