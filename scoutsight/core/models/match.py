"""Match phases and events supplied by upstream match generation."""

from dataclasses import dataclass, field
from typing import Optional

from scoutsight.core.attributes import PlayerAttribute
from scoutsight.core.enums import MatchPhaseType


@dataclass(frozen=True)
class MatchEvent:
    """A single on-pitch event within a match phase."""

    player_id: str
    description: str
    quality: int  # 1-10
    attributes_revealed: tuple[PlayerAttribute, ...] = ()
    minute: Optional[int] = None


@dataclass(frozen=True)
class MatchPhase:
    """One phase of a match as produced by the match generator."""

    index: int
    phase_type: MatchPhaseType
    minute: int
    events: tuple[MatchEvent, ...] = ()
    involved_player_ids: frozenset[str] = field(default_factory=frozenset)

    def involves(self, player_id: str) -> bool:
        return player_id in self.involved_player_ids

    def events_for(self, player_id: str) -> list[MatchEvent]:
        return [e for e in self.events if e.player_id == player_id]
