"""
Boundary layer data model(s).

The match controller reports what happens through these objects, so the display side never needs to hold on to
Player instances or the Board itself.
"""

from dataclasses import dataclass, field
from typing import Optional

from src.core.shared_types import EventKind

# Type aliases to make MatchEvent easier to read
PlayerName = str
Marker = str


@dataclass(frozen=True)
class PlayerSummary:
    """Transport-safe view of a player."""

    name: PlayerName
    marker: Marker
    wins: int


@dataclass(frozen=True)
class MatchEvent:
    """Something the display sink should announce."""

    kind: EventKind
    player: Optional[PlayerSummary] = None
    scores: tuple[PlayerSummary, ...] = field(default_factory=tuple)
    wins_needed: int = 0
