"""Game models and data structures"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, NamedTuple, Optional

from .constants import GAME_LOG_LIMIT, RANKS, SUITS


class Phase(str, Enum):
    """Game phases."""
    LOBBY = "lobby"
    DEALING = "dealing"  # only ever set inside the deal operation
    PLAYING = "playing"
    ENDED = "ended"


@dataclass(frozen=True)
class Card:
    rank: str  # '2'..'10', 'J', 'Q', 'K', 'A'
    suit: str  # 'C', 'D', 'H', 'S'

    def __post_init__(self):
        if self.rank not in RANKS or self.suit not in SUITS:
            raise ValueError(f"Invalid card: {self.rank}{self.suit}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"


class TrickEntry(NamedTuple):
    seat_index: int
    card: Card


@dataclass
class Seat:
    player_id: str
    name: str
    hand: List[Card] = field(default_factory=list)

    @property
    def hand_count(self) -> int:
        return len(self.hand)


@dataclass
class Game:
    room_id: str
    version: int = 0
    phase: Phase = Phase.LOBBY
    players: List[Seat] = field(default_factory=list)
    turn_index: int = 0
    dealer_index: Optional[int] = None
    lead_suit: Optional[str] = None
    trick: List[TrickEntry] = field(default_factory=list)
    trick_participants: List[int] = field(default_factory=list)  # frozen when a trick starts
    discard: List[List[TrickEntry]] = field(default_factory=list)  # completed tricks, history only
    game_log: List[str] = field(default_factory=list)  # most recent GAME_LOG_LIMIT lines

    def seat_index(self, player_id: str) -> int:
        """Index of the seat held by player_id, or -1."""
        for i, seat in enumerate(self.players):
            if seat.player_id == player_id:
                return i
        return -1

    def active_seats(self) -> List[int]:
        return [i for i, seat in enumerate(self.players) if seat.hand]

    def log(self, line: str):
        self.game_log.append(line)
        del self.game_log[:-GAME_LOG_LIMIT]
