"""
Trick completion and resolution.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

from .cards import rank_value
from .models import Card, Game, TrickEntry

logger = logging.getLogger(__name__)


@dataclass
class TrickOutcome:
    winner_index: int
    winning_card: Optional[Card]
    entries: List[TrickEntry]
    fallback: bool = False  # no on-suit card was found


def trick_complete(game: Game) -> bool:
    """A trick is complete once every seat in the participant snapshot has played."""
    return bool(game.trick) and len(game.trick) >= len(game.trick_participants)


def find_trick_winner(trick: List[TrickEntry], lead_suit: Optional[str]) -> Optional[TrickEntry]:
    """
    Highest card of the lead suit wins. Off-suit cards never win, whatever
    their rank. Returns None if nothing in the trick follows the lead suit.
    """
    best = None
    for entry in trick:
        if entry.card.suit != lead_suit:
            continue
        if best is None or rank_value(entry.card.rank) > rank_value(best.card.rank):
            best = entry
    return best


def resolve_trick(game: Game) -> TrickOutcome:
    """
    Resolve the completed trick in place.

    The winner leads the next trick: the turn moves to them, the lead suit is
    cleared and the trick is moved to the discard history.
    """
    entries = list(game.trick)
    winner = find_trick_winner(entries, game.lead_suit)

    if winner is None:
        leader = entries[0].seat_index if entries else game.turn_index
        logger.warning(
            "Room %s: no card matched lead suit %s in trick %s; awarding it to leader seat %d",
            game.room_id, game.lead_suit, [str(e.card) for e in entries], leader
        )
        outcome = TrickOutcome(winner_index=leader, winning_card=None, entries=entries, fallback=True)
    else:
        outcome = TrickOutcome(winner_index=winner.seat_index, winning_card=winner.card, entries=entries)

    game.discard.append(entries)
    game.trick = []
    game.trick_participants = []
    game.lead_suit = None
    game.turn_index = outcome.winner_index
    return outcome
