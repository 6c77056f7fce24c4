"""
Helpers for building cards and games in tests.
"""

from typing import List

from bhabhi_engine.cards import parse_card
from bhabhi_engine.models import Card, Game, Phase, Seat


def cards(tokens: str) -> List[Card]:
    """Parse a space separated list of card tokens."""
    return [parse_card(t) for t in tokens.split()]


def make_game(*hands: str, turn_index: int = 0, room_id: str = "room") -> Game:
    """Build a game in the playing phase with the given hands, one per seat."""
    names = ["alice", "bob", "carol", "dave", "erin", "frank", "grace", "heidi", "ivan", "judy"]
    game = Game(room_id=room_id, phase=Phase.PLAYING, turn_index=turn_index)
    for i, hand in enumerate(hands):
        game.players.append(Seat(player_id=f"{names[i]}@s.whatsapp.net", name=names[i], hand=cards(hand)))
    return game
