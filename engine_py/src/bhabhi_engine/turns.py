"""Turn rotation over seats that still hold cards."""

from .models import Game


def advance_turn(game: Game, from_seat: int) -> int:
    """
    Find the next seat after from_seat (wrapping) that holds at least one card.

    At most N-1 other seats are scanned. If none of them holds cards the
    original seat is returned unchanged.
    """
    n = len(game.players)
    for step in range(1, n):
        i = (from_seat + step) % n
        if game.players[i].hand:
            return i
    return from_seat
