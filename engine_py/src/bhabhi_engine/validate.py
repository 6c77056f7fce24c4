"""
Play validation: turn order and suit following.
"""

from typing import Optional

from .cards import has_suit, suit_name
from .errors import (
    MUST_FOLLOW_SUIT, NO_ACTIVE_GAME, NOT_IN_HAND, NOT_SEATED, NOT_YOUR_TURN
)
from .models import Card, Game, Phase

NO_ROUND_MESSAGE = 'No active Bhabhi round. Use "!bhabhi new", "!join", then "!bdeal".'


class ValidationResult:
    """Result of play validation."""

    def __init__(
        self,
        valid: bool,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
    ):
        self.valid = valid
        self.error_code = error_code
        self.error_message = error_message

    def __bool__(self) -> bool:
        return self.valid

    def __repr__(self) -> str:
        if self.valid:
            return "ValidationResult(valid=True)"
        return f"ValidationResult(valid=False, error_code={self.error_code!r})"

    @classmethod
    def success(cls) -> 'ValidationResult':
        """Create a successful validation result."""
        return cls(valid=True)

    @classmethod
    def error(cls, error_code: str, error_message: str) -> 'ValidationResult':
        """Create an error validation result."""
        return cls(valid=False, error_code=error_code, error_message=error_message)


def is_legal_play(game: Game, seat_index: int, card: Card) -> ValidationResult:
    """
    Check whether a seat may play a card into the current trick.

    The leader of a trick may play anything they hold. Everyone else must
    follow the lead suit if they hold any card of it; otherwise any card
    may be dumped. There is no trump suit.
    """
    hand = game.players[seat_index].hand
    if card not in hand:
        return ValidationResult.error(NOT_IN_HAND, f"You don't hold {card}")

    if game.lead_suit is None:
        return ValidationResult.success()

    if card.suit == game.lead_suit:
        return ValidationResult.success()

    if has_suit(hand, game.lead_suit):
        return ValidationResult.error(
            MUST_FOLLOW_SUIT,
            f"Must follow {suit_name(game.lead_suit)} ({game.lead_suit})"
        )

    return ValidationResult.success()


def validate_play(game: Game, seat_index: int, card: Card) -> ValidationResult:
    """
    Validate a card play attempt without mutating anything.

    Checks run in order: phase, seat, turn, then legality.
    """
    if game.phase != Phase.PLAYING:
        return ValidationResult.error(NO_ACTIVE_GAME, NO_ROUND_MESSAGE)

    if seat_index < 0 or seat_index >= len(game.players):
        return ValidationResult.error(NOT_SEATED, "You are not seated in this game.")

    if seat_index != game.turn_index:
        whose = game.players[game.turn_index].name
        return ValidationResult.error(NOT_YOUR_TURN, f"Not your turn. Turn: @{whose}")

    return is_legal_play(game, seat_index, card)
