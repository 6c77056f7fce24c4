"""
Card token parsing, formatting and rank ordering.
"""

import re
from typing import Iterable, List

from .constants import RANK_ALIASES, RANK_ORDER, SUIT_NAMES, SUIT_ORDER
from .errors import INVALID_CARD, raise_error
from .models import Card

_TOKEN_NOISE = re.compile(r"[^0-9JQKATCDHS]")


def rank_value(rank: str) -> int:
    """Get the 0-12 index of a rank, higher is stronger."""
    try:
        return RANK_ORDER[rank]
    except KeyError:
        raise ValueError(f"Invalid rank: {rank}")


def suit_name(suit: str) -> str:
    return SUIT_NAMES.get(suit, suit)


def parse_card(token: str) -> Card:
    """
    Parse a card token such as "QS", "10h", "td" or "q h".

    The last character is the suit and everything before it is the rank.
    Characters that cannot be part of a card are dropped first.

    Raises:
        GameError: with code INVALID_CARD if the token is malformed
    """
    raw = _TOKEN_NOISE.sub("", (token or "").upper())
    if len(raw) < 2:
        raise_error(INVALID_CARD, f"Invalid card: {token!r}. Examples: 7D, 10H, QS, AC")

    suit = raw[-1]
    rank = raw[:-1]
    rank = RANK_ALIASES.get(rank, rank)

    if suit not in SUIT_ORDER or rank not in RANK_ORDER:
        raise_error(INVALID_CARD, f"Invalid card: {token!r}. Examples: 7D, 10H, QS, AC")
    return Card(rank, suit)


def format_card(card: Card) -> str:
    return f"{card.rank}{card.suit}"


def card_sort_key(card: Card):
    return SUIT_ORDER[card.suit], RANK_ORDER[card.rank]


def sort_hand(cards: Iterable[Card]) -> List[Card]:
    """Sort cards for display: grouped by suit (C, D, H, S), ascending rank."""
    return sorted(cards, key=card_sort_key)


def format_hand(cards: Iterable[Card]) -> str:
    tokens = [format_card(c) for c in sort_hand(cards)]
    return " ".join(tokens) if tokens else "(empty)"


def has_suit(hand: Iterable[Card], suit: str) -> bool:
    return any(card.suit == suit for card in hand)
