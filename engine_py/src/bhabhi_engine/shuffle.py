"""
Card shuffling and dealing utilities.
"""

import random
from typing import List, Optional

from .cards import sort_hand
from .constants import RANKS, SUITS
from .models import Card, Seat


def build_deck() -> List[Card]:
    """Create a standard 52 card deck in canonical order."""
    deck = []
    for suit in SUITS:
        for rank in RANKS:
            deck.append(Card(rank, suit))
    return deck


def shuffle_deck(deck: List[Card], seed: Optional[int] = None) -> List[Card]:
    """
    Shuffle a deck deterministically if seed is provided.

    Args:
        deck: Cards to shuffle
        seed: Optional seed for deterministic shuffling

    Returns:
        Shuffled copy of the deck
    """
    deck_copy = deck.copy()

    if seed is not None:
        rng = random.Random(seed)
        rng.shuffle(deck_copy)
    else:
        random.shuffle(deck_copy)

    return deck_copy


def deal_cards(deck: List[Card], seats: List[Seat]) -> None:
    """
    Deal the whole deck round-robin, one card at a time, starting at seat 0.

    With N seats every hand gets 52 // N or 52 // N + 1 cards; the first
    52 % N seats get the extra card. Hands are sorted afterwards.
    """
    if not seats:
        return

    for seat in seats:
        seat.hand = []

    for i, card in enumerate(deck):
        seats[i % len(seats)].hand.append(card)

    for seat in seats:
        seat.hand = sort_hand(seat.hand)


def pick_dealer(player_count: int, seed: Optional[int] = None) -> int:
    """Pick a dealer seat uniformly at random."""
    rng = random.Random(seed) if seed is not None else random
    return rng.randrange(player_count)


def leader_after(dealer_index: int, player_count: int) -> int:
    """The first player to act sits immediately after the dealer."""
    return (dealer_index + 1) % player_count
