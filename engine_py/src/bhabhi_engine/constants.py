"""Game constants"""

from typing import Dict, List

# Low to high
RANKS: List[str] = ['2', '3', '4', '5', '6', '7', '8', '9', '10', 'J', 'Q', 'K', 'A']
# Canonical enumeration and hand display order
SUITS: List[str] = ['C', 'D', 'H', 'S']

SUIT_NAMES: Dict[str, str] = {
    'C': 'Clubs',
    'D': 'Diamonds',
    'H': 'Hearts',
    'S': 'Spades',
}

SUIT_ORDER: Dict[str, int] = {suit: i for i, suit in enumerate(SUITS)}
RANK_ORDER: Dict[str, int] = {rank: i for i, rank in enumerate(RANKS)}

# Accepted rank spellings in card tokens
RANK_ALIASES: Dict[str, str] = {'T': '10'}

DECK_SIZE = 52
MIN_PLAYERS = 2
MAX_PLAYERS = DECK_SIZE

# Lines of history kept in Game.game_log
GAME_LOG_LIMIT = 50

# Display names longer than this are cut
MAX_NAME_LENGTH = 64
