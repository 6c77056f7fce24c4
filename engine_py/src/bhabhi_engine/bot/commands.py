"""
Chat command parsing for the Bhabhi game.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class CommandType(str, Enum):
    """Game commands understood in chat."""
    NEW = "new"
    JOIN = "join"
    DEAL = "deal"
    HAND = "hand"
    PLAY = "play"
    STATUS = "status"
    END = "end"
    HELP = "help"


@dataclass
class Command:
    type: CommandType
    arg: Optional[str] = None  # card token for PLAY


def parse_command(text: str, prefix: str = "!") -> Optional[Command]:
    """
    Map chat text to a game command.

    Matching is case-insensitive and ignores surrounding whitespace.
    Returns None for text that is not a game command.
    """
    if not text:
        return None
    lower = " ".join(text.strip().lower().split())
    if not lower.startswith(prefix):
        return None
    body = lower[len(prefix):]

    if body in ("bhabhi new", "bhabhi start"):
        return Command(CommandType.NEW)
    if body == "join":
        return Command(CommandType.JOIN)
    if body == "bdeal":
        return Command(CommandType.DEAL)
    if body == "hand":
        return Command(CommandType.HAND)
    if body == "bhabhi status":
        return Command(CommandType.STATUS)
    if body == "bhabhi end":
        return Command(CommandType.END)
    if body in ("bhabhi", "bhabhi help"):
        return Command(CommandType.HELP)
    if body == "play" or body.startswith("play "):
        # Everything after the command word, so "!play q h" still reads as QH
        arg = body[len("play"):].strip()
        return Command(CommandType.PLAY, arg or None)
    return None


def get_help_text(prefix: str = "!") -> str:
    return "\n".join([
        "🃏 *Bhabhi (Get Away) game*",
        f"• {prefix}bhabhi new — create a lobby",
        f"• {prefix}join — join lobby",
        f"• {prefix}bdeal — deal & DM hands",
        f"• {prefix}hand — DM your current hand",
        f"• {prefix}play <card> — play (e.g., {prefix}play QS, {prefix}play 10H)",
        f"• {prefix}bhabhi status — show phase/players",
        f"• {prefix}bhabhi end — end the game",
    ])
