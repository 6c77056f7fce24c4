"""
Chat command routing for the Bhabhi game.
"""

from .commands import Command, CommandType, parse_command
from .events import InboundMessage, OutboundMessage
from .handler import GameCommandHandler
from .identity import ChatIdentityResolver, normalize_jid
from .transport import QueueTransport, Transport

__all__ = [
    "ChatIdentityResolver",
    "Command",
    "CommandType",
    "GameCommandHandler",
    "InboundMessage",
    "OutboundMessage",
    "QueueTransport",
    "Transport",
    "normalize_jid",
    "parse_command",
]
