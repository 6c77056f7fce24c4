"""
Chat message models exchanged with the transport bridge.
"""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class MessageKind(str, Enum):
    """Outbound message kinds."""
    ROOM = "room"
    DIRECT = "direct"


class InboundMessage(BaseModel):
    """A chat message received by the bot."""
    room_id: str = Field(..., min_length=1, max_length=128)
    text: str = ""
    participant: Optional[str] = None  # sender inside a group chat
    sender: Optional[str] = None
    push_name: Optional[str] = None
    from_me: bool = False


class OutboundMessage(BaseModel):
    """
    A message the bot wants delivered.

    A direct message may carry a room message in `fallback`; the bridge
    posts it if the direct message cannot be delivered.
    """
    kind: MessageKind
    to: str
    text: str
    mentions: List[str] = Field(default_factory=list)
    fallback: Optional['OutboundMessage'] = None


class GatewayResponse(BaseModel):
    """Response of the message gateway endpoint."""
    handled: bool
    messages: List[OutboundMessage] = Field(default_factory=list)


def room_message(room_id: str, text: str, mentions: Optional[List[str]] = None) -> OutboundMessage:
    """Create a message for a chat room."""
    return OutboundMessage(kind=MessageKind.ROOM, to=room_id, text=text, mentions=mentions or [])


def direct_message(player_id: str, text: str, fallback: Optional[OutboundMessage] = None) -> OutboundMessage:
    """Create a direct message for a player."""
    return OutboundMessage(kind=MessageKind.DIRECT, to=player_id, text=text, fallback=fallback)
