"""
Outbound messaging interface.
"""

from typing import List, Optional, Protocol, Set

from ..errors import TransportError
from .events import OutboundMessage, direct_message, room_message


class Transport(Protocol):
    """What the bot needs from a chat connection."""

    async def send_to_room(self, room_id: str, text: str, mentions: Optional[List[str]] = None) -> None: ...

    async def send_direct(self, player_id: str, text: str,
                          fallback: Optional[OutboundMessage] = None) -> bool:
        """
        Send a private message.

        Returns True if the message was delivered, False if delivery was
        handed off to someone who will post `fallback` when it fails.
        Raises TransportError if it cannot be delivered.
        """
        ...


class QueueTransport:
    """
    Collects outbound messages instead of sending them.

    Used by the HTTP gateway, which hands the queued messages back to the
    bridge that owns the real chat connection. Direct messages to ids in
    `unreachable` fail with TransportError.
    """

    def __init__(self, unreachable: Optional[Set[str]] = None):
        self.messages: List[OutboundMessage] = []
        self.unreachable = set(unreachable or ())

    async def send_to_room(self, room_id: str, text: str, mentions: Optional[List[str]] = None) -> None:
        self.messages.append(room_message(room_id, text, mentions))

    async def send_direct(self, player_id: str, text: str,
                          fallback: Optional[OutboundMessage] = None) -> bool:
        if player_id in self.unreachable:
            raise TransportError(f"Cannot reach {player_id}")
        self.messages.append(direct_message(player_id, text, fallback))
        # Not delivered yet; the bridge owns delivery
        return False

    def drain(self) -> List[OutboundMessage]:
        messages, self.messages = self.messages, []
        return messages
