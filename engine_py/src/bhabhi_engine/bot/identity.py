"""Sender identity resolution for chat messages."""

from typing import Optional, Protocol

from .events import InboundMessage


class IdentityResolver(Protocol):
    def resolve(self, message: InboundMessage) -> Optional[str]: ...


def normalize_jid(jid: Optional[str]) -> Optional[str]:
    """
    Canonical form of a chat id: lower case, device suffix dropped
    ("123:4@s.whatsapp.net" -> "123@s.whatsapp.net") and the legacy
    "c.us" server mapped to "s.whatsapp.net".
    """
    if not jid:
        return None
    jid = jid.strip().lower()
    if not jid:
        return None
    if "@" not in jid:
        return jid.split(":")[0]
    user, server = jid.split("@", 1)
    user = user.split(":")[0]
    if server == "c.us":
        server = "s.whatsapp.net"
    return f"{user}@{server}"


class ChatIdentityResolver:
    """
    Resolves the person who sent a message.

    Looks at the group participant, then the sender, then (for messages sent
    from the bot account itself) the bot's own id. The room id is never used
    as a player id.
    """

    def __init__(self, bot_id: Optional[str] = None):
        self.bot_id = normalize_jid(bot_id)

    def resolve(self, message: InboundMessage) -> Optional[str]:
        room = normalize_jid(message.room_id)
        for candidate in (message.participant, message.sender):
            jid = normalize_jid(candidate)
            if jid and jid != room:
                return jid
        if message.from_me and self.bot_id:
            return self.bot_id
        return None
