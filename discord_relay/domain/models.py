"""Domain data models — pure Python dataclasses."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from discord_relay.ports.inbound import IncomingMessage

PAYLOAD_TYPE = "message"


@dataclass
class RelayPayload:
    """Normalized body forwarded to the webhook for one matching message."""

    guild_id: Optional[str]
    channel_id: str
    author_id: str
    author_username: str
    message_id: str
    content: str = ""
    mentions: List[str] = field(default_factory=list)
    type: str = PAYLOAD_TYPE
    # Only serialized when extras are enabled
    attachments: Optional[List[Dict[str, Any]]] = None
    timestamp: Optional[int] = None

    @classmethod
    def from_message(cls, msg: IncomingMessage, include_extras: bool = False) -> "RelayPayload":
        payload = cls(
            guild_id=msg.guild_id,
            channel_id=msg.channel_id,
            author_id=msg.author_id,
            author_username=msg.author_username,
            message_id=msg.message_id,
            content=msg.content or "",
            mentions=list(msg.mention_ids),
        )
        if include_extras:
            payload.attachments = [dict(a) for a in msg.attachments]
            payload.timestamp = msg.created_at
        return payload

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "type": self.type,
            "guild_id": self.guild_id,
            "channel_id": self.channel_id,
            "author_id": self.author_id,
            "author_username": self.author_username,
            "message_id": self.message_id,
            "content": self.content,
            "mentions": list(self.mentions),
        }
        if self.attachments is not None:
            data["attachments"] = self.attachments
            data["timestamp"] = self.timestamp
        return data
