"""Inbound port — platform-agnostic message representation."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


@dataclass
class IncomingMessage:
    """Chat-platform-agnostic view of one received message."""

    message_id: str
    channel_id: str
    author_id: str
    author_username: str
    is_bot: bool
    content: str = ""
    guild_id: Optional[str] = None
    mention_ids: List[str] = field(default_factory=list)
    mentions_self: bool = False
    created_at: Optional[int] = None  # epoch millis
    attachments: List[Dict[str, Any]] = field(default_factory=list)


MessageListener = Callable[[IncomingMessage], Any]
ReadyListener = Callable[[], Any]
