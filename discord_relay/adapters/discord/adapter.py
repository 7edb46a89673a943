"""Discord adapter — gateway connection that feeds IncomingMessage listeners.

DiscordGatewayAdapter is a thin discord.Client subclass. It owns the
persistent, reconnecting gateway connection, converts every
discord.Message to IncomingMessage and hands it to whoever subscribed.
Filtering is left to the listeners.
"""

import sys
from typing import Dict, List, Optional, Union

import discord

from discord_relay.config import DEFAULT_ACTIVITY
from discord_relay.ports.inbound import IncomingMessage, MessageListener, ReadyListener

EVENTS = ("message", "ready")


def _log(msg: str):
    print(msg, file=sys.stderr)


def relay_intents() -> discord.Intents:
    """Guild metadata, guild messages and message content.

    message_content must also be enabled in the Developer Portal, otherwise
    content arrives empty rather than failing.
    """
    intents = discord.Intents.none()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents


class DiscordGatewayAdapter(discord.Client):
    """Discord gateway client with explicit event subscription."""

    def __init__(self, activity_name: str = DEFAULT_ACTIVITY, **discord_kwargs):
        super().__init__(intents=relay_intents(), **discord_kwargs)
        self.activity_name = activity_name
        self._listeners: Dict[str, List] = {event: [] for event in EVENTS}

    def subscribe(self, event: str, callback: Union[MessageListener, ReadyListener]) -> None:
        """Register a listener for "message" or "ready"."""
        if event not in self._listeners:
            raise ValueError(f"Unknown event {event!r}, expected one of {EVENTS}")
        self._listeners[event].append(callback)

    def _mentions_self(self, message: discord.Message) -> bool:
        # Guild member covers role mentions as well as direct and @everyone
        me = message.guild.me if message.guild is not None else None
        target = me or self.user
        if target is None:
            return False
        return bool(target.mentioned_in(message))

    def _to_incoming(self, message: discord.Message) -> IncomingMessage:
        """Convert a Discord message to platform-agnostic IncomingMessage."""
        guild = message.guild
        created = message.created_at
        return IncomingMessage(
            message_id=str(message.id),
            channel_id=str(message.channel.id),
            guild_id=str(guild.id) if guild is not None else None,
            author_id=str(message.author.id),
            author_username=message.author.name,
            is_bot=bool(message.author.bot),
            content=message.content or "",
            mention_ids=[str(u.id) for u in message.mentions],
            mentions_self=self._mentions_self(message),
            created_at=int(created.timestamp() * 1000) if created else None,
            attachments=[
                {"id": str(a.id), "url": a.url, "name": a.filename}
                for a in message.attachments
            ],
        )

    async def on_ready(self):
        _log(f"Logged in as {self.user}")
        try:
            await self.change_presence(
                status=discord.Status.online,
                activity=discord.Activity(type=discord.ActivityType.watching, name=self.activity_name),
            )
        except Exception as e:
            _log(f"Presence update failed: {e!r}")
        for callback in self._listeners["ready"]:
            try:
                callback()
            except Exception as e:
                _log(f"ready listener error: {e!r}")

    async def on_message(self, message: discord.Message):
        """Convert and hand to every message listener; errors stop here."""
        try:
            incoming = self._to_incoming(message)
        except Exception as e:
            _log(f"relay error: {e!r}")
            return

        for callback in self._listeners["message"]:
            try:
                callback(incoming)
            except Exception as e:
                _log(f"relay error: {e!r}")


def create_gateway(activity_name: Optional[str] = None) -> DiscordGatewayAdapter:
    return DiscordGatewayAdapter(activity_name=activity_name or DEFAULT_ACTIVITY)
