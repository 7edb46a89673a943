"""Port interfaces (Hexagonal Architecture)."""

from discord_relay.ports.inbound import IncomingMessage, MessageListener, ReadyListener
from discord_relay.ports.outbound import GatewayPort, WebhookPort

__all__ = [
    "IncomingMessage",
    "MessageListener",
    "ReadyListener",
    "GatewayPort",
    "WebhookPort",
]
