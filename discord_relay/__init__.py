"""Discord Relay: forwards bot mentions to an n8n webhook."""

from discord_relay.config import ConfigError, RelayConfig, __version__
from discord_relay.context import RelayContext, RelayState, build_context
from discord_relay.domain import RelayHandler, RelayPayload
from discord_relay.ports import IncomingMessage

__all__ = [
    "__version__",
    "ConfigError",
    "RelayConfig",
    "RelayContext",
    "RelayState",
    "build_context",
    "RelayHandler",
    "RelayPayload",
    "IncomingMessage",
]
