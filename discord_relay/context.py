"""Process-wide relay context, built once at startup."""

import asyncio
import enum
import sys
from dataclasses import dataclass, field

from discord_relay.adapters.discord.adapter import create_gateway
from discord_relay.adapters.web.server import HealthServer, create_health_server
from discord_relay.adapters.webhook.client import WebhookClient
from discord_relay.config import RelayConfig
from discord_relay.domain.relay import RelayHandler
from discord_relay.ports.outbound import GatewayPort


def _log(msg: str):
    print(msg, file=sys.stderr)


class RelayState(enum.Enum):
    STARTING = "starting"
    RUNNING = "running"
    SHUTTING_DOWN = "shutting_down"
    TERMINATED = "terminated"


# No transition back to RUNNING once shutdown starts
_TRANSITIONS = {
    RelayState.STARTING: {RelayState.RUNNING, RelayState.SHUTTING_DOWN},
    RelayState.RUNNING: {RelayState.SHUTTING_DOWN},
    RelayState.SHUTTING_DOWN: {RelayState.TERMINATED},
    RelayState.TERMINATED: set(),
}


@dataclass
class RelayContext:
    """Config plus every long-lived handle, passed explicitly instead of module globals."""

    config: RelayConfig
    gateway: GatewayPort
    webhook: WebhookClient
    handler: RelayHandler
    health: HealthServer
    state: RelayState = RelayState.STARTING
    stopped: asyncio.Event = field(default_factory=asyncio.Event, repr=False)

    def transition(self, new_state: RelayState) -> bool:
        """Move to new_state if allowed. Returns False for an ignored transition."""
        if new_state not in _TRANSITIONS[self.state]:
            return False
        self.state = new_state
        return True

    def mark_running(self) -> None:
        self.transition(RelayState.RUNNING)


def build_context(config: RelayConfig) -> RelayContext:
    """Wire gateway → relay handler → webhook, and the independent health server."""
    webhook = WebhookClient(config.webhook_url, token=config.webhook_token)
    handler = RelayHandler(
        webhook,
        channel_id=config.channel_id,
        include_extras=config.include_extras,
    )
    gateway = create_gateway(config.activity)
    health = create_health_server(host=config.host, port=config.port)

    ctx = RelayContext(
        config=config,
        gateway=gateway,
        webhook=webhook,
        handler=handler,
        health=health,
    )
    gateway.subscribe("message", handler.handle)
    gateway.subscribe("ready", ctx.mark_running)
    if config.channel_id:
        _log(f"Relay restricted to channel {config.channel_id}")
    return ctx
