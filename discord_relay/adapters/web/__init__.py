"""Web adapters — health-check server."""

from discord_relay.adapters.web.server import HealthServer, create_app, create_health_server

__all__ = ["HealthServer", "create_app", "create_health_server"]
