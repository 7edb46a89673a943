"""Discord adapters — gateway connection."""

from discord_relay.adapters.discord.adapter import DiscordGatewayAdapter, create_gateway, relay_intents

__all__ = ["DiscordGatewayAdapter", "create_gateway", "relay_intents"]
