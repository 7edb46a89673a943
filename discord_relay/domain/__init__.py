"""Domain layer — pure Python, no framework dependencies."""

from discord_relay.domain.models import PAYLOAD_TYPE, RelayPayload
from discord_relay.domain.relay import RelayHandler

__all__ = [
    "PAYLOAD_TYPE",
    "RelayPayload",
    "RelayHandler",
]
