"""Outbound ports — interfaces for external system adapters."""

from typing import Any, Dict, Optional, Protocol, runtime_checkable


@runtime_checkable
class WebhookPort(Protocol):
    """Interface for forwarding relay payloads."""

    def dispatch(self, payload: Dict[str, Any]) -> Optional[Any]: ...


@runtime_checkable
class GatewayPort(Protocol):
    """Interface for the chat gateway connection."""

    def subscribe(self, event: str, callback) -> None: ...

    async def start(self, token: str) -> None: ...

    async def close(self) -> None: ...

    def is_closed(self) -> bool: ...
