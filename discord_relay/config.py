"""Configuration loaded from the process environment."""

__version__ = "0.1.0"

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PORT = 3000
DEFAULT_HOST = "0.0.0.0"
DEFAULT_ACTIVITY = "mentions"

_TRUTHY = ("1", "true", "yes", "on")


class ConfigError(Exception):
    """Raised when required settings are missing or malformed."""


def _get(environ: Mapping[str, str], name: str) -> Optional[str]:
    # Blank values count as unset
    value = environ.get(name, "")
    value = value.strip() if value else ""
    return value or None


@dataclass
class RelayConfig:
    """Typed relay settings."""

    discord_token: str
    webhook_url: str
    channel_id: Optional[str] = None
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    webhook_token: Optional[str] = None
    activity: str = DEFAULT_ACTIVITY
    include_extras: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RelayConfig":
        """Create RelayConfig from environment variables."""
        if environ is None:
            environ = os.environ

        token = _get(environ, "DISCORD_TOKEN")
        webhook_url = _get(environ, "N8N_WEBHOOK_URL")
        if not token or not webhook_url:
            raise ConfigError("Missing env DISCORD_TOKEN or N8N_WEBHOOK_URL")

        raw_port = _get(environ, "PORT") or str(DEFAULT_PORT)
        try:
            port = int(raw_port)
        except ValueError:
            raise ConfigError(f"Invalid PORT={raw_port!r}, expected an integer") from None
        if not 0 <= port <= 65535:
            raise ConfigError(f"Invalid PORT={port}, expected 0-65535")

        extras = (_get(environ, "RELAY_INCLUDE_EXTRAS") or "").lower() in _TRUTHY

        return cls(
            discord_token=token,
            webhook_url=webhook_url,
            channel_id=_get(environ, "CHANNEL_ID"),
            port=port,
            host=_get(environ, "HOST") or DEFAULT_HOST,
            webhook_token=_get(environ, "N8N_WEBHOOK_TOKEN"),
            activity=_get(environ, "RELAY_ACTIVITY") or DEFAULT_ACTIVITY,
            include_extras=extras,
        )
