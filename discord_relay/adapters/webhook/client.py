"""Fire-and-forget JSON POST to the relay webhook using aiohttp."""

import asyncio
import json
import sys
from typing import Any, Dict, Optional, Set

import aiohttp


def _log(msg: str):
    print(msg, file=sys.stderr)


class WebhookClient:
    """Async webhook client. Sends are never retried and never raise."""

    def __init__(self, url: str, token: Optional[str] = None):
        self.url = url
        self._token = token
        self._pending: Set[asyncio.Task] = set()

    @property
    def pending(self) -> int:
        """Number of sends still in flight."""
        return len(self._pending)

    def _headers(self) -> Dict[str, str]:
        headers = {"content-type": "application/json"}
        if self._token:
            headers["authorization"] = f"Bearer {self._token}"
        return headers

    async def post(self, payload: Dict[str, Any]) -> bool:
        """POST the payload once. Returns True on a 2xx response."""
        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(
                    self.url, data=json.dumps(payload), headers=self._headers()
                ) as resp:
                    if resp.status >= 300:
                        _log(f"POST to n8n failed: HTTP {resp.status}")
                        return False
                    return True
        except Exception as e:
            _log(f"POST to n8n failed: {e!r}")
            return False

    def dispatch(self, payload: Dict[str, Any]) -> asyncio.Task:
        """Schedule post() without awaiting it."""
        task = asyncio.get_running_loop().create_task(self.post(payload))
        # The loop only keeps weak references to tasks
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task
