"""Health-check HTTP server: FastAPI app served by uvicorn on the relay loop."""

import contextlib
import sys

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from discord_relay.config import DEFAULT_HOST, DEFAULT_PORT

HEALTH_PATH = "/health"
HEALTH_BODY = "ok\n"
ROOT_BODY = "discord relay up\n"


def _log(msg: str):
    print(msg, file=sys.stderr)


def create_app() -> FastAPI:
    """Plain-text 200 for every path and method, answered before routing."""
    app = FastAPI(title="Discord Relay", docs_url=None, redoc_url=None, openapi_url=None)

    @app.middleware("http")
    async def plain_text(request: Request, call_next):
        body = HEALTH_BODY if request.url.path == HEALTH_PATH else ROOT_BODY
        return PlainTextResponse(body)

    return app


class HealthServer(uvicorn.Server):
    """uvicorn server that leaves SIGTERM/SIGINT to the launcher."""

    @contextlib.contextmanager
    def capture_signals(self):
        yield

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.started:
            _log(f"Health on :{self.config.port}")

    def stop(self) -> None:
        self.should_exit = True


def create_health_server(host: str = DEFAULT_HOST, port: int = DEFAULT_PORT) -> HealthServer:
    config = uvicorn.Config(create_app(), host=host, port=port, log_level="warning", lifespan="off")
    return HealthServer(config)
