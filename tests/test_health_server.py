"""Unit tests for the health-check routes and server wrapper."""

import signal

import pytest
from httpx import ASGITransport, AsyncClient

from discord_relay.adapters.web.server import HealthServer, create_app, create_health_server


@pytest.fixture
def transport():
    return ASGITransport(app=create_app())


class TestHealthRoute:
    @pytest.mark.asyncio
    async def test_health(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get("/health")
        assert resp.status_code == 200
        assert resp.text == "ok\n"
        assert resp.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_health_any_method(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.post("/health", json={"x": 1})
        assert resp.status_code == 200
        assert resp.text == "ok\n"


class TestCatchAll:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("path", ["/", "/status", "/a/b/c", "/docs", "/openapi.json"])
    async def test_other_paths(self, transport, path):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.get(path)
        assert resp.status_code == 200
        assert resp.text == "discord relay up\n"
        assert resp.headers["content-type"].startswith("text/plain")

    @pytest.mark.asyncio
    async def test_other_method(self, transport):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.delete("/anything")
        assert resp.status_code == 200
        assert resp.text == "discord relay up\n"


class TestHealthServer:
    def test_create(self):
        server = create_health_server(host="127.0.0.1", port=8123)
        assert isinstance(server, HealthServer)
        assert server.config.port == 8123
        assert server.config.host == "127.0.0.1"

    def test_stop_sets_should_exit(self):
        server = create_health_server()
        assert server.should_exit is False
        server.stop()
        assert server.should_exit is True

    def test_leaves_signals_alone(self):
        server = create_health_server()
        before_term = signal.getsignal(signal.SIGTERM)
        before_int = signal.getsignal(signal.SIGINT)
        with server.capture_signals():
            assert signal.getsignal(signal.SIGTERM) is before_term
            assert signal.getsignal(signal.SIGINT) is before_int
        assert signal.getsignal(signal.SIGTERM) is before_term

    def test_serves_its_own_app(self):
        first = create_health_server()
        second = create_health_server()
        assert first.config.app is not second.config.app


class TestAnyMethod:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "CONNECT", "PURGE"])
    @pytest.mark.parametrize("path,body", [("/health", "ok\n"), ("/other", "discord relay up\n")])
    async def test_uncommon_methods(self, transport, method, path, body):
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            resp = await ac.request(method, path)
        assert resp.status_code == 200
        assert resp.text == body
