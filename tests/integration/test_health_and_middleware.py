"""Integration tests for health check, middleware and error handling."""

import pytest
from httpx import ASGITransport, AsyncClient

from library.infrastructure.config.container import Container
from library.infrastructure.config.settings import Settings
from library.main import create_app


class TestHealth:
    """Test GET /health."""

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["reservation_store"] == "memory"
        assert data["checks"] == {}


class TestMiddleware:
    """Test request ID and timing headers."""

    @pytest.mark.asyncio
    async def test_request_id_generated(self, client):
        response = await client.get("/health")

        assert response.headers["X-Request-ID"]
        assert response.headers["X-Response-Time"].endswith("s")

    @pytest.mark.asyncio
    async def test_request_id_propagated(self, client):
        response = await client.get(
            "/users/12345678/reservations", headers={"X-Request-ID": "abc-123"}
        )

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["meta"]["request_id"] == "abc-123"


class TestUnexpectedErrors:
    """Test the 500 handler."""

    @pytest.mark.asyncio
    async def test_unexpected_error_is_hidden(self, container, monkeypatch):
        async def broken(*args, **kwargs):
            raise RuntimeError("kaboom")

        monkeypatch.setattr(container.sweeper, "run_once", broken)
        app = create_app(container=container)
        transport = ASGITransport(app=app, raise_app_exceptions=False)

        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            response = await ac.post("/reservations/expirations")

        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_ERROR"
        assert "kaboom" not in response.json()["error"]["message"]


class TestCreateApp:
    """Test application factory."""

    def test_docs_only_in_debug(self, container):
        assert create_app(container=container).docs_url is None

        debug_settings = Settings(_env_file=None, debug=True, expiration_sweep_enabled=False)
        assert create_app(settings=debug_settings).docs_url == "/docs"

    @pytest.mark.asyncio
    async def test_lifespan_starts_and_stops_sweeper(self, clock):
        settings = Settings(_env_file=None, expiration_sweep_interval_seconds=3600)
        container = Container(settings, clock=clock)
        app = create_app(container=container)

        async with app.router.lifespan_context(app):
            assert container.sweeper.running

        assert not container.sweeper.running
