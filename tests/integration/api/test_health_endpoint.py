"""Integration tests for GET /health."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from httpx import ASGITransport, AsyncClient

from recipex.factory import create_app


if TYPE_CHECKING:
    from recipex.core.config import Settings


pytestmark = pytest.mark.integration


class TestHealth:
    async def test_healthy_in_demo_mode(self, client: AsyncClient) -> None:
        response = await client.get("/health", headers={"X-Request-ID": "probe-1"})

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["environment"] == "test"
        assert body["providers"] == {"spoonacular": False, "groq": False}
        assert body["requestId"] == "probe-1"
        assert response.headers["X-Request-ID"] == "probe-1"
        assert "X-Process-Time" in response.headers

    async def test_health_is_outside_api_prefix(self, client: AsyncClient) -> None:
        response = await client.get("/api/health")

        assert response.status_code == 404

    async def test_health_not_cached_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "Cache-Control" not in response.headers

    async def test_degraded_before_startup(self, test_settings: Settings) -> None:
        app = create_app(test_settings)
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test"
        ) as ac:
            response = await ac.get("/health")

        assert response.json()["status"] == "degraded"
