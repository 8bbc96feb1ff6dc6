"""Unit tests for the HTTP middleware stack."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from fastapi import FastAPI, Request
from httpx import ASGITransport, AsyncClient

from recipex.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)
from recipex.core.middleware.logging import client_ip
from recipex.observability.logging import get_context


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator


pytestmark = pytest.mark.unit


@pytest.fixture
def app() -> FastAPI:
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, api_prefix="/api")

    @app.get("/api/echo")
    async def echo(request: Request) -> dict[str, object]:
        return {
            "state": request.state.request_id,
            "context": get_context().get("request_id"),
        }

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac


class TestRequestIDMiddleware:
    """Tests for request id propagation."""

    async def test_generates_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/echo")

        request_id = response.headers["X-Request-ID"]
        assert request_id
        assert response.json() == {"state": request_id, "context": request_id}

    async def test_reuses_incoming_id(self, client: AsyncClient) -> None:
        response = await client.get("/api/echo", headers={"X-Request-ID": "abc-123"})

        assert response.headers["X-Request-ID"] == "abc-123"
        assert response.json()["state"] == "abc-123"


class TestTimingMiddleware:
    """Tests for the process time header."""

    async def test_adds_process_time(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["X-Process-Time"].endswith("ms")


class TestSecurityHeadersMiddleware:
    """Tests for security headers."""

    async def test_static_headers(self, client: AsyncClient) -> None:
        response = await client.get("/health")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert "Cache-Control" not in response.headers

    async def test_api_responses_not_cached(self, client: AsyncClient) -> None:
        response = await client.get("/api/echo")

        assert response.headers["Cache-Control"] == "no-store"


class TestClientIp:
    """Tests for client address resolution."""

    def test_prefers_forwarded_for(self) -> None:
        request = Request(
            {
                "type": "http",
                "headers": [(b"x-forwarded-for", b"203.0.113.7, 10.0.0.1")],
                "client": ("10.0.0.1", 1234),
            }
        )

        assert client_ip(request) == "203.0.113.7"

    def test_falls_back_to_peer(self) -> None:
        request = Request({"type": "http", "headers": [], "client": ("10.0.0.2", 1)})

        assert client_ip(request) == "10.0.0.2"
