"""Integration test fixtures.

The application is built with ``create_app`` and started through its real
lifespan; upstream HTTP traffic (TheMealDB, Spoonacular, Groq) is served by
respx instead of the network.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import respx
from httpx import ASGITransport, AsyncClient

from recipex.core.config import Settings
from recipex.core.events.lifespan import lifespan
from recipex.factory import create_app


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Callable, Generator

    from fastapi import FastAPI


pytestmark = pytest.mark.integration


@pytest.fixture
def make_settings(monkeypatch: pytest.MonkeyPatch) -> Callable[..., Settings]:
    """Settings factory with both provider keys unset unless overridden."""
    # YAML overrides are selected from the environment, not init kwargs
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.delenv("SPOONACULAR_API_KEY", raising=False)
    monkeypatch.delenv("GROQ_API_KEY", raising=False)

    def _make(**overrides: Any) -> Settings:
        fields: dict[str, Any] = {
            "APP_ENV": "test",
            "SPOONACULAR_API_KEY": "",
            "GROQ_API_KEY": "",
            "llm": {"groq": {"requests_per_minute": 10000, "max_retries": 0}},
        }
        fields.update(overrides)
        return Settings(**fields)

    return _make


@pytest.fixture
def test_settings(make_settings: Callable[..., Settings]) -> Settings:
    """Demo-mode settings: TheMealDB only, no Groq."""
    return make_settings()


@pytest.fixture
def upstream() -> Generator[respx.MockRouter]:
    """Mock router for every upstream; unmatched requests fail the test."""
    with respx.mock(assert_all_called=False, assert_all_mocked=True) as router:
        yield router


@pytest.fixture
def app(test_settings: Settings) -> FastAPI:
    return create_app(test_settings)


@pytest.fixture
async def client(
    app: FastAPI, upstream: respx.MockRouter
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the started application."""
    async with lifespan(app):
        async with AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as ac:
            yield ac
