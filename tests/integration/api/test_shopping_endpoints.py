"""Integration tests for POST /api/shopping-list."""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from tests.fixtures.llm_responses import GROQ_CHAT_URL, SHOPPING_LIST_RESPONSE
from tests.fixtures.provider_responses import REAL_LOOKING_KEY


if TYPE_CHECKING:
    from collections.abc import Callable

    import respx
    from httpx import AsyncClient

    from recipex.core.config import Settings


pytestmark = pytest.mark.integration


class TestShoppingListDemo:
    """Shopping lists without Groq."""

    async def test_demo_list_skips_pantry_items(self, client: AsyncClient) -> None:
        response = await client.post(
            "/api/shopping-list",
            json={"recipeNames": ["Koshari"], "userIngredients": [" Garlic ", "yogurt"]},
        )

        assert response.status_code == 200
        body = response.json()
        assert body["provider"] == "demo"
        assert [i["item"] for i in body["shoppingList"]] == ["olive oil", "cumin powder"]
        assert body["note"] == "Demo mode list generated because Groq is unavailable."
        assert body["requestId"] == response.headers["X-Request-ID"]

    async def test_empty_body_uses_defaults(self, client: AsyncClient) -> None:
        response = await client.post("/api/shopping-list", json={})

        assert response.status_code == 200
        assert len(response.json()["shoppingList"]) == 4


class TestShoppingListLive:
    """Shopping lists through a mocked Groq text model."""

    @pytest.fixture
    def test_settings(self, make_settings: Callable[..., Settings]) -> Settings:
        return make_settings(GROQ_API_KEY=REAL_LOOKING_KEY)

    async def test_groq_list(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.post(GROQ_CHAT_URL).mock(
            return_value=httpx.Response(200, json=SHOPPING_LIST_RESPONSE)
        )

        response = await client.post(
            "/api/shopping-list",
            json={"recipeNames": ["Chana Masala"], "userIngredients": []},
        )

        body = response.json()
        assert body["provider"] == "groq"
        assert body["note"] is None
        assert body["shoppingList"][0] == {
            "item": "basmati rice",
            "quantity": "2",
            "unit": "cups",
        }

    async def test_groq_timeout_falls_back(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.post(GROQ_CHAT_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        response = await client.post(
            "/api/shopping-list", json={"recipeNames": ["Pho"]}
        )

        body = response.json()
        assert response.status_code == 200
        assert body["provider"] == "demo"
        assert "Groq error:" in body["note"]
