"""Integration tests for the recipe endpoints.

Tests cover:
- Unified search through the TheMealDB fallback stages
- Spoonacular as the primary provider when its key is usable
- Detail lookups and 404s
- Cuisine listing with the fixed fallback
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from recipex.services.recipes.constants import FALLBACK_CUISINES
from tests.fixtures.llm_responses import GROQ_CHAT_URL, SEARCH_INTENT_RESPONSE
from tests.fixtures.provider_responses import (
    MEALDB_AREAS,
    MEALDB_URL,
    REAL_LOOKING_KEY,
    SPOONACULAR_INFORMATION,
    SPOONACULAR_URL,
    create_mealdb_list,
    create_mealdb_meal,
    create_spoonacular_recipe,
    create_spoonacular_search,
)


if TYPE_CHECKING:
    from collections.abc import Callable

    import respx
    from httpx import AsyncClient

    from recipex.core.config import Settings


pytestmark = pytest.mark.integration


class TestListRecipes:
    """Tests for GET /api/recipes."""

    async def test_default_query_is_chicken(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        route = upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(200, json=create_mealdb_list(create_mealdb_meal()))
        )

        response = await client.get("/api/recipes")

        assert response.status_code == 200
        assert route.calls.last.request.url.params["s"] == "chicken"
        body = response.json()
        assert body["requestId"] == response.headers["X-Request-ID"]
        recipe = body["results"][0]
        assert recipe["id"] == "52772"
        assert recipe["thumbnailUrl"].endswith("52772.jpg")
        assert recipe["videoUrl"].startswith("https://www.youtube.com/results?")
        assert response.headers["Cache-Control"] == "no-store"

    async def test_cuisine_filter_applies_to_mealdb(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(
                200,
                json=create_mealdb_list(
                    create_mealdb_meal(meal_id="1", area="Japanese"),
                    create_mealdb_meal(meal_id="2", area="British"),
                ),
            )
        )

        response = await client.get(
            "/api/recipes", params={"q": "pie", "cuisine": "british"}
        )

        assert [r["id"] for r in response.json()["results"]] == ["2"]

    async def test_provider_outage_is_empty_not_error(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/search.php").mock(
            side_effect=httpx.ConnectError("down")
        )

        response = await client.get("/api/recipes", params={"q": "soup"})

        assert response.status_code == 200
        assert response.json()["results"] == []

    async def test_invalid_max_time(self, client: AsyncClient) -> None:
        response = await client.get("/api/recipes", params={"maxTime": "0"})

        assert response.status_code == 422
        assert response.json()["error"] == "VALIDATION_ERROR"


class TestSearch:
    """Tests for GET /api/search in demo mode (no Groq)."""

    async def test_empty_query(self, client: AsyncClient, upstream: respx.MockRouter) -> None:
        route = upstream.get(f"{MEALDB_URL}/search.php")

        response = await client.get("/api/search", params={"q": "  "})

        assert response.status_code == 200
        assert response.json()["results"] == []
        assert route.called is False

    async def test_term_expansion(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        def search(request: httpx.Request) -> httpx.Response:
            if request.url.params["s"] == "salmon":
                return httpx.Response(
                    200,
                    json=create_mealdb_list(
                        create_mealdb_meal(meal_id="52773", name="Teriyaki Salmon")
                    ),
                )
            return httpx.Response(200, json={"meals": None})

        upstream.get(f"{MEALDB_URL}/search.php").mock(side_effect=search)

        response = await client.get("/api/search", params={"q": "glazed salmon"})

        body = response.json()
        assert [r["id"] for r in body["results"]] == ["52773"]
        assert body["message"] is None
        assert body["note"] is None

    async def test_no_results_message(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(200, json={"meals": None})
        )

        response = await client.get("/api/search", params={"q": "zzqx"})

        body = response.json()
        assert body["results"] == []
        assert "zzqx" in body["message"]


class TestSpoonacularPrimary:
    """Tests with a usable Spoonacular key."""

    @pytest.fixture
    def test_settings(self, make_settings: Callable[..., Settings]) -> Settings:
        return make_settings(SPOONACULAR_API_KEY=REAL_LOOKING_KEY)

    async def test_primary_results(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        mealdb = upstream.get(f"{MEALDB_URL}/search.php")
        upstream.get(f"{SPOONACULAR_URL}/recipes/complexSearch").mock(
            return_value=httpx.Response(
                200,
                json=create_spoonacular_search(
                    create_spoonacular_recipe(ready_in_minutes=20)
                ),
            )
        )

        response = await client.get("/api/recipes", params={"q": "pasta"})

        recipe = response.json()["results"][0]
        assert recipe["id"] == "spoon-716429"
        assert recipe["difficulty"] == "easy"
        assert recipe["readyInMinutes"] == 20
        assert mealdb.called is False

    async def test_quota_exhausted_falls_back(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{SPOONACULAR_URL}/recipes/complexSearch").mock(
            return_value=httpx.Response(402)
        )
        upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(200, json=create_mealdb_list(create_mealdb_meal()))
        )

        response = await client.get("/api/recipes", params={"q": "teriyaki"})

        assert [r["id"] for r in response.json()["results"]] == ["52772"]

    async def test_detail(self, client: AsyncClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{SPOONACULAR_URL}/recipes/716429/information").mock(
            return_value=httpx.Response(200, json=SPOONACULAR_INFORMATION)
        )

        response = await client.get("/api/recipes/spoon-716429")

        assert response.status_code == 200
        recipe = response.json()["recipe"]
        assert recipe["temperatureHint"] == "400F"
        assert recipe["ingredients"] == ["1 tbsp butter", "cauliflower florets"]


class TestRecipeDetail:
    """Tests for GET /api/recipes/{recipe_id}."""

    async def test_mealdb_detail(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/lookup.php").mock(
            return_value=httpx.Response(200, json=create_mealdb_list(create_mealdb_meal()))
        )

        response = await client.get("/api/recipes/52772")

        assert response.status_code == 200
        body = response.json()
        assert body["recipe"]["id"] == "52772"
        assert body["recipe"]["temperatureHint"] == "350F"
        assert body["requestId"]

    async def test_unknown_id_is_404(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/lookup.php").mock(
            return_value=httpx.Response(200, json={"meals": None})
        )

        response = await client.get("/api/recipes/99999999")

        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "NOT_FOUND"
        assert body["request_id"] == response.headers["X-Request-ID"]

    async def test_spoon_id_without_key_is_404(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        route = upstream.get(f"{SPOONACULAR_URL}/recipes/1/information")

        response = await client.get("/api/recipes/spoon-1")

        assert response.status_code == 404
        assert route.called is False

    async def test_malformed_spoon_id_is_404(self, client: AsyncClient) -> None:
        response = await client.get("/api/recipes/spoon-abc")

        assert response.status_code == 404


class TestCuisines:
    """Tests for GET /api/cuisines."""

    async def test_lists_areas(self, client: AsyncClient, upstream: respx.MockRouter) -> None:
        upstream.get(f"{MEALDB_URL}/list.php").mock(
            return_value=httpx.Response(200, json=MEALDB_AREAS)
        )

        response = await client.get("/api/cuisines")

        assert response.json()["cuisines"] == ["American", "Egyptian", "Italian"]

    async def test_fallback_list_on_outage(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.get(f"{MEALDB_URL}/list.php").mock(return_value=httpx.Response(500))

        response = await client.get("/api/cuisines")

        assert response.status_code == 200
        assert response.json()["cuisines"] == list(FALLBACK_CUISINES)


class TestSearchWithIntent:
    """Tests for GET /api/search with Groq intent extraction."""

    @pytest.fixture
    def test_settings(self, make_settings: Callable[..., Settings]) -> Settings:
        return make_settings(GROQ_API_KEY=REAL_LOOKING_KEY)

    async def test_extracted_filters_drive_search(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.post(GROQ_CHAT_URL).mock(
            return_value=httpx.Response(200, json=SEARCH_INTENT_RESPONSE)
        )
        search = upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(
                200,
                json=create_mealdb_list(
                    create_mealdb_meal(meal_id="1", name="Chickpea Curry", area="Indian"),
                    create_mealdb_meal(meal_id="2", name="Thai Curry", area="Thai"),
                ),
            )
        )

        response = await client.get(
            "/api/search", params={"q": "something veggie and indian, curry maybe"}
        )

        body = response.json()
        assert [r["id"] for r in body["results"]] == ["1"]
        assert body["note"] is None
        assert search.calls.last.request.url.params["s"] == "curry"

    async def test_intent_failure_adds_note(
        self, client: AsyncClient, upstream: respx.MockRouter
    ) -> None:
        upstream.post(GROQ_CHAT_URL).mock(return_value=httpx.Response(503))
        upstream.get(f"{MEALDB_URL}/search.php").mock(
            return_value=httpx.Response(200, json=create_mealdb_list(create_mealdb_meal()))
        )

        response = await client.get("/api/search", params={"q": "teriyaki"})

        body = response.json()
        assert [r["id"] for r in body["results"]] == ["52772"]
        assert body["note"] == "Groq intent fallback used: Groq returned 503"
