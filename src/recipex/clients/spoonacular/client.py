"""Spoonacular API client (primary recipe provider).

Spoonacular is paid and keyed. Every call checks the configured key first
and refuses to touch the network with a placeholder or missing key.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Final

from recipex.clients.base import BaseProviderClient
from recipex.clients.exceptions import ProviderUnavailableError
from recipex.clients.spoonacular.models import (
    SpoonacularRecipe,
    SpoonacularSearchResponse,
)
from recipex.core.config import has_usable_api_key
from recipex.mappers.recipe import spoonacular_detail, spoonacular_summary
from recipex.observability.logging import get_logger
from recipex.schemas.enums import RecipeProvider


if TYPE_CHECKING:
    import httpx

    from recipex.schemas.recipe import RecipeDetail, RecipeSummary, SearchQuery


logger = get_logger(__name__)


class SpoonacularClient(BaseProviderClient):
    """Search and detail lookups against api.spoonacular.com."""

    provider: ClassVar[RecipeProvider] = RecipeProvider.SPOONACULAR

    DEFAULT_BASE_URL: Final[str] = "https://api.spoonacular.com"
    SEARCH_ENDPOINT: Final[str] = "/recipes/complexSearch"
    INFORMATION_ENDPOINT: Final[str] = "/recipes/{recipe_id}/information"

    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
        result_limit: int = 16,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, http_client=http_client)
        self._api_key = api_key
        self.result_limit = result_limit

    @property
    def is_configured(self) -> bool:
        """Whether the API key is usable; if not, no request is ever sent."""
        return has_usable_api_key(self._api_key)

    def _require_key(self) -> None:
        if not self.is_configured:
            raise ProviderUnavailableError(self.provider, "API key not configured")

    async def search(self, query: SearchQuery) -> list[RecipeSummary]:
        """Run ``complexSearch`` with the query text and optional filters."""
        self._require_key()

        params: dict[str, Any] = {
            "apiKey": self._api_key,
            "query": query.text,
            "number": self.result_limit,
            "addRecipeInformation": "true",
        }
        if query.cuisine:
            params["cuisine"] = query.cuisine
        if query.diet:
            params["diet"] = query.diet
        if query.max_time:
            params["maxReadyTime"] = query.max_time

        payload = await self._get_model(
            self.SEARCH_ENDPOINT, SpoonacularSearchResponse, params
        )
        logger.debug(
            "Spoonacular search complete",
            query=query.text,
            result_count=len(payload.results),
        )
        return [spoonacular_summary(recipe) for recipe in payload.results]

    async def get_by_id(self, raw_id: str) -> RecipeDetail:
        """Fetch recipe information; HTTP 404 raises ``ProviderNotFoundError``."""
        self._require_key()

        recipe = await self._get_model(
            self.INFORMATION_ENDPOINT.format(recipe_id=raw_id),
            SpoonacularRecipe,
            {"apiKey": self._api_key, "includeNutrition": "false"},
            not_found_id=raw_id,
        )
        return spoonacular_detail(recipe)
