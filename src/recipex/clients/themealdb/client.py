"""TheMealDB API client (secondary recipe provider).

TheMealDB is free and unauthenticated. It only supports name search, so
cuisine, diet and time filters are not sent; the unified recipe layer
filters by cuisine after the fact.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Final

from recipex.clients.base import BaseProviderClient
from recipex.clients.exceptions import ProviderNotFoundError
from recipex.clients.themealdb.models import MealDBAreaList, MealDBMealList
from recipex.mappers.recipe import mealdb_detail, mealdb_summary
from recipex.observability.logging import get_logger
from recipex.schemas.enums import RecipeProvider


if TYPE_CHECKING:
    import httpx

    from recipex.schemas.recipe import RecipeDetail, RecipeSummary, SearchQuery


logger = get_logger(__name__)


class TheMealDBClient(BaseProviderClient):
    """Search, lookup and area listing against themealdb.com."""

    provider: ClassVar[RecipeProvider] = RecipeProvider.THEMEALDB

    DEFAULT_BASE_URL: Final[str] = "https://www.themealdb.com/api/json/v1/1"
    SEARCH_ENDPOINT: Final[str] = "/search.php"
    LOOKUP_ENDPOINT: Final[str] = "/lookup.php"
    LIST_ENDPOINT: Final[str] = "/list.php"

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        super().__init__(base_url=base_url, timeout=timeout, http_client=http_client)

    async def search(self, query: SearchQuery) -> list[RecipeSummary]:
        """Search meals by name. ``{"meals": null}`` means no matches."""
        payload = await self._get_model(
            self.SEARCH_ENDPOINT, MealDBMealList, {"s": query.text}
        )
        meals = payload.meals or []
        logger.debug(
            "TheMealDB search complete", query=query.text, result_count=len(meals)
        )
        return [mealdb_summary(meal) for meal in meals]

    async def get_by_id(self, raw_id: str) -> RecipeDetail:
        """Look a meal up by id; ``{"meals": null}`` raises ``ProviderNotFoundError``."""
        payload = await self._get_model(
            self.LOOKUP_ENDPOINT, MealDBMealList, {"i": raw_id}
        )
        if not payload.meals:
            raise ProviderNotFoundError(self.provider, raw_id)
        return mealdb_detail(payload.meals[0])

    async def list_cuisines(self) -> list[str]:
        """Distinct area names, trimmed and sorted alphabetically."""
        payload = await self._get_model(
            self.LIST_ENDPOINT, MealDBAreaList, {"a": "list"}
        )
        areas = {
            (entry.str_area or "").strip() for entry in payload.meals or []
        }
        areas.discard("")
        return sorted(areas)
