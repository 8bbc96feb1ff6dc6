"""Unified recipe search and detail lookup across both providers.

Search cascade:
1. Spoonacular with all filters (only when its API key is usable).
2. TheMealDB name search with the raw query text.
3. TheMealDB once per expanded search term, concurrently, merged and
   de-duplicated by id in term order.

Stages 2 and 3 filter by cuisine afterwards since TheMealDB cannot. No
provider failure ever escapes ``search`` or ``get_detail``.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from recipex.clients.exceptions import ProviderError, ProviderNotFoundError
from recipex.observability.logging import get_logger
from recipex.schemas.enums import RecipeProvider
from recipex.schemas.recipe import SearchQuery
from recipex.services.recipes.constants import MAX_RESULTS
from recipex.services.recipes.routing import classify_recipe_id
from recipex.services.recipes.stages import (
    FallbackStage,
    filter_by_cuisine,
    run_fallback_stages,
)
from recipex.services.recipes.terms import expand_search_terms


if TYPE_CHECKING:
    from recipex.clients.spoonacular import SpoonacularClient
    from recipex.clients.themealdb import TheMealDBClient
    from recipex.schemas.recipe import RecipeDetail, RecipeSummary


logger = get_logger(__name__)


class RecipeAggregator:
    """Provider-neutral recipe search, detail and cuisine listing.

    Example:
        ```python
        aggregator = RecipeAggregator(primary=spoonacular, secondary=mealdb)
        results = await aggregator.search(SearchQuery("chicken curry"))
        detail = await aggregator.get_detail(results[0].id)
        ```
    """

    def __init__(
        self,
        primary: SpoonacularClient,
        secondary: TheMealDBClient,
        *,
        result_limit: int = MAX_RESULTS,
    ) -> None:
        self._primary = primary
        self._secondary = secondary
        self.result_limit = result_limit

    def build_stages(self) -> list[FallbackStage]:
        """Stages for one search, in order; the primary is skipped when unconfigured."""
        stages: list[FallbackStage] = []
        if self._primary.is_configured:
            stages.append(FallbackStage(name="spoonacular", run=self._primary.search))
        stages.append(
            FallbackStage(
                name="themealdb",
                run=self._secondary.search,
                post_filter=filter_by_cuisine,
            )
        )
        stages.append(
            FallbackStage(
                name="themealdb-terms",
                run=self._search_secondary_by_terms,
                post_filter=filter_by_cuisine,
            )
        )
        return stages

    async def search(self, query: SearchQuery) -> list[RecipeSummary]:
        """Search both providers through the fallback cascade.

        Returns at most ``result_limit`` recipes; an empty list when nothing
        matched or every provider failed.
        """
        results = await run_fallback_stages(
            self.build_stages(), query, limit=self.result_limit
        )
        logger.debug("Unified search complete", query=query.text, count=len(results))
        return results

    async def _search_secondary_by_terms(
        self, query: SearchQuery
    ) -> list[RecipeSummary]:
        terms = expand_search_terms(query.text)
        responses = await asyncio.gather(
            *(self._secondary.search(SearchQuery(text=term)) for term in terms),
            return_exceptions=True,
        )

        merged: dict[str, RecipeSummary] = {}
        for term, response in zip(terms, responses, strict=True):
            if isinstance(response, BaseException):
                if not isinstance(response, Exception):
                    raise response
                logger.warning(
                    "Term search failed", term=term, error=str(response)
                )
                continue
            for recipe in response:
                merged.setdefault(recipe.id, recipe)
        return list(merged.values())

    async def get_detail(self, recipe_id: str) -> RecipeDetail | None:
        """Fetch one recipe from whichever provider owns ``recipe_id``.

        Returns ``None`` when the id is malformed, the provider does not know
        it, or the provider is failing; the cases are only distinguished in
        logs.
        """
        ref = classify_recipe_id(recipe_id)
        if not ref.is_well_formed:
            logger.info("Malformed recipe id", recipe_id=recipe_id)
            return None

        client = (
            self._primary
            if ref.provider is RecipeProvider.SPOONACULAR
            else self._secondary
        )
        try:
            return await client.get_by_id(ref.raw_id)
        except ProviderNotFoundError:
            logger.info("Recipe not found", recipe_id=recipe_id, provider=ref.provider)
        except ProviderError as e:
            logger.warning(
                "Recipe detail unavailable",
                recipe_id=recipe_id,
                provider=ref.provider,
                error=str(e),
            )
        except Exception as e:
            logger.opt(exception=e).error(
                "Recipe detail lookup raised unexpectedly", recipe_id=recipe_id
            )
        return None

    async def list_cuisines(self) -> list[str]:
        """Cuisine names known to the secondary provider.

        Raises:
            ProviderError: If the listing cannot be fetched.
        """
        return await self._secondary.list_cuisines()
