"""Ordered fallback stages for unified search.

A search runs its stages in order. The first stage that produces a
non-empty list wins; its post-filter (if any) is applied and the result is
truncated. A stage that errors or comes back empty hands over to the next.
When every stage is exhausted the search yields an empty list.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from recipex.clients.exceptions import ProviderError
from recipex.observability.logging import get_logger


if TYPE_CHECKING:
    from recipex.schemas.recipe import RecipeSummary, SearchQuery


logger = get_logger(__name__)

StageRunner = Callable[["SearchQuery"], Awaitable[list["RecipeSummary"]]]
PostFilter = Callable[[list["RecipeSummary"], "SearchQuery"], list["RecipeSummary"]]


@dataclass(frozen=True, slots=True)
class StageResult:
    """Outcome of one stage: either recipes (possibly empty) or an error."""

    recipes: list[RecipeSummary] = field(default_factory=list)
    error: Exception | None = None

    @property
    def has_recipes(self) -> bool:
        return self.error is None and bool(self.recipes)


@dataclass(frozen=True, slots=True)
class FallbackStage:
    """A named search step with an optional post-filter."""

    name: str
    run: StageRunner
    post_filter: PostFilter | None = None

    async def execute(self, query: SearchQuery) -> StageResult:
        try:
            return StageResult(recipes=await self.run(query))
        except ProviderError as e:
            logger.warning("Search stage failed", stage=self.name, error=str(e))
            return StageResult(error=e)
        except Exception as e:
            logger.opt(exception=e).error(
                "Search stage raised unexpectedly", stage=self.name
            )
            return StageResult(error=e)


def filter_by_cuisine(
    recipes: list[RecipeSummary], query: SearchQuery
) -> list[RecipeSummary]:
    """Keep recipes whose provider cuisine contains the requested one.

    Matching is case-insensitive. Recipes the provider gave no cuisine are
    dropped whenever a cuisine is requested.
    """
    if not query.cuisine:
        return recipes
    wanted = query.cuisine.lower()
    return [
        recipe
        for recipe in recipes
        if wanted in (recipe.provider_cuisine or "").lower()
    ]


async def run_fallback_stages(
    stages: Sequence[FallbackStage],
    query: SearchQuery,
    *,
    limit: int,
) -> list[RecipeSummary]:
    """Run ``stages`` in order and return the first non-empty result."""
    for stage in stages:
        result = await stage.execute(query)
        if not result.has_recipes:
            logger.debug(
                "Search stage produced nothing",
                stage=stage.name,
                failed=result.error is not None,
            )
            continue

        recipes = result.recipes
        if stage.post_filter is not None:
            recipes = stage.post_filter(recipes, query)
        logger.info(
            "Search stage selected",
            stage=stage.name,
            result_count=min(len(recipes), limit),
        )
        return recipes[:limit]

    return []
