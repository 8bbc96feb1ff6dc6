"""Free-text recipe discovery: intent extraction followed by unified search."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from recipex.observability.logging import get_logger
from recipex.schemas.recipe import SearchQuery
from recipex.services.recipes.constants import NO_RESULTS_MESSAGE


if TYPE_CHECKING:
    from recipex.schemas.recipe import RecipeSummary
    from recipex.services.recipes.intent import SearchIntentExtractor
    from recipex.services.recipes.service import RecipeAggregator


logger = get_logger(__name__)

INTENT_FALLBACK_NOTE = "Groq intent fallback used: {reason}"


@dataclass(frozen=True, slots=True)
class DiscoveryResult:
    """Search results plus the user-facing message and note, if any."""

    results: list[RecipeSummary] = field(default_factory=list)
    message: str | None = None
    note: str | None = None


class RecipeDiscoveryService:
    """Search driven by a user's free-text query.

    Explicit filters from the caller take precedence over anything the
    intent extractor inferred.
    """

    def __init__(
        self,
        aggregator: RecipeAggregator,
        intent_extractor: SearchIntentExtractor,
    ) -> None:
        self._aggregator = aggregator
        self._intent_extractor = intent_extractor

    async def discover(
        self,
        text: str,
        *,
        cuisine: str | None = None,
        diet: str | None = None,
        max_time: int | None = None,
    ) -> DiscoveryResult:
        text = text.strip()
        if not text:
            return DiscoveryResult()

        outcome = await self._intent_extractor.extract(text)
        intent = outcome.intent
        query = SearchQuery(
            text=(intent.keyword or text).strip(),
            cuisine=cuisine or intent.cuisine or None,
            diet=diet or intent.diet or None,
            max_time=max_time,
        )

        results = await self._aggregator.search(query)
        if not results:
            logger.info(
                "Discovery found no results",
                query=text,
                cuisine=query.cuisine,
                diet=query.diet,
                max_time=max_time,
            )
            return DiscoveryResult(message=NO_RESULTS_MESSAGE.format(query=text))

        note = (
            INTENT_FALLBACK_NOTE.format(reason=outcome.fallback_reason)
            if outcome.fallback_reason
            else None
        )
        return DiscoveryResult(results=results, note=note)
