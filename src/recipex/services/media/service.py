"""Media enrichment: best photo and video link for a free-text dish name."""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipex.mappers.video import build_video_search_url
from recipex.observability.logging import get_logger
from recipex.schemas.analysis import RecipeMedia
from recipex.schemas.recipe import SearchQuery


if TYPE_CHECKING:
    from recipex.services.recipes.service import RecipeAggregator


logger = get_logger(__name__)


class MediaEnricher:
    """Look a dish up through the unified search and expose its media.

    The top search hit supplies the id, photo and video link. With no hit,
    only a synthesized video-search link is returned. Never raises.
    """

    def __init__(self, aggregator: RecipeAggregator) -> None:
        self._aggregator = aggregator

    async def enrich(self, text: str) -> RecipeMedia:
        results = await self._aggregator.search(SearchQuery(text=text))
        if not results:
            logger.debug("No media match", query=text)
            return RecipeMedia(video_url=build_video_search_url(text))

        top = results[0]
        return RecipeMedia(
            id=top.id,
            photo_url=top.thumbnail_url or None,
            video_url=top.video_url or None,
        )
