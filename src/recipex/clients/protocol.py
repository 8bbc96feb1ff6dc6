"""Interface shared by the recipe provider clients."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable


if TYPE_CHECKING:
    from recipex.schemas.enums import RecipeProvider
    from recipex.schemas.recipe import RecipeDetail, RecipeSummary, SearchQuery


@runtime_checkable
class RecipeProviderProtocol(Protocol):
    """A recipe database that can be searched and looked up by id.

    ``search`` returns an empty list for zero matches and raises
    ``ProviderUnavailableError`` or ``MalformedUpstreamError`` on failure.
    ``get_by_id`` takes the provider-native id (no prefix) and raises
    ``ProviderNotFoundError`` when the provider says it does not exist.
    """

    provider: RecipeProvider

    async def initialize(self) -> None: ...

    async def shutdown(self) -> None: ...

    async def search(self, query: SearchQuery) -> list[RecipeSummary]: ...

    async def get_by_id(self, raw_id: str) -> RecipeDetail: ...
