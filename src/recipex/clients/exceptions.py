"""Recipe provider client exceptions.

These never reach API callers: the unified recipe layer catches them and
either falls through to the next search stage or reports "no recipe".
"""

from __future__ import annotations

from recipex.schemas.enums import RecipeProvider


class ProviderError(Exception):
    """Base exception for recipe provider failures."""

    def __init__(self, provider: RecipeProvider, message: str) -> None:
        self.provider = provider
        super().__init__(f"{provider}: {message}")


class ProviderUnavailableError(ProviderError):
    """The provider could not be reached, timed out, or answered non-2xx.

    Also raised when the provider is not configured for use.
    """


class ProviderNotFoundError(ProviderError):
    """The provider reports that the requested recipe does not exist."""

    def __init__(self, provider: RecipeProvider, recipe_id: str) -> None:
        self.recipe_id = recipe_id
        super().__init__(provider, f"recipe '{recipe_id}' not found")


class MalformedUpstreamError(ProviderError):
    """The provider answered 2xx but the payload could not be parsed."""
