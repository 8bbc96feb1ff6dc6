"""Unified recipe schemas.

Both recipe providers are normalized into these shapes; nothing downstream
of the provider clients sees provider-native field names.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Self

from pydantic import ConfigDict, Field, PrivateAttr

from recipex.schemas.base import APIResponse
from recipex.schemas.enums import Difficulty


@dataclass(frozen=True, slots=True)
class SearchQuery:
    """One search request against the unified recipe layer."""

    text: str
    cuisine: str | None = None
    diet: str | None = None
    max_time: int | None = None


class RecipeSummary(APIResponse):
    """Provider-neutral recipe listing entry."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Provider-prefixed recipe id")
    title: str = Field(..., description="Recipe title")
    cuisine: str = Field(..., description="Cuisine or area")
    category: str = Field(..., description="Dish type or category")
    thumbnail_url: str | None = Field(default=None, description="Provider image URL")
    ready_in_minutes: int | None = Field(default=None, description="Total time")
    difficulty: Difficulty | None = Field(
        default=None,
        description="Derived from ready time",
    )
    temperature_hint: str | None = Field(
        default=None,
        description="Oven temperature mentioned in the instructions, e.g. 350F",
    )
    source_url: str | None = Field(default=None, description="Original recipe page")
    video_url: str = Field(..., description="Video search link for the recipe")

    # Cuisine exactly as the provider reported it; None when it had none.
    _provider_cuisine: str | None = PrivateAttr(default=None)

    def model_post_init(self, context: Any, /) -> None:
        self._provider_cuisine = self.cuisine

    @property
    def provider_cuisine(self) -> str | None:
        """Cuisine used for filtering, before any default was substituted."""
        return self._provider_cuisine

    def mark_provider_cuisine(self, cuisine: str | None) -> Self:
        self._provider_cuisine = cuisine
        return self


class RecipeDetail(RecipeSummary):
    """Full recipe including instructions and ingredient lines."""

    instructions: str = Field(..., description="Plain-text cooking instructions")
    ingredients: list[str] = Field(
        default_factory=list,
        description="Ingredient lines in recipe order",
    )


class RecipeSearchResponse(APIResponse):
    """Response for the search and listing endpoints."""

    results: list[RecipeSummary] = Field(default_factory=list)
    message: str | None = Field(
        default=None,
        description="Human-readable hint when nothing matched",
    )
    note: str | None = Field(
        default=None,
        description="Explains degraded behavior, e.g. intent extraction fallback",
    )
    request_id: str | None = None


class RecipeDetailResponse(APIResponse):
    """Response for the recipe detail endpoint."""

    recipe: RecipeDetail
    request_id: str | None = None


class CuisineListResponse(APIResponse):
    """Response for the cuisine listing endpoint."""

    cuisines: list[str] = Field(default_factory=list)
    request_id: str | None = None
