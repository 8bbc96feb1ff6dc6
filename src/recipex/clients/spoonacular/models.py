"""Spoonacular payload schemas (only the fields the service reads)."""

from __future__ import annotations

from pydantic import Field

from recipex.schemas.base import DownstreamResponse


class SpoonacularIngredient(DownstreamResponse):
    """Entry of ``extendedIngredients`` on a recipe information payload."""

    original: str | None = None
    original_name: str | None = None


class SpoonacularRecipe(DownstreamResponse):
    """Recipe as returned by complexSearch or the information endpoint."""

    id: int
    title: str
    image: str | None = None
    ready_in_minutes: int | None = None
    source_url: str | None = None
    cuisines: list[str] | None = None
    dish_types: list[str] | None = None
    instructions: str | None = None
    extended_ingredients: list[SpoonacularIngredient] | None = None


class SpoonacularSearchResponse(DownstreamResponse):
    """Response of ``GET /recipes/complexSearch``."""

    results: list[SpoonacularRecipe] = Field(default_factory=list)
    total_results: int | None = None
