"""Pantry photo analysis schemas."""

from __future__ import annotations

from pydantic import ConfigDict, Field

from recipex.schemas.base import APIRequest, APIResponse
from recipex.schemas.enums import AnalysisMode, ResultProvider


class AnalyzeFilters(APIRequest):
    """Optional constraints for suggested recipes."""

    diet: str | None = None
    max_time: int | None = Field(default=None, ge=1)
    difficulty: str | None = None


class AnalyzeRequest(APIRequest):
    """Request body for ``POST /analyze``.

    ``image_base64`` is optional at the schema level so a missing image is
    reported as a 400 with a clear message instead of a generic 422.
    """

    image_base64: str | None = None
    cuisines: list[str] = Field(default_factory=list)
    filters: AnalyzeFilters | None = None


class RecipeMedia(APIResponse):
    """Best-effort media for a free-text recipe name."""

    model_config = ConfigDict(frozen=True)

    id: str | None = Field(default=None, description="Matching unified recipe id")
    photo_url: str | None = None
    video_url: str | None = None


class DetectedDishOut(APIResponse):
    """What the picture shows overall."""

    name: str
    confidence: float
    is_food: bool


class DetectedIngredientOut(APIResponse):
    """An ingredient spotted in the picture."""

    name: str
    quantity: str = ""
    confidence: float = 0.0


class SuggestedRecipeOut(APIResponse):
    """A recipe suggestion enriched with media from the recipe providers."""

    name: str
    cuisine: str
    match_percent: int | None = None
    missing_ingredients: list[str] = Field(default_factory=list)
    cooking_time_minutes: int | None = None
    difficulty: str | None = None
    description: str | None = None
    calories_per_serving: int | None = None
    servings: int | None = None
    search_query: str
    media: RecipeMedia


class AnalyzeResponse(APIResponse):
    """Result of analyzing a pantry photo."""

    detected_dish: DetectedDishOut | None = None
    detected_ingredients: list[DetectedIngredientOut] = Field(default_factory=list)
    recipes: list[SuggestedRecipeOut] = Field(default_factory=list)
    mode: AnalysisMode
    provider: ResultProvider
    note: str | None = None
    request_id: str | None = None
