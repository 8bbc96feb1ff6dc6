"""Vision prompt for analyzing a photo of pantry ingredients.

The model identifies what is in the picture and proposes recipes that use
it. Output fields are deliberately lenient (numbers may arrive as floats,
lists may contain blanks); the analysis service normalizes them.
"""

from __future__ import annotations

from typing import Annotated, Any, ClassVar

from pydantic import BaseModel, BeforeValidator, Field

from .base import BasePrompt


def _round_number(value: Any) -> Any:
    if isinstance(value, float):
        return round(value)
    return value


LenientInt = Annotated[int | None, BeforeValidator(_round_number)]


class DetectedDish(BaseModel):
    """What the model thinks the picture shows overall."""

    name: str = ""
    confidence: float = 0.0
    is_food: bool = True


class DetectedIngredient(BaseModel):
    """An ingredient visible in the picture."""

    name: str
    quantity: str = ""
    confidence: float = 0.0


class SuggestedRecipe(BaseModel):
    """A recipe idea built around the detected ingredients."""

    name: str = ""
    cuisine: str | None = None
    match_percent: LenientInt = None
    missing_ingredients: list[Any] = Field(default_factory=list)
    cooking_time_minutes: LenientInt = None
    difficulty: str | None = None
    description: str | None = None
    calories_per_serving: LenientInt = None
    servings: LenientInt = None
    search_query: str | None = Field(
        default=None,
        description="Short recipe-database search phrase for this dish",
    )


class ScanAnalysisResult(BaseModel):
    """Output schema for pantry photo analysis."""

    detected_dish: DetectedDish | None = None
    detected_ingredients: list[DetectedIngredient] = Field(default_factory=list)
    recipes: list[SuggestedRecipe] = Field(default_factory=list)


class ScanAnalysisPrompt(BasePrompt[ScanAnalysisResult]):
    """Analyze a pantry photo and suggest recipes.

    Input: preferred cuisines plus optional diet/max time/difficulty filters.
    The image itself travels as a separate message part.
    """

    output_schema: ClassVar[type[BaseModel]] = ScanAnalysisResult

    system_prompt: ClassVar[str | None] = """You are Recipex AI, a culinary assistant.
Analyze pantry ingredient images and return strict JSON only.
If the image is not food or ingredients, set detected_dish.is_food=false and return
empty detected_ingredients and recipes.
Return shape:
{
  "detected_dish": {"name": "string", "confidence": 0.0, "is_food": true},
  "detected_ingredients": [{"name": "string", "quantity": "string", "confidence": 0.0}],
  "recipes": [{
    "name": "string",
    "cuisine": "string",
    "match_percent": 0,
    "missing_ingredients": ["string"],
    "cooking_time_minutes": 0,
    "difficulty": "easy|intermediate|advanced",
    "description": "string",
    "calories_per_serving": 0,
    "servings": 0,
    "search_query": "string"
  }]
}"""

    temperature: ClassVar[float] = 0.2
    max_tokens: ClassVar[int | None] = 2048

    def format(self, **kwargs: Any) -> str:
        cuisines = kwargs.get("cuisines") or []
        diet = kwargs.get("diet") or "none"
        max_time = kwargs.get("max_time") or "any"
        difficulty = kwargs.get("difficulty") or "any"
        preferred = ", ".join(cuisines) or "any"
        return (
            f"Preferred cuisines: {preferred}; "
            f"Filters: diet={diet}, maxTime={max_time}, difficulty={difficulty}."
        )
