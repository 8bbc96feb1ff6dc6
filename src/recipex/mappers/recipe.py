"""Mappers from provider payloads to the unified recipe schemas.

Primary-provider ids are namespaced with ``spoon-`` so that ids from both
providers can share one id space; TheMealDB ids are passed through as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from recipex.mappers.derivation import (
    difficulty_from_minutes,
    extract_temperature_hint,
    html_to_text,
)
from recipex.mappers.video import build_video_search_url
from recipex.schemas.recipe import RecipeDetail, RecipeSummary


if TYPE_CHECKING:
    from recipex.clients.spoonacular.models import SpoonacularRecipe
    from recipex.clients.themealdb.models import MealDBMeal


SPOONACULAR_ID_PREFIX = "spoon-"
DEFAULT_CUISINE = "Global"
DEFAULT_CATEGORY = "Recipe"
MISSING_INSTRUCTIONS = "Instructions currently unavailable."


def spoonacular_recipe_id(raw_id: int | str) -> str:
    return f"{SPOONACULAR_ID_PREFIX}{raw_id}"


def spoonacular_summary(recipe: SpoonacularRecipe) -> RecipeSummary:
    """Map a complexSearch result to a summary."""
    return RecipeSummary(
        id=spoonacular_recipe_id(recipe.id),
        title=recipe.title,
        cuisine=(recipe.cuisines or [DEFAULT_CUISINE])[0],
        category=(recipe.dish_types or [DEFAULT_CATEGORY])[0],
        thumbnail_url=recipe.image or None,
        ready_in_minutes=recipe.ready_in_minutes,
        difficulty=difficulty_from_minutes(recipe.ready_in_minutes),
        source_url=recipe.source_url or None,
        video_url=build_video_search_url(recipe.title),
    )


def spoonacular_ingredient_lines(recipe: SpoonacularRecipe) -> list[str]:
    lines: list[str] = []
    for ingredient in recipe.extended_ingredients or []:
        line = (ingredient.original or "").strip() or (
            ingredient.original_name or ""
        ).strip()
        if line:
            lines.append(line)
    return lines


def spoonacular_detail(recipe: SpoonacularRecipe) -> RecipeDetail:
    """Map a recipe information payload to a detail; instructions are de-HTMLed."""
    instructions = html_to_text(recipe.instructions)
    summary = spoonacular_summary(recipe)
    return RecipeDetail(
        **summary.model_dump(by_alias=False, exclude={"temperature_hint"}),
        temperature_hint=extract_temperature_hint(instructions),
        instructions=instructions or MISSING_INSTRUCTIONS,
        ingredients=spoonacular_ingredient_lines(recipe),
    )


def mealdb_ingredient_lines(pairs: list[tuple[str, str]]) -> list[str]:
    """Render ``(ingredient, measure)`` slots as ``"<measure> <ingredient>"``.

    Slots without an ingredient are skipped.
    """
    return [
        f"{measure} {ingredient}".strip()
        for ingredient, measure in pairs
        if ingredient
    ]


def mealdb_summary(meal: MealDBMeal) -> RecipeSummary:
    """Map a TheMealDB meal to a summary; TheMealDB carries no timing data."""
    summary = RecipeSummary(
        id=meal.id_meal,
        title=meal.str_meal,
        cuisine=meal.str_area or DEFAULT_CUISINE,
        category=meal.str_category or DEFAULT_CATEGORY,
        thumbnail_url=meal.str_meal_thumb or None,
        video_url=build_video_search_url(meal.str_meal),
    )
    return summary.mark_provider_cuisine(meal.str_area or None)


def mealdb_detail(meal: MealDBMeal) -> RecipeDetail:
    instructions = (meal.str_instructions or "").strip()
    summary = mealdb_summary(meal)
    return RecipeDetail(
        **summary.model_dump(by_alias=False, exclude={"temperature_hint"}),
        temperature_hint=extract_temperature_hint(instructions),
        instructions=instructions or MISSING_INSTRUCTIONS,
        ingredients=mealdb_ingredient_lines(meal.ingredient_pairs),
    )
