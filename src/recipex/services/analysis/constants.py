"""Demo data served when pantry analysis cannot run live."""

from __future__ import annotations

from typing import Final

from recipex.llm.prompts.scan_analysis import (
    DetectedDish,
    DetectedIngredient,
    ScanAnalysisResult,
    SuggestedRecipe,
)


LIVE_NOTE: Final[str] = "Live analysis provided by Groq."
LIVE_FAILED_NOTE: Final[str] = "Groq unavailable. Falling back to demo mode. {error}"
DEMO_NOTE: Final[str] = (
    "Demo mode: Groq unavailable. "
    "Showing sample scan results instead of live vision."
)
NOT_FOOD_NOTE: Final[str] = "No food ingredients detected in the uploaded image."

DEFAULT_RECIPE_CUISINE: Final[str] = "Global"

DEMO_INGREDIENTS: Final[tuple[DetectedIngredient, ...]] = (
    DetectedIngredient(name="onion", quantity="2 medium", confidence=0.9),
    DetectedIngredient(name="tomato", quantity="3 medium", confidence=0.88),
    DetectedIngredient(name="chicken breast", quantity="400g", confidence=0.86),
)

EGYPTIAN_DEMO_RECIPES: Final[tuple[SuggestedRecipe, ...]] = (
    SuggestedRecipe(
        name="Egyptian-Spiced Protein Skillet",
        cuisine="Egyptian",
        match_percent=82,
        missing_ingredients=["cumin", "coriander", "lemon"],
        cooking_time_minutes=40,
        difficulty="intermediate",
        description="Pan-seared protein with warming Egyptian-style spices and onions.",
        calories_per_serving=410,
        servings=4,
        search_query="egyptian chicken",
    ),
    SuggestedRecipe(
        name="Baladi Veggie Saute",
        cuisine="Egyptian",
        match_percent=74,
        missing_ingredients=["bell pepper", "fresh parsley"],
        cooking_time_minutes=25,
        difficulty="easy",
        description="Quick onion-garlic vegetable saute with classic pantry spices.",
        calories_per_serving=290,
        servings=3,
        search_query="egyptian vegetables",
    ),
    SuggestedRecipe(
        name="Herbed Tomato Broth",
        cuisine="Egyptian",
        match_percent=69,
        missing_ingredients=["vegetable stock", "mint"],
        cooking_time_minutes=30,
        difficulty="easy",
        description="Light tomato-forward broth finished with herbs and citrus.",
        calories_per_serving=180,
        servings=4,
        search_query="egyptian soup",
    ),
)


def generic_demo_recipes(cuisine: str | None) -> list[SuggestedRecipe]:
    """Pantry-friendly demo recipes labelled with the preferred cuisine."""
    label = cuisine or DEFAULT_RECIPE_CUISINE
    return [
        SuggestedRecipe(
            name="Spiced Pantry Curry",
            cuisine=label,
            match_percent=84,
            missing_ingredients=["yogurt", "cumin"],
            cooking_time_minutes=40,
            difficulty="intermediate",
            description="Balanced onion-tomato curry base with pantry-friendly spices.",
            calories_per_serving=400,
            servings=4,
            search_query="pantry curry",
        ),
        SuggestedRecipe(
            name="One-Pan Skillet Bowl",
            cuisine=label,
            match_percent=72,
            missing_ingredients=["bell pepper", "lime"],
            cooking_time_minutes=28,
            difficulty="easy",
            description="Simple one-pan bowl with protein, aromatics, and sauce.",
            calories_per_serving=360,
            servings=3,
            search_query="skillet bowl",
        ),
        SuggestedRecipe(
            name="Tomato Garlic Soup",
            cuisine=label,
            match_percent=78,
            missing_ingredients=["celery", "stock cube"],
            cooking_time_minutes=35,
            difficulty="easy",
            description="Comforting soup built from onion, tomato, and garlic.",
            calories_per_serving=240,
            servings=4,
            search_query="tomato soup",
        ),
    ]


def demo_analysis(primary_cuisine: str | None) -> ScanAnalysisResult:
    """Canned analysis, Egyptian-flavored when the user prefers Egyptian food."""
    cuisine = (primary_cuisine or "").strip()
    if "egypt" in cuisine.lower():
        recipes = list(EGYPTIAN_DEMO_RECIPES)
    else:
        recipes = generic_demo_recipes(cuisine or None)

    return ScanAnalysisResult(
        detected_dish=DetectedDish(
            name=f"{cuisine} pantry ingredients" if cuisine else "Mixed pantry ingredients",
            confidence=0.74,
            is_food=True,
        ),
        detected_ingredients=list(DEMO_INGREDIENTS),
        recipes=recipes,
    )
