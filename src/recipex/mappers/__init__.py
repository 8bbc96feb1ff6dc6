"""Pure functions that normalize provider data into the unified schemas."""

from recipex.mappers.derivation import (
    difficulty_from_minutes,
    extract_temperature_hint,
    html_to_text,
)
from recipex.mappers.recipe import (
    SPOONACULAR_ID_PREFIX,
    mealdb_detail,
    mealdb_ingredient_lines,
    mealdb_summary,
    spoonacular_detail,
    spoonacular_summary,
)
from recipex.mappers.video import build_video_search_url


__all__ = [
    "SPOONACULAR_ID_PREFIX",
    "build_video_search_url",
    "difficulty_from_minutes",
    "extract_temperature_hint",
    "html_to_text",
    "mealdb_detail",
    "mealdb_ingredient_lines",
    "mealdb_summary",
    "spoonacular_detail",
    "spoonacular_summary",
]
