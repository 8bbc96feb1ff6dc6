"""Unified recipe layer: search cascade, id routing and discovery."""

from recipex.services.recipes.discovery import DiscoveryResult, RecipeDiscoveryService
from recipex.services.recipes.intent import IntentOutcome, SearchIntentExtractor
from recipex.services.recipes.routing import RecipeRef, classify_recipe_id
from recipex.services.recipes.service import RecipeAggregator
from recipex.services.recipes.stages import (
    FallbackStage,
    StageResult,
    filter_by_cuisine,
    run_fallback_stages,
)
from recipex.services.recipes.terms import expand_search_terms


__all__ = [
    "DiscoveryResult",
    "FallbackStage",
    "IntentOutcome",
    "RecipeAggregator",
    "RecipeDiscoveryService",
    "RecipeRef",
    "SearchIntentExtractor",
    "StageResult",
    "classify_recipe_id",
    "expand_search_terms",
    "filter_by_cuisine",
    "run_fallback_stages",
]
