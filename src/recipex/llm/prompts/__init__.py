"""LLM prompt templates."""

from recipex.llm.prompts.base import BasePrompt
from recipex.llm.prompts.scan_analysis import (
    DetectedDish,
    DetectedIngredient,
    ScanAnalysisPrompt,
    ScanAnalysisResult,
    SuggestedRecipe,
)
from recipex.llm.prompts.search_intent import SearchIntent, SearchIntentPrompt
from recipex.llm.prompts.shopping_list import (
    ShoppingItem,
    ShoppingListPrompt,
    ShoppingListResult,
)


__all__ = [
    "BasePrompt",
    "DetectedDish",
    "DetectedIngredient",
    "ScanAnalysisPrompt",
    "ScanAnalysisResult",
    "SearchIntent",
    "SearchIntentPrompt",
    "ShoppingItem",
    "ShoppingListPrompt",
    "ShoppingListResult",
    "SuggestedRecipe",
]
