"""Unit tests for LLM prompt templates and their output schemas."""

from __future__ import annotations

import pytest

from recipex.llm.prompts import (
    ScanAnalysisPrompt,
    ScanAnalysisResult,
    SearchIntentPrompt,
    ShoppingItem,
    ShoppingListPrompt,
)
from tests.fixtures.llm_responses import SCAN_ANALYSIS_RESPONSE


pytestmark = pytest.mark.unit


class TestSearchIntentPrompt:
    """Tests for SearchIntentPrompt."""

    def test_format_returns_query(self) -> None:
        assert SearchIntentPrompt().format(query="vegan pad thai") == "vegan pad thai"

    def test_format_requires_query(self) -> None:
        with pytest.raises(ValueError, match="query"):
            SearchIntentPrompt().format()

    def test_options(self) -> None:
        prompt = SearchIntentPrompt()

        assert prompt.get_options() == {"temperature": 0.2, "max_tokens": 256}
        assert prompt.name == "SearchIntentPrompt"


class TestShoppingListPrompt:
    """Tests for ShoppingListPrompt and its schema."""

    def test_format(self) -> None:
        text = ShoppingListPrompt().format(
            recipe_names=["Curry", "Naan"], user_ingredients=["flour"]
        )

        assert text == "Recipes: Curry, Naan. User has: flour."

    def test_format_with_nothing(self) -> None:
        assert ShoppingListPrompt().format() == "Recipes: none. User has: nothing."

    def test_numbers_coerced_to_text(self) -> None:
        item = ShoppingItem.model_validate({"item": "eggs", "quantity": 12, "unit": None})

        assert item.quantity == "12"
        assert item.unit == ""


class TestScanAnalysisPrompt:
    """Tests for ScanAnalysisPrompt and its schema."""

    def test_format_with_filters(self) -> None:
        text = ScanAnalysisPrompt().format(
            cuisines=["Thai", "Indian"], diet="vegan", max_time=30, difficulty="easy"
        )

        assert text == (
            "Preferred cuisines: Thai, Indian; "
            "Filters: diet=vegan, maxTime=30, difficulty=easy."
        )

    def test_format_defaults(self) -> None:
        assert ScanAnalysisPrompt().format() == (
            "Preferred cuisines: any; "
            "Filters: diet=none, maxTime=any, difficulty=any."
        )

    def test_lenient_schema(self) -> None:
        content = SCAN_ANALYSIS_RESPONSE["choices"][0]["message"]["content"]

        result = ScanAnalysisResult.model_validate_json(content)

        recipe = result.recipes[0]
        assert recipe.match_percent == 92
        assert recipe.cooking_time_minutes == 15
        assert recipe.missing_ingredients == ["butter", " ", 3]
        assert result.detected_dish is not None
        assert result.detected_dish.is_food is True
