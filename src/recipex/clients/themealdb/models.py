"""TheMealDB payload schemas.

TheMealDB spreads ingredients across twenty numbered column pairs
(``strIngredient1``..``strIngredient20`` / ``strMeasure1``..``strMeasure20``);
they are folded into ``ingredient_pairs`` at parse time.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field, model_validator

from recipex.schemas.base import DownstreamResponse


INGREDIENT_SLOTS = 20


class MealDBMeal(DownstreamResponse):
    """A meal from ``search.php`` or ``lookup.php``."""

    id_meal: str
    str_meal: str
    str_area: str | None = None
    str_category: str | None = None
    str_meal_thumb: str | None = None
    str_instructions: str | None = None
    str_source: str | None = None
    ingredient_pairs: list[tuple[str, str]] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _collect_ingredient_slots(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "ingredientPairs" in data:
            return data
        pairs = [
            (
                str(data.get(f"strIngredient{slot}") or "").strip(),
                str(data.get(f"strMeasure{slot}") or "").strip(),
            )
            for slot in range(1, INGREDIENT_SLOTS + 1)
        ]
        return {**data, "ingredientPairs": pairs}


class MealDBMealList(DownstreamResponse):
    """Envelope for meal lookups; ``meals`` is null when nothing matched."""

    meals: list[MealDBMeal] | None = None


class MealDBArea(DownstreamResponse):
    """Entry of ``list.php?a=list``."""

    str_area: str | None = None


class MealDBAreaList(DownstreamResponse):
    """Envelope for the area (cuisine) listing."""

    meals: list[MealDBArea] | None = None
