"""Recipe id classification.

Ids are namespaced by provider: ``spoon-<digits>`` belongs to Spoonacular
and every other id is passed to TheMealDB untouched.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from recipex.mappers.recipe import SPOONACULAR_ID_PREFIX
from recipex.schemas.enums import RecipeProvider


_NUMERIC_ID = re.compile(r"[0-9]+")


@dataclass(frozen=True, slots=True)
class RecipeRef:
    """A unified recipe id split into its provider and provider-native id."""

    provider: RecipeProvider
    raw_id: str

    @property
    def is_well_formed(self) -> bool:
        """Spoonacular ids must be numeric; TheMealDB ids are opaque."""
        if self.provider is RecipeProvider.SPOONACULAR:
            return _NUMERIC_ID.fullmatch(self.raw_id) is not None
        return bool(self.raw_id)


def classify_recipe_id(recipe_id: str) -> RecipeRef:
    """Route a unified recipe id to the provider that owns it."""
    if recipe_id.startswith(SPOONACULAR_ID_PREFIX):
        return RecipeRef(
            provider=RecipeProvider.SPOONACULAR,
            raw_id=recipe_id.removeprefix(SPOONACULAR_ID_PREFIX),
        )
    return RecipeRef(provider=RecipeProvider.THEMEALDB, raw_id=recipe_id)
