"""Shared test fixtures for the Recipex API tests."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from recipex.core.config import get_settings
from recipex.schemas.recipe import RecipeSummary


if TYPE_CHECKING:
    from collections.abc import Callable, Generator
    from typing import Any


@pytest.fixture(autouse=True)
def _clear_settings_cache() -> Generator[None]:
    """Settings are cached per process; tests that touch env vars need a fresh copy."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def make_summary() -> Callable[..., RecipeSummary]:
    """Factory for unified recipe summaries."""

    def _make(recipe_id: str = "52772", **overrides: Any) -> RecipeSummary:
        fields: dict[str, Any] = {
            "id": recipe_id,
            "title": f"Recipe {recipe_id}",
            "cuisine": "Italian",
            "category": "Pasta",
            "thumbnail_url": f"https://img.example.com/{recipe_id}.jpg",
            "video_url": f"https://video.example.com/{recipe_id}",
        }
        fields.update(overrides)
        return RecipeSummary(**fields)

    return _make
