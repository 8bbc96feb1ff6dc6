"""FastAPI dependencies for service access.

Services are built once in the application lifespan and stored on
``app.state``; these dependencies hand them to route handlers.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import HTTPException, Request, status


if TYPE_CHECKING:
    from recipex.core.config import Settings
    from recipex.services.analysis import ScanAnalysisService
    from recipex.services.media import MediaEnricher
    from recipex.services.recipes import RecipeAggregator, RecipeDiscoveryService
    from recipex.services.shopping import ShoppingListService


def _require_state(request: Request, name: str, label: str) -> Any:
    service = getattr(request.app.state, name, None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} not available",
        )
    return service


async def get_settings_dep(request: Request) -> Settings:
    """Settings the application was created with."""
    settings: Settings = _require_state(request, "settings", "Settings")
    return settings


async def get_aggregator(request: Request) -> RecipeAggregator:
    """Get the unified recipe aggregator.

    Raises:
        HTTPException: 503 if the aggregator is not initialized.
    """
    aggregator: RecipeAggregator = _require_state(
        request, "aggregator", "Recipe search"
    )
    return aggregator


async def get_discovery_service(request: Request) -> RecipeDiscoveryService:
    """Get the free-text discovery service."""
    service: RecipeDiscoveryService = _require_state(
        request, "discovery_service", "Recipe discovery"
    )
    return service


async def get_media_enricher(request: Request) -> MediaEnricher:
    enricher: MediaEnricher = _require_state(
        request, "media_enricher", "Media enrichment"
    )
    return enricher


async def get_analysis_service(request: Request) -> ScanAnalysisService:
    """Get the pantry photo analysis service."""
    service: ScanAnalysisService = _require_state(
        request, "analysis_service", "Pantry analysis"
    )
    return service


async def get_shopping_service(request: Request) -> ShoppingListService:
    """Get the shopping list service."""
    service: ShoppingListService = _require_state(
        request, "shopping_service", "Shopping list generation"
    )
    return service


def get_request_id(request: Request) -> str | None:
    """Request id assigned by ``RequestIDMiddleware``, if it ran."""
    return getattr(request.state, "request_id", None)
