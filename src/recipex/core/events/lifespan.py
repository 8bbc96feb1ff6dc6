"""Application lifespan event handlers.

Startup builds the provider clients, the optional Groq client and the
services layered on top of them, and stores the services on ``app.state``.
Shutdown closes every HTTP client that was opened.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from recipex.clients.spoonacular import SpoonacularClient
from recipex.clients.themealdb import TheMealDBClient
from recipex.core.config import Settings, get_settings
from recipex.llm.client.groq import GroqClient
from recipex.observability.logging import get_logger, setup_logging
from recipex.services.analysis import ScanAnalysisService
from recipex.services.media import MediaEnricher
from recipex.services.recipes import (
    RecipeAggregator,
    RecipeDiscoveryService,
    SearchIntentExtractor,
)
from recipex.services.shopping import ShoppingListService


if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from fastapi import FastAPI


logger = get_logger(__name__)


def _build_groq_client(settings: Settings) -> GroqClient | None:
    """Groq client, or None when LLM features are off or the key is unusable."""
    if not settings.llm.enabled:
        logger.info("LLM features disabled by configuration")
        return None
    if not settings.groq_configured:
        logger.warning("GROQ_API_KEY missing or placeholder, LLM features use demo mode")
        return None

    groq = settings.llm.groq
    return GroqClient(
        api_key=settings.GROQ_API_KEY,
        model=groq.text_model,
        base_url=groq.url,
        timeout=groq.timeout,
        max_retries=groq.max_retries,
        requests_per_minute=groq.requests_per_minute,
    )


async def _startup(app: FastAPI, settings: Settings) -> None:
    """Initialize all application services during startup."""
    setup_logging(
        log_level=settings.logging.level,
        log_format=settings.logging.format,
        is_development=settings.is_development,
    )
    logger.info(
        "Starting application",
        app_name=settings.app.name,
        environment=settings.APP_ENV,
        debug=settings.app.debug,
    )

    providers = settings.providers
    mealdb = TheMealDBClient(
        base_url=providers.themealdb.url,
        timeout=providers.themealdb.timeout,
    )
    spoonacular = SpoonacularClient(
        api_key=settings.SPOONACULAR_API_KEY,
        base_url=providers.spoonacular.url,
        timeout=providers.spoonacular.timeout,
    )
    await mealdb.initialize()
    await spoonacular.initialize()
    if not spoonacular.is_configured:
        logger.warning("SPOONACULAR_API_KEY missing or placeholder, using TheMealDB only")

    groq_client = _build_groq_client(settings)
    if groq_client is not None:
        await groq_client.initialize()

    aggregator = RecipeAggregator(primary=spoonacular, secondary=mealdb)
    enricher = MediaEnricher(aggregator)

    app.state.provider_clients = [spoonacular, mealdb]
    app.state.llm_client = groq_client
    app.state.aggregator = aggregator
    app.state.media_enricher = enricher
    app.state.discovery_service = RecipeDiscoveryService(
        aggregator,
        SearchIntentExtractor(groq_client, model=settings.llm.groq.text_model),
    )
    app.state.analysis_service = ScanAnalysisService(
        groq_client, enricher, model=settings.llm.groq.vision_model
    )
    app.state.shopping_service = ShoppingListService(
        groq_client, model=settings.llm.groq.text_model
    )

    logger.info(
        "Application startup complete",
        spoonacular=spoonacular.is_configured,
        groq=groq_client is not None,
    )


async def _shutdown(app: FastAPI) -> None:
    """Close every client opened during startup."""
    logger.info("Shutting down application")

    llm_client: GroqClient | None = getattr(app.state, "llm_client", None)
    if llm_client is not None:
        await llm_client.shutdown()

    for client in getattr(app.state, "provider_clients", []):
        await client.shutdown()

    app.state.aggregator = None
    logger.info("Application shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan events.

    Uses the settings stored on ``app.state`` by the factory, falling back
    to ``get_settings()``.
    """
    settings: Settings = getattr(app.state, "settings", None) or get_settings()
    await _startup(app, settings)
    try:
        yield
    finally:
        await _shutdown(app)
