"""Application factory for creating FastAPI instances.

This module provides the create_app factory function that:
- Configures the FastAPI application from settings
- Sets up the middleware stack in the correct order
- Registers exception handlers
- Mounts the health router at the root and the API router under its prefix
"""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse

from recipex.api.v1.endpoints import health
from recipex.api.v1.router import router as api_router
from recipex.core.config import Settings, get_settings
from recipex.core.events.lifespan import lifespan
from recipex.core.exceptions import setup_exception_handlers
from recipex.core.middleware import (
    LoggingMiddleware,
    RequestIDMiddleware,
    SecurityHeadersMiddleware,
    TimingMiddleware,
)
from recipex.core.middleware.request_id import REQUEST_ID_HEADER
from recipex.core.middleware.timing import PROCESS_TIME_HEADER


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        settings: Optional settings override. If not provided, uses get_settings().

    Returns:
        Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    app = FastAPI(
        title=settings.app.name,
        version=settings.app.version,
        description=(
            "Recipe discovery across Spoonacular and TheMealDB, with pantry "
            "photo analysis and shopping lists powered by Groq"
        ),
        lifespan=lifespan,
        default_response_class=ORJSONResponse,
        docs_url="/docs" if settings.is_non_production else None,
        redoc_url="/redoc" if settings.is_non_production else None,
        openapi_url="/openapi.json" if settings.is_non_production else None,
        debug=settings.app.debug,
    )

    app.state.settings = settings

    setup_exception_handlers(app)
    _setup_middleware(app, settings)
    _setup_routers(app, settings)

    return app


def _setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Configure middleware stack.

    Middleware is executed in reverse order of addition. Order from the
    request's perspective:
    1. SecurityHeadersMiddleware
    2. RequestIDMiddleware
    3. TimingMiddleware
    4. LoggingMiddleware
    5. GZipMiddleware
    6. CORSMiddleware
    """
    origins = settings.api.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # No allowlist: every origin is echoed back
        allow_origin_regex=None if origins else ".*",
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=[REQUEST_ID_HEADER, PROCESS_TIME_HEADER],
    )

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(RequestIDMiddleware)
    app.add_middleware(SecurityHeadersMiddleware, api_prefix=settings.api.prefix)


def _setup_routers(app: FastAPI, settings: Settings) -> None:
    # Root health check (no prefix, for load balancers)
    app.include_router(health.router)
    app.include_router(api_router, prefix=settings.api.prefix)
