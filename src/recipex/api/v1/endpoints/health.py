"""Health check endpoint for load balancers and uptime checks."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from recipex.api.dependencies import get_request_id, get_settings_dep
from recipex.core.config import Settings
from recipex.schemas.enums import HealthStatus
from recipex.schemas.health import HealthCheckResponse, ProviderStatus


router = APIRouter(tags=["Health"])


@router.get(
    "/health",
    response_model=HealthCheckResponse,
    summary="Liveness probe",
    description="Reports whether the service is up and which upstreams run live.",
)
async def health_check(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings_dep)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> HealthCheckResponse:
    """Check if the service is alive.

    Does not call any upstream. The status is ``degraded`` when the recipe
    services failed to start.
    """
    services_ready = getattr(request.app.state, "aggregator", None) is not None
    return HealthCheckResponse(
        status=HealthStatus.HEALTHY if services_ready else HealthStatus.DEGRADED,
        timestamp=datetime.now(UTC),
        version=settings.app.version,
        environment=settings.APP_ENV,
        providers=ProviderStatus(
            spoonacular=settings.spoonacular_configured,
            groq=settings.groq_configured,
        ),
        request_id=request_id,
    )
