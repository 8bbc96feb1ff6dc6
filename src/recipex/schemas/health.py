"""Health check schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import Field

from recipex.schemas.base import APIResponse
from recipex.schemas.enums import HealthStatus


class ProviderStatus(APIResponse):
    """Which optional upstreams are configured for live use."""

    spoonacular: bool = Field(..., description="Primary recipe provider key is usable")
    groq: bool = Field(..., description="LLM features run live")


class HealthCheckResponse(APIResponse):
    """Liveness response for load balancers and uptime checks."""

    status: HealthStatus = Field(..., description="Overall service health status")
    timestamp: datetime = Field(..., description="Health check timestamp")
    version: str = Field(..., description="Service version")
    environment: str = Field(..., description="Deployment environment")
    providers: ProviderStatus = Field(..., description="Configured upstreams")
    request_id: str | None = None
