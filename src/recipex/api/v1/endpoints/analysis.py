"""Pantry photo analysis endpoint."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends

from recipex.api.dependencies import get_analysis_service, get_request_id
from recipex.core.exceptions import BadRequestError
from recipex.schemas.analysis import AnalyzeRequest, AnalyzeResponse
from recipex.services.analysis import ScanAnalysisService


router = APIRouter(tags=["Analysis"])


@router.post(
    "/analyze",
    response_model=AnalyzeResponse,
    summary="Analyze a pantry photo",
    description=(
        "Detects ingredients in a base64 image and suggests recipes with "
        "photo and video links. Falls back to demo results when Groq is "
        "not available."
    ),
    responses={400: {"description": "imageBase64 missing"}},
)
async def analyze_pantry(
    body: AnalyzeRequest,
    service: Annotated[ScanAnalysisService, Depends(get_analysis_service)],
    request_id: Annotated[str | None, Depends(get_request_id)],
) -> AnalyzeResponse:
    if not (body.image_base64 or "").strip():
        raise BadRequestError("imageBase64 is required")

    response = await service.analyze(body)
    return response.model_copy(update={"request_id": request_id})
