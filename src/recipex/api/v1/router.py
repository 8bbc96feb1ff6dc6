"""API router aggregating all endpoint routers.

Everything here is mounted under ``api.prefix`` (``/api`` by default); the
health check is mounted at the root by the application factory.
"""

from __future__ import annotations

from fastapi import APIRouter

from recipex.api.v1.endpoints import analysis, recipes, shopping


router = APIRouter()

router.include_router(recipes.router)
router.include_router(analysis.router)
router.include_router(shopping.router)
