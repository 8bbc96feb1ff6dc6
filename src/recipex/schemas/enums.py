"""Enumeration types shared across the API schemas and services."""

from __future__ import annotations

from enum import StrEnum


class RecipeProvider(StrEnum):
    """Third-party recipe databases the service can route to."""

    SPOONACULAR = "spoonacular"
    THEMEALDB = "themealdb"


class Difficulty(StrEnum):
    """Difficulty bucket derived from a recipe's ready time."""

    EASY = "easy"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class AnalysisMode(StrEnum):
    """Whether an LLM-backed response came from the live model or demo data."""

    LIVE = "live"
    DEMO = "demo"


class ResultProvider(StrEnum):
    """Who produced an LLM-backed response."""

    GROQ = "groq"
    DEMO = "demo"


class HealthStatus(StrEnum):
    """Liveness states reported by the health endpoint."""

    HEALTHY = "healthy"
    DEGRADED = "degraded"
