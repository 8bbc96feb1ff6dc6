"""Pantry photo analysis."""

from recipex.services.analysis.service import ScanAnalysisService, normalize_suggestion


__all__ = ["ScanAnalysisService", "normalize_suggestion"]
