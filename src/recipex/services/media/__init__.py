"""Media enrichment for free-text recipe names."""

from recipex.services.media.service import MediaEnricher


__all__ = ["MediaEnricher"]
