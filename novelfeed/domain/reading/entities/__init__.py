from .enriched_progress import EnrichedProgress, EnrichmentFallback
from .reading_progress import ReadingProgress

__all__ = [
    "EnrichedProgress",
    "EnrichmentFallback",
    "ReadingProgress",
]
