from .progress_enricher import EnrichmentResult, ProgressEnricher

__all__ = [
    "EnrichmentResult",
    "ProgressEnricher",
]
