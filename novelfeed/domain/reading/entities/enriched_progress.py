"""Outcomes of joining a reading progress record with its novel, chapter and author."""

from dataclasses import dataclass

from novelfeed.domain.library.entities.chapter import Chapter
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress


@dataclass(frozen=True)
class EnrichedProgress:
    """
    Progress record joined with the entities needed to display it.

    ``novel`` and ``chapter`` are None when the store no longer has them.
    ``author_name`` is always set; it carries the unknown-author sentinel
    when the novel or its author could not be resolved.
    """

    record: ReadingProgress
    novel: Novel | None
    author_name: str
    chapter: Chapter | None


@dataclass(frozen=True)
class EnrichmentFallback:
    """The unenriched record, returned when enrichment raised."""

    record: ReadingProgress
    reason: str
