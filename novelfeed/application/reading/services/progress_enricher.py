"""
Reading progress enrichment.

Joins raw progress records with their novel, chapter and author so the
reader's history and "continue reading" card can be rendered. Every record is
enriched on its own: a failure while joining one record is caught at that
record's boundary, logged, and reported as a fallback carrying the raw record.
"""

from collections.abc import Sequence

import structlog

from novelfeed.application.common.result import Failure, Result, Success
from novelfeed.application.protocols.store import StoreProtocol
from novelfeed.domain.common.value_objects.ids import UserId
from novelfeed.domain.library.entities.author import UNKNOWN_AUTHOR_NAME
from novelfeed.domain.library.entities.chapter import Chapter
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.enriched_progress import (
    EnrichedProgress,
    EnrichmentFallback,
)
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress
from novelfeed.domain.reading.services.progress_percent_calculator import (
    ProgressPercentCalculator,
)
from novelfeed.exceptions import StoreError

EnrichmentResult = Result[EnrichedProgress, EnrichmentFallback]


class ProgressEnricher:
    """Application service joining progress records with store data."""

    def __init__(
        self,
        store: StoreProtocol,
        percent_calculator: ProgressPercentCalculator,
        unknown_author_name: str = UNKNOWN_AUTHOR_NAME,
        observer: structlog.stdlib.BoundLogger | None = None,
    ) -> None:
        """
        Initialize enricher.

        Args:
            store: Store the related entities are fetched from
            percent_calculator: Domain service used by the latest-record path
            unknown_author_name: Name used when a novel's author cannot be resolved
            observer: Logger receiving enrichment events
        """
        self.store = store
        self.percent_calculator = percent_calculator
        self.unknown_author_name = unknown_author_name
        self._observer = observer or structlog.get_logger(__name__)

    def enrich_many(self, records: Sequence[ReadingProgress]) -> list[EnrichmentResult]:
        """
        Enrich a batch of records, keeping the stored percentages.

        Records are joined one after another. The output has exactly one
        result per input record, in input order, whatever the store does.
        """
        results = [self.enrich(record) for record in records]
        self._observer.debug(
            "progress_batch_enriched",
            record_count=len(results),
            fallback_count=sum(1 for result in results if result.is_failure),
        )
        return results

    def enrich(self, record: ReadingProgress) -> EnrichmentResult:
        """Join one record with its novel, chapter and author."""
        try:
            novel = self.store.get_novel(record.novel_id)
            chapter = self.store.get_chapter(record.chapter_id)
            return Success(self._assemble(record, novel, chapter))
        except Exception as e:
            return Failure(self._fallback(record, e))

    def enrich_latest(self, user_id: UserId) -> EnrichmentResult | None:
        """
        Enrich the user's most recent record and recompute its percentage.

        The stored percentage is replaced by the chapter's position among the
        novel's published chapters. Store errors while fetching the record
        itself propagate; errors after that degrade to a fallback.

        Returns:
            None when the user has no progress at all
        """
        records = self.store.get_recently_read(user_id, 1)
        if not records:
            self._observer.debug("latest_progress_missing", user_id=user_id.value)
            return None

        record = records[0]
        try:
            novel = self.store.get_novel(record.novel_id)
            chapter = self.store.get_chapter(record.chapter_id)
            chapters = self.store.get_chapters_by_novel(record.novel_id)
            percent = self.percent_calculator.percent_complete(chapter, chapters)
            return Success(self._assemble(record.with_progress(percent), novel, chapter))
        except Exception as e:
            return Failure(self._fallback(record, e))

    def _assemble(
        self, record: ReadingProgress, novel: Novel | None, chapter: Chapter | None
    ) -> EnrichedProgress:
        return EnrichedProgress(
            record=record,
            novel=novel,
            author_name=self._resolve_author_name(novel),
            chapter=chapter,
        )

    def _resolve_author_name(self, novel: Novel | None) -> str:
        """Look up the novel's author, falling back to the sentinel on a miss or store error."""
        if novel is None:
            return self.unknown_author_name
        try:
            author = self.store.get_user(novel.author_id)
        except StoreError as e:
            self._observer.warning(
                "author_lookup_failed",
                novel_id=novel.id.value,
                author_id=novel.author_id.value,
                error=str(e),
            )
            return self.unknown_author_name
        if author is None:
            return self.unknown_author_name
        return author.username.strip() or self.unknown_author_name

    def _fallback(self, record: ReadingProgress, error: Exception) -> EnrichmentFallback:
        self._observer.error(
            "progress_enrichment_failed",
            progress_id=record.id.value,
            novel_id=record.novel_id.value,
            chapter_id=record.chapter_id.value,
            exc_info=error,
        )
        return EnrichmentFallback(record=record, reason=str(error) or type(error).__name__)
