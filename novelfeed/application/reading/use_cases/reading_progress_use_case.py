"""
Reading progress use cases.

Serves the reader's history list, the "continue reading" record and the
per-novel progress record, and records progress as the reader moves on.
"""

from novelfeed.application.protocols.store import StoreProtocol
from novelfeed.application.reading.services.progress_enricher import (
    EnrichmentResult,
    ProgressEnricher,
)
from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId, UserId
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress
from novelfeed.exceptions import NotFoundError, ReadingProgressNotFoundError


class ReadingProgressUseCase:
    """Use case for reading and recording a user's progress."""

    def __init__(self, store: StoreProtocol, enricher: ProgressEnricher) -> None:
        """
        Initialize use case with dependencies.

        Args:
            store: Store protocol implementation
            enricher: Application service joining records with novels and chapters
        """
        self.store = store
        self.enricher = enricher

    def get_recent(self, user_id: int, limit: int = 50) -> list[EnrichmentResult]:
        """
        Get the user's recently read novels, enriched for display.

        Stored percentages are returned as they are.

        Raises:
            StoreError: If the progress records themselves cannot be fetched
        """
        records = self.store.get_recently_read(UserId(user_id), limit)
        return self.enricher.enrich_many(records)

    def get_latest(self, user_id: int) -> EnrichmentResult | None:
        """
        Get the user's most recent record with a freshly computed percentage.

        Returns:
            None when the user has not read anything yet
        """
        return self.enricher.enrich_latest(UserId(user_id))

    def get_for_novel(self, user_id: int, novel_id: int) -> ReadingProgress:
        """
        Get the stored progress record for one novel.

        Raises:
            ReadingProgressNotFoundError: If the user has no progress for the novel
        """
        record = self.store.get_reading_progress(UserId(user_id), NovelId(novel_id))
        if record is None:
            raise ReadingProgressNotFoundError(novel_id)
        return record

    def record_progress(
        self, user_id: int, novel_id: int, chapter_id: int, progress: int
    ) -> ReadingProgress:
        """
        Record that the user is now reading a chapter.

        Raises:
            NotFoundError: If the chapter does not exist or belongs to another novel
        """
        chapter = self.store.get_chapter(ChapterId(chapter_id))
        if chapter is None or chapter.novel_id != NovelId(novel_id):
            raise NotFoundError(f"Chapter {chapter_id} not found in novel {novel_id}")

        return self.store.save_reading_progress(
            UserId(user_id), NovelId(novel_id), ChapterId(chapter_id), progress
        )
