"""
SQLAlchemy-backed store for the feed and reading progress read models.

Returns domain entities instead of ORM models and translates every
SQLAlchemy failure into StoreError so callers deal with a single error type.
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId, UserId
from novelfeed.domain.feed.entities.feed import FeedRow
from novelfeed.domain.library.entities.author import Author
from novelfeed.domain.library.entities.chapter import Chapter, ChapterStatus
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress
from novelfeed.exceptions import StoreError
from novelfeed.infrastructure.store.mappers import (
    AuthorMapper,
    ChapterMapper,
    FeedRowMapper,
    NovelMapper,
    ReadingProgressMapper,
)
from novelfeed.models import Chapter as ChapterORM
from novelfeed.models import Novel as NovelORM
from novelfeed.models import ReadingProgress as ReadingProgressORM
from novelfeed.models import User as UserORM

logger = logging.getLogger(__name__)

DEFAULT_RECENTLY_READ_LIMIT = 10


class SqlAlchemyStore:
    """Store implementation over the relational schema in novelfeed.models."""

    def __init__(self, db: Session) -> None:
        """
        Initialize store.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db
        self.novel_mapper = NovelMapper()
        self.chapter_mapper = ChapterMapper()
        self.author_mapper = AuthorMapper()
        self.progress_mapper = ReadingProgressMapper()
        self.feed_row_mapper = FeedRowMapper()

    @contextmanager
    def _translate_errors(self, operation: str) -> Iterator[None]:
        try:
            yield
        except SQLAlchemyError as e:
            logger.error(f"Store operation {operation} failed: {e!s}", exc_info=True)
            raise StoreError(f"Store operation '{operation}' failed", operation=operation) from e

    def get_latest_chapters(self, limit: int) -> list[FeedRow]:
        """
        Get recently updated published chapters with their novel and author.

        Rows are ordered by the owning novel's most recent published update,
        newest first, then by the chapter's own update time. ``limit`` caps
        the number of rows, not the number of novels.

        Args:
            limit: Maximum number of chapter rows to return

        Returns:
            List of FeedRow ordered by novel recency
        """
        novel_activity = (
            func.max(ChapterORM.updated_at)
            .over(partition_by=ChapterORM.novel_id)
            .label("novel_activity")
        )
        ranked = (
            select(
                NovelORM.id.label("novel_id"),
                NovelORM.title.label("novel_title"),
                NovelORM.cover_image.label("novel_cover_image"),
                UserORM.username.label("author_username"),
                ChapterORM.id.label("chapter_id"),
                ChapterORM.title.label("chapter_title"),
                ChapterORM.chapter_number.label("chapter_number"),
                ChapterORM.created_at.label("chapter_created_at"),
                ChapterORM.updated_at.label("chapter_updated_at"),
                novel_activity,
            )
            .select_from(ChapterORM)
            .join(NovelORM, NovelORM.id == ChapterORM.novel_id)
            .outerjoin(UserORM, UserORM.id == NovelORM.author_id)
            .where(ChapterORM.status == ChapterStatus.PUBLISHED.value)
            .subquery()
        )
        stmt = (
            select(ranked)
            .order_by(
                ranked.c.novel_activity.desc(),
                ranked.c.novel_id.desc(),
                ranked.c.chapter_updated_at.desc(),
                ranked.c.chapter_id.desc(),
            )
            .limit(limit)
        )

        with self._translate_errors("get_latest_chapters"):
            rows = self.db.execute(stmt).all()

        logger.debug(f"Found {len(rows)} latest chapters (limit={limit})")
        return [self.feed_row_mapper.to_domain(row) for row in rows]

    def get_recently_read(self, user_id: UserId, limit: int) -> list[ReadingProgress]:
        """
        Get the user's most recent progress record per novel, newest first.

        Args:
            user_id: User whose history to read
            limit: Maximum number of records; non-positive values fall back to 10

        Returns:
            List of ReadingProgress with at most one record per novel
        """
        if limit <= 0:
            logger.warning(
                f"Invalid recently-read limit {limit}, using {DEFAULT_RECENTLY_READ_LIMIT}"
            )
            limit = DEFAULT_RECENTLY_READ_LIMIT

        stmt = (
            select(ReadingProgressORM)
            .where(ReadingProgressORM.user_id == user_id.value)
            .order_by(ReadingProgressORM.last_read_at.desc(), ReadingProgressORM.id.desc())
        )
        with self._translate_errors("get_recently_read"):
            orm_models = self.db.execute(stmt).scalars().all()

        latest_per_novel: dict[int, ReadingProgressORM] = {}
        for orm_model in orm_models:
            latest_per_novel.setdefault(orm_model.novel_id, orm_model)

        return [
            self.progress_mapper.to_domain(orm_model)
            for orm_model in list(latest_per_novel.values())[:limit]
        ]

    def get_novel(self, novel_id: NovelId) -> Novel | None:
        with self._translate_errors("get_novel"):
            orm_model = self.db.get(NovelORM, novel_id.value)
        return self.novel_mapper.to_domain(orm_model) if orm_model else None

    def get_user(self, user_id: UserId) -> Author | None:
        with self._translate_errors("get_user"):
            orm_model = self.db.get(UserORM, user_id.value)
        return self.author_mapper.to_domain(orm_model) if orm_model else None

    def get_chapter(self, chapter_id: ChapterId) -> Chapter | None:
        with self._translate_errors("get_chapter"):
            orm_model = self.db.get(ChapterORM, chapter_id.value)
        return self.chapter_mapper.to_domain(orm_model) if orm_model else None

    def get_chapters_by_novel(self, novel_id: NovelId) -> list[Chapter]:
        """Get every chapter of a novel in all statuses, ordered by chapter number."""
        stmt = (
            select(ChapterORM)
            .where(ChapterORM.novel_id == novel_id.value)
            .order_by(ChapterORM.chapter_number)
        )
        with self._translate_errors("get_chapters_by_novel"):
            orm_models = self.db.execute(stmt).scalars().all()
        return [self.chapter_mapper.to_domain(orm_model) for orm_model in orm_models]

    def get_reading_progress(self, user_id: UserId, novel_id: NovelId) -> ReadingProgress | None:
        """Get the user's latest progress record for one novel."""
        with self._translate_errors("get_reading_progress"):
            orm_model = self._find_progress(user_id, novel_id)
        return self.progress_mapper.to_domain(orm_model) if orm_model else None

    def save_reading_progress(
        self, user_id: UserId, novel_id: NovelId, chapter_id: ChapterId, progress: int
    ) -> ReadingProgress:
        """
        Record that the user is now on ``chapter_id`` of ``novel_id``.

        Moves the existing record for the (user, novel) pair if there is one,
        otherwise creates it. ``last_read_at`` is set to now either way.
        """
        now = datetime.now(UTC)
        try:
            orm_model = self._find_progress(user_id, novel_id)
            if orm_model:
                orm_model.chapter_id = chapter_id.value
                orm_model.progress = progress
                orm_model.last_read_at = now
                logger.info(f"Updated reading progress {orm_model.id} for user {user_id.value}")
            else:
                orm_model = ReadingProgressORM(
                    user_id=user_id.value,
                    novel_id=novel_id.value,
                    chapter_id=chapter_id.value,
                    progress=progress,
                    last_read_at=now,
                )
                self.db.add(orm_model)
                logger.info(
                    f"Created reading progress for user {user_id.value}, novel {novel_id.value}"
                )
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to save reading progress: {e!s}", exc_info=True)
            raise StoreError(
                "Store operation 'save_reading_progress' failed",
                operation="save_reading_progress",
            ) from e

        return self.progress_mapper.to_domain(orm_model)

    def _find_progress(self, user_id: UserId, novel_id: NovelId) -> ReadingProgressORM | None:
        stmt = (
            select(ReadingProgressORM)
            .where(ReadingProgressORM.user_id == user_id.value)
            .where(ReadingProgressORM.novel_id == novel_id.value)
            .order_by(ReadingProgressORM.last_read_at.desc(), ReadingProgressORM.id.desc())
            .limit(1)
        )
        return self.db.execute(stmt).scalar_one_or_none()
