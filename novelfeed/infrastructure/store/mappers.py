"""Mappers for ORM → domain conversion of store rows."""

import logging

from sqlalchemy import Row

from novelfeed.domain.common.value_objects.ids import (
    ChapterId,
    NovelId,
    ReadingProgressId,
    UserId,
)
from novelfeed.domain.feed.entities.feed import FeedRow
from novelfeed.domain.library.entities.author import Author
from novelfeed.domain.library.entities.chapter import Chapter
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress
from novelfeed.models import Chapter as ChapterORM
from novelfeed.models import Novel as NovelORM
from novelfeed.models import ReadingProgress as ReadingProgressORM
from novelfeed.models import User as UserORM

logger = logging.getLogger(__name__)


class NovelMapper:
    """Mapper for Novel ORM → Domain conversion."""

    def to_domain(self, orm_model: NovelORM) -> Novel:
        return Novel(
            id=NovelId(orm_model.id),
            author_id=UserId(orm_model.author_id),
            title=orm_model.title,
            description=orm_model.description,
            cover_image=orm_model.cover_image,
            status=orm_model.status,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )


class ChapterMapper:
    """Mapper for Chapter ORM → Domain conversion."""

    def to_domain(self, orm_model: ChapterORM) -> Chapter:
        return Chapter(
            id=ChapterId(orm_model.id),
            novel_id=NovelId(orm_model.novel_id),
            chapter_number=orm_model.chapter_number,
            title=orm_model.title,
            status=orm_model.status,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )


class AuthorMapper:
    """Mapper for User ORM → Author conversion. Only public fields cross over."""

    def to_domain(self, orm_model: UserORM) -> Author:
        return Author(id=UserId(orm_model.id), username=orm_model.username)


class ReadingProgressMapper:
    """
    Mapper for ReadingProgress ORM → Domain conversion.

    The progress column is whatever clients reported, so values outside
    0..100 are clamped instead of failing the user's whole history.
    """

    def to_domain(self, orm_model: ReadingProgressORM) -> ReadingProgress:
        progress = min(100, max(0, orm_model.progress))
        if progress != orm_model.progress:
            logger.warning(
                f"Clamped stored progress {orm_model.progress} to {progress} "
                f"for reading progress {orm_model.id}"
            )
        return ReadingProgress(
            id=ReadingProgressId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            novel_id=NovelId(orm_model.novel_id),
            chapter_id=ChapterId(orm_model.chapter_id),
            progress=progress,
            last_read_at=orm_model.last_read_at,
        )


class FeedRowMapper:
    """Mapper for the joined latest-chapters query → FeedRow."""

    def to_domain(self, row: Row) -> FeedRow:
        """
        Convert one result row of the latest-chapters query.

        The row carries the selected columns by label (novel_id, novel_title,
        ..., chapter_updated_at).
        """
        return FeedRow(
            novel_id=NovelId(row.novel_id),
            novel_title=row.novel_title,
            novel_cover_image=row.novel_cover_image,
            author_username=row.author_username,
            chapter_id=ChapterId(row.chapter_id),
            chapter_title=row.chapter_title,
            chapter_number=row.chapter_number,
            chapter_created_at=row.chapter_created_at,
            chapter_updated_at=row.chapter_updated_at,
        )
