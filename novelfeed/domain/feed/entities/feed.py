from dataclasses import dataclass
from datetime import datetime

from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId


@dataclass(frozen=True)
class FeedRow:
    """
    One recently updated chapter, as returned by the store.

    Rows arrive already ordered by their novel's most recent update, newest
    first, and carry denormalized novel and author fields.
    """

    novel_id: NovelId
    novel_title: str
    novel_cover_image: str | None
    author_username: str | None

    chapter_id: ChapterId
    chapter_title: str
    chapter_number: int
    chapter_created_at: datetime
    chapter_updated_at: datetime


@dataclass(frozen=True)
class FeedNovel:
    """Novel summary shown at the head of a feed entry."""

    id: NovelId
    title: str
    author_username: str | None
    cover_image: str | None


@dataclass(frozen=True)
class FeedChapter:
    """Chapter summary listed under a feed entry."""

    id: ChapterId
    title: str
    chapter_number: int
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class FeedEntry:
    """A novel with the chapters of one feed batch that belong to it, newest number first."""

    novel: FeedNovel
    chapters: tuple[FeedChapter, ...]
