"""Pydantic schemas for the latest-updates feed."""

from datetime import datetime

from pydantic import Field

from novelfeed.infrastructure.common.schemas import CamelModel


class FeedWork(CamelModel):
    """Novel summary at the head of a feed entry."""

    id: int
    title: str
    author_username: str | None = None
    cover_image: str | None = None


class FeedChapter(CamelModel):
    """Chapter listed under a feed entry."""

    id: int
    title: str
    chapter_number: int
    created_at: datetime
    updated_at: datetime


class FeedEntry(CamelModel):
    """One novel with its recently updated chapters, highest chapter number first."""

    work: FeedWork
    chapters: list[FeedChapter] = Field(default_factory=list)
