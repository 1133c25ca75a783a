"""Pydantic schemas for reading progress API request/response validation."""

from datetime import datetime
from typing import Annotated, Literal

from pydantic import Field

from novelfeed.infrastructure.common.schemas import CamelModel


class ReadingProgress(CamelModel):
    """Schema for a stored reading progress record."""

    id: int
    user_id: int
    novel_id: int
    chapter_id: int
    progress: int = Field(..., ge=0, le=100, description="Completion percentage")
    last_read_at: datetime


class NovelInProgress(CamelModel):
    """Novel joined onto a progress record, with its resolved author name."""

    id: int
    title: str
    description: str | None = None
    cover_image: str | None = None
    author_id: int
    status: str
    created_at: datetime
    updated_at: datetime
    author_name: str


class ChapterInProgress(CamelModel):
    """Chapter joined onto a progress record."""

    id: int
    novel_id: int
    chapter_number: int
    title: str
    status: str
    created_at: datetime
    updated_at: datetime


class EnrichedReadingProgress(ReadingProgress):
    """Progress record with its novel and chapter joined in."""

    enrichment: Literal["full"] = "full"
    novel: NovelInProgress | None = None
    chapter: ChapterInProgress | None = None


class FallbackReadingProgress(ReadingProgress):
    """Progress record that could not be enriched."""

    enrichment: Literal["fallback"] = "fallback"
    fallback_reason: str


ReadingProgressItem = Annotated[
    EnrichedReadingProgress | FallbackReadingProgress,
    Field(discriminator="enrichment"),
]


class RecordProgressRequest(CamelModel):
    """Schema for recording the chapter a user is on."""

    novel_id: int = Field(..., ge=1, description="Novel being read")
    chapter_id: int = Field(..., ge=1, description="Chapter the user is on")
    progress: int = Field(
        0, ge=0, le=100, description="Completion percentage reported by the reader"
    )
