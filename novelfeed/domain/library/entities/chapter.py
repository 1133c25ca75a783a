from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum

from novelfeed.domain.common.exceptions import DomainError, ValidationError
from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId


class ChapterStatus(StrEnum):
    """Publication status of a chapter."""

    DRAFT = "draft"
    PUBLISHED = "published"


@dataclass(frozen=True)
class Chapter:
    """
    Chapter entity.

    One numbered installment of a novel. ``chapter_number`` is unique per
    novel but not necessarily contiguous, and is the only ordering key
    within a novel.
    """

    # Identity
    id: ChapterId
    novel_id: NovelId

    # Content
    chapter_number: int
    title: str
    status: ChapterStatus

    # Timestamps
    created_at: datetime
    updated_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if self.chapter_number < 0:
            raise DomainError("Chapter number cannot be negative")

        if not isinstance(self.status, ChapterStatus):
            try:
                # Rows coming from the store carry the plain string value
                object.__setattr__(self, "status", ChapterStatus(self.status))
            except ValueError:
                raise ValidationError(
                    "Unknown chapter status", field="status", value=self.status
                ) from None

    # Query methods
    def is_published(self) -> bool:
        """Check if the chapter is visible to readers."""
        return self.status is ChapterStatus.PUBLISHED
