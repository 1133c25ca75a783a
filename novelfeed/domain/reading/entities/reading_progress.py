from dataclasses import dataclass, replace
from datetime import datetime

from novelfeed.domain.common.exceptions import ValidationError
from novelfeed.domain.common.value_objects.ids import (
    ChapterId,
    NovelId,
    ReadingProgressId,
    UserId,
)


@dataclass(frozen=True)
class ReadingProgress:
    """
    A user's last-read position within a novel.

    There is one logical record per (user, novel) pair; ``chapter_id`` is the
    last chapter the user touched and ``progress`` is the completion
    percentage that was stored alongside it.
    """

    # Identity
    id: ReadingProgressId
    user_id: UserId
    novel_id: NovelId

    # Position
    chapter_id: ChapterId
    progress: int

    # Timestamps
    last_read_at: datetime

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not 0 <= self.progress <= 100:
            raise ValidationError(
                "Progress must be between 0 and 100", field="progress", value=self.progress
            )

    def with_progress(self, progress: int) -> "ReadingProgress":
        """Return a copy carrying a recomputed percentage."""
        return replace(self, progress=progress)
