"""Protocol for the store the read model pulls its raw data from."""

from collections.abc import Sequence
from typing import Protocol

from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId, UserId
from novelfeed.domain.feed.entities.feed import FeedRow
from novelfeed.domain.library.entities.author import Author
from novelfeed.domain.library.entities.chapter import Chapter
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress


class StoreProtocol(Protocol):
    """
    Store operations consumed by the feed and progress read models.

    Any call may raise StoreError. Lookups by id return None when the entity
    does not exist.
    """

    def get_latest_chapters(self, limit: int) -> Sequence[FeedRow]:
        """Recent chapter updates, ordered by their novel's latest activity, newest first."""
        ...

    def get_recently_read(self, user_id: UserId, limit: int) -> Sequence[ReadingProgress]:
        """The user's progress records, one per novel, most recent first."""
        ...

    def get_novel(self, novel_id: NovelId) -> Novel | None: ...

    def get_user(self, user_id: UserId) -> Author | None: ...

    def get_chapter(self, chapter_id: ChapterId) -> Chapter | None: ...

    def get_chapters_by_novel(self, novel_id: NovelId) -> Sequence[Chapter]:
        """Every chapter of the novel, in all statuses."""
        ...

    def get_reading_progress(self, user_id: UserId, novel_id: NovelId) -> ReadingProgress | None:
        ...

    def save_reading_progress(
        self, user_id: UserId, novel_id: NovelId, chapter_id: ChapterId, progress: int
    ) -> ReadingProgress:
        """Create or move the user's single progress record for the novel."""
        ...
