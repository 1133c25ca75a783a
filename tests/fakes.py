"""In-memory store and entity builders for unit tests."""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta

from novelfeed.domain.common.value_objects.ids import (
    ChapterId,
    NovelId,
    ReadingProgressId,
    UserId,
)
from novelfeed.domain.feed.entities.feed import FeedRow
from novelfeed.domain.library.entities.author import Author
from novelfeed.domain.library.entities.chapter import Chapter, ChapterStatus
from novelfeed.domain.library.entities.novel import Novel
from novelfeed.domain.reading.entities.reading_progress import ReadingProgress
from novelfeed.exceptions import StoreError

BASE_TIME = datetime(2024, 3, 1, 12, 0, tzinfo=UTC)


def make_novel(novel_id: int, author_id: int = 100, title: str | None = None) -> Novel:
    return Novel(
        id=NovelId(novel_id),
        author_id=UserId(author_id),
        title=title or f"Novel {novel_id}",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
        status="published",
    )


def make_chapter(
    chapter_id: int,
    novel_id: int,
    chapter_number: int,
    status: ChapterStatus = ChapterStatus.PUBLISHED,
) -> Chapter:
    return Chapter(
        id=ChapterId(chapter_id),
        novel_id=NovelId(novel_id),
        chapter_number=chapter_number,
        title=f"Chapter {chapter_number}",
        status=status,
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


def make_progress(
    progress_id: int,
    novel_id: int,
    chapter_id: int,
    user_id: int = 1,
    progress: int = 0,
    minutes_ago: int = 0,
) -> ReadingProgress:
    return ReadingProgress(
        id=ReadingProgressId(progress_id),
        user_id=UserId(user_id),
        novel_id=NovelId(novel_id),
        chapter_id=ChapterId(chapter_id),
        progress=progress,
        last_read_at=BASE_TIME - timedelta(minutes=minutes_ago),
    )


def make_feed_row(
    novel_id: int,
    chapter_id: int,
    chapter_number: int,
    author_username: str | None = "author",
) -> FeedRow:
    return FeedRow(
        novel_id=NovelId(novel_id),
        novel_title=f"Novel {novel_id}",
        novel_cover_image=f"/covers/{novel_id}.jpg",
        author_username=author_username,
        chapter_id=ChapterId(chapter_id),
        chapter_title=f"Chapter {chapter_number}",
        chapter_number=chapter_number,
        chapter_created_at=BASE_TIME,
        chapter_updated_at=BASE_TIME,
    )


class InMemoryStore:
    """
    Store double backed by dicts.

    ``failing`` names store operations that raise StoreError; set it to
    ``{"*"}`` to make every call fail.
    """

    def __init__(
        self,
        novels: Iterable[Novel] = (),
        chapters: Iterable[Chapter] = (),
        authors: Iterable[Author] = (),
        progress: Iterable[ReadingProgress] = (),
        feed_rows: Iterable[FeedRow] = (),
        failing: set[str] | None = None,
    ) -> None:
        self.novels = {novel.id: novel for novel in novels}
        self.chapters = {chapter.id: chapter for chapter in chapters}
        self.authors = {author.id: author for author in authors}
        self.progress = list(progress)
        self.feed_rows = list(feed_rows)
        self.failing = failing or set()
        self.calls: list[str] = []

    def _call(self, operation: str) -> None:
        self.calls.append(operation)
        if "*" in self.failing or operation in self.failing:
            raise StoreError(f"{operation} unavailable", operation=operation)

    def get_latest_chapters(self, limit: int) -> list[FeedRow]:
        self._call("get_latest_chapters")
        return self.feed_rows[:limit]

    def get_recently_read(self, user_id: UserId, limit: int) -> list[ReadingProgress]:
        self._call("get_recently_read")
        records = [record for record in self.progress if record.user_id == user_id]
        records.sort(key=lambda record: record.last_read_at, reverse=True)
        return records[:limit]

    def get_novel(self, novel_id: NovelId) -> Novel | None:
        self._call("get_novel")
        return self.novels.get(novel_id)

    def get_user(self, user_id: UserId) -> Author | None:
        self._call("get_user")
        return self.authors.get(user_id)

    def get_chapter(self, chapter_id: ChapterId) -> Chapter | None:
        self._call("get_chapter")
        return self.chapters.get(chapter_id)

    def get_chapters_by_novel(self, novel_id: NovelId) -> list[Chapter]:
        self._call("get_chapters_by_novel")
        return [chapter for chapter in self.chapters.values() if chapter.novel_id == novel_id]

    def get_reading_progress(self, user_id: UserId, novel_id: NovelId) -> ReadingProgress | None:
        self._call("get_reading_progress")
        return next(
            (
                record
                for record in self.progress
                if record.user_id == user_id and record.novel_id == novel_id
            ),
            None,
        )

    def save_reading_progress(
        self, user_id: UserId, novel_id: NovelId, chapter_id: ChapterId, progress: int
    ) -> ReadingProgress:
        self._call("save_reading_progress")
        record = ReadingProgress(
            id=ReadingProgressId(len(self.progress) + 1),
            user_id=user_id,
            novel_id=novel_id,
            chapter_id=chapter_id,
            progress=progress,
            last_read_at=datetime.now(UTC),
        )
        self.progress.append(record)
        return record
