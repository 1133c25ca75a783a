"""Domain service for grouping recently updated chapters by novel."""

from collections.abc import Iterable

import structlog

from novelfeed.domain.common.value_objects.ids import NovelId
from novelfeed.domain.feed.entities.feed import FeedChapter, FeedEntry, FeedNovel, FeedRow


class LatestUpdatesAggregator:
    """Stateless domain service building the latest-updates feed."""

    def __init__(self, observer: structlog.stdlib.BoundLogger | None = None) -> None:
        self._observer = observer or structlog.get_logger(__name__)

    def build_feed(self, rows: Iterable[FeedRow]) -> list[FeedEntry]:
        """
        Group feed rows into one entry per novel.

        Entries come out in the order each novel first appears in ``rows``.
        Every row of a novel is folded into that novel's entry, wherever it
        sits in the batch, and the chapters are sorted by chapter number,
        highest first. The novel summary is taken from the first row seen.

        Args:
            rows: Feed rows, pre-ordered by novel recency

        Returns:
            List of FeedEntry, one per distinct novel
        """
        leaders: dict[NovelId, FeedRow] = {}
        grouped: dict[NovelId, list[FeedChapter]] = {}

        for row in rows:
            if row.novel_id not in leaders:
                leaders[row.novel_id] = row
                grouped[row.novel_id] = []
            grouped[row.novel_id].append(
                FeedChapter(
                    id=row.chapter_id,
                    title=row.chapter_title,
                    chapter_number=row.chapter_number,
                    created_at=row.chapter_created_at,
                    updated_at=row.chapter_updated_at,
                )
            )

        # dicts keep insertion order, so this is first-seen order
        entries = [
            FeedEntry(
                novel=FeedNovel(
                    id=novel_id,
                    title=leader.novel_title,
                    author_username=leader.author_username,
                    cover_image=leader.novel_cover_image,
                ),
                chapters=tuple(
                    sorted(grouped[novel_id], key=lambda c: c.chapter_number, reverse=True)
                ),
            )
            for novel_id, leader in leaders.items()
        ]

        self._observer.debug(
            "feed_built",
            novel_count=len(entries),
            chapter_count=sum(len(entry.chapters) for entry in entries),
        )
        return entries
