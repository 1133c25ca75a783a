"""Tests for LatestUpdatesAggregator domain service."""

from structlog.testing import capture_logs

from novelfeed.domain.common.value_objects.ids import ChapterId, NovelId
from novelfeed.domain.feed.services.latest_updates_aggregator import LatestUpdatesAggregator
from tests.fakes import make_feed_row


class TestLatestUpdatesAggregator:
    def test_empty_batch_builds_empty_feed(self) -> None:
        assert LatestUpdatesAggregator().build_feed([]) == []

    def test_entries_follow_first_appearance_of_each_novel(self) -> None:
        rows = [
            make_feed_row(novel_id=1, chapter_id=11, chapter_number=5),
            make_feed_row(novel_id=2, chapter_id=21, chapter_number=2),
            make_feed_row(novel_id=1, chapter_id=12, chapter_number=4),
            make_feed_row(novel_id=3, chapter_id=31, chapter_number=1),
            make_feed_row(novel_id=2, chapter_id=22, chapter_number=1),
        ]

        feed = LatestUpdatesAggregator().build_feed(rows)

        assert [entry.novel.id for entry in feed] == [NovelId(1), NovelId(2), NovelId(3)]

    def test_non_contiguous_rows_are_folded_into_one_entry(self) -> None:
        rows = [
            make_feed_row(novel_id=1, chapter_id=11, chapter_number=5),
            make_feed_row(novel_id=2, chapter_id=21, chapter_number=2),
            make_feed_row(novel_id=1, chapter_id=12, chapter_number=4),
            make_feed_row(novel_id=3, chapter_id=31, chapter_number=1),
            make_feed_row(novel_id=2, chapter_id=22, chapter_number=1),
        ]

        feed = LatestUpdatesAggregator().build_feed(rows)

        first = feed[0]
        assert {chapter.id for chapter in first.chapters} == {ChapterId(11), ChapterId(12)}
        assert len(feed[1].chapters) == 2
        assert len(feed[2].chapters) == 1

    def test_chapters_are_sorted_by_number_descending(self) -> None:
        rows = [
            make_feed_row(novel_id=7, chapter_id=73, chapter_number=3),
            make_feed_row(novel_id=7, chapter_id=71, chapter_number=1),
            make_feed_row(novel_id=7, chapter_id=72, chapter_number=2),
        ]

        (entry,) = LatestUpdatesAggregator().build_feed(rows)

        assert [chapter.chapter_number for chapter in entry.chapters] == [3, 2, 1]

    def test_non_contiguous_numbers_keep_descending_order(self) -> None:
        rows = [
            make_feed_row(novel_id=7, chapter_id=1, chapter_number=10),
            make_feed_row(novel_id=7, chapter_id=2, chapter_number=100),
            make_feed_row(novel_id=7, chapter_id=3, chapter_number=42),
        ]

        (entry,) = LatestUpdatesAggregator().build_feed(rows)

        assert [chapter.chapter_number for chapter in entry.chapters] == [100, 42, 10]

    def test_novel_summary_comes_from_first_row(self) -> None:
        rows = [
            make_feed_row(novel_id=5, chapter_id=51, chapter_number=2, author_username="first"),
            make_feed_row(novel_id=5, chapter_id=52, chapter_number=3, author_username="later"),
        ]

        (entry,) = LatestUpdatesAggregator().build_feed(rows)

        assert entry.novel.author_username == "first"
        assert entry.novel.title == "Novel 5"
        assert entry.novel.cover_image == "/covers/5.jpg"

    def test_missing_author_username_is_kept_as_none(self) -> None:
        rows = [make_feed_row(novel_id=5, chapter_id=51, chapter_number=1, author_username=None)]

        (entry,) = LatestUpdatesAggregator().build_feed(rows)

        assert entry.novel.author_username is None

    def test_chapter_summary_carries_row_fields(self) -> None:
        row = make_feed_row(novel_id=5, chapter_id=51, chapter_number=9)

        (entry,) = LatestUpdatesAggregator().build_feed([row])
        (chapter,) = entry.chapters

        assert chapter.id == row.chapter_id
        assert chapter.title == row.chapter_title
        assert chapter.created_at == row.chapter_created_at
        assert chapter.updated_at == row.chapter_updated_at

    def test_building_twice_gives_identical_feeds(self) -> None:
        aggregator = LatestUpdatesAggregator()
        rows = [
            make_feed_row(novel_id=1, chapter_id=11, chapter_number=1),
            make_feed_row(novel_id=2, chapter_id=21, chapter_number=1),
            make_feed_row(novel_id=1, chapter_id=12, chapter_number=2),
        ]

        assert aggregator.build_feed(rows) == aggregator.build_feed(rows)

    def test_accepts_a_one_shot_iterator(self) -> None:
        rows = iter(
            [
                make_feed_row(novel_id=1, chapter_id=11, chapter_number=1),
                make_feed_row(novel_id=1, chapter_id=12, chapter_number=2),
            ]
        )

        (entry,) = LatestUpdatesAggregator().build_feed(rows)

        assert len(entry.chapters) == 2

    def test_reports_feed_size_to_observer(self) -> None:
        rows = [
            make_feed_row(novel_id=1, chapter_id=11, chapter_number=1),
            make_feed_row(novel_id=2, chapter_id=21, chapter_number=1),
            make_feed_row(novel_id=1, chapter_id=12, chapter_number=2),
        ]

        with capture_logs() as logs:
            LatestUpdatesAggregator().build_feed(rows)

        (event,) = [log for log in logs if log["event"] == "feed_built"]
        assert event["novel_count"] == 2
        assert event["chapter_count"] == 3
