"""Domain service computing how far into a novel a chapter sits."""

from collections.abc import Iterable

from novelfeed.domain.library.entities.chapter import Chapter


class ProgressPercentCalculator:
    """Stateless domain service for reading completion percentages."""

    @staticmethod
    def percent_complete(target: Chapter | None, chapters: Iterable[Chapter]) -> int:
        """
        Compute the completion percentage of ``target`` within its novel.

        Only published chapters count. They are ordered by chapter number and
        the target's 1-based position is divided by the published total.
        Rounding is half away from zero, done in integer arithmetic so that
        exact halves (1/8 -> 12.5 -> 13) never depend on float error.

        Args:
            target: The chapter the reader is on, or None if it is unknown
            chapters: Every chapter of the novel, in any status and order

        Returns:
            An integer in [0, 100]. 0 when the target is missing, unpublished
            or the novel has no published chapters.
        """
        if target is None:
            return 0

        published = sorted(
            (chapter for chapter in chapters if chapter.is_published()),
            key=lambda chapter: chapter.chapter_number,
        )
        total = len(published)
        if total == 0:
            return 0

        position = next(
            (index + 1 for index, chapter in enumerate(published) if chapter.id == target.id),
            None,
        )
        if position is None:
            return 0

        percent = (200 * position + total) // (2 * total)
        return max(0, min(100, percent))
