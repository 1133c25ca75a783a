from .reading_progress_schemas import (
    ChapterInProgress,
    EnrichedReadingProgress,
    FallbackReadingProgress,
    NovelInProgress,
    ReadingProgress,
    ReadingProgressItem,
    RecordProgressRequest,
)

__all__ = [
    "ChapterInProgress",
    "EnrichedReadingProgress",
    "FallbackReadingProgress",
    "NovelInProgress",
    "ReadingProgress",
    "ReadingProgressItem",
    "RecordProgressRequest",
]
