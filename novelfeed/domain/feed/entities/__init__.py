from .feed import FeedChapter, FeedEntry, FeedNovel, FeedRow

__all__ = [
    "FeedChapter",
    "FeedEntry",
    "FeedNovel",
    "FeedRow",
]
