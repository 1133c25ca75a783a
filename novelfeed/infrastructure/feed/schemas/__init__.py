from .feed_schemas import FeedChapter, FeedEntry, FeedWork

__all__ = [
    "FeedChapter",
    "FeedEntry",
    "FeedWork",
]
