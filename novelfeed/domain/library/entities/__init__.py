from .author import UNKNOWN_AUTHOR_NAME, Author
from .chapter import Chapter, ChapterStatus
from .novel import Novel

__all__ = [
    "UNKNOWN_AUTHOR_NAME",
    "Author",
    "Chapter",
    "ChapterStatus",
    "Novel",
]
