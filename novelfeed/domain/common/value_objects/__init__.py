"""Common value objects shared across all domain modules."""

from .ids import ChapterId, EntityId, NovelId, ReadingProgressId, UserId

__all__ = [
    "ChapterId",
    "EntityId",
    "NovelId",
    "ReadingProgressId",
    "UserId",
]
