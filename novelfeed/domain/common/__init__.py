"""
Domain common module.

Contains the building blocks shared by every domain module:
- Strongly-typed ids
- Domain exceptions
"""

from .exceptions import DomainError, ValidationError
from .value_objects import ChapterId, EntityId, NovelId, ReadingProgressId, UserId

__all__ = [
    "ChapterId",
    "DomainError",
    "EntityId",
    "NovelId",
    "ReadingProgressId",
    "UserId",
    "ValidationError",
]
