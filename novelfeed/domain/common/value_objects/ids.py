"""
Strongly-typed identifiers.

Ids wrap the integer primary keys handed out by the store so a chapter id
cannot be passed where a novel id is expected.

Example:
    novel_id = NovelId(42)
    chapter_id = ChapterId(42)
    assert novel_id != chapter_id
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityId:
    """Base class for integer entity identifiers."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{self.__class__.__name__} must wrap an int")
        if self.value < 0:
            raise ValueError(f"{self.__class__.__name__} must be non-negative")

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class UserId(EntityId):
    """Strongly-typed user identifier."""


@dataclass(frozen=True)
class NovelId(EntityId):
    """Strongly-typed novel identifier."""


@dataclass(frozen=True)
class ChapterId(EntityId):
    """Strongly-typed chapter identifier."""


@dataclass(frozen=True)
class ReadingProgressId(EntityId):
    """Strongly-typed reading progress identifier."""
