from dataclasses import dataclass

from novelfeed.domain.common.value_objects.ids import UserId

UNKNOWN_AUTHOR_NAME = "Unknown Author"


@dataclass(frozen=True)
class Author:
    """Public identity of the user who owns a novel."""

    id: UserId
    username: str
