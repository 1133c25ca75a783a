from dataclasses import dataclass
from datetime import datetime

from novelfeed.domain.common.exceptions import DomainError
from novelfeed.domain.common.value_objects.ids import NovelId, UserId


@dataclass(frozen=True)
class Novel:
    """
    Novel read model.

    A serialized long-form work owned by one author. This subsystem never
    mutates novels, so the entity is frozen.
    """

    # Identity
    id: NovelId
    author_id: UserId

    # Essential metadata
    title: str

    # Timestamps
    created_at: datetime
    updated_at: datetime

    # Optional fields
    description: str | None = None
    cover_image: str | None = None
    status: str = "draft"

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.title or not self.title.strip():
            raise DomainError("Novel title cannot be empty")
