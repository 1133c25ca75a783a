"""Custom exception hierarchy for the novelfeed service."""

from fastapi import HTTPException
from starlette import status


class NovelfeedError(Exception):
    """Base exception for all novelfeed errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(NovelfeedError):
    """Resource not found error."""

    def __init__(self, message: str) -> None:
        """Initialize with message and 404 status code."""
        super().__init__(message, status_code=404)


class ReadingProgressNotFoundError(NotFoundError):
    """No reading progress stored for a user and novel."""

    def __init__(self, novel_id: int) -> None:
        """Initialize with the novel the progress was requested for."""
        self.novel_id = novel_id
        super().__init__(f"No reading progress found for novel {novel_id}")


class StoreError(NovelfeedError):
    """The store could not answer a query."""

    def __init__(self, message: str, operation: str | None = None) -> None:
        """Initialize with message and the store operation that failed."""
        self.operation = operation
        super().__init__(message, status_code=500)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Authentication required",
    headers={"WWW-Authenticate": "Bearer"},
)
