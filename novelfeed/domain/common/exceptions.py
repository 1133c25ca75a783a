"""
Errors raised while building domain entities.

A store row that breaks an entity invariant surfaces as one of these. The
enricher treats them like any other per-record failure.
"""


class DomainError(Exception):
    """An entity was constructed from data that breaks one of its invariants."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = dict(details or {})

    def __str__(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} ({context})"


class ValidationError(DomainError):
    """A single field holds a value outside its allowed range or set."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        self.field = field
        self.value = value
        details = {"field": field, "value": value} if field else {}
        super().__init__(message, details)
