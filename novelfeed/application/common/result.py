"""
Two-armed outcome for operations that degrade instead of raising.

Progress enrichment never fails a request. A record comes back either fully
joined (``Success``) or as the raw record plus the reason the join broke
(``Failure``), and callers branch on ``is_success``:

    outcome = enricher.enrich(record)
    if outcome.is_success:
        show(outcome.unwrap())
    else:
        show_raw(outcome.unwrap_error().record)
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    value: T

    is_success = True
    is_failure = False

    def unwrap(self) -> T:
        return self.value

    def unwrap_error(self) -> NoReturn:
        raise ValueError("Success carries no error")


@dataclass(frozen=True)
class Failure(Generic[E]):
    error: E

    is_success = False
    is_failure = True

    def unwrap(self) -> NoReturn:
        raise ValueError(f"Failure carries no value: {self.error!r}")

    def unwrap_error(self) -> E:
        return self.error


Result = Success[T] | Failure[E]
