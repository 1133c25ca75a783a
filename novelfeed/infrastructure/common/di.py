"""Glue between the DI container and FastAPI's dependency system."""

from collections.abc import Callable
from typing import TypeVar

from dependency_injector.providers import Provider

from novelfeed.core import container
from novelfeed.database import DatabaseSession

UseCaseT = TypeVar("UseCaseT")


def inject_use_case(provider: Provider[UseCaseT]) -> Callable[[DatabaseSession], UseCaseT]:
    """
    Wrap a container provider as a FastAPI dependency.

    The request's session is bound to ``container.db`` only while the provider
    builds the use case, so the store it receives talks to that session.
    """

    def build(db: DatabaseSession) -> UseCaseT:
        with container.db.override(db):
            return provider()

    return build
