"""SQLAlchemy engine for the site database and per-request sessions."""

from collections.abc import Generator
from typing import Annotated, Any

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from novelfeed.config import Settings, get_settings


class Base(DeclarativeBase):
    """Declarative base shared by the tables in novelfeed.models."""


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def _engine_options(database_url: str) -> dict[str, Any]:
    if database_url.startswith("sqlite"):
        # One connection, so an in-memory database is visible from every thread
        return {"connect_args": {"check_same_thread": False}, "poolclass": StaticPool}
    return {"pool_size": 10, "max_overflow": 20, "pool_pre_ping": True, "pool_recycle": 1800}


def initialize_database(settings: Settings) -> None:
    """Build the engine and session factory from ``settings.DATABASE_URL``."""
    global _engine, _SessionLocal  # noqa: PLW0603

    _engine = create_engine(settings.DATABASE_URL, **_engine_options(settings.DATABASE_URL))
    _SessionLocal = sessionmaker(bind=_engine, autocommit=False, autoflush=False)


def get_engine() -> Engine:
    if _engine is None:
        raise RuntimeError("initialize_database() has not been called")
    return _engine


def get_session_factory(
    settings: Annotated[Settings, Depends(get_settings)],
) -> sessionmaker[Session]:
    """Session factory for request handlers; built on first use outside the app lifespan."""
    if _SessionLocal is None:
        initialize_database(settings)
    assert _SessionLocal is not None
    return _SessionLocal


def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""
    global _engine, _SessionLocal  # noqa: PLW0603
    if _engine is None:
        return
    _engine.dispose()
    _engine = None
    _SessionLocal = None


def get_db(
    session_factory: Annotated[sessionmaker[Session], Depends(get_session_factory)],
) -> Generator[Session, None, None]:
    """One session per request, closed when the response is sent."""
    with session_factory() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
