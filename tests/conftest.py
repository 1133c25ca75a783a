"""Pytest configuration and fixtures."""

import os

# Settings are read once and cached, so the test environment must be in place
# before anything from novelfeed is imported.
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key-0123456789abcdef0123456789abcdef"

from collections.abc import Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from novelfeed import models  # noqa: E402
from novelfeed.database import Base, get_db  # noqa: E402
from novelfeed.infrastructure.identity.token_service import create_access_token  # noqa: E402
from novelfeed.main import app  # noqa: E402

# In-memory SQLite shared across the TestClient's worker threads
test_engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

DEFAULT_USER_ID = 1


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def test_user(db_session: Session) -> models.User:
    """Create the reader the auth headers belong to."""
    return create_test_user(db_session, username="reader", user_id=DEFAULT_USER_ID)


@pytest.fixture
def auth_headers(test_user: models.User) -> dict[str, str]:
    """Bearer token for the default test user."""
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


def create_test_user(
    db_session: Session, username: str, user_id: int | None = None
) -> models.User:
    """Helper function to create a user."""
    user = models.User(
        id=user_id,
        email=f"{username}@example.com",
        username=username,
        is_author=True,
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


def create_test_novel(
    db_session: Session,
    author: models.User,
    title: str = "Test Novel",
    cover_image: str | None = None,
) -> models.Novel:
    """Helper function to create a published novel."""
    now = datetime(2024, 1, 1, tzinfo=UTC)
    novel = models.Novel(
        title=title,
        description=f"Description of {title}",
        cover_image=cover_image,
        author_id=author.id,
        status="published",
        created_at=now,
        updated_at=now,
    )
    db_session.add(novel)
    db_session.commit()
    db_session.refresh(novel)
    return novel


def create_test_chapter(
    db_session: Session,
    novel: models.Novel,
    chapter_number: int,
    updated_at: datetime,
    status: str = "published",
    title: str | None = None,
) -> models.Chapter:
    """Helper function to create a chapter."""
    chapter = models.Chapter(
        novel_id=novel.id,
        chapter_number=chapter_number,
        title=title or f"Chapter {chapter_number}",
        content="...",
        status=status,
        created_at=updated_at,
        updated_at=updated_at,
    )
    db_session.add(chapter)
    db_session.commit()
    db_session.refresh(chapter)
    return chapter


def create_test_progress(
    db_session: Session,
    user: models.User,
    chapter: models.Chapter,
    last_read_at: datetime,
    progress: int = 0,
) -> models.ReadingProgress:
    """Helper function to create a reading progress record."""
    record = models.ReadingProgress(
        user_id=user.id,
        novel_id=chapter.novel_id,
        chapter_id=chapter.id,
        progress=progress,
        last_read_at=last_read_at,
    )
    db_session.add(record)
    db_session.commit()
    db_session.refresh(record)
    return record
