"""API routes for the latest-updates feed."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from novelfeed.application.feed.use_cases.get_latest_updates_use_case import (
    GetLatestUpdatesUseCase,
)
from novelfeed.config import get_settings
from novelfeed.core import container
from novelfeed.domain.feed.entities.feed import FeedEntry as DomainFeedEntry
from novelfeed.exceptions import StoreError
from novelfeed.infrastructure.common.di import inject_use_case
from novelfeed.infrastructure.common.query_params import coerce_limit
from novelfeed.infrastructure.feed.schemas import FeedChapter, FeedEntry, FeedWork

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chapters", tags=["feed"])


def _map_feed_entry(entry: DomainFeedEntry) -> FeedEntry:
    return FeedEntry(
        work=FeedWork(
            id=entry.novel.id.value,
            title=entry.novel.title,
            author_username=entry.novel.author_username,
            cover_image=entry.novel.cover_image,
        ),
        chapters=[
            FeedChapter(
                id=chapter.id.value,
                title=chapter.title,
                chapter_number=chapter.chapter_number,
                created_at=chapter.created_at,
                updated_at=chapter.updated_at,
            )
            for chapter in entry.chapters
        ],
    )


@router.get("/latest", response_model=list[FeedEntry], status_code=status.HTTP_200_OK)
def get_latest_chapters(
    use_case: GetLatestUpdatesUseCase = Depends(
        inject_use_case(container.get_latest_updates_use_case)
    ),
    limit: str | None = Query(
        None, description="Maximum number of chapter rows; invalid values use the default"
    ),
) -> list[FeedEntry]:
    """
    Get recently updated novels with their latest chapters.

    Novels are ordered by their most recent update; each lists the chapters
    of this batch that belong to it, highest chapter number first.

    Raises:
        HTTPException: 500 if the store cannot be queried
    """
    settings = get_settings()
    row_limit = coerce_limit(limit, settings.FEED_DEFAULT_LIMIT, settings.MAX_QUERY_LIMIT)
    try:
        entries = use_case.get_latest_updates(row_limit)
    except StoreError as e:
        logger.error(f"Failed to fetch latest chapters: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"message": "Server error", "error": str(e)},
        ) from e

    logger.info(f"Returning {len(entries)} latest novels with chapters (limit={row_limit})")
    return [_map_feed_entry(entry) for entry in entries]
