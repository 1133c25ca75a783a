"""API routes for reading progress."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from novelfeed.application.reading.services.progress_enricher import EnrichmentResult
from novelfeed.application.reading.use_cases.reading_progress_use_case import (
    ReadingProgressUseCase,
)
from novelfeed.config import get_settings
from novelfeed.core import container
from novelfeed.domain.reading.entities.reading_progress import (
    ReadingProgress as DomainReadingProgress,
)
from novelfeed.exceptions import NotFoundError, StoreError
from novelfeed.infrastructure.common.di import inject_use_case
from novelfeed.infrastructure.common.query_params import coerce_limit
from novelfeed.infrastructure.identity.dependencies import CurrentUserId
from novelfeed.infrastructure.reading.schemas import (
    ChapterInProgress,
    EnrichedReadingProgress,
    FallbackReadingProgress,
    NovelInProgress,
    ReadingProgress,
    ReadingProgressItem,
    RecordProgressRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/reading-progress", tags=["reading_progress"])


def _record_fields(record: DomainReadingProgress) -> dict[str, object]:
    return {
        "id": record.id.value,
        "user_id": record.user_id.value,
        "novel_id": record.novel_id.value,
        "chapter_id": record.chapter_id.value,
        "progress": record.progress,
        "last_read_at": record.last_read_at,
    }


def _map_outcome(outcome: EnrichmentResult) -> EnrichedReadingProgress | FallbackReadingProgress:
    """
    Map an enrichment outcome to its response schema.

    Args:
        outcome: Success with EnrichedProgress, or Failure with EnrichmentFallback

    Returns:
        EnrichedReadingProgress or FallbackReadingProgress
    """
    if outcome.is_failure:
        fallback = outcome.unwrap_error()
        return FallbackReadingProgress(
            **_record_fields(fallback.record), fallback_reason=fallback.reason
        )

    enriched = outcome.unwrap()
    novel = enriched.novel
    chapter = enriched.chapter
    return EnrichedReadingProgress(
        **_record_fields(enriched.record),
        novel=NovelInProgress(
            id=novel.id.value,
            title=novel.title,
            description=novel.description,
            cover_image=novel.cover_image,
            author_id=novel.author_id.value,
            status=novel.status,
            created_at=novel.created_at,
            updated_at=novel.updated_at,
            author_name=enriched.author_name,
        )
        if novel
        else None,
        chapter=ChapterInProgress(
            id=chapter.id.value,
            novel_id=chapter.novel_id.value,
            chapter_number=chapter.chapter_number,
            title=chapter.title,
            status=chapter.status.value,
            created_at=chapter.created_at,
            updated_at=chapter.updated_at,
        )
        if chapter
        else None,
    )


def _store_failure(e: StoreError, action: str) -> HTTPException:
    logger.error(f"Failed to {action}: {e!s}", exc_info=True)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail={"message": "Server error", "error": str(e)},
    )


@router.get("/recent", response_model=list[ReadingProgressItem], status_code=status.HTTP_200_OK)
def get_recent_reading_progress(
    user_id: CurrentUserId,
    use_case: ReadingProgressUseCase = Depends(
        inject_use_case(container.reading_progress_use_case)
    ),
    limit: str | None = Query(
        None, description="Maximum number of novels; invalid values use the default"
    ),
) -> list[EnrichedReadingProgress | FallbackReadingProgress]:
    """
    Get the user's recently read novels, newest first.

    Each item carries its novel and chapter. Items that could not be joined
    are returned as stored, marked with ``enrichment: "fallback"``.
    Percentages are the stored ones.

    Raises:
        HTTPException: 401 without a valid token, 500 if the history cannot be read
    """
    settings = get_settings()
    record_limit = coerce_limit(
        limit, settings.PROGRESS_DEFAULT_LIMIT, settings.MAX_QUERY_LIMIT
    )
    try:
        outcomes = use_case.get_recent(user_id, record_limit)
    except StoreError as e:
        raise _store_failure(e, f"fetch reading progress for user {user_id}") from e

    logger.info(f"Returning {len(outcomes)} reading progress items for user {user_id}")
    return [_map_outcome(outcome) for outcome in outcomes]


@router.get(
    "/latest",
    response_model=ReadingProgressItem | None,
    status_code=status.HTTP_200_OK,
)
def get_latest_reading_progress(
    user_id: CurrentUserId,
    use_case: ReadingProgressUseCase = Depends(
        inject_use_case(container.reading_progress_use_case)
    ),
) -> EnrichedReadingProgress | FallbackReadingProgress | None:
    """
    Get the novel the user read most recently, for the "continue reading" card.

    The percentage is recomputed from the chapter's position among the
    novel's published chapters. Returns null when the user has no progress.

    Raises:
        HTTPException: 401 without a valid token, 500 if the history cannot be read
    """
    try:
        outcome = use_case.get_latest(user_id)
    except StoreError as e:
        raise _store_failure(e, f"fetch latest reading progress for user {user_id}") from e

    if outcome is None:
        return None
    return _map_outcome(outcome)


@router.get("/{novel_id}", response_model=ReadingProgress, status_code=status.HTTP_200_OK)
def get_novel_reading_progress(
    novel_id: int,
    user_id: CurrentUserId,
    use_case: ReadingProgressUseCase = Depends(
        inject_use_case(container.reading_progress_use_case)
    ),
) -> ReadingProgress:
    """
    Get the user's stored progress for one novel.

    Raises:
        HTTPException: 404 if the user has not read the novel
    """
    try:
        record = use_case.get_for_novel(user_id, novel_id)
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except StoreError as e:
        raise _store_failure(e, f"fetch reading progress for novel {novel_id}") from e

    return ReadingProgress(**_record_fields(record))


@router.post("", response_model=ReadingProgress, status_code=status.HTTP_201_CREATED)
def record_reading_progress(
    request: RecordProgressRequest,
    user_id: CurrentUserId,
    use_case: ReadingProgressUseCase = Depends(
        inject_use_case(container.reading_progress_use_case)
    ),
) -> ReadingProgress:
    """
    Record the chapter the user is reading.

    Creates the user's progress record for the novel or moves it to the new
    chapter.

    Raises:
        HTTPException: 404 if the chapter is not part of the novel
    """
    try:
        record = use_case.record_progress(
            user_id=user_id,
            novel_id=request.novel_id,
            chapter_id=request.chapter_id,
            progress=request.progress,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message) from e
    except StoreError as e:
        raise _store_failure(e, f"record reading progress for user {user_id}") from e

    return ReadingProgress(**_record_fields(record))
