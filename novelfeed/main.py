"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from novelfeed import models
from novelfeed.config import configure_logging, get_settings
from novelfeed.database import dispose_engine, get_engine, initialize_database
from novelfeed.domain.common.exceptions import DomainError
from novelfeed.exceptions import NovelfeedError
from novelfeed.infrastructure.feed.routers import latest_chapters
from novelfeed.infrastructure.reading.routers import reading_progress

settings = get_settings()
configure_logging(settings.ENVIRONMENT)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Open the database engine for the lifetime of the app."""
    initialize_database(settings)
    if settings.ENVIRONMENT == "development":
        # Production schemas are managed outside this service
        models.Base.metadata.create_all(bind=get_engine())
    logger.info("app_started", environment=settings.ENVIRONMENT, version=settings.VERSION)
    yield
    dispose_engine()
    logger.info("app_stopped")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NovelfeedError)
async def novelfeed_error_handler(_request: Request, exc: NovelfeedError) -> JSONResponse:
    """Translate uncaught service errors into JSON responses."""
    logger.error("unhandled_service_error", error=exc.message, status_code=exc.status_code)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.exception_handler(DomainError)
async def domain_error_handler(_request: Request, exc: DomainError) -> JSONResponse:
    """Stored data that breaks an entity invariant outside per-record enrichment."""
    logger.error("invalid_stored_data", error=str(exc))
    return JSONResponse(
        status_code=500, content={"detail": {"message": "Server error", "error": str(exc)}}
    )


api_router = APIRouter(prefix=settings.API_V1_PREFIX)


@api_router.get("/")
def api_root() -> dict[str, str]:
    """API v1 root."""
    return {
        "message": f"{settings.PROJECT_NAME} v1",
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
    }


api_router.include_router(latest_chapters.router)
api_router.include_router(reading_progress.router)
app.include_router(api_router)


@app.get("/")
def root() -> dict[str, str]:
    """Welcome message."""
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}


@app.get("/health")
def health() -> dict[str, str]:
    """Health check."""
    return {"status": "healthy"}
