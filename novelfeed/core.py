from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from novelfeed.application.feed.use_cases.get_latest_updates_use_case import (
    GetLatestUpdatesUseCase,
)
from novelfeed.application.reading.services.progress_enricher import ProgressEnricher
from novelfeed.application.reading.use_cases.reading_progress_use_case import (
    ReadingProgressUseCase,
)
from novelfeed.config import get_settings
from novelfeed.domain.feed.services.latest_updates_aggregator import LatestUpdatesAggregator
from novelfeed.domain.reading.services.progress_percent_calculator import (
    ProgressPercentCalculator,
)
from novelfeed.infrastructure.store.sqlalchemy_store import SqlAlchemyStore


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Request-scoped session, provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Store adapter
    store = providers.Factory(SqlAlchemyStore, db=db)

    # Domain services (pure domain logic, no db)
    latest_updates_aggregator = providers.Factory(LatestUpdatesAggregator)
    progress_percent_calculator = providers.Factory(ProgressPercentCalculator)

    # Application services
    progress_enricher = providers.Factory(
        ProgressEnricher,
        store=store,
        percent_calculator=progress_percent_calculator,
        unknown_author_name=settings.provided.UNKNOWN_AUTHOR_NAME,
    )

    # Feed module use cases
    get_latest_updates_use_case = providers.Factory(
        GetLatestUpdatesUseCase,
        store=store,
        aggregator=latest_updates_aggregator,
    )

    # Reading module use cases
    reading_progress_use_case = providers.Factory(
        ReadingProgressUseCase,
        store=store,
        enricher=progress_enricher,
    )


container = Container()
