"""
Get latest updates use case.

Fetches recently updated chapters from the store and groups them by novel.
"""

from novelfeed.application.protocols.store import StoreProtocol
from novelfeed.domain.feed.entities.feed import FeedEntry
from novelfeed.domain.feed.services.latest_updates_aggregator import LatestUpdatesAggregator


class GetLatestUpdatesUseCase:
    """Use case for building the latest-updates feed."""

    def __init__(self, store: StoreProtocol, aggregator: LatestUpdatesAggregator) -> None:
        """
        Initialize use case with dependencies.

        Args:
            store: Store protocol implementation
            aggregator: Domain service grouping rows by novel
        """
        self.store = store
        self.aggregator = aggregator

    def get_latest_updates(self, limit: int = 10) -> list[FeedEntry]:
        """
        Get the latest-updates feed.

        Args:
            limit: Maximum number of chapter rows pulled from the store

        Returns:
            List of FeedEntry in novel recency order

        Raises:
            StoreError: If the store cannot return the chapter rows
        """
        rows = self.store.get_latest_chapters(limit)
        return self.aggregator.build_feed(rows)
