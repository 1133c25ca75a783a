from .latest_updates_aggregator import LatestUpdatesAggregator

__all__ = [
    "LatestUpdatesAggregator",
]
