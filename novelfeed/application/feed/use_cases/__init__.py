from .get_latest_updates_use_case import GetLatestUpdatesUseCase

__all__ = [
    "GetLatestUpdatesUseCase",
]
