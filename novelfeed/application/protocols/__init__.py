from .store import StoreProtocol

__all__ = [
    "StoreProtocol",
]
