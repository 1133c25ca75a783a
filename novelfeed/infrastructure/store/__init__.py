from .sqlalchemy_store import SqlAlchemyStore

__all__ = [
    "SqlAlchemyStore",
]
