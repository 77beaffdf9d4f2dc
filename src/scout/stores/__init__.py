"""Project storage for Project Scout."""

from scout.stores.base import ProjectStore
from scout.stores.memory import InMemoryProjectStore
from scout.stores.sqlite_project import SQLiteProjectStore

__all__ = [
    "ProjectStore",
    "InMemoryProjectStore",
    "SQLiteProjectStore",
]
