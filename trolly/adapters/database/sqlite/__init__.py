"""SQLite database adapter.

Uses SQLAlchemy with async SQLite driver (aiosqlite).
"""

from .adapter import SQLiteDatabaseAdapter, get_database_adapter
from .repositories import SQLiteShoppingListRepository

__all__ = ["SQLiteDatabaseAdapter", "SQLiteShoppingListRepository", "get_database_adapter"]
