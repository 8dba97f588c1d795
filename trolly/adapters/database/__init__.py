"""Database adapter implementations."""

from .sqlite import SQLiteDatabaseAdapter, get_database_adapter

__all__ = ["SQLiteDatabaseAdapter", "get_database_adapter"]
