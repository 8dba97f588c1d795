"""Core interfaces for the adapter pattern.

These interfaces define the contract between the content provider and the
storage implementation behind it.
"""

from .database import (
    IDatabaseAdapter,
    IShoppingListRepository,
    QueryResult,
    Row,
)

__all__ = [
    "IDatabaseAdapter",
    "IShoppingListRepository",
    "QueryResult",
    "Row",
]
