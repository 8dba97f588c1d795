"""Database adapter interface definitions.

This module defines the contracts for the shopping list store, allowing
different implementations to be swapped transparently. Rows travel as plain
column -> value dictionaries, the same shape callers use for inserts and
updates.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from contextlib import AbstractAsyncContextManager
from dataclasses import dataclass, field
from typing import Any

Row = dict[str, Any]


@dataclass
class QueryResult:
    """Rows returned by a content query."""

    columns: list[str]
    rows: list[Row] = field(default_factory=list)
    notification_uri: str | None = None

    def __len__(self) -> int:
        return len(self.rows)


class IShoppingListRepository(ABC):
    """Interface for shopping list data operations.

    ``selection`` is a SQL ``WHERE`` fragment using ``?`` placeholders that
    are bound from ``selection_args`` in order.
    """

    @abstractmethod
    async def list(
        self,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> QueryResult:
        """List all rows matching the selection."""
        ...

    @abstractmethod
    async def get(
        self,
        item_id: int,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> QueryResult:
        """List rows with the given id that also match the selection."""
        ...

    @abstractmethod
    async def insert(self, values: Mapping[str, Any]) -> int | None:
        """Insert a row. Returns the new row id, or None if none was created."""
        ...

    @abstractmethod
    async def update(
        self,
        item_id: int | None,
        values: Mapping[str, Any],
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """Update matching rows. Returns the number of rows affected."""
        ...

    @abstractmethod
    async def delete(
        self,
        item_id: int | None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """Delete matching rows. Returns the number of rows removed."""
        ...


class IDatabaseAdapter(ABC):
    """Main database adapter interface.

    Manages the database lifecycle and hands out repositories bound to a
    session.
    """

    @abstractmethod
    def session(self) -> AbstractAsyncContextManager[Any]:
        """Open a session that commits on success and rolls back on error."""
        ...

    @abstractmethod
    def items(self, session: Any) -> IShoppingListRepository:
        """Get the shopping list repository for a session."""
        ...

    @abstractmethod
    async def initialize(self) -> None:
        """Initialize the database (create or rebuild the schema)."""
        ...

    @abstractmethod
    async def close(self) -> None:
        """Close database connections and cleanup."""
        ...

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if database is healthy and accessible."""
        ...
