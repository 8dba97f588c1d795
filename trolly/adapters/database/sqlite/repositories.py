"""SQLite repository implementations."""

from collections.abc import Mapping, Sequence
from typing import Any

from sqlalchemy import ColumnElement, delete, false, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from trolly.core.contract import ShoppingList
from trolly.core.interfaces import IShoppingListRepository, QueryResult
from trolly.persistence.models import ShoppingListItem

from .mappers import bind_selection, projection_columns, row_to_dict

# SQLite INTEGER range. Ids outside it can never be stored.
MIN_ROW_ID = -(2**63)
MAX_ROW_ID = 2**63 - 1


class SQLiteShoppingListRepository(IShoppingListRepository):
    """SQLite implementation of the shopping list repository."""

    def __init__(self, session: AsyncSession):
        self._session = session
        self._table = ShoppingListItem.__table__

    def _where(
        self,
        item_id: int | None,
        selection: str | None,
        selection_args: Sequence[Any] | None,
    ) -> list[ColumnElement]:
        clauses: list[ColumnElement] = []
        if item_id is not None:
            if MIN_ROW_ID <= item_id <= MAX_ROW_ID:
                clauses.append(self._table.c.id == item_id)
            else:
                clauses.append(false())
        if selection:
            clauses.append(bind_selection(selection, selection_args))
        elif selection_args:
            raise ValueError("Selection arguments given without a selection")
        return clauses

    async def _query(
        self,
        item_id: int | None,
        projection: Sequence[str] | None,
        selection: str | None,
        selection_args: Sequence[Any] | None,
        sort_order: str | None,
    ) -> QueryResult:
        columns = projection_columns(self._table, projection)
        query = (
            select(*columns)
            .where(*self._where(item_id, selection, selection_args))
            .order_by(text(sort_order or ShoppingList.DEFAULT_SORT_ORDER))
        )
        result = await self._session.execute(query)
        return QueryResult(
            columns=[column.name for column in columns],
            rows=[row_to_dict(row) for row in result],
        )

    async def list(
        self,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> QueryResult:
        return await self._query(None, projection, selection, selection_args, sort_order)

    async def get(
        self,
        item_id: int,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> QueryResult:
        return await self._query(item_id, projection, selection, selection_args, sort_order)

    async def insert(self, values: Mapping[str, Any]) -> int | None:
        result = await self._session.execute(insert(self._table).values(dict(values)))
        primary_key = result.inserted_primary_key
        return primary_key[0] if primary_key else None

    async def update(
        self,
        item_id: int | None,
        values: Mapping[str, Any],
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        if not values:
            raise ValueError("Empty values")
        if ShoppingList.ID in values:
            raise ValueError("Column id cannot be updated")
        statement = (
            update(self._table)
            .where(*self._where(item_id, selection, selection_args))
            .values(dict(values))
        )
        result = await self._session.execute(statement)
        return result.rowcount

    async def delete(
        self,
        item_id: int | None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        statement = delete(self._table).where(*self._where(item_id, selection, selection_args))
        result = await self._session.execute(statement)
        return result.rowcount
