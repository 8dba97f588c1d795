"""Mapping between caller column names, table columns and result rows."""

from collections.abc import Sequence
from typing import Any

from sqlalchemy import Label, Table, TextClause, text
from sqlalchemy.engine import Row as SARow

from trolly.core.contract import PROJECTION_MAP
from trolly.core.exceptions import InvalidColumnError
from trolly.core.interfaces import Row


def projection_columns(table: Table, projection: Sequence[str] | None) -> list[Label]:
    """Resolve requested column names through the projection allow-list.

    An empty or missing projection selects every allow-listed column.
    """
    names = list(projection) if projection else list(PROJECTION_MAP)
    columns = []
    for name in names:
        if name not in PROJECTION_MAP:
            raise InvalidColumnError(name)
        columns.append(table.c[PROJECTION_MAP[name]].label(name))
    return columns


def row_to_dict(row: SARow) -> Row:
    """Convert a result row to a column -> value dict."""
    return dict(row._mapping)


def bind_selection(selection: str, selection_args: Sequence[Any] | None) -> TextClause:
    """Turn a ``?``-placeholder WHERE fragment into a bound text clause.

    Only bare ``?`` placeholders are supported; numbered ``?NNN`` ones raise
    ``ValueError``. Placeholders inside quoted literals are left alone, but
    SQL comments are not recognised. The fragment is wrapped in parentheses
    so it can be ANDed with other conditions.
    """
    args = list(selection_args or [])
    parts: list[str] = []
    quote: str | None = None
    index = 0
    for position, char in enumerate(selection):
        if char == ":":
            # text() would read a bare colon as a named parameter
            parts.append("\\:")
        elif quote:
            if char == quote:
                quote = None
            parts.append(char)
        elif char in ("'", '"'):
            quote = char
            parts.append(char)
        elif char == "?":
            if selection[position + 1 : position + 2].isdigit():
                raise ValueError("Numbered placeholders are not supported")
            parts.append(f":arg{index}")
            index += 1
        else:
            parts.append(char)

    if index != len(args):
        raise ValueError(
            f"Selection has {index} placeholders but {len(args)} arguments were given"
        )

    clause = text(f"({''.join(parts)})")
    if args:
        clause = clause.bindparams(**{f"arg{i}": value for i, value in enumerate(args)})
    return clause
