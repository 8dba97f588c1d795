"""Database persistence layer."""

from .database import DATABASE_VERSION, create_engine, get_schema_version, open_schema
from .models import Base, ShoppingListItem

__all__ = [
    "DATABASE_VERSION",
    "create_engine",
    "get_schema_version",
    "open_schema",
    "Base",
    "ShoppingListItem",
]
