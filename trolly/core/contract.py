"""Public contract of the shopping list content store.

Clients address data through these identifiers and column names. Everything
here is fixed at import time and never mutated afterwards.
"""

from enum import IntEnum
from types import MappingProxyType

AUTHORITY = "captainfanatic.provider.Trolly"

SCHEME = "content"


class ItemStatus(IntEnum):
    """State of an item on the shopping list."""

    ON_LIST = 0
    IN_TROLLEY = 1
    OFF_LIST = 2


class ShoppingList:
    """Columns and identifiers of the shopping_list table."""

    PATH = "shoppinglist"

    CONTENT_URI = f"{SCHEME}://{AUTHORITY}/{PATH}"

    # MIME labels reported by get_type()
    CONTENT_TYPE = "vnd.android.cursor.dir/vnd.captainfanatic.trolly.item"
    CONTENT_ITEM_TYPE = "vnd.android.cursor.item/vnd.captainfanatic.trolly.item"

    ID = "id"
    ITEM = "item"
    STATUS = "status"
    CREATED_DATE = "created_at"
    MODIFIED_DATE = "modified_at"

    DEFAULT_SORT_ORDER = "id ASC"


# Columns a caller may project. Keys are the names callers use, values the
# table columns they resolve to.
PROJECTION_MAP = MappingProxyType(
    {
        ShoppingList.ID: ShoppingList.ID,
        ShoppingList.ITEM: ShoppingList.ITEM,
        ShoppingList.STATUS: ShoppingList.STATUS,
        ShoppingList.CREATED_DATE: ShoppingList.CREATED_DATE,
        ShoppingList.MODIFIED_DATE: ShoppingList.MODIFIED_DATE,
    }
)

UNTITLED_LABELS = MappingProxyType(
    {
        "en": "<Untitled>",
        "de": "<Unbenannt>",
        "es": "<Sin título>",
        "fr": "<Sans titre>",
        "it": "<Senza titolo>",
        "nl": "<Naamloos>",
    }
)


def untitled_label(locale: str) -> str:
    """Return the "untitled" label for a locale such as ``de`` or ``fr_CA``."""
    language = locale.replace("-", "_").split("_", 1)[0].lower()
    return UNTITLED_LABELS.get(language, UNTITLED_LABELS["en"])
