"""Services layer."""

from .shopping_list import (
    ShoppingListProvider,
    get_provider,
    init_provider,
    publish_change,
    shutdown_provider,
)

__all__ = [
    "ShoppingListProvider",
    "get_provider",
    "init_provider",
    "publish_change",
    "shutdown_provider",
]
