"""Core configuration, contract, routing and interfaces.

- Settings: Application configuration
- Contract: Authority, columns, MIME labels and defaults clients rely on
- Routing: Content identifier matcher
- Interfaces: Contracts for swappable storage implementations
"""

from .config import Settings, settings
from .contract import AUTHORITY, PROJECTION_MAP, ItemStatus, ShoppingList
from .uri import ITEM_ID, ITEMS, UriMatch, UriMatcher, uri_matcher

__all__ = [
    # Configuration
    "Settings",
    "settings",
    # Contract
    "AUTHORITY",
    "PROJECTION_MAP",
    "ItemStatus",
    "ShoppingList",
    # Routing
    "ITEMS",
    "ITEM_ID",
    "UriMatch",
    "UriMatcher",
    "uri_matcher",
]
