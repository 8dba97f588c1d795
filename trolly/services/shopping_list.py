"""Shopping list content provider.

Routes content identifiers to the storage repository, fills insert
defaults and publishes a change notification after every write.
"""

import logging
import time
from collections.abc import Awaitable, Callable, Mapping, Sequence
from typing import Any

from trolly.adapters.database import get_database_adapter
from trolly.core import events
from trolly.core.config import settings
from trolly.core.contract import ItemStatus, ShoppingList
from trolly.core.exceptions import InsertFailedError, UnknownUriError
from trolly.core.interfaces import IDatabaseAdapter, QueryResult
from trolly.core.uri import ITEM_ID, ITEMS, UriMatch, UriMatcher, uri_matcher, with_appended_id

logger = logging.getLogger(__name__)

# Receives the identifier whose data changed
Notifier = Callable[[str], Awaitable[None]]
Clock = Callable[[], int]


async def publish_change(uri: str) -> None:
    """Default notifier: publish on the in-process event bus."""
    await events.emit(events.CONTENT_CHANGED, uri=uri)


def current_millis() -> int:
    """Wall clock time in epoch milliseconds."""
    return int(time.time() * 1000)


class ShoppingListProvider:
    """URI-addressed CRUD over the shopping_list table."""

    def __init__(
        self,
        adapter: IDatabaseAdapter,
        notifier: Notifier | None = None,
        clock: Clock | None = None,
        untitled_label: str | None = None,
        matcher: UriMatcher = uri_matcher,
    ):
        """Initialize the provider.

        Args:
            adapter: Initialized database adapter
            notifier: Async callable invoked with the changed identifier
            clock: Returns the current time in epoch milliseconds
            untitled_label: Stored for items inserted without a name
            matcher: Routing table for content identifiers
        """
        self._adapter = adapter
        self._notifier = notifier or publish_change
        self._clock = clock or current_millis
        self._untitled_label = (
            untitled_label if untitled_label is not None else settings.untitled_label()
        )
        self._matcher = matcher

    @property
    def adapter(self) -> IDatabaseAdapter:
        return self._adapter

    def _match(self, uri: str, *codes: int) -> UriMatch:
        match = self._matcher.match(uri)
        if match is None or match.code not in codes:
            raise UnknownUriError(uri)
        return match

    async def _notify(self, uri: str) -> None:
        try:
            await self._notifier(uri)
        except Exception:
            logger.exception("Change notification failed for %s", uri)

    async def query(
        self,
        uri: str,
        projection: Sequence[str] | None = None,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
        sort_order: str | None = None,
    ) -> QueryResult:
        """Return rows for the collection or for a single item."""
        match = self._match(uri, ITEMS, ITEM_ID)

        async with self._adapter.session() as session:
            items = self._adapter.items(session)
            if match.code == ITEM_ID:
                result = await items.get(
                    match.item_id, projection, selection, selection_args, sort_order
                )
            else:
                result = await items.list(projection, selection, selection_args, sort_order)

        # Observers of this identifier learn when the rows go stale
        result.notification_uri = uri
        return result

    def get_type(self, uri: str) -> str:
        """Return the MIME label for an identifier."""
        match = self._match(uri, ITEMS, ITEM_ID)
        if match.code == ITEM_ID:
            return ShoppingList.CONTENT_ITEM_TYPE
        return ShoppingList.CONTENT_TYPE

    def apply_defaults(self, values: Mapping[str, Any] | None) -> dict[str, Any]:
        """Copy ``values`` and fill each missing column with its default."""
        filled = dict(values) if values else {}
        now = self._clock()

        if ShoppingList.CREATED_DATE not in filled:
            filled[ShoppingList.CREATED_DATE] = now
        if ShoppingList.MODIFIED_DATE not in filled:
            filled[ShoppingList.MODIFIED_DATE] = now
        if ShoppingList.ITEM not in filled:
            filled[ShoppingList.ITEM] = self._untitled_label
        if ShoppingList.STATUS not in filled:
            filled[ShoppingList.STATUS] = int(ItemStatus.ON_LIST)
        return filled

    async def insert(self, uri: str, values: Mapping[str, Any] | None = None) -> str:
        """Insert a row into the collection and return the new item's identifier."""
        self._match(uri, ITEMS)
        filled = self.apply_defaults(values)

        async with self._adapter.session() as session:
            row_id = await self._adapter.items(session).insert(filled)

        if not row_id or row_id <= 0:
            raise InsertFailedError(uri)

        item_uri = with_appended_id(ShoppingList.CONTENT_URI, row_id)
        logger.debug("Inserted %s", item_uri)
        await self._notify(item_uri)
        return item_uri

    async def update(
        self,
        uri: str,
        values: Mapping[str, Any],
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """Write ``values`` to every matching row. Returns the affected count.

        modified_at is written only when ``values`` carries it.
        """
        match = self._match(uri, ITEMS, ITEM_ID)

        async with self._adapter.session() as session:
            count = await self._adapter.items(session).update(
                match.item_id, values, selection, selection_args
            )

        logger.debug("Updated %d row(s) at %s", count, uri)
        await self._notify(uri)
        return count

    async def delete(
        self,
        uri: str,
        selection: str | None = None,
        selection_args: Sequence[Any] | None = None,
    ) -> int:
        """Delete every matching row. Returns the removed count."""
        match = self._match(uri, ITEMS, ITEM_ID)

        async with self._adapter.session() as session:
            count = await self._adapter.items(session).delete(
                match.item_id, selection, selection_args
            )

        logger.debug("Deleted %d row(s) at %s", count, uri)
        await self._notify(uri)
        return count


# Process-wide provider, set up by the application lifespan
_provider: ShoppingListProvider | None = None


async def init_provider(
    database_url: str | None = None,
    notifier: Notifier | None = None,
) -> ShoppingListProvider:
    """Open the database and install the process-wide provider."""
    global _provider

    adapter = await get_database_adapter(
        database_url or settings.DATABASE_URL, echo=settings.DATABASE_ECHO
    )
    _provider = ShoppingListProvider(adapter, notifier=notifier)
    return _provider


def get_provider() -> ShoppingListProvider:
    """Return the process-wide provider."""
    if _provider is None:
        raise RuntimeError("Provider not initialized. Call init_provider() first.")
    return _provider


async def shutdown_provider() -> None:
    """Close the process-wide provider's database."""
    global _provider

    if _provider is not None:
        await _provider.adapter.close()
        _provider = None
