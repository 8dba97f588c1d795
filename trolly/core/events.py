"""Lightweight async event bus for change notifications.

The content provider emits ``content.changed`` after every successful write.
Observers (the WebSocket endpoint, tests, embedding applications) subscribe
to it.

Usage:
    from trolly.core.events import CONTENT_CHANGED, on, emit, clear

    async def my_handler(**kwargs):
        print(kwargs["uri"])

    on(CONTENT_CHANGED, my_handler)
    await emit(CONTENT_CHANGED, uri="content://captainfanatic.provider.Trolly/shoppinglist/1")
"""

import logging
from typing import Any, Callable, Coroutine

logger = logging.getLogger(__name__)

CONTENT_CHANGED = "content.changed"

EventHandler = Callable[..., Coroutine[Any, Any, None]]

_handlers: dict[str, list[EventHandler]] = {}


def on(event_name: str, handler: EventHandler) -> None:
    """Subscribe to an event."""
    _handlers.setdefault(event_name, []).append(handler)


def off(event_name: str, handler: EventHandler) -> None:
    """Unsubscribe from an event. Unknown handlers are ignored."""
    handlers = _handlers.get(event_name, [])
    if handler in handlers:
        handlers.remove(handler)


async def emit(event_name: str, **kwargs) -> None:
    """Emit an event to all subscribers. Failures are logged, not raised."""
    for handler in list(_handlers.get(event_name, [])):
        try:
            await handler(**kwargs)
        except Exception:
            logger.exception("Event handler failed for '%s'", event_name)


def clear() -> None:
    """Clear all handlers. Used in tests."""
    _handlers.clear()
