"""WebSocket endpoint streaming content change notifications."""

import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from trolly.core.contract import ShoppingList
from trolly.core.events import CONTENT_CHANGED, off, on
from trolly.core.uri import notifies

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/ws", tags=["observe"])


@router.websocket("/observe")
async def observe_websocket(
    websocket: WebSocket,
    uri: str = ShoppingList.CONTENT_URI,
    descendants: bool = False,
):
    """Send ``{"type": "change", "uri": ...}`` for every change under ``uri``."""

    async def forward(**kwargs) -> None:
        changed = kwargs["uri"]
        if notifies(uri, changed, descendants):
            await websocket.send_json({"type": "change", "uri": changed})

    await websocket.accept()
    on(CONTENT_CHANGED, forward)
    try:
        logger.info("Observer connected for %s (descendants=%s)", uri, descendants)
        while True:
            # Keep connection alive - client can send ping messages
            await websocket.receive_text()
    except WebSocketDisconnect:
        logger.info("Observer disconnected from %s", uri)
    finally:
        off(CONTENT_CHANGED, forward)
