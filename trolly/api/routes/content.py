"""Content endpoints: query, insert, update and delete by identifier.

``{path}`` is resolved under the provider authority, so
``/api/content/shoppinglist/3`` addresses
``content://captainfanatic.provider.Trolly/shoppinglist/3``.
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import BaseModel

from trolly.core.uri import content_uri, uri_matcher
from trolly.services.shopping_list import ShoppingListProvider, get_provider

logger = logging.getLogger(__name__)

router = APIRouter(tags=["content"])


class QueryResponse(BaseModel):
    """Response model for a content query."""

    uri: str
    notification_uri: str | None
    columns: list[str]
    items: list[dict[str, Any]]


class InsertResponse(BaseModel):
    """Response model for an insert."""

    uri: str
    id: int


class CountResponse(BaseModel):
    """Rows affected by an update or delete."""

    count: int


class TypeResponse(BaseModel):
    """MIME label of an identifier."""

    uri: str
    type: str


@router.get("/content/{path:path}", response_model=QueryResponse)
async def query_content(
    path: str,
    projection: list[str] | None = Query(None),
    selection: str | None = Query(None),
    selection_args: list[str] | None = Query(None),
    sort_order: str | None = Query(None),
    provider: ShoppingListProvider = Depends(get_provider),
) -> QueryResponse:
    """Query the collection or a single item."""
    uri = content_uri(path)
    result = await provider.query(uri, projection, selection, selection_args, sort_order)
    return QueryResponse(
        uri=uri,
        notification_uri=result.notification_uri,
        columns=result.columns,
        items=result.rows,
    )


@router.post(
    "/content/{path:path}",
    response_model=InsertResponse,
    status_code=status.HTTP_201_CREATED,
)
async def insert_content(
    path: str,
    values: dict[str, Any] | None = Body(None),
    provider: ShoppingListProvider = Depends(get_provider),
) -> InsertResponse:
    """Insert an item. Missing columns receive their defaults."""
    item_uri = await provider.insert(content_uri(path), values)
    match = uri_matcher.match(item_uri)
    return InsertResponse(uri=item_uri, id=match.item_id)


@router.patch("/content/{path:path}", response_model=CountResponse)
async def update_content(
    path: str,
    values: dict[str, Any] = Body(...),
    selection: str | None = Query(None),
    selection_args: list[str] | None = Query(None),
    provider: ShoppingListProvider = Depends(get_provider),
) -> CountResponse:
    """Update matching items with the given column values."""
    count = await provider.update(content_uri(path), values, selection, selection_args)
    return CountResponse(count=count)


@router.delete("/content/{path:path}", response_model=CountResponse)
async def delete_content(
    path: str,
    selection: str | None = Query(None),
    selection_args: list[str] | None = Query(None),
    provider: ShoppingListProvider = Depends(get_provider),
) -> CountResponse:
    """Delete matching items."""
    count = await provider.delete(content_uri(path), selection, selection_args)
    return CountResponse(count=count)


@router.get("/types/{path:path}", response_model=TypeResponse)
async def content_type(
    path: str,
    provider: ShoppingListProvider = Depends(get_provider),
) -> TypeResponse:
    """Return the MIME label of an identifier."""
    uri = content_uri(path)
    return TypeResponse(uri=uri, type=provider.get_type(uri))
