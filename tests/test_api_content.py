"""Test content endpoints."""

import pytest
from httpx import AsyncClient

from trolly.core.contract import ItemStatus, ShoppingList

from .conftest import FIXED_NOW, UNTITLED, RecordingNotifier

COLLECTION = ShoppingList.CONTENT_URI


@pytest.mark.asyncio
async def test_insert_item(client: AsyncClient, notifier: RecordingNotifier):
    response = await client.post("/api/content/shoppinglist", json={"item": "Milk"})

    assert response.status_code == 201
    assert response.json() == {"uri": f"{COLLECTION}/1", "id": 1}
    assert notifier.uris == [f"{COLLECTION}/1"]


@pytest.mark.asyncio
async def test_insert_without_body_uses_defaults(client: AsyncClient):
    response = await client.post("/api/content/shoppinglist")
    assert response.status_code == 201

    response = await client.get("/api/content/shoppinglist/1")
    assert response.json()["items"] == [
        {
            "id": 1,
            "item": UNTITLED,
            "status": ItemStatus.ON_LIST,
            "created_at": FIXED_NOW,
            "modified_at": FIXED_NOW,
        }
    ]


@pytest.mark.asyncio
async def test_list_items(client: AsyncClient):
    await client.post("/api/content/shoppinglist", json={"item": "Milk"})
    await client.post(
        "/api/content/shoppinglist",
        json={"item": "Eggs", "status": int(ItemStatus.OFF_LIST)},
    )

    response = await client.get("/api/content/shoppinglist")

    assert response.status_code == 200
    data = response.json()
    assert data["uri"] == COLLECTION
    assert data["notification_uri"] == COLLECTION
    assert data["columns"] == ["id", "item", "status", "created_at", "modified_at"]
    assert [item["item"] for item in data["items"]] == ["Milk", "Eggs"]


@pytest.mark.asyncio
async def test_list_with_projection_selection_and_sort(client: AsyncClient):
    for name in ("Milk", "Eggs", "Tea"):
        await client.post("/api/content/shoppinglist", json={"item": name})
    await client.patch("/api/content/shoppinglist/2", json={"status": 1})

    response = await client.get(
        "/api/content/shoppinglist",
        params={
            "projection": ["id", "item"],
            "selection": "status = ?",
            "selection_args": ["0"],
            "sort_order": "item ASC",
        },
    )

    assert response.status_code == 200
    assert response.json()["items"] == [
        {"id": 1, "item": "Milk"},
        {"id": 3, "item": "Tea"},
    ]


@pytest.mark.asyncio
async def test_update_item(client: AsyncClient, notifier: RecordingNotifier):
    await client.post("/api/content/shoppinglist", json={"item": "Milk"})

    response = await client.patch(
        "/api/content/shoppinglist/1",
        json={"status": int(ItemStatus.IN_TROLLEY)},
    )

    assert response.status_code == 200
    assert response.json() == {"count": 1}
    assert notifier.uris[-1] == f"{COLLECTION}/1"

    item = (await client.get("/api/content/shoppinglist/1")).json()["items"][0]
    assert item["status"] == ItemStatus.IN_TROLLEY
    assert item["item"] == "Milk"


@pytest.mark.asyncio
async def test_update_missing_item_counts_zero(client: AsyncClient):
    response = await client.patch("/api/content/shoppinglist/5", json={"status": 1})
    assert response.status_code == 200
    assert response.json() == {"count": 0}


@pytest.mark.asyncio
async def test_update_with_empty_values_is_rejected(client: AsyncClient):
    response = await client.patch("/api/content/shoppinglist", json={})
    assert response.status_code == 400
    assert response.json()["detail"] == "Empty values"


@pytest.mark.asyncio
async def test_delete_item(client: AsyncClient):
    await client.post("/api/content/shoppinglist", json={"item": "Milk"})

    response = await client.delete("/api/content/shoppinglist/1")

    assert response.status_code == 200
    assert response.json() == {"count": 1}
    response = await client.get("/api/content/shoppinglist/1")
    assert response.json()["items"] == []


@pytest.mark.asyncio
async def test_delete_with_selection(client: AsyncClient):
    for name in ("Milk", "Eggs", "Tea"):
        await client.post("/api/content/shoppinglist", json={"item": name})

    response = await client.delete(
        "/api/content/shoppinglist",
        params={"selection": "item <> ?", "selection_args": ["Tea"]},
    )

    assert response.json() == {"count": 2}


@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["shoppinglist/abc", "notes", "shoppinglist/1/x"])
async def test_unknown_path_is_rejected(client: AsyncClient, notifier: RecordingNotifier, path: str):
    url = f"/api/content/{path}"
    expected = f"Unknown URI content://captainfanatic.provider.Trolly/{path}"

    for response in (
        await client.get(url),
        await client.post(url, json={"item": "Milk"}),
        await client.patch(url, json={"status": 1}),
        await client.delete(url),
        await client.get(f"/api/types/{path}"),
    ):
        assert response.status_code == 400
        assert response.json()["detail"] == expected

    assert notifier.uris == []


@pytest.mark.asyncio
async def test_insert_into_item_path_is_rejected(client: AsyncClient):
    response = await client.post("/api/content/shoppinglist/1", json={"item": "Milk"})
    assert response.status_code == 400


@pytest.mark.asyncio
async def test_invalid_projection_is_rejected(client: AsyncClient):
    response = await client.get("/api/content/shoppinglist", params={"projection": "password"})
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid column password"


@pytest.mark.asyncio
async def test_duplicate_id_conflicts(client: AsyncClient):
    await client.post("/api/content/shoppinglist", json={"id": 7, "item": "Milk"})

    response = await client.post("/api/content/shoppinglist", json={"id": 7, "item": "Eggs"})

    assert response.status_code == 409


@pytest.mark.asyncio
async def test_content_types(client: AsyncClient):
    response = await client.get("/api/types/shoppinglist")
    assert response.json() == {"uri": COLLECTION, "type": ShoppingList.CONTENT_TYPE}

    response = await client.get("/api/types/shoppinglist/4")
    assert response.json() == {"uri": f"{COLLECTION}/4", "type": ShoppingList.CONTENT_ITEM_TYPE}


@pytest.mark.asyncio
async def test_id_beyond_integer_range_is_not_found(client: AsyncClient):
    await client.post("/api/content/shoppinglist", json={"item": "Milk"})
    url = "/api/content/shoppinglist/99999999999999999999"

    response = await client.get(url)
    assert response.status_code == 200
    assert response.json()["items"] == []

    assert (await client.patch(url, json={"status": 1})).json() == {"count": 0}
    assert (await client.delete(url)).json() == {"count": 0}


@pytest.mark.asyncio
async def test_update_rejects_id_change(client: AsyncClient):
    await client.post("/api/content/shoppinglist", json={"item": "Milk"})

    response = await client.patch("/api/content/shoppinglist/1", json={"id": 99})

    assert response.status_code == 400
    assert response.json()["detail"] == "Column id cannot be updated"
    assert len((await client.get("/api/content/shoppinglist/1")).json()["items"]) == 1


@pytest.mark.asyncio
async def test_numbered_placeholder_is_rejected(client: AsyncClient):
    response = await client.get(
        "/api/content/shoppinglist",
        params={"selection": "status = ?1", "selection_args": ["0"]},
    )
    assert response.status_code == 400
    assert response.json()["detail"] == "Numbered placeholders are not supported"
