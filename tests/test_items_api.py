"""
Item API tests - listing by category name, create, update, delete.
"""

import pytest
from httpx import AsyncClient

from buildstore.db.models import Item


async def add(client: AsyncClient, category: str, description: str, price: float):
    return await client.post("/items", json={"category": category, "description": description, "price": price})


@pytest.mark.asyncio
async def test_list_items_empty(client: AsyncClient):
    response = await client.get("/items/Steel")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_list_items_unknown_category_is_empty(client: AsyncClient):
    response = await client.get("/items/Plywood")
    assert response.status_code == 200
    assert response.json() == []


@pytest.mark.asyncio
async def test_add_item(client: AsyncClient):
    response = await add(client, "Cement", "OPC 53 grade bag", 420.5)
    assert response.status_code == 200
    assert response.json() == {"message": "Item added successfully!"}

    items = (await client.get("/items/Cement")).json()
    assert len(items) == 1
    assert items[0]["description"] == "OPC 53 grade bag"
    assert items[0]["price"] == 420.5
    assert isinstance(items[0]["category_id"], int)


@pytest.mark.asyncio
async def test_list_items_only_returns_that_category(client: AsyncClient):
    await add(client, "Steel", "TMT bar 8mm", 70)
    await add(client, "Steel", "Binding wire", 90)
    await add(client, "Sand", "River sand", 1500)

    steel = (await client.get("/items/Steel")).json()
    sand = (await client.get("/items/Sand")).json()
    assert sorted(i["description"] for i in steel) == ["Binding wire", "TMT bar 8mm"]
    assert [i["description"] for i in sand] == ["River sand"]
    assert len({i["category_id"] for i in steel}) == 1
    assert steel[0]["category_id"] != sand[0]["category_id"]


@pytest.mark.asyncio
async def test_add_item_unknown_category(client: AsyncClient, count_rows):
    response = await add(client, "Plywood", "18mm sheet", 1200)
    assert response.status_code == 404
    assert response.json() == {"error": "Category not found"}
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_add_item_missing_category(client: AsyncClient, count_rows):
    response = await client.post("/items", json={"description": "No category", "price": 1})
    assert response.status_code == 404
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_add_item_without_description_or_price(client: AsyncClient):
    response = await client.post("/items", json={"category": "Tapi"})
    assert response.status_code == 200
    items = (await client.get("/items/Tapi")).json()
    assert items[0]["description"] is None
    assert items[0]["price"] is None


@pytest.mark.asyncio
async def test_add_item_form_encoded(client: AsyncClient):
    response = await client.post("/items", data={"category": "Sand", "description": "M-sand", "price": "950"})
    assert response.status_code == 200
    items = (await client.get("/items/Sand")).json()
    assert items[0]["price"] == 950.0


@pytest.mark.asyncio
async def test_add_item_invalid_json(client: AsyncClient, count_rows):
    response = await client.post(
        "/items", content=b"{not json", headers={"Content-Type": "application/json"}
    )
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_add_item_non_numeric_price(client: AsyncClient, count_rows):
    response = await client.post("/items", json={"category": "Sand", "price": "cheap"})
    assert response.status_code == 500
    assert response.json() == {"error": "Internal Server Error"}
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_add_item_numeric_description_stored_as_text(client: AsyncClient):
    response = await client.post("/items", json={"category": "Steel", "description": 42, "price": 10})
    assert response.status_code == 200
    items = (await client.get("/items/Steel")).json()
    assert items[0]["description"] == "42"


@pytest.mark.asyncio
async def test_update_item(client: AsyncClient):
    await add(client, "Steel", "TMT bar 8mm", 70)
    item_id = (await client.get("/items/Steel")).json()[0]["id"]

    response = await client.put(f"/items/{item_id}", json={"description": "TMT bar 10mm", "price": 95.0})
    assert response.status_code == 200
    assert response.json() == {"message": "Item updated successfully!"}

    item = (await client.get("/items/Steel")).json()[0]
    assert item["description"] == "TMT bar 10mm"
    assert item["price"] == 95.0


@pytest.mark.asyncio
async def test_update_missing_item_still_succeeds(client: AsyncClient, count_rows):
    response = await client.put("/items/9999", json={"description": "ghost", "price": 1})
    assert response.status_code == 200
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_update_item_non_numeric_id_matches_nothing(client: AsyncClient):
    await add(client, "Steel", "TMT bar 8mm", 70)
    response = await client.put("/items/abc", json={"description": "x", "price": 1})
    assert response.status_code == 200
    assert response.json() == {"message": "Item updated successfully!"}
    assert (await client.get("/items/Steel")).json()[0]["description"] == "TMT bar 8mm"


@pytest.mark.asyncio
async def test_delete_item_non_numeric_id_matches_nothing(client: AsyncClient, count_rows):
    await add(client, "Steel", "TMT bar 8mm", 70)
    response = await client.delete("/items/abc")
    assert response.status_code == 200
    assert response.json() == {"message": "Item deleted successfully!"}
    assert await count_rows(Item) == 1


@pytest.mark.asyncio
async def test_delete_item(client: AsyncClient, count_rows):
    await add(client, "Cement", "PPC bag", 380)
    item_id = (await client.get("/items/Cement")).json()[0]["id"]

    response = await client.delete(f"/items/{item_id}")
    assert response.status_code == 200
    assert response.json() == {"message": "Item deleted successfully!"}
    assert await count_rows(Item) == 0


@pytest.mark.asyncio
async def test_delete_missing_item_still_succeeds(client: AsyncClient):
    response = await client.delete("/items/9999")
    assert response.status_code == 200
    assert response.json() == {"message": "Item deleted successfully!"}
