"""
Item endpoints - list by category name, create, update, delete.
Thin controllers; the catalog service holds the logic.
"""

from typing import Annotated

from fastapi import APIRouter, Depends

from buildstore.api.dependencies import CatalogServiceDep, parsed_body
from buildstore.schemas.item import ItemCreate, ItemResponse, ItemUpdate
from buildstore.schemas.user import MessageResponse

router = APIRouter()


@router.get("/{category}", response_model=list[ItemResponse])
async def list_items(svc: CatalogServiceDep, category: str):
    """Items of one category by name; unknown names return []."""
    return await svc.list_items(category)


@router.post("", response_model=MessageResponse)
async def add_item(svc: CatalogServiceDep, data: Annotated[ItemCreate, Depends(parsed_body(ItemCreate))]):
    await svc.add_item(data)
    return MessageResponse(message="Item added successfully!")


@router.put("/{item_id}", response_model=MessageResponse)
async def update_item(
    svc: CatalogServiceDep,
    item_id: str,
    data: Annotated[ItemUpdate, Depends(parsed_body(ItemUpdate))],
):
    await svc.update_item(item_id, data)
    return MessageResponse(message="Item updated successfully!")


@router.delete("/{item_id}", response_model=MessageResponse)
async def delete_item(svc: CatalogServiceDep, item_id: str):
    await svc.delete_item(item_id)
    return MessageResponse(message="Item deleted successfully!")
