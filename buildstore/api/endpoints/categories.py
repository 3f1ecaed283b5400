"""
Category endpoints - read-only listing of the seeded categories.
"""

from fastapi import APIRouter

from buildstore.api.dependencies import CatalogServiceDep
from buildstore.schemas.category import CategoryResponse

router = APIRouter()


@router.get("", response_model=list[CategoryResponse])
async def list_categories(svc: CatalogServiceDep):
    """All categories, in store order."""
    return await svc.list_categories()
