"""
API router - aggregates all endpoint modules. Routes live at the root path.
"""

from fastapi import APIRouter

from buildstore.api.endpoints import auth, categories, health, items

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(categories.router, prefix="/categories", tags=["categories"])
api_router.include_router(items.router, prefix="/items", tags=["items"])
api_router.include_router(auth.router, tags=["auth"])
