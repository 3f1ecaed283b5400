"""
Health checks - for load balancers and monitoring.
"""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("")
async def health(request: Request):
    """Liveness: is the process up?"""
    return {"status": "ok", "app": request.app.title}


@router.get("/ready")
async def ready():
    """Readiness: can accept traffic?"""
    return {"status": "ready"}
