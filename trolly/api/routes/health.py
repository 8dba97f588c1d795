"""Health check endpoints."""

from fastapi import APIRouter

from trolly.services.shopping_list import get_provider

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check() -> dict:
    """Readiness check including the database."""
    try:
        provider = get_provider()
    except RuntimeError:
        database = "not_initialized"
    else:
        database = "healthy" if await provider.adapter.health_check() else "unhealthy"

    return {
        "status": "ready" if database == "healthy" else "not_ready",
        "services": {"database": database},
    }
