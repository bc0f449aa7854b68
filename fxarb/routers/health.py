"""Health check endpoints."""

from fastapi import APIRouter
from datetime import datetime, timezone

from ..settings import get_settings

router = APIRouter()


@router.get("/healthz")
async def health_check():
    """Health check endpoint.

    Returns:
        Health status with service information
    """
    return {
        "ok": True,
        "service": "fxarb-api",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "healthy"
    }


@router.get("/health")
async def detailed_health():
    """Detailed health check endpoint.

    Returns:
        Detailed health information
    """
    return {
        "ok": True,
        "service": "fxarb-api",
        "version": get_settings().api_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "status": "healthy",
        "components": {
            "api": "healthy",
            "market_data": "synthetic",
            "database": "not_configured"
        }
    }
