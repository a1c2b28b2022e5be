"""
Health Check Router
===================
Endpoints for health and readiness checks.
"""
from fastapi import APIRouter

from linecounter import __version__

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """Readiness check; the service has no external dependencies."""
    return {"status": "ready"}
