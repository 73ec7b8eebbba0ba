"""
Health Check Endpoints
"""

from fastapi import APIRouter, Depends

from backend.api.deps import get_app_settings
from backend.core.config import Settings

router = APIRouter()


@router.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "promptveo-scene-api"}


@router.get("/ready")
async def readiness_check(settings: Settings = Depends(get_app_settings)):
    """Readiness check endpoint."""
    return {"status": "ready", "model": settings.gemini_model}
