"""
API Dependencies

Common dependencies for route handlers.
"""

from fastapi import Request

from backend.core.config import Settings
from backend.services.scenes import SceneService


def get_scene_service(request: Request) -> SceneService:
    """Scene service built once at startup and stored on app state."""
    return request.app.state.scene_service


def get_app_settings(request: Request) -> Settings:
    """Settings the app was created with."""
    return request.app.state.settings
