"""
PromptVEO Services
"""

from .scene_client import SceneApiClient

__all__ = ["SceneApiClient"]
