"""
Backend Services
"""

from .scenes import SceneService

__all__ = ["SceneService"]
