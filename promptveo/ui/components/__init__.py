"""
PromptVEO UI Components
"""

from .scene_card import SceneCard
from .status_bar import StatusBar

__all__ = ["SceneCard", "StatusBar"]
