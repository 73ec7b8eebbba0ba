"""
Backend Core Module
"""

from .config import Settings, get_settings
from .logging import setup_logging, get_logger
from .exceptions import (
    SceneServiceError,
    ConfigurationError,
    ValidationError,
    GenerationError,
    EmptyResponseError,
)

__all__ = [
    "Settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "SceneServiceError",
    "ConfigurationError",
    "ValidationError",
    "GenerationError",
    "EmptyResponseError",
]
