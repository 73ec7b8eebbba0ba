"""
API Routes Module
"""

from . import health, scenes

__all__ = ["health", "scenes"]
