"""
Pydantic Models for API
"""

from .scene import (
    GenerateRequest,
    ExpandRequest,
    ErrorResponse,
)

__all__ = [
    "GenerateRequest",
    "ExpandRequest",
    "ErrorResponse",
]
