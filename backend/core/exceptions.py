"""
Backend Exceptions

Error types raised by the scene service and translated to HTTP responses
by the API layer.
"""


class SceneServiceError(Exception):
    """Base exception for all proxy service errors."""

    status_code = 500

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return self.message


class ConfigurationError(SceneServiceError):
    """Raised when the service cannot be configured (missing API key)."""
    pass


class ValidationError(SceneServiceError):
    """Raised when a required request field is missing or empty."""

    status_code = 400


class GenerationError(SceneServiceError):
    """Raised when the provider call fails or returns unusable output."""
    pass


class EmptyResponseError(GenerationError):
    """Raised when the provider returns no text at all."""

    def __init__(self, message: str = "Empty response from API", details: dict = None):
        super().__init__(message, details)
