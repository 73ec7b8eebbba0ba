"""
PromptVEO Client Exceptions

Exception classes raised by the desktop client and its backend connector.
"""


class PromptVeoError(Exception):
    """Base exception for all client errors."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self):
        return self.message


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================

class ConfigurationError(PromptVeoError):
    """Raised when there's an issue with configuration."""
    pass


class InvalidConfigError(ConfigurationError):
    """Raised when a configuration value or file is invalid."""
    pass


# =============================================================================
# SESSION ERRORS
# =============================================================================

class ValidationError(PromptVeoError):
    """Raised when user input fails a guardrail before any request is made."""
    pass


class SessionBusyError(PromptVeoError):
    """Raised when a request is started while another is in flight."""

    def __init__(self):
        super().__init__("A request is already in progress.")


class ExportError(PromptVeoError):
    """Raised when scenes cannot be exported or imported."""
    pass


# =============================================================================
# TRANSPORT ERRORS
# =============================================================================

TRANSPORT_PREFIX = "Failed to communicate with the server: "


class TransportError(PromptVeoError):
    """Raised when the scene backend cannot be reached or answers with an error."""

    def __init__(self, reason: str, status_code: int = None):
        super().__init__(f"{TRANSPORT_PREFIX}{reason}", {"status_code": status_code})
        self.reason = reason
        self.status_code = status_code
