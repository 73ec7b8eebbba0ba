"""
PromptVEO Core Module

Session state, configuration, export helpers, logging and exceptions.
"""

from .exceptions import (
    PromptVeoError,
    ConfigurationError,
    InvalidConfigError,
    ValidationError,
    SessionBusyError,
    ExportError,
    TransportError,
)
from .config import ClientConfig, UIConfig, load_config, save_config, get_default_config
from .logging_config import LogLevel, setup_logging, get_logger
from .session import SceneSession, SessionState, clamp_expand_count

__all__ = [
    'PromptVeoError',
    'ConfigurationError',
    'InvalidConfigError',
    'ValidationError',
    'SessionBusyError',
    'ExportError',
    'TransportError',
    'ClientConfig',
    'UIConfig',
    'load_config',
    'save_config',
    'get_default_config',
    'LogLevel',
    'setup_logging',
    'get_logger',
    'SceneSession',
    'SessionState',
    'clamp_expand_count',
]
