"""
PromptVEO Client Configuration

JSON-file configuration for the desktop client with environment overrides.
"""

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Optional

from .env_loader import get_backend_url
from .exceptions import InvalidConfigError

DEFAULT_BACKEND_URL = "http://localhost:3001"
DEFAULT_CONFIG_PATH = Path("config/promptveo_config.json")


@dataclass
class UIConfig:
    """UI configuration settings."""
    appearance_mode: str = "dark"
    window_width: int = 1400
    window_height: int = 860
    font_family: str = "Segoe UI"
    font_size: int = 13


@dataclass
class ClientConfig:
    """Main configuration for the PromptVEO client."""

    app_name: str = "PromptVEO Scene Studio"
    backend_url: str = DEFAULT_BACKEND_URL
    # None means wait for the backend indefinitely.
    request_timeout: Optional[float] = None
    default_expand_count: int = 1
    export_filename: str = "scenes.json"
    ui: UIConfig = field(default_factory=UIConfig)

    @classmethod
    def from_dict(cls, data: dict) -> 'ClientConfig':
        """Create ClientConfig from dictionary."""
        config = cls()

        config.app_name = data.get('app_name', config.app_name)
        config.backend_url = data.get('backend_url', config.backend_url)
        config.request_timeout = data.get('request_timeout', config.request_timeout)
        config.export_filename = data.get('export_filename', config.export_filename)

        try:
            config.default_expand_count = max(1, int(data.get('default_expand_count', 1)))
        except (TypeError, ValueError):
            raise InvalidConfigError(
                f"default_expand_count must be an integer, got {data.get('default_expand_count')!r}"
            )

        if 'ui' in data:
            ui_data = data['ui']
            config.ui = UIConfig(
                appearance_mode=ui_data.get('appearance_mode', 'dark'),
                window_width=ui_data.get('window_width', 1400),
                window_height=ui_data.get('window_height', 860),
                font_family=ui_data.get('font_family', 'Segoe UI'),
                font_size=ui_data.get('font_size', 13)
            )

        return config

    def to_dict(self) -> dict:
        """Convert configuration to dictionary."""
        return asdict(self)


def load_config(config_path: Path = None, apply_env: bool = True) -> ClientConfig:
    """
    Load configuration from a JSON file.

    Args:
        config_path: Path to configuration file. If None, uses default.
        apply_env: Let PROMPTVEO_BACKEND_URL override the file

    Returns:
        Loaded ClientConfig instance; defaults when the file is missing
    """
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if not config_path.exists():
        config = get_default_config()
    else:
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise InvalidConfigError(f"Invalid JSON in config file: {e}")
        if not isinstance(data, dict):
            raise InvalidConfigError("Config file must contain a JSON object")
        config = ClientConfig.from_dict(data)

    if apply_env:
        env_url = get_backend_url()
        if env_url:
            config.backend_url = env_url

    return config


def save_config(config: ClientConfig, config_path: Path = None) -> None:
    """Save configuration to a JSON file."""
    config_path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    config_path.parent.mkdir(parents=True, exist_ok=True)

    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config.to_dict(), f, indent=2)


def get_default_config() -> ClientConfig:
    """Get default configuration."""
    return ClientConfig()
