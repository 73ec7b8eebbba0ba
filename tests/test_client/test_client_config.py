"""
Tests for client configuration

Tests for promptveo/core/config.py
"""

import json

import pytest

from promptveo.core.config import (
    ClientConfig,
    UIConfig,
    get_default_config,
    load_config,
    save_config,
)
from promptveo.core.exceptions import InvalidConfigError


@pytest.fixture
def no_backend_env(monkeypatch):
    monkeypatch.delenv("PROMPTVEO_BACKEND_URL", raising=False)


class TestClientConfig:
    """Tests for ClientConfig dataclass."""

    def test_defaults(self):
        config = get_default_config()

        assert config.backend_url == "http://localhost:3001"
        assert config.request_timeout is None
        assert config.default_expand_count == 1
        assert config.export_filename == "scenes.json"
        assert isinstance(config.ui, UIConfig)

    def test_from_dict(self):
        config = ClientConfig.from_dict({
            "backend_url": "http://scenes.internal:8080",
            "request_timeout": 90,
            "default_expand_count": 3,
            "ui": {"appearance_mode": "light", "font_size": 15},
        })

        assert config.backend_url == "http://scenes.internal:8080"
        assert config.request_timeout == 90
        assert config.default_expand_count == 3
        assert config.ui.appearance_mode == "light"
        assert config.ui.font_size == 15
        assert config.ui.window_width == 1400

    def test_expand_count_clamped(self):
        assert ClientConfig.from_dict({"default_expand_count": 0}).default_expand_count == 1

    def test_bad_expand_count(self):
        with pytest.raises(InvalidConfigError):
            ClientConfig.from_dict({"default_expand_count": "many"})


class TestConfigFiles:

    def test_missing_file_gives_defaults(self, temp_dir, no_backend_env):
        config = load_config(temp_dir / "nope.json")
        assert config.to_dict() == ClientConfig().to_dict()

    def test_save_and_load(self, temp_dir, no_backend_env):
        path = temp_dir / "config" / "promptveo_config.json"
        original = ClientConfig(backend_url="http://10.0.0.5:3001", default_expand_count=2)

        save_config(original, path)
        loaded = load_config(path)

        assert loaded.backend_url == "http://10.0.0.5:3001"
        assert loaded.default_expand_count == 2

    def test_invalid_json(self, temp_dir, no_backend_env):
        path = temp_dir / "bad.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(InvalidConfigError):
            load_config(path)

    def test_non_object(self, temp_dir, no_backend_env):
        path = temp_dir / "list.json"
        path.write_text(json.dumps(["a"]), encoding="utf-8")

        with pytest.raises(InvalidConfigError):
            load_config(path)

    def test_env_overrides_file(self, temp_dir, monkeypatch):
        path = temp_dir / "config.json"
        path.write_text(json.dumps({"backend_url": "http://from-file:3001"}), encoding="utf-8")
        monkeypatch.setenv("PROMPTVEO_BACKEND_URL", "http://from-env:4000")

        assert load_config(path).backend_url == "http://from-env:4000"
        assert load_config(path, apply_env=False).backend_url == "http://from-file:3001"
