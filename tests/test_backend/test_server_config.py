"""
Tests for backend settings and startup

Tests for backend/core/config.py and backend.main.run
"""

import pytest

from backend.core.config import Settings
from backend.main import MISSING_KEY_MESSAGE, build_provider
from backend.core.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch):
    for name in ("GEMINI_API_KEY", "GOOGLE_API_KEY", "PORT", "GEMINI_MODEL", "TEMPERATURE"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestSettings:

    def test_defaults(self, clean_env):
        settings = Settings(_env_file=None)

        assert settings.port == 3001
        assert settings.gemini_model == "gemini-2.5-pro"
        assert settings.temperature == 0.7
        assert settings.request_timeout is None
        assert not settings.has_api_key

    def test_gemini_key_from_env(self, clean_env):
        clean_env.setenv("GEMINI_API_KEY", "from-env")
        assert Settings(_env_file=None).gemini_api_key == "from-env"

    def test_google_key_fallback(self, clean_env):
        clean_env.setenv("GOOGLE_API_KEY", "google-key")
        assert Settings(_env_file=None).gemini_api_key == "google-key"

    def test_env_file(self, clean_env, temp_dir):
        env_file = temp_dir / ".env"
        env_file.write_text("GEMINI_API_KEY=file-key\nPORT=4000\n", encoding="utf-8")

        settings = Settings(_env_file=env_file)

        assert settings.gemini_api_key == "file-key"
        assert settings.port == 4000

    def test_settings_are_immutable(self, clean_env):
        settings = Settings(_env_file=None)
        with pytest.raises(Exception):
            settings.port = 9999


class TestStartup:

    def test_build_provider_without_key_fails(self, clean_env):
        with pytest.raises(ConfigurationError) as exc_info:
            build_provider(Settings(_env_file=None))
        assert exc_info.value.message == MISSING_KEY_MESSAGE

    def test_run_exits_without_key(self, clean_env, monkeypatch):
        import backend.main as main_module

        monkeypatch.setattr(main_module, "get_settings", lambda: Settings(_env_file=None))
        served = []
        monkeypatch.setattr(main_module.uvicorn, "run", lambda *a, **kw: served.append(a))

        with pytest.raises(SystemExit) as exc_info:
            main_module.run()

        assert exc_info.value.code == 1
        assert served == []
