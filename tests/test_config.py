# =============================================================================
# tests/test_config.py - Settings Tests
# =============================================================================

import pytest
from pydantic import ValidationError

from app.config import Settings


def _settings(monkeypatch, **env):
    for name in ("BACKEND_URL", "VITE_BACKEND_URL", "BACKEND_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    for name, value in env.items():
        monkeypatch.setenv(name, value)
    return Settings(_env_file=None)


def test_backend_url_default(monkeypatch):
    settings = _settings(monkeypatch)

    assert settings.backend_base_url == "http://localhost:8000"
    assert settings.BACKEND_TIMEOUT_SECONDS is None
    assert settings.CONTENT_REQUIRE_SUCCESS is False


def test_empty_backend_url_uses_default(monkeypatch):
    assert _settings(monkeypatch, BACKEND_URL="").backend_base_url == "http://localhost:8000"


def test_trailing_slash_stripped(monkeypatch):
    settings = _settings(monkeypatch, BACKEND_URL="https://api.qarakal.com/")

    assert settings.backend_base_url == "https://api.qarakal.com"


def test_vite_alias(monkeypatch):
    settings = _settings(monkeypatch, VITE_BACKEND_URL="http://content:9000")

    assert settings.backend_base_url == "http://content:9000"


def test_timeout_must_be_positive(monkeypatch):
    with pytest.raises(ValidationError):
        _settings(monkeypatch, BACKEND_TIMEOUT_SECONDS="0")


def test_cors_origins_list(monkeypatch):
    settings = _settings(monkeypatch, CORS_ORIGINS="http://a.test, http://b.test")

    assert settings.cors_origins_list == ["http://a.test", "http://b.test"]
