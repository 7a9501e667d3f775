"""Tests for server settings."""

from config import Settings


def test_defaults(monkeypatch):
    for name in ("SILLI_HOST", "SILLI_PORT", "SILLI_RELOAD", "SILLI_DEBUG"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings(_env_file=None)
    assert settings.port == 8000
    assert settings.reload is False
    assert settings.debug is False


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("SILLI_PORT", "9000")
    monkeypatch.setenv("SILLI_DEBUG", "true")
    settings = Settings(_env_file=None)
    assert settings.port == 9000
    assert settings.debug is True
