"""Tests for config module."""

from pathlib import Path

from hoyowiki_data.config import Settings, get_settings, reload_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("HOYOWIKI_CATEGORY_OVERRIDES", raising=False)
    settings = Settings()

    assert settings.api_base_url == "https://sg-wiki-api-static.hoyolab.com/hoyowiki"
    assert settings.api_timeout == 30.0
    assert settings.language == "en-US"
    assert settings.log_level == "INFO"
    assert settings.category_overrides is None


def test_settings_from_env(monkeypatch):
    monkeypatch.setenv("HOYOWIKI_API_TIMEOUT", "60.0")
    monkeypatch.setenv("HOYOWIKI_LANGUAGE", "ja-JP")
    monkeypatch.setenv("HOYOWIKI_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("HOYOWIKI_CATEGORY_OVERRIDES", "/tmp/categories.yaml")

    settings = reload_settings()

    assert settings.api_timeout == 60.0
    assert settings.language == "ja-JP"
    assert settings.log_level == "DEBUG"
    assert settings.category_overrides == Path("/tmp/categories.yaml")


def test_settings_ignores_extra_env_vars(monkeypatch):
    monkeypatch.setenv("HOYOWIKI_UNKNOWN_VAR", "value")

    settings = reload_settings()

    assert not hasattr(settings, "unknown_var")


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
