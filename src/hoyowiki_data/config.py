"""
Configuration management for HoYoWiki page normalization.

Loads settings from environment variables and config file, with sensible defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="HOYOWIKI_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_base_url: str = Field(
        default="https://sg-wiki-api-static.hoyolab.com/hoyowiki",
        description="HoYoLAB wiki API root",
    )
    api_timeout: float = Field(default=30.0, description="HTTP request timeout in seconds")
    language: str = Field(default="en-US", description="Content language requested upstream")
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/123.0.0.0 Safari/537.36"
        ),
        description="User-Agent header sent to the wiki API",
    )
    log_level: str = Field(default="INFO", description="Logging level")
    category_overrides: Path | None = Field(
        default=None,
        description="YAML file adding or replacing category table entries",
    )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings
