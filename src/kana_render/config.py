"""Configuration management for Kana Render."""

from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration via environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Comma-separated tag names, highest priority first
    enabled_tags: str = Field(
        default="hg,kk,hk",
        alias="KANA_RENDER_TAGS",
    )

    # Rendering
    css_class: str = Field(
        default="japanese-render",
        alias="KANA_RENDER_CSS_CLASS",
    )
    font_family: str = Field(
        default="Noto Sans JP",
        alias="KANA_RENDER_FONT",
    )

    # Output files get this suffix before the extension
    output_suffix: str = Field(
        default="-kana",
        alias="KANA_RENDER_SUFFIX",
    )

    @property
    def tag_names(self) -> list[str]:
        """Enabled tag names in priority order."""
        return [name.strip() for name in self.enabled_tags.split(",") if name.strip()]


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, creating it if needed."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def load_settings(env_file: Optional[Path] = None) -> Settings:
    """Load settings from an optional specific .env file."""
    global _settings
    if env_file:
        _settings = Settings(_env_file=env_file)
    else:
        _settings = Settings()
    return _settings
