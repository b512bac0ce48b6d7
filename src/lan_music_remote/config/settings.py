"""Application Settings and Configuration

Pydantic-based settings management using environment variables.
Settings are loaded from environment variables with support for .env files,
type validation, and sensible defaults. All settings are frozen and immutable
after initialization.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..domain.shared.messages import ErrorMessages


class ServerSettings(BaseModel):
    """Command channel (HTTP listener) configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("host", "bind"))
    port: int = Field(default=8080, ge=1, le=65535)
    static_dir: str = Field(
        default="wwwroot", validation_alias=AliasChoices("static_dir", "wwwroot")
    )


class LibrarySettings(BaseModel):
    """Music library scan configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    music_dir: str = Field(default="music", validation_alias=AliasChoices("music_dir", "path"))
    extensions: tuple[str, ...] = (".mp3", ".wav")

    @field_validator("extensions", mode="before")
    @classmethod
    def normalize_extensions(cls, v: tuple[str, ...] | list[str]) -> tuple[str, ...]:
        """Lower-case extensions and make sure each starts with a dot."""
        return tuple(
            ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v if ext
        )


class AudioSettings(BaseModel):
    """Audio playback configuration."""

    model_config = SettingsConfigDict(frozen=True, populate_by_name=True)

    default_volume: float = Field(default=0.5, ge=0.0, le=1.0)
    block_size: int = Field(default=2048, ge=0, le=65536)
    latency: Literal["low", "high"] = "high"


class Settings(BaseSettings):
    """Application settings container.

    Automatically loads configuration from environment variables.

    Environment variable naming:
    - ENVIRONMENT, DEBUG, LOG_LEVEL (top-level)
    - SERVER__PORT, SERVER__STATIC_DIR, etc. (nested with delimiter)
    - LIBRARY__MUSIC_DIR, LIBRARY__EXTENSIONS (JSON array)
    - AUDIO__DEFAULT_VOLUME, AUDIO__BLOCK_SIZE, AUDIO__LATENCY
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"

    server: ServerSettings = Field(default_factory=ServerSettings)
    library: LibrarySettings = Field(default_factory=LibrarySettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(
                ErrorMessages.INVALID_LOG_LEVEL.format(level=v, valid_levels=valid_levels)
            )
        return v_upper


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached application settings.

    Settings are automatically loaded from:
    1. .env file (if present)
    2. Environment variables
    3. Default values
    """
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
