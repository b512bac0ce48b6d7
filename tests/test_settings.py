"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values for every settings group
- Loading settings from environment variables (flat and nested)
- Type coercion from strings
- Range validation and custom validators
- Settings caching and clearing
"""

import pytest
from pydantic import ValidationError

from lan_music_remote.config.settings import (
    AudioSettings,
    LibrarySettings,
    ServerSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)

# =============================================================================
# ServerSettings Tests
# =============================================================================


class TestServerSettings:
    """Unit tests for ServerSettings configuration."""

    def test_create_with_defaults(self):
        """Should listen on all interfaces, port 8080, serving wwwroot."""
        server = ServerSettings()

        assert server.host == "0.0.0.0"
        assert server.port == 8080
        assert server.static_dir == "wwwroot"

    def test_port_validation_minimum(self):
        with pytest.raises(ValidationError, match="greater than or equal to 1"):
            ServerSettings(port=0)

    def test_port_validation_maximum(self):
        with pytest.raises(ValidationError, match="less than or equal to 65535"):
            ServerSettings(port=70000)

    def test_host_alias_bind(self):
        """Should accept 'bind' as alias for host."""
        server = ServerSettings(bind="127.0.0.1")

        assert server.host == "127.0.0.1"

    def test_static_dir_alias_wwwroot(self):
        server = ServerSettings(wwwroot="/srv/www")

        assert server.static_dir == "/srv/www"

    def test_immutability(self):
        """Should not allow mutation after creation."""
        server = ServerSettings()

        with pytest.raises(ValidationError):
            server.port = 9090


# =============================================================================
# LibrarySettings Tests
# =============================================================================


class TestLibrarySettings:
    """Unit tests for LibrarySettings configuration."""

    def test_create_with_defaults(self):
        library = LibrarySettings()

        assert library.music_dir == "music"
        assert library.extensions == (".mp3", ".wav")

    def test_extensions_normalized(self):
        """Should lower-case extensions and add the leading dot."""
        library = LibrarySettings(extensions=["FLAC", ".Ogg", ""])

        assert library.extensions == (".flac", ".ogg")

    def test_music_dir_alias_path(self):
        library = LibrarySettings(path="/data/music")

        assert library.music_dir == "/data/music"


# =============================================================================
# AudioSettings Tests
# =============================================================================


class TestAudioSettings:
    """Unit tests for AudioSettings configuration."""

    def test_create_with_defaults(self):
        audio = AudioSettings()

        assert audio.default_volume == 0.5
        assert audio.block_size == 2048
        assert audio.latency == "high"

    def test_volume_validation_minimum(self):
        with pytest.raises(ValidationError, match="greater than or equal to 0"):
            AudioSettings(default_volume=-0.1)

    def test_volume_validation_maximum(self):
        with pytest.raises(ValidationError, match="less than or equal to 1"):
            AudioSettings(default_volume=1.5)

    def test_latency_literal(self):
        """Should only accept PortAudio's named latencies."""
        assert AudioSettings(latency="low").latency == "low"

        with pytest.raises(ValidationError, match="Input should be"):
            AudioSettings(latency="medium")


# =============================================================================
# Settings (Main Container) Tests
# =============================================================================


class TestSettings:
    """Unit tests for main Settings configuration container."""

    def test_create_with_all_defaults(self, monkeypatch):
        """Should create Settings with all default values."""
        for name in ("ENVIRONMENT", "DEBUG", "LOG_LEVEL"):
            monkeypatch.delenv(name, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert isinstance(settings.server, ServerSettings)
        assert isinstance(settings.library, LibrarySettings)
        assert isinstance(settings.audio, AudioSettings)

    def test_load_from_environment_variables(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("DEBUG", "true")
        monkeypatch.setenv("LOG_LEVEL", "WARNING")

        settings = Settings(_env_file=None)

        assert settings.environment == "production"
        assert settings.debug is True
        assert settings.log_level == "WARNING"

    def test_load_nested_settings_from_env(self, monkeypatch):
        """Should load nested settings using env_nested_delimiter."""
        monkeypatch.setenv("SERVER__PORT", "9000")
        monkeypatch.setenv("SERVER__STATIC_DIR", "/srv/remote")
        monkeypatch.setenv("LIBRARY__MUSIC_DIR", "/mnt/music")
        monkeypatch.setenv("LIBRARY__EXTENSIONS", '["flac", "MP3"]')
        monkeypatch.setenv("AUDIO__DEFAULT_VOLUME", "0.8")
        monkeypatch.setenv("AUDIO__LATENCY", "low")

        settings = Settings(_env_file=None)

        assert settings.server.port == 9000
        assert settings.server.static_dir == "/srv/remote"
        assert settings.library.music_dir == "/mnt/music"
        assert settings.library.extensions == (".flac", ".mp3")
        assert settings.audio.default_volume == 0.8
        assert settings.audio.latency == "low"

    def test_environment_validation(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "invalid")

        with pytest.raises(ValidationError, match="Input should be"):
            Settings(_env_file=None)

    def test_log_level_validation_case_insensitive(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        assert Settings(_env_file=None).log_level == "DEBUG"

    def test_log_level_validation_invalid(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "LOUD")

        with pytest.raises(ValidationError, match="Invalid log level"):
            Settings(_env_file=None)

    def test_nested_validation_propagates(self, monkeypatch):
        monkeypatch.setenv("SERVER__PORT", "0")

        with pytest.raises(ValidationError, match="greater than or equal to 1"):
            Settings(_env_file=None)


# =============================================================================
# Caching Tests
# =============================================================================


class TestSettingsCache:
    """Unit tests for get_settings caching."""

    def test_get_settings_is_cached(self):
        clear_settings_cache()
        try:
            assert get_settings() is get_settings()
        finally:
            clear_settings_cache()

    def test_clear_settings_cache_reloads(self, monkeypatch):
        """Should pick up environment changes after clearing the cache."""
        clear_settings_cache()
        try:
            monkeypatch.setenv("SERVER__PORT", "8081")
            first = get_settings()
            clear_settings_cache()
            monkeypatch.setenv("SERVER__PORT", "8082")
            second = get_settings()

            assert first.server.port == 8081
            assert second.server.port == 8082
        finally:
            clear_settings_cache()
