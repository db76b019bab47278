"""
Unit Tests for Application Settings Configuration

Tests for:
- Default values for nested settings
- Environment variable loading with the nested delimiter
- Validation of ranges, URLs and log levels
- Settings caching and clearing
"""

import pytest
from pydantic import ValidationError

from discord_music_resolver.config.settings import (
    HttpSettings,
    SearchSettings,
    Settings,
    YouTubeSettings,
    clear_settings_cache,
    get_settings,
)


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    """Run without a stray .env file and with a fresh cache."""
    monkeypatch.chdir(tmp_path)
    clear_settings_cache()
    yield
    clear_settings_cache()


# =============================================================================
# Nested Settings
# =============================================================================


class TestHttpSettings:
    """Unit tests for HttpSettings."""

    def test_defaults(self):
        http = HttpSettings()
        assert http.timeout_s == 15.0
        assert "Mozilla" in http.user_agent
        assert http.accept_language.startswith("en")

    def test_timeout_alias(self):
        """Should accept the short timeout alias."""
        assert HttpSettings(timeout=3).timeout_s == 3.0

    @pytest.mark.parametrize("value", [0, -1, 500])
    def test_timeout_range(self, value):
        with pytest.raises(ValidationError):
            HttpSettings(timeout_s=value)

    def test_frozen(self):
        with pytest.raises(ValidationError):
            HttpSettings().timeout_s = 1


class TestSearchSettings:
    """Unit tests for SearchSettings."""

    def test_defaults(self):
        assert SearchSettings().default_limit == 5

    def test_limit_alias(self):
        assert SearchSettings(limit=10).default_limit == 10

    @pytest.mark.parametrize("value", [0, 101])
    def test_limit_range(self, value):
        with pytest.raises(ValidationError):
            SearchSettings(default_limit=value)


class TestYouTubeSettings:
    """Unit tests for YouTubeSettings."""

    def test_defaults(self):
        yt = YouTubeSettings()
        assert yt.base_url == "https://www.youtube.com"
        assert yt.page_size == 100
        assert yt.mix_author == "YouTube Mix"

    def test_trailing_slash_stripped(self):
        assert YouTubeSettings(base_url="https://yt.example/").base_url == "https://yt.example"

    def test_rejects_non_http_base(self):
        with pytest.raises(ValidationError):
            YouTubeSettings(base_url="ftp://youtube.com")


# =============================================================================
# Root Settings
# =============================================================================


class TestSettings:
    """Unit tests for the root Settings container."""

    def test_defaults(self):
        settings = Settings()
        assert settings.environment == "development"
        assert settings.debug is False
        assert settings.log_level == "INFO"
        assert settings.search.default_limit == 5

    def test_nested_env(self, monkeypatch):
        """Should read nested values with the __ delimiter."""
        monkeypatch.setenv("SEARCH__DEFAULT_LIMIT", "8")
        monkeypatch.setenv("YOUTUBE__PAGE_SIZE", "50")
        monkeypatch.setenv("HTTP__TIMEOUT_S", "2.5")

        settings = Settings()

        assert settings.search.default_limit == 8
        assert settings.youtube.page_size == 50
        assert settings.http.timeout_s == 2.5

    def test_log_level_normalised(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Settings().log_level == "DEBUG"

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_invalid_environment(self):
        with pytest.raises(ValidationError):
            Settings(environment="staging")

    def test_env_file(self, tmp_path):
        """Should load values from .env in the working directory."""
        (tmp_path / ".env").write_text("ENVIRONMENT=test\nSEARCH__DEFAULT_LIMIT=3\n")
        settings = Settings()
        assert settings.environment == "test"
        assert settings.search.default_limit == 3


class TestSettingsCache:
    """Tests for get_settings caching."""

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_clear(self):
        first = get_settings()
        clear_settings_cache()
        assert get_settings() is not first
