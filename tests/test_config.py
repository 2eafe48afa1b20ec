"""Tests for configuration module."""

import pytest

from police_buddy.config import Environment, Language, SearchProviderName, Settings


def test_default_settings():
    """Test that default settings are loaded correctly."""
    settings = Settings()

    assert settings.search_provider == SearchProviderName.MOCK
    assert settings.environment == Environment.DEVELOPMENT
    assert settings.default_language == Language.ENGLISH
    assert settings.log_level == "INFO"
    assert settings.memory_max_messages == 20
    assert settings.port == 3000


def test_settings_from_environment(monkeypatch):
    """Test that environment variables override defaults."""
    monkeypatch.setenv("SEARCH_PROVIDER", "http")
    monkeypatch.setenv("SEARCH_API_URL", "http://search:8080/api")
    monkeypatch.setenv("DEFAULT_LANGUAGE", "te")

    settings = Settings()

    assert settings.search_provider == SearchProviderName.HTTP
    assert settings.search_api_url == "http://search:8080/api"
    assert settings.default_language == Language.TELUGU


def test_validate_http_search_config():
    """Test HTTP search configuration validation."""
    settings = Settings(search_provider=SearchProviderName.HTTP)

    with pytest.raises(ValueError, match="Search API URL is required"):
        settings.validate_search_config()


def test_valid_http_search_config():
    """Test valid HTTP search configuration."""
    settings = Settings(
        search_provider=SearchProviderName.HTTP,
        search_api_url="http://search:8080/api",
    )

    # Should not raise
    settings.validate_search_config()


def test_validate_memory_size():
    """Test that an empty conversation memory is rejected."""
    settings = Settings(memory_max_messages=0)

    with pytest.raises(ValueError, match="memory_max_messages"):
        settings.validate_search_config()
