"""Configuration management using pydantic-settings."""

from enum import Enum

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Language(str, Enum):
    """Supported conversation languages."""

    ENGLISH = "en"
    TELUGU = "te"


class SearchProviderName(str, Enum):
    """Supported search providers."""

    MOCK = "mock"
    HTTP = "http"


class Environment(str, Enum):
    """Application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Search Configuration
    search_provider: SearchProviderName = Field(
        default=SearchProviderName.MOCK,
        description="Search provider used to enrich responses",
    )
    search_api_url: str | None = Field(
        default=None,
        description="Search API endpoint for the HTTP provider",
    )
    search_api_key: str | None = Field(
        default=None,
        description="Search API key for the HTTP provider",
    )
    search_timeout: float = Field(
        default=5.0,
        description="Per-request search timeout in seconds",
    )
    search_max_retries: int = Field(
        default=2,
        description="Retries after a failed search request",
    )
    search_failure_threshold: int = Field(
        default=3,
        description="Consecutive failures before the search circuit opens",
    )
    search_reset_seconds: float = Field(
        default=30.0,
        description="Seconds the search circuit stays open",
    )
    search_delay: float = Field(
        default=1.0,
        description="Simulated latency of the mock search provider",
    )

    # Conversation Configuration
    response_timeout: float = Field(
        default=15.0,
        description="Seconds to wait for a composed response before falling back",
    )
    memory_max_messages: int = Field(
        default=20,
        description="Messages kept in a session's conversation memory",
    )
    session_idle_seconds: float | None = Field(
        default=1800.0,
        description="Seconds of inactivity after which a session is forgotten",
    )
    default_language: Language = Field(
        default=Language.ENGLISH,
        description="Language used when a request does not name one",
    )

    # Web Server Configuration
    host: str = Field(default="0.0.0.0", description="Web server bind address")
    port: int = Field(default=3000, description="Web server port")

    # Application Configuration
    log_level: str = Field(
        default="INFO",
        description="Logging level",
    )
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment",
    )

    def validate_search_config(self) -> None:
        """Validate that the selected search provider is fully configured."""
        if self.search_provider == SearchProviderName.HTTP and not self.search_api_url:
            raise ValueError("Search API URL is required when using HTTP search provider")
        if self.memory_max_messages < 1:
            raise ValueError("memory_max_messages must be at least 1")
        if self.response_timeout <= 0:
            raise ValueError("response_timeout must be positive")


# Global settings instance - lazy loaded
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
