"""Factory for creating search providers from configuration."""

import logging

from police_buddy.config import SearchProviderName, Settings, get_settings

from .augmentor import SearchAugmentor
from .base import SearchProvider, SearchProviderFactory
from .http import HttpSearchConfig

logger = logging.getLogger(__name__)

# Seconds left to compose the reply after a search gives up.
SEARCH_DEADLINE_MARGIN = 1.0


def create_search_provider(
    provider_name: str | None = None,
    settings: Settings | None = None,
) -> SearchProvider:
    """Create search provider from configuration.

    Args:
        provider_name: Override provider name, defaults to settings.search_provider
        settings: Settings to read, defaults to the global settings

    Returns:
        Configured search provider instance

    Raises:
        ValueError: If provider configuration is invalid
    """
    settings = settings or get_settings()
    provider_name = provider_name or settings.search_provider

    if provider_name == SearchProviderName.MOCK:
        from .mock import MockSearchConfig

        config = MockSearchConfig(delay=settings.search_delay)
        return SearchProviderFactory.create(SearchProviderName.MOCK, config=config)

    elif provider_name == SearchProviderName.HTTP:
        if not settings.search_api_url:
            raise ValueError("Search API URL is required")

        config = HttpSearchConfig(
            url=settings.search_api_url,
            api_key=settings.search_api_key,
            timeout=settings.search_timeout,
            max_retries=settings.search_max_retries,
            failure_threshold=settings.search_failure_threshold,
            reset_seconds=settings.search_reset_seconds,
        )
        return SearchProviderFactory.create(SearchProviderName.HTTP, config=config)

    else:
        raise ValueError(f"Unknown search provider: {provider_name}")


def create_search_augmentor(settings: Settings | None = None) -> SearchAugmentor:
    """Create a search augmentor around the configured provider.

    The search deadline is capped below ``response_timeout`` so a hanging
    search API yields an unenriched reply rather than the apology.
    """
    settings = settings or get_settings()
    provider = create_search_provider(settings=settings)
    # Deadline covers every attempt of a single search plus the backoff between them.
    attempts = settings.search_max_retries + 1
    backoff = HttpSearchConfig.model_fields["retry_backoff"].default * (2 ** settings.search_max_retries - 1)
    deadline = settings.search_timeout * attempts + backoff + settings.search_delay
    budget = max(settings.response_timeout - SEARCH_DEADLINE_MARGIN, settings.response_timeout / 2)
    if deadline > budget:
        logger.info(f"Capping search deadline at {budget:.2f}s (retry budget is {deadline:.2f}s)")
        deadline = budget
    return SearchAugmentor(provider, timeout=deadline)
