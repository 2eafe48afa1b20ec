"""Base search provider interface and factory pattern."""

from abc import ABC, abstractmethod
from typing import Any

from pydantic import BaseModel, Field

from police_buddy.config import Language, SearchProviderName


class SearchResult(BaseModel):
    """A single piece of supplementary information."""

    title: str
    snippet: str
    url: str
    relevance: float = Field(default=0.0, ge=0.0, le=1.0)


class SearchProvider(ABC):
    """Abstract base class for search providers."""

    @abstractmethod
    async def search(self, query: str, lang: Language = Language.ENGLISH) -> list[SearchResult]:
        """Search for information related to the query.

        Args:
            query: User query
            lang: Language the results should be written in

        Returns:
            Results ordered by relevance, best first
        """
        pass

    @abstractmethod
    async def health_check(self) -> bool:
        """Check if the provider is healthy and accessible.

        Returns:
            True if healthy, False otherwise
        """
        pass

    async def aclose(self) -> None:
        """Release any resources held by the provider."""
        return None


class SearchProviderFactory:
    """Registry mapping provider names to provider classes.

    Names are the values of ``SearchProviderName``; enum members and plain
    strings are both accepted, case-insensitively.
    """

    _providers: dict[str, type[SearchProvider]] = {}

    @staticmethod
    def _key(name: SearchProviderName | str) -> str:
        if isinstance(name, SearchProviderName):
            return name.value
        return str(name).strip().lower()

    @classmethod
    def register(cls, name: SearchProviderName | str):
        """Class decorator registering a provider under ``name``."""

        def decorator(provider_class: type[SearchProvider]) -> type[SearchProvider]:
            cls._providers[cls._key(name)] = provider_class
            return provider_class

        return decorator

    @classmethod
    def create(cls, name: SearchProviderName | str, **kwargs: Any) -> SearchProvider:
        """Instantiate the provider registered under ``name``.

        Raises:
            ValueError: If no provider is registered under the name
        """
        provider_class = cls._providers.get(cls._key(name))
        if provider_class is None:
            available = ", ".join(sorted(cls._providers))
            raise ValueError(f"Unknown provider '{cls._key(name)}'. Available: {available}")
        return provider_class(**kwargs)

    @classmethod
    def list_providers(cls) -> list[str]:
        """List all registered provider names."""
        return list(cls._providers.keys())
