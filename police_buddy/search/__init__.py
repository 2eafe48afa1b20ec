"""Search augmentation module."""

from .augmentor import SearchAugmentor
from .base import SearchProvider, SearchProviderFactory, SearchResult
from .factory import create_search_augmentor, create_search_provider
from .http import HttpSearchConfig, HttpSearchProvider
from .mock import MockSearchConfig, MockSearchProvider

__all__ = [
    "HttpSearchConfig",
    "HttpSearchProvider",
    "MockSearchConfig",
    "MockSearchProvider",
    "SearchAugmentor",
    "SearchProvider",
    "SearchProviderFactory",
    "SearchResult",
    "create_search_augmentor",
    "create_search_provider",
]
