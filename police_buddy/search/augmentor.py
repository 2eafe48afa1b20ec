"""Decides when a query deserves supplementary information and fetches it."""

import asyncio
import logging

from police_buddy.config import Language
from police_buddy.nlu.models import Intent

from .base import SearchProvider, SearchResult

logger = logging.getLogger(__name__)

# These intents already have complete canned answers.
NON_SEARCHABLE_INTENTS = frozenset({
    Intent.GREETING,
    Intent.HELP,
    Intent.EMERGENCY,
    Intent.FIR_STATUS,
})

RECENCY_KEYWORDS = (
    "latest", "recent", "new", "current", "update", "today",
    "ఇటీవలి", "కొత్త", "తాజా", "ప్రస్తుత",
)

LONG_QUERY_TOKENS = 6


class SearchAugmentor:
    """Wraps a search provider with the searchability decision and fault recovery."""

    def __init__(self, provider: SearchProvider, timeout: float | None = None):
        """Initialize search augmentor.

        Args:
            provider: Source of supplementary results
            timeout: Optional overall deadline for one search, in seconds
        """
        self.provider = provider
        self.timeout = timeout

    def is_searchable(self, query: str, intent: Intent) -> bool:
        """Return True if the query could use supplementary information.

        Args:
            query: Original user text
            intent: Classified intent

        Returns:
            False for intents with complete canned answers; otherwise True when
            the query asks for recent information or is longer than six words
        """
        if intent in NON_SEARCHABLE_INTENTS:
            return False

        lowered = query.lower()
        if any(keyword in lowered for keyword in RECENCY_KEYWORDS):
            return True
        return len(query.split(" ")) > LONG_QUERY_TOKENS

    async def search(self, query: str, lang: Language = Language.ENGLISH) -> list[SearchResult]:
        """Fetch results, returning an empty list if the provider fails.

        Args:
            query: Original user text
            lang: Language of the results

        Returns:
            Ordered search results, or [] on any provider fault
        """
        try:
            if self.timeout is not None:
                return await asyncio.wait_for(self.provider.search(query, lang), self.timeout)
            return await self.provider.search(query, lang)
        except asyncio.TimeoutError:
            logger.warning(f"Search timed out after {self.timeout}s")
        except Exception as e:
            logger.warning(f"Search failed, continuing without enrichment: {e}")
        return []
