"""HTTP search provider with timeout, retries and a circuit breaker."""

import asyncio
import logging
import time
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from police_buddy.config import Language, SearchProviderName

from .base import SearchProvider, SearchProviderFactory, SearchResult

logger = logging.getLogger(__name__)


class HttpSearchConfig(BaseModel):
    """Configuration for the HTTP search provider."""

    url: str
    api_key: str | None = None
    timeout: float = 5.0
    max_retries: int = 2
    retry_backoff: float = 0.5
    failure_threshold: int = 3
    reset_seconds: float = 30.0
    max_results: int = 3


class CircuitBreaker:
    """Stops calling a failing dependency for a cool-down period.

    The circuit opens after ``failure_threshold`` consecutive failures and
    lets a single trial call through once ``reset_seconds`` have passed.
    """

    def __init__(self, failure_threshold: int = 3, reset_seconds: float = 30.0):
        self.failure_threshold = failure_threshold
        self.reset_seconds = reset_seconds
        self.failures = 0
        self.opened_at: float | None = None

    @property
    def is_open(self) -> bool:
        if self.opened_at is None:
            return False
        return time.monotonic() - self.opened_at < self.reset_seconds

    def record_success(self) -> None:
        self.failures = 0
        self.opened_at = None

    def record_failure(self) -> None:
        self.failures += 1
        if self.failures >= self.failure_threshold:
            self.opened_at = time.monotonic()
            logger.warning(f"Search circuit opened after {self.failures} consecutive failures")


@SearchProviderFactory.register(SearchProviderName.HTTP)
class HttpSearchProvider(SearchProvider):
    """Search provider backed by a JSON search API.

    The API is called as ``GET <url>?q=<query>&lang=<lang>`` and must return
    ``{"results": [{"title", "snippet", "url", "relevance"}, ...]}``.
    """

    def __init__(self, config: HttpSearchConfig | None = None, **kwargs: Any) -> None:
        """Initialize HTTP search provider.

        Args:
            config: HTTP search configuration
            **kwargs: Additional configuration options
        """
        self.config = config or HttpSearchConfig(**kwargs)
        headers = {"Accept": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        self.client = httpx.AsyncClient(timeout=self.config.timeout, headers=headers)
        self.breaker = CircuitBreaker(
            failure_threshold=self.config.failure_threshold,
            reset_seconds=self.config.reset_seconds,
        )

    async def search(self, query: str, lang: Language = Language.ENGLISH) -> list[SearchResult]:
        """Query the search API, retrying transient failures.

        Raises:
            RuntimeError: If the circuit is open or every attempt failed
        """
        if self.breaker.is_open:
            raise RuntimeError("Search circuit is open")

        params = {"q": query, "lang": Language(lang).value}
        last_error: Exception | None = None

        for attempt in range(self.config.max_retries + 1):
            try:
                response = await self.client.get(self.config.url, params=params)
                response.raise_for_status()
                results = self._parse_results(response.json())
                self.breaker.record_success()
                return results
            except httpx.TimeoutException as e:
                logger.warning(f"Search request timed out (attempt {attempt + 1}): {e}")
                last_error = e
            except httpx.RequestError as e:
                logger.warning(f"Search request failed (attempt {attempt + 1}): {e}")
                last_error = e
            except httpx.HTTPStatusError as e:
                logger.warning(f"Search API error {e.response.status_code} (attempt {attempt + 1})")
                last_error = e
                if e.response.status_code < 500:
                    break
            except (ValueError, TypeError) as e:
                logger.warning(f"Search API returned a malformed payload: {e}")
                last_error = e
                break

            if attempt < self.config.max_retries:
                await asyncio.sleep(self.config.retry_backoff * (2 ** attempt))

        self.breaker.record_failure()
        raise RuntimeError(f"Search failed: {last_error}")

    def _parse_results(self, data: Any) -> list[SearchResult]:
        """Convert the API payload into search results, skipping malformed items."""
        items = data.get("results") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise ValueError("Search payload has no results list")
        results = []
        for item in items:
            try:
                results.append(SearchResult.model_validate(item))
            except ValidationError as e:
                logger.debug(f"Skipping malformed search result: {e}")
        results.sort(key=lambda r: r.relevance, reverse=True)
        return results[: self.config.max_results]

    async def health_check(self) -> bool:
        """Check if the search API is reachable.

        Returns:
            True if healthy, False otherwise
        """
        try:
            response = await self.client.get(self.config.url, params={"q": "health"})
            return response.status_code == 200
        except Exception as e:
            logger.warning(f"Search health check failed: {e}")
            return False

    async def aclose(self) -> None:
        await self.client.aclose()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.aclose()
