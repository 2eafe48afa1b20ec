"""Deterministic search provider returning canned AP Police information."""

import asyncio
import logging
from typing import Any

from pydantic import BaseModel

from police_buddy.config import Language, SearchProviderName

from .base import SearchProvider, SearchProviderFactory, SearchResult

logger = logging.getLogger(__name__)


class MockSearchConfig(BaseModel):
    """Configuration for the mock search provider."""

    delay: float = 1.0


# Checked in order; the first topic whose keywords appear in the query wins.
TOPIC_KEYWORDS: list[tuple[str, tuple[str, ...]]] = [
    ("crime", ("crime", "statistics", "నేరాలు")),
    ("traffic", ("traffic", "license", "ట్రాఫిక్")),
    ("legal", ("procedure", "legal", "చట్టపరమైన")),
]

CANNED_RESULTS: dict[str, dict[Language, list[SearchResult]]] = {
    "crime": {
        Language.ENGLISH: [
            SearchResult(
                title="Andhra Pradesh Crime Statistics 2024",
                snippet=(
                    "According to recent AP Police data, property crimes have decreased by 15% in "
                    "major cities. Cyber crimes reporting increased by 35% showing better awareness."
                ),
                url="https://appolice.gov.in/crime-stats",
                relevance=0.9,
            ),
            SearchResult(
                title="Safety Measures in Urban Areas",
                snippet=(
                    "New safety initiatives include increased patrolling in commercial areas and "
                    "installation of CCTV cameras at 500+ locations across AP."
                ),
                url="https://appolice.gov.in/safety",
                relevance=0.8,
            ),
        ],
        Language.TELUGU: [
            SearchResult(
                title="ఆంధ్రప్రదేశ్ నేర గణాంకాలు 2024",
                snippet=(
                    "ఇటీవలి AP పోలీస్ డేటా ప్రకారం, ప్రధాన నగరాలలో ఆస్తి నేరాలు 15% తగ్గాయి. "
                    "సైబర్ నేరాల నివేదనలు 35% పెరిగాయి."
                ),
                url="https://appolice.gov.in/crime-stats-te",
                relevance=0.9,
            ),
        ],
    },
    "traffic": {
        Language.ENGLISH: [
            SearchResult(
                title="New Traffic Rules 2024 - AP Police",
                snippet=(
                    "Updated traffic regulations include stricter penalties for mobile phone usage "
                    "while driving. New online payment system for challans launched."
                ),
                url="https://appolice.gov.in/traffic-rules",
                relevance=0.9,
            ),
            SearchResult(
                title="Driving License Renewal Process",
                snippet=(
                    "Online renewal now available through AP Transport portal. Required documents: "
                    "Aadhar, current license, medical certificate for age 50+."
                ),
                url="https://transport.ap.gov.in/license",
                relevance=0.8,
            ),
        ],
        Language.TELUGU: [
            SearchResult(
                title="కొత్త ట్రాఫిక్ నియమాలు 2024 - AP పోలీస్",
                snippet=(
                    "అప్‌డేట్ చేయబడిన ట్రాఫిక్ నిబంధనలలో డ్రైవింగ్ చేస్తున్నప్పుడు మొబైల్ ఫోన్ "
                    "వాడకానికి కఠిన జరిమానాలు ఉన్నాయి."
                ),
                url="https://appolice.gov.in/traffic-rules-te",
                relevance=0.9,
            ),
        ],
    },
    "legal": {
        Language.ENGLISH: [
            SearchResult(
                title="Legal Aid Services - AP Police",
                snippet=(
                    "Free legal consultation available at all district police headquarters. "
                    "Para-legal volunteers trained to assist in filing procedures."
                ),
                url="https://appolice.gov.in/legal-aid",
                relevance=0.8,
            ),
        ],
        Language.TELUGU: [
            SearchResult(
                title="న్యాయ సహాయ సేవలు - AP పోలీస్",
                snippet=(
                    "అన్ని జిల్లా పోలీస్ కేంద్రాలలో ఉచిత న్యాయ సలహలు అందుబాటులో. దాఖలు విధానాలలో "
                    "సహాయం చేయడానికి పారా-లీగల్ వాలంటీర్లు శిక్షణ పొందారు."
                ),
                url="https://appolice.gov.in/legal-aid-te",
                relevance=0.8,
            ),
        ],
    },
    "general": {
        Language.ENGLISH: [
            SearchResult(
                title="AP Police Official Information",
                snippet=(
                    "For accurate and up-to-date information about police services, procedures, "
                    "and contact details, please visit the official AP Police website or contact "
                    "your nearest police station."
                ),
                url="https://appolice.gov.in",
                relevance=0.6,
            ),
        ],
        Language.TELUGU: [
            SearchResult(
                title="AP పోలీస్ అధికారిక సమాచారం",
                snippet=(
                    "పోలీస్ సేవలు, విధానాలు మరియు సంప్రదింపు వివరాల గురించి ఖచ్చితమైన మరియు తాజా "
                    "సమాచారం కోసం, దయచేసి అధికారిక AP పోలీస్ వెబ్‌సైట్‌ను సందర్శించండి."
                ),
                url="https://appolice.gov.in",
                relevance=0.6,
            ),
        ],
    },
}


def match_topic(query: str) -> str:
    """Return the first topic whose keywords occur in the query, or ``general``."""
    lowered = query.lower()
    for topic, keywords in TOPIC_KEYWORDS:
        if any(keyword in lowered for keyword in keywords):
            return topic
    return "general"


@SearchProviderFactory.register(SearchProviderName.MOCK)
class MockSearchProvider(SearchProvider):
    """Search provider that simulates network latency and returns fixed results."""

    def __init__(self, config: MockSearchConfig | None = None, **kwargs: Any) -> None:
        """Initialize mock provider.

        Args:
            config: Mock search configuration
            **kwargs: Additional configuration options
        """
        self.config = config or MockSearchConfig(**kwargs)

    async def search(self, query: str, lang: Language = Language.ENGLISH) -> list[SearchResult]:
        """Return the canned results for the query's topic."""
        topic = match_topic(query)
        logger.debug(f"Mock search matched topic '{topic}'")

        if self.config.delay > 0:
            await asyncio.sleep(self.config.delay)

        return [result.model_copy() for result in CANNED_RESULTS[topic][Language(lang)]]

    async def health_check(self) -> bool:
        return True
