"""Rule-based intent classification.

Rules are evaluated top to bottom and the first match wins, so the order of
``INTENT_RULES`` is the priority contract between overlapping intents (a
greeting that also mentions crime is still a greeting).
"""

import logging
import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from police_buddy.config import Language

from .entities import extract_case_number
from .models import Classification, Intent

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = 0.5


def compile_keywords(keywords: Iterable[str]) -> re.Pattern[str]:
    """Compile bilingual keywords into a single case-insensitive pattern.

    ASCII keywords are guarded by word boundaries. Telugu keywords are matched
    as substrings because inflected forms attach suffixes directly to the stem.

    Args:
        keywords: Keyword or phrase alternatives

    Returns:
        Compiled pattern matching any of the alternatives
    """
    alternatives = []
    for keyword in keywords:
        escaped = re.escape(keyword)
        if keyword.isascii():
            alternatives.append(rf"\b{escaped}\b")
        else:
            alternatives.append(escaped)
    return re.compile("|".join(alternatives), re.IGNORECASE)


@dataclass(frozen=True)
class IntentRule:
    """A keyword pattern (and optional structural check) mapped to an intent."""

    intent: Intent
    confidence: float
    pattern: re.Pattern[str]
    structural: Callable[[str], bool] | None = None

    def matches(self, text: str) -> bool:
        if self.pattern.search(text):
            return True
        return self.structural is not None and self.structural(text)


def _has_case_number(text: str) -> bool:
    return extract_case_number(text) is not None


INTENT_RULES: tuple[IntentRule, ...] = (
    IntentRule(
        Intent.GREETING,
        0.95,
        compile_keywords([
            "hi", "hello", "hey", "good morning", "good afternoon", "good evening",
            "namaste", "నమస్కారం", "హలో",
        ]),
    ),
    IntentRule(
        Intent.HELP,
        0.9,
        compile_keywords([
            "help", "assist", "support", "what can you do", "how to use", "guide",
            "మదద్", "సహాయం",
        ]),
    ),
    IntentRule(
        Intent.FIR_STATUS,
        0.9,
        compile_keywords([
            "fir status", "check fir", "track fir", "fir update", "case status", "my case",
            "ఎఫ్‌ఐఆర్ స్థితి", "కేసు స్థితి",
        ]),
        structural=_has_case_number,
    ),
    IntentRule(
        Intent.CRIME_STATS,
        0.8,
        compile_keywords([
            "crime", "crimes", "criminal activity", "incidents", "safety", "security",
            "statistics", "data", "report", "అపరాధాలు", "నేరాలు", "భద్రత",
        ]),
    ),
    IntentRule(
        Intent.FILE_COMPLAINT,
        0.85,
        compile_keywords([
            "file complaint", "report", "complain", "complaint", "issue", "problem",
            "lodge complaint", "register complaint", "ఫిర్యాదు", "నివేదించు", "సమస్య",
        ]),
    ),
    IntentRule(
        Intent.FILE_FIR,
        0.9,
        compile_keywords([
            "file fir", "register fir", "how to file", "fir process",
            "first information report", "ఎఫ్‌ఐఆర్ దాఖలు", "ఎఫ్‌ఐఆర్ ఎలా",
        ]),
    ),
    IntentRule(
        Intent.EMERGENCY,
        0.95,
        compile_keywords([
            "emergency", "urgent", "help me", "911", "100", "112", "immediate", "crisis",
            "danger", "అత్యవసరం", "ఆపద",
        ]),
    ),
    IntentRule(
        Intent.TRAFFIC_RULES,
        0.8,
        compile_keywords([
            "traffic", "driving", "license", "licence", "challan", "fine", "vehicle",
            "road rules", "ట్రాఫిక్", "లైసెన్స్", "జరిమానా",
        ]),
    ),
    IntentRule(
        Intent.LOST_DOCUMENTS,
        0.8,
        compile_keywords([
            "lost", "missing", "stolen", "documents", "passport", "id", "aadhar", "aadhaar",
            "పోగొట్టుకున్న", "తప్పిపోయిన", "దస్తావేజులు",
        ]),
    ),
    IntentRule(
        Intent.POLICE_CONTACT,
        0.8,
        compile_keywords([
            "police station", "contact", "phone number", "address", "location", "officer",
            "పోలీస్ స్టేషన్", "సంప్రదింపు", "అధికారి",
        ]),
    ),
)


def normalize_text(text: str) -> str:
    """Lowercase and collapse whitespace."""
    return re.sub(r"\s+", " ", text.strip()).lower()


def classify(
    text: str,
    lang: Language = Language.ENGLISH,
    rules: Iterable[IntentRule] = INTENT_RULES,
) -> Classification:
    """Classify text into exactly one intent.

    Both languages' keywords are checked whatever ``lang`` is, since users mix
    English and Telugu freely.

    Args:
        text: Raw user text
        lang: Conversation language
        rules: Ordered rules; the first match wins

    Returns:
        Classification with the matched rule's fixed confidence, or
        ``general_query`` at 0.5 when no rule matches
    """
    lang = Language(lang)
    normalized = normalize_text(text)
    for rule in rules:
        if rule.matches(normalized):
            logger.debug(f"Classified as {rule.intent.value} ({lang.value})")
            return Classification(intent=rule.intent, confidence=rule.confidence)

    return Classification(intent=Intent.GENERAL_QUERY, confidence=FALLBACK_CONFIDENCE)
