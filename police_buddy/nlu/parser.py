"""Query parsing: intent classification plus entity extraction."""

from police_buddy.config import Language

from .classifier import classify
from .entities import extract_entities
from .models import ParsedQuery


def parse_query(text: str, lang: Language = Language.ENGLISH) -> ParsedQuery:
    """Classify and extract entities from a single utterance.

    Args:
        text: Raw user text
        lang: Conversation language

    Returns:
        ParsedQuery combining the intent, its confidence and the entities
    """
    classification = classify(text, lang)
    return ParsedQuery(
        intent=classification.intent,
        entities=extract_entities(text),
        confidence=classification.confidence,
    )
