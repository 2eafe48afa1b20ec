"""Query understanding module: intents and entities."""

from .classifier import INTENT_RULES, IntentRule, classify
from .entities import extract_entities
from .models import Classification, Entities, Intent, ParsedQuery
from .parser import parse_query

__all__ = [
    "INTENT_RULES",
    "Classification",
    "Entities",
    "Intent",
    "IntentRule",
    "ParsedQuery",
    "classify",
    "extract_entities",
    "parse_query",
]
