"""Pattern-based entity extraction for case numbers, phones, places and time."""

import re

from .models import Entities

# Marker spellings for "FIR" in English, Telugu and Hindi. The Telugu form is
# typed both with and without the zero-width non-joiner.
CASE_MARKERS = (
    r"(?<![a-z])fir",
    r"f\.i\.r\.?",
    "\u0c0e\u0c2b\u0c4d\u200c\u0c10\u0c06\u0c30\u0c4d",
    "\u0c0e\u0c2b\u0c4d\u0c10\u0c06\u0c30\u0c4d",
    "एफआईआर",
)

CASE_NUMBER_PATTERN = re.compile(
    r"(?:" + "|".join(CASE_MARKERS) + r")[\s/:#\-]*(\d+(?:/\d+)*)",
    re.IGNORECASE,
)
SLASH_NUMBER_PATTERN = re.compile(r"(?<![\d/])(\d{3}/\d{4})(?![\d/])")

PHONE_PATTERN = re.compile(r"(?<!\d)(\d{10})(?!\d)")

# English spellings are normalised to title case; Telugu spellings as written.
KNOWN_LOCATIONS = {
    "guntur": "Guntur",
    "vijayawada": "Vijayawada",
    "tirupati": "Tirupati",
    "hyderabad": "Hyderabad",
    "visakhapatnam": "Visakhapatnam",
    "గుంటూర్": "గుంటూర్",
    "కుంటూర్": "కుంటూర్",
    "విజయవాడ": "విజయవాడ",
    "తిరుపతి": "తిరుపతి",
    "హైదరాబాద్": "హైదరాబాద్",
    "విశాఖపట్నం": "విశాఖపట్నం",
}
LOCATION_PATTERN = re.compile(
    "(" + "|".join(re.escape(name) for name in KNOWN_LOCATIONS) + ")",
    re.IGNORECASE,
)

# Telugu spellings mapped to the English names used by the record store.
CANONICAL_LOCATIONS = {
    "గుంటూర్": "Guntur",
    "కుంటూర్": "Guntur",
    "విజయవాడ": "Vijayawada",
    "తిరుపతి": "Tirupati",
    "హైదరాబాద్": "Hyderabad",
    "విశాఖపట్నం": "Visakhapatnam",
}

TIMEFRAME_MARKERS = {
    "week": ("last week", "గత వారం"),
}


def extract_case_number(text: str) -> str | None:
    """Return the case number as written, e.g. ``001/2024`` from ``FIR/001/2024``."""
    match = CASE_NUMBER_PATTERN.search(text)
    if match:
        return match.group(1)
    match = SLASH_NUMBER_PATTERN.search(text)
    return match.group(1) if match else None


def extract_phone_number(text: str) -> str | None:
    """Return the first run of exactly ten digits."""
    match = PHONE_PATTERN.search(text)
    return match.group(1) if match else None


def extract_location(text: str) -> str | None:
    """Return the first gazetteer city mentioned in the text."""
    match = LOCATION_PATTERN.search(text)
    if not match:
        return None
    return KNOWN_LOCATIONS[match.group(1).lower()]


def canonical_location(location: str) -> str:
    """Return the English name of a gazetteer city, or the input unchanged."""
    return CANONICAL_LOCATIONS.get(location, location)


def extract_timeframe(text: str) -> str | None:
    lowered = text.lower()
    for tag, markers in TIMEFRAME_MARKERS.items():
        if any(marker in lowered for marker in markers):
            return tag
    return None


def extract_entities(text: str) -> Entities:
    """Extract every supported entity from free text.

    Args:
        text: Raw user text in English, Telugu or a mix of both

    Returns:
        Entities record; fields without a match are None
    """
    return Entities(
        case_number=extract_case_number(text),
        location=extract_location(text),
        phone_number=extract_phone_number(text),
        timeframe=extract_timeframe(text),
    )
