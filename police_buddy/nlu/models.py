"""Query understanding models and data structures."""

from dataclasses import dataclass, field
from enum import Enum


class Intent(str, Enum):
    """Purposes a user utterance can be classified into."""

    FIR_STATUS = "fir_status"
    CRIME_STATS = "crime_stats"
    FILE_COMPLAINT = "file_complaint"
    GENERAL_QUERY = "general_query"
    FILE_FIR = "file_fir"
    EMERGENCY = "emergency"
    TRAFFIC_RULES = "traffic_rules"
    LOST_DOCUMENTS = "lost_documents"
    GREETING = "greeting"
    HELP = "help"
    POLICE_CONTACT = "police_contact"
    LEGAL_ADVICE = "legal_advice"
    DOCUMENT_VERIFICATION = "document_verification"


@dataclass(frozen=True)
class Entities:
    """Structured values pulled out of a user utterance."""

    case_number: str | None = None
    location: str | None = None
    phone_number: str | None = None
    timeframe: str | None = None

    def is_empty(self) -> bool:
        """Return True when nothing was extracted."""
        return not any((self.case_number, self.location, self.phone_number, self.timeframe))


@dataclass(frozen=True)
class Classification:
    """Intent label with the confidence of the rule that produced it."""

    intent: Intent
    confidence: float


@dataclass(frozen=True)
class ParsedQuery:
    """Complete understanding of a single user utterance."""

    intent: Intent
    entities: Entities = field(default_factory=Entities)
    confidence: float = 0.5
