"""Case file, crime statistic and complaint records."""

from dataclasses import dataclass
from enum import Enum


class CaseStatus(str, Enum):
    """Investigation stage of a case."""

    UNDER_INVESTIGATION = "Under Investigation"
    CLOSED = "Closed"
    CHARGESHEET_FILED = "Chargesheet Filed"
    CASE_TRANSFERRED = "Case Transferred"


class ComplaintCategory(str, Enum):
    """Categories of non-urgent complaints."""

    THEFT = "Theft"
    MISSING_PERSON = "Missing Person"
    HARASSMENT = "Harassment"
    NOISE_COMPLAINT = "Noise Complaint"
    TRAFFIC = "Traffic"
    OTHER = "Other"


class ComplaintStatus(str, Enum):
    """Handling stage of a complaint."""

    OPEN = "Open"
    IN_PROGRESS = "In Progress"
    RESOLVED = "Resolved"


@dataclass(frozen=True)
class CaseRecord:
    """A first information report (FIR) case file."""

    case_number: str
    status: CaseStatus
    police_station: str
    officer_name: str
    crime_type: str
    date_reported: str
    location: str
    complainant_name: str
    description: str
    phone_number: str | None = None


@dataclass(frozen=True)
class CrimeStat:
    """Number of cases of one crime type at a location."""

    location: str
    crime_type: str
    count: int
    date: str


@dataclass(frozen=True)
class ComplaintRecord:
    """A filed complaint."""

    id: str
    category: ComplaintCategory
    description: str
    location: str
    contact_number: str
    status: ComplaintStatus
    date_reported: str
