"""Case record and complaint stores."""

import logging
import time
from abc import ABC, abstractmethod
from collections.abc import Iterable
from datetime import date

from .models import (
    CaseRecord,
    CaseStatus,
    ComplaintCategory,
    ComplaintRecord,
    ComplaintStatus,
    CrimeStat,
)

logger = logging.getLogger(__name__)

SAMPLE_CASES = (
    CaseRecord(
        case_number="FIR/001/2024",
        status=CaseStatus.UNDER_INVESTIGATION,
        police_station="Guntur City Police Station",
        officer_name="SI Ramesh Kumar",
        crime_type="Theft",
        date_reported="2024-06-15",
        location="Brodipet, Guntur",
        complainant_name="Rajesh Reddy",
        description="Motorcycle theft from parking area",
        phone_number="9876543210",
    ),
    CaseRecord(
        case_number="FIR/002/2024",
        status=CaseStatus.CLOSED,
        police_station="Vijayawada Central Police Station",
        officer_name="CI Lakshmi Devi",
        crime_type="Missing Person",
        date_reported="2024-06-10",
        location="Gandhi Nagar, Vijayawada",
        complainant_name="Sita Devi",
        description="Missing teenager - case resolved",
        phone_number="9876543211",
    ),
    CaseRecord(
        case_number="FIR/003/2024",
        status=CaseStatus.CHARGESHEET_FILED,
        police_station="Tirupati East Police Station",
        officer_name="SI Venkata Rao",
        crime_type="Fraud",
        date_reported="2024-06-08",
        location="Renigunta, Tirupati",
        complainant_name="Krishna Murthy",
        description="Online fraud case - accused arrested",
        phone_number="9876543212",
    ),
)

SAMPLE_CRIME_STATS = (
    CrimeStat(location="Guntur", crime_type="Theft", count=5, date="2024-06-18"),
    CrimeStat(location="Guntur", crime_type="Fraud", count=2, date="2024-06-18"),
    CrimeStat(location="Vijayawada", crime_type="Missing Person", count=3, date="2024-06-18"),
    CrimeStat(location="Tirupati", crime_type="Harassment", count=1, date="2024-06-18"),
)


class CaseRecordStore(ABC):
    """Read access to case files and crime statistics."""

    @abstractmethod
    def find_by_number(self, case_number: str) -> CaseRecord | None:
        """Find a case by (part of) its number.

        Args:
            case_number: Full number (``FIR/001/2024``) or its numeric part

        Returns:
            The matching record, or None
        """
        pass

    @abstractmethod
    def stats_by_location(self, location: str) -> list[CrimeStat]:
        """Return crime statistics recorded for a location, in store order."""
        pass

    def verify_access(self, case_number: str, phone_number: str) -> bool:
        """Check that the phone number is the one registered on the case."""
        record = self.find_by_number(case_number)
        return record is not None and record.phone_number == phone_number.strip()


class InMemoryCaseRecordStore(CaseRecordStore):
    """Case record store over fixed in-process data."""

    def __init__(
        self,
        cases: Iterable[CaseRecord] = SAMPLE_CASES,
        crime_stats: Iterable[CrimeStat] = SAMPLE_CRIME_STATS,
    ):
        self.cases = list(cases)
        self.crime_stats = list(crime_stats)

    def find_by_number(self, case_number: str) -> CaseRecord | None:
        needle = case_number.strip().lower()
        if not needle:
            return None
        for record in self.cases:
            if needle in record.case_number.lower():
                return record
        return None

    def stats_by_location(self, location: str) -> list[CrimeStat]:
        needle = location.strip().lower()
        if not needle:
            return []
        return [stat for stat in self.crime_stats if needle in stat.location.lower()]

    def search(self, query: str) -> list[CaseRecord]:
        """Find cases whose type, location, description or number mention the query."""
        term = query.lower()
        return [
            record
            for record in self.cases
            if term in record.crime_type.lower()
            or term in record.location.lower()
            or term in record.description.lower()
            or term in record.case_number.lower()
        ]


class ComplaintStore(ABC):
    """Write access for non-urgent complaints."""

    @abstractmethod
    def create(
        self,
        category: ComplaintCategory,
        description: str,
        location: str,
        contact_number: str,
    ) -> ComplaintRecord:
        """File a complaint.

        Returns:
            The stored record with its id, ``Open`` status and today's date
        """
        pass

    @abstractmethod
    def list_all(self) -> list[ComplaintRecord]:
        pass


class InMemoryComplaintStore(ComplaintStore):
    """Complaint store kept in process memory."""

    def __init__(self):
        self._complaints: list[ComplaintRecord] = []

    def create(
        self,
        category: ComplaintCategory,
        description: str,
        location: str,
        contact_number: str,
    ) -> ComplaintRecord:
        if not description.strip():
            raise ValueError("Complaint description is required")

        complaint = ComplaintRecord(
            id=self._next_id(),
            category=ComplaintCategory(category),
            description=description.strip(),
            location=location.strip(),
            contact_number=contact_number.strip(),
            status=ComplaintStatus.OPEN,
            date_reported=date.today().isoformat(),
        )
        self._complaints.append(complaint)
        logger.info(f"Complaint {complaint.id} filed ({complaint.category.value})")
        return complaint

    def _next_id(self) -> str:
        complaint_id = f"COMP/AP/{int(time.time() * 1000)}"
        # Two complaints filed within the same millisecond get a suffix.
        existing = {c.id for c in self._complaints}
        suffix = 1
        candidate = complaint_id
        while candidate in existing:
            candidate = f"{complaint_id}-{suffix}"
            suffix += 1
        return candidate

    def list_all(self) -> list[ComplaintRecord]:
        return list(self._complaints)
