"""Case record and complaint storage module."""

from .models import (
    CaseRecord,
    CaseStatus,
    ComplaintCategory,
    ComplaintRecord,
    ComplaintStatus,
    CrimeStat,
)
from .store import (
    CaseRecordStore,
    ComplaintStore,
    InMemoryCaseRecordStore,
    InMemoryComplaintStore,
)

__all__ = [
    "CaseRecord",
    "CaseRecordStore",
    "CaseStatus",
    "ComplaintCategory",
    "ComplaintRecord",
    "ComplaintStatus",
    "ComplaintStore",
    "CrimeStat",
    "InMemoryCaseRecordStore",
    "InMemoryComplaintStore",
]
