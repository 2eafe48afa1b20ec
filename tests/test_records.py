"""Tests for case record and complaint stores."""

import pytest

from police_buddy.records import (
    CaseStatus,
    ComplaintCategory,
    ComplaintStatus,
    InMemoryCaseRecordStore,
    InMemoryComplaintStore,
)


class TestCaseRecordStore:
    """Test the in-memory case record store."""

    @pytest.fixture
    def store(self):
        return InMemoryCaseRecordStore()

    def test_find_by_numeric_part(self, store):
        """Test lookup by the numeric part of the case number."""
        record = store.find_by_number("001/2024")

        assert record is not None
        assert record.case_number == "FIR/001/2024"
        assert record.status == CaseStatus.UNDER_INVESTIGATION
        assert record.officer_name == "SI Ramesh Kumar"

    def test_find_case_insensitive(self, store):
        """Test lookup ignores case."""
        assert store.find_by_number("fir/002/2024").case_number == "FIR/002/2024"

    def test_find_unknown(self, store):
        """Test unknown and empty numbers are not found."""
        assert store.find_by_number("999/2024") is None
        assert store.find_by_number("  ") is None

    def test_stats_by_location(self, store):
        """Test statistics come back in store order."""
        stats = store.stats_by_location("guntur")

        assert [(s.crime_type, s.count) for s in stats] == [("Theft", 5), ("Fraud", 2)]
        assert store.stats_by_location("Hyderabad") == []

    def test_verify_access(self, store):
        """Test the registered phone number unlocks the case."""
        assert store.verify_access("FIR/001/2024", "9876543210")
        assert not store.verify_access("FIR/001/2024", "9999999999")
        assert not store.verify_access("FIR/999/2024", "9876543210")

    def test_search(self, store):
        """Test free-text search over case fields."""
        results = store.search("theft")

        assert results
        assert all("theft" in r.crime_type.lower() or "theft" in r.description.lower() for r in results)


class TestComplaintStore:
    """Test the in-memory complaint store."""

    def test_create(self):
        """Test a complaint is stored as open with today's date."""
        store = InMemoryComplaintStore()
        complaint = store.create(
            category=ComplaintCategory.NOISE_COMPLAINT,
            description="  Loud music after midnight  ",
            location="Guntur",
            contact_number="9876543210",
        )

        assert complaint.id.startswith("COMP/AP/")
        assert complaint.status == ComplaintStatus.OPEN
        assert complaint.description == "Loud music after midnight"
        assert store.list_all() == [complaint]

    def test_ids_are_unique(self):
        """Test complaints filed back to back get distinct ids."""
        store = InMemoryComplaintStore()
        first = store.create(ComplaintCategory.THEFT, "bicycle stolen", "", "")
        second = store.create(ComplaintCategory.THEFT, "phone stolen", "", "")

        assert first.id != second.id

    def test_description_required(self):
        """Test an empty description is rejected."""
        store = InMemoryComplaintStore()

        with pytest.raises(ValueError, match="description is required"):
            store.create(ComplaintCategory.OTHER, "   ", "", "")
