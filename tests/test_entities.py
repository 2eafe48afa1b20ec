"""Tests for entity extraction."""

from police_buddy.nlu.entities import (
    canonical_location,
    extract_case_number,
    extract_entities,
    extract_location,
    extract_phone_number,
)
from police_buddy.nlu.models import Entities


class TestCaseNumber:
    """Test case number extraction."""

    def test_marker_with_slashes(self):
        """Test the numeric part of a full FIR number is returned verbatim."""
        assert extract_case_number("FIR/001/2024 status") == "001/2024"

    def test_marker_with_space(self):
        """Test a marker followed by a plain number."""
        assert extract_case_number("check fir 123 please") == "123"

    def test_telugu_marker(self):
        """Test the Telugu spelling of the marker."""
        assert extract_case_number("ఎఫ్‌ఐఆర్ 001/2024 స్థితి") == "001/2024"

    def test_bare_slash_number(self):
        """Test a slash-delimited number without a marker."""
        assert extract_case_number("what happened with 045/2023?") == "045/2023"

    def test_marker_without_number(self):
        """Test that the marker alone is not a case number."""
        assert extract_case_number("How do I file an FIR?") is None
        assert extract_case_number("first information report") is None


class TestOtherEntities:
    """Test phone, location and timeframe extraction."""

    def test_phone_number(self):
        """Test ten consecutive digits are extracted."""
        assert extract_phone_number("call me at 9876543210 now") == "9876543210"

    def test_phone_number_wrong_length(self):
        """Test longer or shorter digit runs are ignored."""
        assert extract_phone_number("12345678901") is None
        assert extract_phone_number("98765") is None

    def test_location_case_insensitive(self):
        """Test English city names are matched in any case."""
        assert extract_location("crime in GUNTUR") == "Guntur"
        assert extract_location("is vijayawada safe") == "Vijayawada"

    def test_telugu_location(self):
        """Test Telugu city names are matched inside inflected words."""
        assert extract_location("విజయవాడలో నేరాలు") == "విజయవాడ"
        assert canonical_location("విజయవాడ") == "Vijayawada"
        assert canonical_location("Guntur") == "Guntur"

    def test_first_location_wins(self):
        """Test only the first city mentioned is returned."""
        assert extract_location("Tirupati or Guntur") == "Tirupati"

    def test_timeframe(self):
        """Test last week is tagged in both languages."""
        assert extract_entities("crimes in Guntur last week").timeframe == "week"
        assert extract_entities("గత వారం నేరాలు").timeframe == "week"
        assert extract_entities("crimes in Guntur").timeframe is None


class TestExtractEntities:
    """Test the combined extractor."""

    def test_all_fields(self):
        """Test every field is filled from one message."""
        entities = extract_entities("FIR/001/2024 from Guntur last week, phone 9876543210")

        assert entities == Entities(
            case_number="001/2024",
            location="Guntur",
            phone_number="9876543210",
            timeframe="week",
        )

    def test_no_match(self):
        """Test that text without entities yields an empty record."""
        entities = extract_entities("hello there")

        assert entities == Entities()
        assert entities.is_empty()

    def test_idempotent(self):
        """Test extraction gives identical results on repeated runs."""
        text = "FIR 002/2024 in Vijayawada, call 9876543211"

        assert extract_entities(text) == extract_entities(text)
