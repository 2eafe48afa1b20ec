"""Tests for intent classification."""

import pytest

from police_buddy.config import Language
from police_buddy.nlu import INTENT_RULES, Intent, classify, parse_query


class TestClassify:
    """Test keyword rules and their priority."""

    @pytest.mark.parametrize(
        "text,intent",
        [
            ("Hello there", Intent.GREETING),
            ("Can you help me?", Intent.HELP),
            ("FIR/001/2024 status", Intent.FIR_STATUS),
            ("What is FIR 001/2024?", Intent.FIR_STATUS),
            ("crime in Guntur", Intent.CRIME_STATS),
            ("I want to register a complaint about noise", Intent.FILE_COMPLAINT),
            ("How to file an FIR", Intent.FILE_FIR),
            ("This is urgent, there is danger", Intent.EMERGENCY),
            ("What are the traffic challan rules", Intent.TRAFFIC_RULES),
            ("I lost my passport", Intent.LOST_DOCUMENTS),
            ("Where is the nearest police station", Intent.POLICE_CONTACT),
        ],
    )
    def test_english_intents(self, text, intent):
        """Test one representative message per intent."""
        assert classify(text).intent == intent

    def test_telugu_intents(self):
        """Test Telugu keywords match inside inflected words."""
        assert classify("నమస్కారం", Language.TELUGU).intent == Intent.GREETING
        assert classify("గుంటూర్‌లో నేరాలు", Language.TELUGU).intent == Intent.CRIME_STATS

    def test_greeting_wins_over_crime(self):
        """Test a greeting that mentions crime is still a greeting."""
        result = classify("hello, tell me about crime in Guntur")

        assert result.intent == Intent.GREETING
        assert result.confidence == 0.95

    def test_help_wins_over_emergency(self):
        """Test "help me" is answered by the help rule first."""
        assert classify("please help me").intent == Intent.HELP

    def test_keywords_match_whole_words(self):
        """Test ASCII keywords do not match inside longer words."""
        assert classify("this thing").intent == Intent.GENERAL_QUERY

    def test_fallback(self):
        """Test unmatched text falls back to a general query."""
        result = classify("Tell me something interesting")

        assert result.intent == Intent.GENERAL_QUERY
        assert result.confidence == 0.5

    def test_case_and_whitespace_insensitive(self):
        """Test classification ignores case and repeated whitespace."""
        assert classify("  CRIME   in   GUNTUR ").intent == Intent.CRIME_STATS

    def test_confidence_range(self):
        """Test every rule's confidence is within [0, 1]."""
        for rule in INTENT_RULES:
            assert 0.0 <= rule.confidence <= 1.0

    def test_rule_order(self):
        """Test the rule priority order."""
        assert [rule.intent for rule in INTENT_RULES] == [
            Intent.GREETING,
            Intent.HELP,
            Intent.FIR_STATUS,
            Intent.CRIME_STATS,
            Intent.FILE_COMPLAINT,
            Intent.FILE_FIR,
            Intent.EMERGENCY,
            Intent.TRAFFIC_RULES,
            Intent.LOST_DOCUMENTS,
            Intent.POLICE_CONTACT,
        ]

    def test_unsupported_language(self):
        """Test an unknown language code is rejected."""
        with pytest.raises(ValueError):
            classify("hello", "fr")


class TestParseQuery:
    """Test combined parsing."""

    def test_parse_query(self):
        """Test intent, confidence and entities come back together."""
        parsed = parse_query("FIR/001/2024 status")

        assert parsed.intent == Intent.FIR_STATUS
        assert parsed.confidence == 0.9
        assert parsed.entities.case_number == "001/2024"

    def test_parse_query_location(self):
        """Test entities are extracted independently of the intent."""
        parsed = parse_query("latest crime in Vijayawada last week")

        assert parsed.intent == Intent.CRIME_STATS
        assert parsed.entities.location == "Vijayawada"
        assert parsed.entities.timeframe == "week"
