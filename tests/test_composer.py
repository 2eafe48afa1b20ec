"""Tests for response composition."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from police_buddy.config import Language
from police_buddy.memory import ConversationMemory, Message, Sender
from police_buddy.nlu import parse_query
from police_buddy.records import InMemoryCaseRecordStore
from police_buddy.responses import ResponseComposer, ordinal, ordinal_suffix, render_case_details
from police_buddy.search import MockSearchProvider, SearchAugmentor


@pytest.fixture
def composer():
    """Create a composer over the sample records and instant mock search."""
    return ResponseComposer(InMemoryCaseRecordStore(), SearchAugmentor(MockSearchProvider(delay=0)))


@pytest.fixture
def memory():
    return ConversationMemory()


async def compose(composer, text, memory, lang=Language.ENGLISH):
    return await composer.compose(parse_query(text, lang), lang, text, memory)


@pytest.mark.parametrize(
    "number,expected",
    [(1, "st"), (2, "nd"), (3, "rd"), (4, "th"), (11, "th"), (12, "th"), (13, "th"),
     (21, "st"), (22, "nd"), (101, "st"), (111, "th")],
)
def test_ordinal_suffix(number, expected):
    """Test English ordinal suffixes, including the teens."""
    assert ordinal_suffix(number) == expected
    assert ordinal(number) == f"{number}{expected}"


class TestCaseStatus:
    """Test FIR status responses."""

    @pytest.mark.asyncio
    async def test_case_found(self, composer, memory):
        """Test a known case renders its details."""
        response = await compose(composer, "FIR/001/2024 status", memory)

        assert "Status: Under Investigation" in response
        assert "Police Station: Guntur City Police Station" in response
        assert "Investigating Officer: SI Ramesh Kumar" in response

    @pytest.mark.asyncio
    async def test_case_not_found(self, composer, memory):
        """Test an unknown case mentions a different earlier case."""
        memory.add_message(Message(text="FIR/002/2025 status", sender=Sender.USER))

        response = await compose(composer, "FIR/999/2024 status", memory)

        assert 'I couldn\'t find FIR number "999/2024"' in response
        assert "previously inquired about FIR 002/2025" in response

    @pytest.mark.asyncio
    async def test_case_not_found_same_number(self, composer, memory):
        """Test the earlier-case note is skipped when it is the same case."""
        memory.add_message(Message(text="FIR/999/2024 status", sender=Sender.USER))

        response = await compose(composer, "FIR/999/2024 status", memory)

        assert "previously inquired" not in response

    @pytest.mark.asyncio
    async def test_case_number_missing(self, composer, memory):
        """Test the user is asked for a case number."""
        response = await compose(composer, "check my case status", memory)
        assert "FIR/XXX/YYYY" in response

    def test_render_case_details(self):
        """Test case details render in Telugu."""
        record = InMemoryCaseRecordStore().find_by_number("001/2024")
        response = render_case_details(record, Language.TELUGU)

        assert "FIR/001/2024" in response
        assert "SI Ramesh Kumar" in response


class TestCrimeStats:
    """Test crime statistics responses."""

    @pytest.mark.asyncio
    async def test_guntur_stats(self, composer, memory):
        """Test Guntur statistics come with parking advice and no search block."""
        response = await compose(composer, "crime in Guntur", memory)

        assert "• Theft: 5 cases" in response
        assert "• Fraud: 2 cases" in response
        assert "Be cautious of theft in parking areas" in response
        assert "Latest Updates" not in response

    @pytest.mark.asyncio
    async def test_stats_with_latest_updates(self, composer, memory):
        """Test recency queries append the top search snippet."""
        response = await compose(composer, "latest crime in Vijayawada", memory)

        assert "• Missing Person: 3 cases" in response
        assert "Stay alert in crowded areas" in response
        assert "**Latest Updates:**\nAccording to recent AP Police data" in response

    @pytest.mark.asyncio
    async def test_telugu_city_name(self, composer, memory):
        """Test Telugu city names find the English statistics."""
        response = await compose(composer, "విజయవాడలో నేరాలు", memory, Language.TELUGU)

        assert "• Missing Person: 3 కేసులు" in response
        assert "విజయవాడ" in response

    @pytest.mark.asyncio
    async def test_no_location(self, composer, memory):
        """Test the user is asked to pick a city."""
        response = await compose(composer, "show me crime statistics", memory)
        assert "Please specify a city" in response

    @pytest.mark.asyncio
    async def test_city_without_stats(self, composer, memory):
        """Test a city with no statistics also asks for a city."""
        response = await compose(composer, "crime in Hyderabad", memory)
        assert "Please specify a city" in response

    @pytest.mark.asyncio
    async def test_no_location_with_search(self, composer, memory):
        """Test the city prompt carries the latest information when searched."""
        response = await compose(composer, "what is the latest crime situation", memory)

        assert "Please specify a city" in response
        assert "**Latest Information:**" in response
        assert "Source: Andhra Pradesh Crime Statistics 2024" in response


class TestGreeting:
    """Test greetings and the welcome-back line."""

    @pytest.mark.asyncio
    async def test_first_greeting(self, composer, memory):
        """Test a fresh session gets no welcome-back line."""
        response = await compose(composer, "hello", memory)

        assert response.startswith("Hello! Welcome to AP Police Buddy.")
        assert "Welcome back" not in response

    @pytest.mark.asyncio
    async def test_welcome_back(self, composer, memory):
        """Test the ordinal counts the current query."""
        for text in ("crime in Guntur", "FIR 001/2024", "traffic rules"):
            memory.add_message(Message(text=text, sender=Sender.USER))

        response = await compose(composer, "hello again", memory)

        assert response.startswith("Welcome back! I see this is your 4th query today. ")

    @pytest.mark.asyncio
    async def test_welcome_back_telugu(self, composer):
        memory = ConversationMemory(preferred_language=Language.TELUGU)
        memory.add_message(Message(text="నమస్కారం", sender=Sender.USER, language=Language.TELUGU))

        response = await compose(composer, "నమస్కారం", memory, Language.TELUGU)

        assert "2వ ప్రశ్న" in response


class TestOtherIntents:
    """Test static, guidance and default responses."""

    @pytest.mark.asyncio
    async def test_emergency(self, composer, memory):
        response = await compose(composer, "This is an emergency", memory)
        assert "Police Emergency: 100" in response

    @pytest.mark.asyncio
    async def test_guidance_without_search(self, composer, memory):
        """Test guidance is returned as is for short queries."""
        response = await compose(composer, "what are the traffic rules", memory)

        assert "Traffic Rules & Services" in response
        assert "Latest Information" not in response

    @pytest.mark.asyncio
    async def test_guidance_with_search(self, composer, memory):
        """Test guidance is followed by the top search result."""
        response = await compose(composer, "latest traffic rules", memory)

        assert response.index("Traffic Rules & Services") < response.index("**Latest Information:**")
        assert "Source: New Traffic Rules 2024 - AP Police" in response

    @pytest.mark.asyncio
    async def test_default_with_search(self, composer, memory):
        """Test general queries lead with the top search result."""
        response = await compose(composer, "tell me the latest news about noise rules", memory)

        assert response.startswith("I found some relevant information about your query:")
        assert "📖 **AP Police Official Information**" in response
        assert "I understand you're looking for assistance" in response

    @pytest.mark.asyncio
    async def test_default_with_context(self, composer, memory):
        """Test a backward reference recalls the earlier answer."""
        answer = "Police verification for your passport application takes about two weeks at your local station."
        memory.add_message(Message(text=answer, sender=Sender.BOT))

        response = await compose(composer, "remind me about that verification again", memory)

        assert response.startswith(f"Based on our previous discussion:\n{answer}...\n\n")

    @pytest.mark.asyncio
    async def test_search_failure(self, memory):
        """Test a failing search provider leaves the default answer intact."""
        provider = MagicMock()
        provider.search = AsyncMock(side_effect=RuntimeError("Search failed"))
        composer = ResponseComposer(InMemoryCaseRecordStore(), SearchAugmentor(provider))

        response = await compose(composer, "tell me the latest news about noise rules", memory)

        provider.search.assert_awaited_once()
        assert response.startswith("I understand you're looking for assistance")
