"""Response composition from parsed queries, memory, search and case records."""

import logging

from police_buddy.config import Language
from police_buddy.memory import ConversationMemory
from police_buddy.nlu.entities import canonical_location
from police_buddy.nlu.models import Intent, ParsedQuery
from police_buddy.records import CaseRecord, CaseRecordStore
from police_buddy.search import SearchAugmentor, SearchResult

from .templates import render

logger = logging.getLogger(__name__)

# City whose statistics come with the parking-theft advice.
PARKING_THEFT_CITY = "Guntur"

STATIC_INTENTS = {
    Intent.HELP: "help",
    Intent.FILE_FIR: "file_fir",
    Intent.EMERGENCY: "emergency",
    Intent.POLICE_CONTACT: "police_contact",
}

GUIDANCE_INTENTS = {
    Intent.TRAFFIC_RULES: "traffic_rules",
    Intent.LOST_DOCUMENTS: "lost_documents",
    Intent.FILE_COMPLAINT: "file_complaint",
}


def ordinal_suffix(number: int) -> str:
    """Return the English ordinal suffix: 1 -> "st", 12 -> "th", 23 -> "rd"."""
    if number % 100 in (11, 12, 13):
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")


def ordinal(number: int) -> str:
    return f"{number}{ordinal_suffix(number)}"


def render_case_details(record: CaseRecord, lang: Language, template: str = "fir_found") -> str:
    """Render a case record with one of the case templates."""
    return render(
        template,
        lang,
        case_number=record.case_number,
        status=record.status.value,
        police_station=record.police_station,
        officer_name=record.officer_name,
        crime_type=record.crime_type,
        location=record.location,
        date_reported=record.date_reported,
        description=record.description,
    )


class ResponseComposer:
    """Builds the assistant's reply for a parsed query."""

    def __init__(self, record_store: CaseRecordStore, augmentor: SearchAugmentor):
        """Initialize response composer.

        Args:
            record_store: Source of case files and crime statistics
            augmentor: Search augmentor for supplementary information
        """
        self.record_store = record_store
        self.augmentor = augmentor

    async def compose(
        self,
        parsed: ParsedQuery,
        lang: Language,
        original_text: str,
        memory: ConversationMemory,
    ) -> str:
        """Compose the reply to one user turn.

        Memory is only read; recording the exchange is left to the caller.

        Args:
            parsed: Classified intent and extracted entities
            lang: Response language
            original_text: The user's text as typed or transcribed
            memory: Conversation memory of the current session

        Returns:
            Rendered response text
        """
        lang = Language(lang)

        # Step 1: Recall earlier answers the user is pointing back at
        context_prefix = ""
        if memory.should_refer_to_previous(original_text):
            history = memory.get_relevant_history(original_text)
            if history:
                context_prefix = render("context_prefix", lang, history=history[0])

        # Step 2: Fetch supplementary information
        search_results: list[SearchResult] = []
        if self.augmentor.is_searchable(original_text, parsed.intent):
            search_results = await self.augmentor.search(original_text, lang)
            logger.info(f"Search returned {len(search_results)} results")

        # Step 3: Render the template for the intent
        intent = parsed.intent
        if intent == Intent.GREETING:
            return self._greeting(lang, memory)
        if intent == Intent.FIR_STATUS:
            return self._case_status(parsed, lang, memory)
        if intent == Intent.CRIME_STATS:
            return self._crime_stats(parsed, lang, context_prefix, search_results)
        if intent in STATIC_INTENTS:
            return render(STATIC_INTENTS[intent], lang)
        if intent in GUIDANCE_INTENTS:
            return render(GUIDANCE_INTENTS[intent], lang) + self._latest_information(lang, search_results)
        return self._default(lang, context_prefix, search_results)

    def _greeting(self, lang: Language, memory: ConversationMemory) -> str:
        personalized = ""
        total_queries = memory.total_queries
        if total_queries > 0:
            count = total_queries + 1
            personalized = render("welcome_back", lang, ordinal=ordinal(count), count=count)
        return personalized + render("greeting", lang)

    def _case_status(self, parsed: ParsedQuery, lang: Language, memory: ConversationMemory) -> str:
        case_number = parsed.entities.case_number
        if not case_number:
            return render("fir_request_number", lang)

        record = self.record_store.find_by_number(case_number)
        if record is not None:
            logger.info(f"Case {record.case_number} found")
            return render_case_details(record, lang)

        logger.info(f"Case {case_number} not found")
        response = render("fir_not_found", lang, case_number=case_number)
        previous = memory.get_context().user_profile.previous_case_numbers
        others = [number for number in previous if number != case_number]
        if others:
            response += render("fir_previous_note", lang, case_number=others[0])
        return response

    def _crime_stats(
        self,
        parsed: ParsedQuery,
        lang: Language,
        context_prefix: str,
        search_results: list[SearchResult],
    ) -> str:
        location = parsed.entities.location
        if location:
            city = canonical_location(location)
            stats = self.record_store.stats_by_location(city)
            if stats:
                stats_text = "\n".join(
                    render("stat_line", lang, crime_type=stat.crime_type, count=stat.count)
                    for stat in stats
                )
                tips = "safety_parking" if city == PARKING_THEFT_CITY else "safety_general"
                response = context_prefix + render(
                    "crime_stats",
                    lang,
                    location=location,
                    stats=stats_text,
                    safety_tips=render(tips, lang),
                )
                if search_results:
                    response += render("latest_updates", lang, snippet=search_results[0].snippet)
                return response

        return (
            context_prefix
            + render("crime_pick_city", lang)
            + self._latest_information(lang, search_results)
        )

    def _latest_information(self, lang: Language, search_results: list[SearchResult]) -> str:
        if not search_results:
            return ""
        top = search_results[0]
        return render("latest_information", lang, snippet=top.snippet, title=top.title)

    def _default(self, lang: Language, context_prefix: str, search_results: list[SearchResult]) -> str:
        if search_results:
            top = search_results[0]
            return render("search_found", lang, title=top.title, snippet=top.snippet) + render("default", lang)
        return context_prefix + render("default", lang)
