"""Conversation handling: one user turn in, one bot reply out."""

import asyncio
import logging
from dataclasses import dataclass

from police_buddy.config import Language, Settings, get_settings
from police_buddy.memory import ConversationMemory, Message, Sender, SessionRegistry
from police_buddy.nlu import ParsedQuery, parse_query
from police_buddy.records import (
    CaseRecord,
    CaseRecordStore,
    ComplaintCategory,
    ComplaintRecord,
    ComplaintStore,
    InMemoryCaseRecordStore,
    InMemoryComplaintStore,
)
from police_buddy.responses import ResponseComposer, render, render_case_details
from police_buddy.search import SearchAugmentor, create_search_augmentor

logger = logging.getLogger(__name__)


@dataclass
class BotReply:
    """The assistant's answer to one user message."""

    text: str
    parsed: ParsedQuery
    language: Language
    fallback: bool = False


class PoliceBuddyAssistant:
    """Routes user messages through parsing, composition and session memory."""

    def __init__(
        self,
        record_store: CaseRecordStore | None = None,
        complaint_store: ComplaintStore | None = None,
        augmentor: SearchAugmentor | None = None,
        sessions: SessionRegistry | None = None,
        settings: Settings | None = None,
    ):
        """Initialize the assistant.

        Args:
            record_store: Case records, defaults to the in-memory sample store
            complaint_store: Complaint storage, defaults to in-memory
            augmentor: Search augmentor, defaults to the configured provider
            sessions: Session registry, defaults to a new one
            settings: Application settings, defaults to the global settings
        """
        self.settings = settings or get_settings()
        self.record_store = record_store or InMemoryCaseRecordStore()
        self.complaint_store = complaint_store or InMemoryComplaintStore()
        self.augmentor = augmentor or create_search_augmentor(self.settings)
        self.sessions = sessions or SessionRegistry(
            max_messages=self.settings.memory_max_messages,
            default_language=self.settings.default_language,
            idle_timeout=self.settings.session_idle_seconds,
        )
        self.composer = ResponseComposer(self.record_store, self.augmentor)
        logger.info("Police Buddy assistant initialized")

    def parse(self, text: str, lang: Language = Language.ENGLISH) -> ParsedQuery:
        """Classify the text and extract its entities."""
        return parse_query(text, lang)

    def _open_session(
        self, session_id: str, lang: Language | str | None
    ) -> tuple[ConversationMemory, Language]:
        """Return the session memory and the language to answer in."""
        memory = self.sessions.get_or_create(session_id, Language(lang) if lang else None)
        if lang is None:
            return memory, memory.preferred_language
        lang = Language(lang)
        if lang != memory.preferred_language:
            memory.set_preferred_language(lang)
        return memory, lang

    async def handle_message(
        self,
        session_id: str,
        text: str,
        lang: Language | str | None = None,
    ) -> BotReply | None:
        """Answer one user message and record the exchange.

        Composition failures and timeouts never propagate; the reply falls back
        to a fixed apology that points urgent cases to emergency services.

        Args:
            session_id: Caller-owned session identifier
            text: User text
            lang: Reply language, defaults to the session's preferred language

        Returns:
            The reply, or None for blank input
        """
        text = text.strip()
        if not text:
            return None

        memory, lang = self._open_session(session_id, lang)
        parsed = self.parse(text, lang)
        logger.info(f"Session {session_id}: intent={parsed.intent.value} confidence={parsed.confidence:.2f}")

        fallback = False
        try:
            response = await asyncio.wait_for(
                self.composer.compose(parsed, lang, text, memory),
                timeout=self.settings.response_timeout,
            )
        except asyncio.TimeoutError:
            logger.warning(f"Response composition timed out after {self.settings.response_timeout}s")
            response = render("apology", lang)
            fallback = True
        except Exception as e:
            logger.error(f"Error generating response: {e}", exc_info=True)
            response = render("apology", lang)
            fallback = True

        memory.add_message(Message(
            text=text,
            sender=Sender.USER,
            language=lang,
            intent=parsed.intent,
            entities=parsed.entities,
        ))
        memory.add_message(Message(
            text=response,
            sender=Sender.BOT,
            language=lang,
            intent=parsed.intent,
            entities=parsed.entities,
        ))

        return BotReply(text=response, parsed=parsed, language=lang, fallback=fallback)

    def welcome_message(self, session_id: str, lang: Language | str | None = None) -> str:
        """Seed a session with the localized welcome message and return it."""
        memory, lang = self._open_session(session_id, lang)
        text = render("welcome", lang)
        memory.add_message(
            Message(text=text, sender=Sender.BOT, language=lang)
        )
        return text

    def verify_case(self, case_number: str, phone_number: str) -> CaseRecord | None:
        """Return the case record if the phone number is registered on it."""
        if not self.record_store.verify_access(case_number, phone_number):
            logger.info(f"Case verification failed for {case_number}")
            return None
        return self.record_store.find_by_number(case_number)

    def render_verified_case(self, record: CaseRecord | None, lang: Language = Language.ENGLISH) -> str:
        if record is None:
            return render("case_verification_failed", lang)
        return render_case_details(record, lang, template="case_verified")

    def file_complaint(
        self,
        category: ComplaintCategory | str,
        description: str,
        location: str = "",
        contact_number: str = "",
        lang: Language = Language.ENGLISH,
    ) -> tuple[ComplaintRecord, str]:
        """File a complaint and render its confirmation.

        Raises:
            ValueError: If the category is unknown or the description is empty
        """
        complaint = self.complaint_store.create(
            category=ComplaintCategory(category),
            description=description,
            location=location,
            contact_number=contact_number,
        )
        confirmation = render(
            "complaint_filed",
            lang,
            id=complaint.id,
            category=complaint.category.value,
            date_reported=complaint.date_reported,
            status=complaint.status.value,
        )
        return complaint, confirmation

    def clear_session(self, session_id: str) -> bool:
        """Clear a session's memory. Returns False if the session is unknown."""
        memory = self.sessions.get(session_id)
        if memory is None:
            return False
        memory.clear_session()
        return True

    def end_session(self, session_id: str) -> bool:
        """Forget a session entirely. Returns False if the session is unknown."""
        ended = self.sessions.drop(session_id)
        if ended:
            logger.info(f"Session {session_id} ended")
        return ended

    async def aclose(self) -> None:
        await self.augmentor.provider.aclose()
