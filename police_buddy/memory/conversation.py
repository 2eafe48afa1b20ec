"""Per-session conversation memory with relevance recall."""

import copy
import logging
from datetime import datetime, timedelta

from police_buddy.config import Language
from police_buddy.nlu.classifier import compile_keywords
from police_buddy.nlu.entities import extract_case_number, extract_location

from .models import ConversationContext, Message, SessionData, Sender, UserProfile

logger = logging.getLogger(__name__)

DEFAULT_MAX_MESSAGES = 20

# Recall tuning
MIN_RECALL_MESSAGE_LENGTH = 50
MIN_QUERY_TOKEN_LENGTH = 4
MAX_RECALLED_MESSAGES = 3
RECALL_SNIPPET_LENGTH = 200

BACKWARD_REFERENCES = (
    "again", "previous", "earlier", "before", "same", "that",
    "మళ్లీ", "మునుపు", "అదే", "ముందు",
)

TOPIC_KEYWORDS = {
    "crime_safety": ("crime", "crimes", "safety", "నేరాలు", "భద్రత"),
    "traffic": ("traffic", "challan", "license", "ట్రాఫిక్"),
    "fir": ("fir", "ఎఫ్‌ఐఆర్"),
    "complaint": ("complaint", "complaints", "complain", "ఫిర్యాదు"),
}
TOPIC_PATTERNS = {topic: compile_keywords(keywords) for topic, keywords in TOPIC_KEYWORDS.items()}


class ConversationMemory:
    """Working memory of a single conversation.

    Holds the most recent messages (oldest first), a user profile derived from
    what the user has said, and session counters. One instance per session;
    it is not safe to share between concurrent conversations.
    """

    def __init__(
        self,
        max_messages: int = DEFAULT_MAX_MESSAGES,
        preferred_language: Language = Language.ENGLISH,
    ):
        """Initialize conversation memory.

        Args:
            max_messages: Maximum messages retained in the log
            preferred_language: Initial language of the session
        """
        self.max_messages = max_messages
        self._context = ConversationContext(
            user_profile=UserProfile(preferred_language=Language(preferred_language)),
        )

    def add_message(self, message: Message) -> None:
        """Append a message and update the session and profile.

        Args:
            message: Message to record
        """
        context = self._context
        context.messages.append(message)
        if len(context.messages) > self.max_messages:
            context.messages = context.messages[-self.max_messages:]
        context.session_data.last_activity = datetime.now()

        if message.sender == Sender.USER:
            context.session_data.total_queries += 1
            self._extract_user_info(message.text)

    def _extract_user_info(self, text: str) -> None:
        """Update the profile from a user message without overwriting anything."""
        profile = self._context.user_profile

        location = extract_location(text)
        if location and profile.location is None:
            profile.location = location
            logger.debug(f"Profile location set to {location}")

        case_number = extract_case_number(text)
        if case_number and case_number not in profile.previous_case_numbers:
            profile.previous_case_numbers.append(case_number)

        for topic, pattern in TOPIC_PATTERNS.items():
            if topic in profile.common_query_topics:
                continue
            if pattern.search(text):
                profile.common_query_topics.append(topic)

    def get_context(self) -> ConversationContext:
        """Return a copy of the context; changes to it do not affect memory."""
        return copy.deepcopy(self._context)

    @property
    def total_queries(self) -> int:
        return self._context.session_data.total_queries

    @property
    def last_activity(self) -> datetime:
        return self._context.session_data.last_activity

    @property
    def preferred_language(self) -> Language:
        return self._context.user_profile.preferred_language

    def __len__(self) -> int:
        return len(self._context.messages)

    def get_relevant_history(self, query: str) -> list[str]:
        """Find earlier bot answers that share words with the query.

        A bot message qualifies when it is longer than 50 characters and any
        query word of four or more characters occurs in it.

        Args:
            query: Current user query

        Returns:
            Up to three most recent matches, each cut to 200 characters
            followed by ``...``
        """
        query_words = [word for word in query.lower().split(" ") if len(word) >= MIN_QUERY_TOKEN_LENGTH]
        if not query_words:
            return []

        relevant = []
        for message in self._context.messages:
            if message.sender != Sender.BOT or len(message.text) <= MIN_RECALL_MESSAGE_LENGTH:
                continue
            lowered = message.text.lower()
            if any(word in lowered for word in query_words):
                relevant.append(message.text[:RECALL_SNIPPET_LENGTH] + "...")

        return relevant[-MAX_RECALLED_MESSAGES:]

    def should_refer_to_previous(self, query: str) -> bool:
        """Return True when the query points back at the earlier conversation."""
        lowered = query.lower()
        return any(indicator in lowered for indicator in BACKWARD_REFERENCES)

    def set_preferred_language(self, lang: Language) -> None:
        self._context.user_profile.preferred_language = Language(lang)

    def mark_resolved(self, issue: str) -> None:
        """Record an issue the user considers resolved."""
        resolved = self._context.session_data.resolved_issues
        if issue not in resolved:
            resolved.append(issue)

    def clear_session(self) -> None:
        """Forget the conversation, keeping only the preferred language."""
        language = self._context.user_profile.preferred_language
        self._context = ConversationContext(
            user_profile=UserProfile(preferred_language=language),
            session_data=SessionData(),
        )
        logger.info("Conversation session cleared")


class SessionRegistry:
    """Caller-owned mapping of session identifiers to conversation memories."""

    def __init__(
        self,
        max_messages: int = DEFAULT_MAX_MESSAGES,
        default_language: Language = Language.ENGLISH,
        idle_timeout: float | None = None,
    ):
        """Initialize the registry.

        Args:
            max_messages: Message log size of each new session
            default_language: Language of sessions created without one
            idle_timeout: Seconds without activity after which a session is
                forgotten; None keeps sessions until dropped
        """
        self.max_messages = max_messages
        self.default_language = Language(default_language)
        self.idle_timeout = idle_timeout
        self._sessions: dict[str, ConversationMemory] = {}

    def get_or_create(self, session_id: str, lang: Language | None = None) -> ConversationMemory:
        """Get the memory for a session, creating it on first use.

        Args:
            session_id: Caller-chosen session identifier
            lang: Preferred language for a newly created session

        Returns:
            The session's conversation memory
        """
        self.evict_idle()
        memory = self._sessions.get(session_id)
        if memory is None:
            memory = ConversationMemory(
                max_messages=self.max_messages,
                preferred_language=lang or self.default_language,
            )
            self._sessions[session_id] = memory
            logger.info(f"Created conversation session {session_id}")
        return memory

    def get(self, session_id: str) -> ConversationMemory | None:
        return self._sessions.get(session_id)

    def evict_idle(self, now: datetime | None = None) -> int:
        """Forget sessions idle for longer than ``idle_timeout``.

        Returns:
            Number of sessions evicted
        """
        if self.idle_timeout is None:
            return 0
        cutoff = (now or datetime.now()) - timedelta(seconds=self.idle_timeout)
        expired = [sid for sid, memory in self._sessions.items() if memory.last_activity < cutoff]
        for session_id in expired:
            del self._sessions[session_id]
        if expired:
            logger.info(f"Evicted {len(expired)} idle conversation sessions")
        return len(expired)

    def drop(self, session_id: str) -> bool:
        """Forget a session entirely. Returns False if it did not exist."""
        return self._sessions.pop(session_id, None) is not None

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)
