"""Conversation memory models and data structures."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from police_buddy.config import Language
from police_buddy.nlu.models import Entities, Intent


class Sender(str, Enum):
    """Author of a conversation message."""

    USER = "user"
    BOT = "bot"


def _now() -> datetime:
    return datetime.now()


@dataclass(frozen=True)
class Message:
    """A single turn in the conversation."""

    text: str
    sender: Sender
    language: Language = Language.ENGLISH
    id: str = field(default_factory=lambda: uuid.uuid4().hex)
    timestamp: datetime = field(default_factory=_now)
    intent: Intent | None = None
    entities: Entities | None = None


@dataclass
class UserProfile:
    """What the assistant has learned about the user during the session."""

    preferred_language: Language = Language.ENGLISH
    name: str | None = None
    location: str | None = None
    previous_case_numbers: list[str] = field(default_factory=list)
    common_query_topics: list[str] = field(default_factory=list)


@dataclass
class SessionData:
    """Activity counters for the session."""

    start_time: datetime = field(default_factory=_now)
    last_activity: datetime = field(default_factory=_now)
    total_queries: int = 0
    resolved_issues: list[str] = field(default_factory=list)


@dataclass
class ConversationContext:
    """Message log, user profile and session data of one conversation."""

    messages: list[Message] = field(default_factory=list)
    user_profile: UserProfile = field(default_factory=UserProfile)
    session_data: SessionData = field(default_factory=SessionData)
