"""Conversation memory module."""

from .conversation import ConversationMemory, SessionRegistry
from .models import ConversationContext, Message, Sender, SessionData, UserProfile

__all__ = [
    "ConversationContext",
    "ConversationMemory",
    "Message",
    "Sender",
    "SessionData",
    "SessionRegistry",
    "UserProfile",
]
