"""Conversation UI — in-memory chat state shared by the terminal client."""

from taxchat.ui.conversation import CONNECTION_ERROR_MESSAGE, Conversation
from taxchat.ui.models import Message
from taxchat.ui.suggestions import SUGGESTION_PROMPTS, all_suggestions

__all__ = [
    "CONNECTION_ERROR_MESSAGE",
    "Conversation",
    "Message",
    "SUGGESTION_PROMPTS",
    "all_suggestions",
]
