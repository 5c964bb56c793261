"""Conversation session manager.

Owns the transcript and the pending flag, and runs each turn against the
backend.

Responsibilities:
    - Ordered, append-only message history seeded with a greeting
    - Pending/typing flag for the UI
    - Change notification for re-render and autoscroll
    - Turn sequencing with a fixed fallback on backend failure

Holds no presentation code; the UI reads from it and submits turns to it.
"""

from portfolio_assistant.conversation.controller import FALLBACK_TEXT, DispatchController
from portfolio_assistant.conversation.session import GREETING, ChatSession
from portfolio_assistant.conversation.store import ConversationStore, StoreEvent

__all__ = [
    "FALLBACK_TEXT",
    "GREETING",
    "ChatSession",
    "ConversationStore",
    "DispatchController",
    "StoreEvent",
]
