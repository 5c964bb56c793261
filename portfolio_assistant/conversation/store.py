"""In-memory transcript and pending flag for one chat session.

The store is the only place conversation state lives. Presentation code
reads it through ``snapshot()`` / ``is_pending()`` and learns about changes
by subscribing; it never mutates the store itself.
"""

import logging
from collections.abc import Callable
from enum import Enum

from portfolio_assistant.models.schemas import Message, Role

logger = logging.getLogger(__name__)


class StoreEvent(str, Enum):
    """Kinds of change reported to subscribers."""

    MESSAGE_APPENDED = "message_appended"
    PENDING_CHANGED = "pending_changed"


Listener = Callable[[StoreEvent], None]


class ConversationStore:
    """Append-only transcript plus the pending-request flag.

    Args:
        greeting: The assistant message every transcript starts with.

    Raises:
        ValueError: If the greeting is not an assistant message.
    """

    def __init__(self, greeting: Message) -> None:
        if greeting.role is not Role.MODEL:
            raise ValueError("Transcript must start with an assistant message")
        self._messages: list[Message] = [greeting]
        self._pending: bool = False
        self._listeners: list[Listener] = []

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: Message) -> None:
        """Add a message to the end of the transcript.

        No role alternation is enforced: an assistant message may follow
        another assistant message (e.g. a fallback after a failed turn).
        """
        self._messages.append(message)
        self._notify(StoreEvent.MESSAGE_APPENDED)

    def snapshot(self) -> tuple[Message, ...]:
        """Return the transcript in order as an immutable tuple."""
        return tuple(self._messages)

    def is_pending(self) -> bool:
        return self._pending

    def set_pending(self, pending: bool) -> None:
        if pending == self._pending:
            return
        self._pending = pending
        self._notify(StoreEvent.PENDING_CHANGED)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener.

        Args:
            listener: Called with the event after every mutation.

        Returns:
            A callable that removes the listener. Calling it more than
            once has no effect.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self, event: StoreEvent) -> None:
        # Copy so listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(event)
            except Exception:
                logger.exception(f"Store listener failed while handling {event.value}")
