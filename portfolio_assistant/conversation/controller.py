"""Turn-taking logic for the chat session.

One turn runs these steps:

1. Append the user's message (visible before the backend is contacted).
2. Mark the session pending.
3. Ask the backend for a reply, passing the transcript as it was before
   this turn.
4. Append the reply, or a fixed fallback message if the backend failed.
5. Release the pending flag, whatever happened above.

Steps 1 and 2 happen synchronously; the caller gets control back while the
backend round trip is outstanding. Backend failures never escape this
module: they become an ordinary assistant message so the session stays
usable for the next turn.
"""

import asyncio
import logging

from portfolio_assistant.backend.client import BackendClient
from portfolio_assistant.conversation.store import ConversationStore
from portfolio_assistant.models.schemas import BackendReply, Message, Role

logger = logging.getLogger(__name__)

FALLBACK_TEXT = "⚠️ Sorry, I encountered an error. Please ensure the backend is running."


def user_message(text: str) -> Message:
    return Message(role=Role.USER, content=text)


def reply_message(reply: BackendReply) -> Message:
    return Message(
        role=Role.MODEL,
        content=reply.text,
        suggestions=reply.suggestions,
        videos=reply.videos,
    )


def fallback_message() -> Message:
    return Message(role=Role.MODEL, content=FALLBACK_TEXT)


class DispatchController:
    """Runs conversational turns against a backend and records them in a store.

    Args:
        store: Transcript and pending flag to update.
        backend: Adapter that produces assistant replies.
        reject_overlapping_turns: When True, a turn started while another is
            still pending is ignored. When False (default) overlapping turns
            run concurrently and only the UI prevents them.
    """

    def __init__(
        self,
        store: ConversationStore,
        backend: BackendClient,
        *,
        reject_overlapping_turns: bool = False,
    ) -> None:
        self._store = store
        self._backend = backend
        self._reject_overlapping = reject_overlapping_turns
        self._in_flight = 0
        self._tasks: set[asyncio.Task[None]] = set()

    def _begin_turn(self, input_text: str) -> tuple[Message, ...] | None:
        """Validate input, record the user message and take the pending flag.

        Returns:
            The transcript as it was before this turn, or None if the input
            was rejected.
        """
        if not input_text or not input_text.strip():
            logger.debug("Ignoring blank input")
            return None

        if self._reject_overlapping and self._store.is_pending():
            logger.info("Rejecting turn while another is pending")
            return None

        logger.info(f"Starting turn ({len(input_text)} chars, {len(self._store)} prior messages)")
        history = self._store.snapshot()
        self._store.append(user_message(input_text))
        self._in_flight += 1
        self._store.set_pending(True)
        return history

    def _end_turn(self) -> None:
        # The flag stays set until the last overlapping turn ends
        self._in_flight -= 1
        if self._in_flight == 0:
            self._store.set_pending(False)
        logger.debug(f"Turn finished; transcript has {len(self._store)} messages")

    async def _exchange(self, input_text: str, history: tuple[Message, ...]) -> None:
        try:
            reply = reply_message(await self._backend.send(input_text, history))
        except Exception as e:
            logger.error(f"Chat error: {e}")
            reply = fallback_message()
        self._store.append(reply)

    async def handle_turn(self, input_text: str) -> bool:
        """Run one turn for the given user input and wait for it to settle.

        Args:
            input_text: Text typed by the user or taken from a suggestion.

        Returns:
            True if the turn ran, False if the input was rejected (blank
            text, or a turn already pending while overlapping is disallowed).
        """
        history = self._begin_turn(input_text)
        if history is None:
            return False
        try:
            await self._exchange(input_text, history)
        finally:
            self._end_turn()
        return True

    def submit(self, input_text: str) -> asyncio.Task[None] | None:
        """Start a turn without waiting for it.

        The user message and pending flag are visible as soon as this
        returns. Must be called from within the running event loop.

        Returns:
            The task awaiting the backend, or None if the input was rejected.
        """
        history = self._begin_turn(input_text)
        if history is None:
            return None
        task = asyncio.get_running_loop().create_task(self._exchange(input_text, history))
        self._tasks.add(task)
        # Released from a done callback so a task cancelled before it ever
        # ran still gives the flag back.
        task.add_done_callback(self._task_done)
        return task

    def _task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        self._end_turn()

    def select_suggestion(self, suggestion: str) -> asyncio.Task[None] | None:
        """Send a suggestion exactly as if the user had typed it."""
        return self.submit(suggestion)

    async def wait_idle(self) -> None:
        """Wait until every turn started with ``submit`` has settled."""
        while self._tasks:
            await asyncio.gather(*self._tasks, return_exceptions=True)
            # Let done callbacks run before checking again
            await asyncio.sleep(0)
