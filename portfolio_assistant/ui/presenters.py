"""View helpers that do not import NiceGUI."""

from collections.abc import Callable, Sequence
from typing import Protocol

from portfolio_assistant.conversation.store import ConversationStore, Listener
from portfolio_assistant.models.schemas import Message, Role, VideoRef

STARTER_PROMPTS: tuple[str, ...] = (
    "Show me your Computer Vision projects",
    "What deep learning frameworks do you use?",
    "Tell me about your medical imaging work",
)


class PageClient(Protocol):
    """The part of a NiceGUI client the page lifecycle needs."""

    def on_delete(self, handler: Callable[[], None]) -> None: ...


def listen_for_page_lifetime(
    client: PageClient, store: ConversationStore, listener: Listener
) -> Callable[[], None]:
    """Subscribe a page to its store until the page is deleted.

    A dropped socket that reconnects keeps the same page, so the listener
    is removed only when the client is deleted, not on disconnect.

    Returns:
        The unsubscribe callable.
    """
    unsubscribe = store.subscribe(listener)
    client.on_delete(unsubscribe)
    return unsubscribe


def starter_prompts_visible(messages: Sequence[Message], pending: bool) -> bool:
    """Starter cards show only before the first turn has been sent."""
    return len(messages) == 1 and not pending


def speaker_label(message: Message) -> str:
    return "You" if message.role is Role.USER else "Assistant"


def video_label(video: VideoRef, index: int) -> str:
    """Link text for a video, falling back to its position."""
    return video.title or f"Video {index + 1}"
