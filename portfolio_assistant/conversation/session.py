"""Chat session: one transcript, one controller, seeded with the greeting."""

from portfolio_assistant.backend.client import BackendClient, get_backend_client
from portfolio_assistant.backend.config import BackendConfig, get_backend_config
from portfolio_assistant.conversation.controller import DispatchController
from portfolio_assistant.conversation.store import ConversationStore
from portfolio_assistant.models.schemas import Message, Role

GREETING = (
    "👋 Hi! I'm **Molindu's AI Assistant**. I can tell you about my projects, "
    "technical skills, and experience in **Machine Learning** and **Computer Vision**."
    "\n\nTry asking:\n"
    '- "Show me your Computer Vision projects"\n'
    '- "What deep learning frameworks do you use?"\n'
    '- "Tell me about your medical imaging work"'
)


def greeting_message() -> Message:
    return Message(role=Role.MODEL, content=GREETING)


class ChatSession:
    """Manages chat state for a single browser session.

    Args:
        backend: Optional backend adapter. Uses the shared HTTP client if
                 not provided.
        config: Optional configuration. Loads from environment if not
                provided.
    """

    def __init__(
        self,
        backend: BackendClient | None = None,
        config: BackendConfig | None = None,
    ) -> None:
        config = config or get_backend_config()
        self.store = ConversationStore(greeting_message())
        self.controller = DispatchController(
            self.store,
            backend or get_backend_client(),
            reject_overlapping_turns=config.reject_overlapping_turns,
        )

    @property
    def messages(self) -> tuple[Message, ...]:
        return self.store.snapshot()

    @property
    def is_pending(self) -> bool:
        return self.store.is_pending()
