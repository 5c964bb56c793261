"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - backend_config: BackendConfig isolated from the process environment
    - scripted_backend: Backend double returning queued replies or errors
    - gated_backend: Backend double that blocks until released
    - session: ChatSession wired to the scripted backend
    - async_client: HTTPX client for the host application
"""

import asyncio
from collections.abc import AsyncGenerator, Sequence

import pytest
from httpx import ASGITransport, AsyncClient

from portfolio_assistant.api import app
from portfolio_assistant.backend.config import BackendConfig
from portfolio_assistant.conversation.session import ChatSession
from portfolio_assistant.models.schemas import BackendReply, Message


class ScriptedBackend:
    """Backend double that replays queued outcomes and records its calls.

    Queue a BackendReply to succeed or an Exception to fail. With an empty
    queue it echoes the input.
    """

    def __init__(self) -> None:
        self.outcomes: list[BackendReply | Exception] = []
        self.calls: list[tuple[str, tuple[Message, ...]]] = []

    def reply(self, text: str, **kwargs) -> "ScriptedBackend":
        self.outcomes.append(BackendReply(text=text, **kwargs))
        return self

    def fail(self, error: Exception | None = None) -> "ScriptedBackend":
        self.outcomes.append(error or RuntimeError("backend down"))
        return self

    async def send(self, input_text: str, history: Sequence[Message]) -> BackendReply:
        self.calls.append((input_text, tuple(history)))
        outcome = self.outcomes.pop(0) if self.outcomes else BackendReply(text=f"echo: {input_text}")
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class GatedBackend(ScriptedBackend):
    """Scripted backend whose calls block until ``release()`` is called."""

    def __init__(self) -> None:
        super().__init__()
        self.gate = asyncio.Event()
        self.started = 0

    def release(self) -> None:
        self.gate.set()

    async def send(self, input_text: str, history: Sequence[Message]) -> BackendReply:
        self.started += 1
        await self.gate.wait()
        return await super().send(input_text, history)


@pytest.fixture
def backend_config() -> BackendConfig:
    """Return explicit configuration so tests ignore local .env files."""
    return BackendConfig(
        api_base_url="http://backend.test",
        chat_path="/chat",
        request_timeout=5.0,
        reject_overlapping_turns=False,
    )


@pytest.fixture
def scripted_backend() -> ScriptedBackend:
    return ScriptedBackend()


@pytest.fixture
def gated_backend() -> GatedBackend:
    return GatedBackend()


@pytest.fixture
def session(scripted_backend: ScriptedBackend, backend_config: BackendConfig) -> ChatSession:
    """Fresh chat session talking to the scripted backend."""
    return ChatSession(backend=scripted_backend, config=backend_config)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
