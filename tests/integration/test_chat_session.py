"""Integration tests for a full chat session over HTTP.

Wires ChatSession to the real HttpBackendClient and an in-process stub
backend, then checks the transcript a UI would render.
"""

import httpx
import pytest
import pytest_check as check
from fastapi import FastAPI, HTTPException

from portfolio_assistant.backend.client import HttpBackendClient
from portfolio_assistant.backend.config import BackendConfig
from portfolio_assistant.conversation import FALLBACK_TEXT, GREETING, ChatSession, StoreEvent
from portfolio_assistant.models.schemas import ChatRequest, Role


def create_portfolio_backend() -> FastAPI:
    stub = FastAPI()

    @stub.post("/chat")
    async def chat(request: ChatRequest) -> dict:
        if request.message == "trigger failure":
            raise HTTPException(status_code=503, detail="unavailable")
        if "Computer Vision" in request.message:
            return {
                "text": "Here are two CV projects...",
                "suggestions": ["Tell me more", "Show code"],
            }
        return {"text": f"{len(request.history)} earlier messages"}

    return stub


class TestChatSessionOverHttp:
    """End-to-end turn handling through the HTTP adapter."""

    @pytest.fixture
    def http_session(self, backend_config: BackendConfig) -> ChatSession:
        transport = httpx.ASGITransport(app=create_portfolio_backend())
        backend = HttpBackendClient(config=backend_config, transport=transport)
        return ChatSession(backend=backend, config=backend_config)

    async def test_successful_turn(self, http_session: ChatSession) -> None:
        await http_session.controller.handle_turn("Show me your Computer Vision projects")

        messages = http_session.messages
        check.equal(
            [(m.role, m.content) for m in messages],
            [
                (Role.MODEL, GREETING),
                (Role.USER, "Show me your Computer Vision projects"),
                (Role.MODEL, "Here are two CV projects..."),
            ],
        )
        check.equal(messages[-1].suggestions, ("Tell me more", "Show code"))
        check.is_false(http_session.is_pending)

    async def test_backend_failure_becomes_fallback(self, http_session: ChatSession) -> None:
        await http_session.controller.handle_turn("trigger failure")

        messages = http_session.messages
        check.equal(len(messages), 3)
        check.equal(messages[1].content, "trigger failure")
        check.equal(messages[2].role, Role.MODEL)
        check.equal(messages[2].content, FALLBACK_TEXT)
        check.is_false(http_session.is_pending)

    async def test_history_grows_with_each_turn(self, http_session: ChatSession) -> None:
        await http_session.controller.handle_turn("one")
        await http_session.controller.handle_turn("two")

        check.equal(http_session.messages[2].content, "1 earlier messages")
        check.equal(http_session.messages[4].content, "3 earlier messages")

    async def test_suggestion_click_flow(self, http_session: ChatSession) -> None:
        """A suggestion from a reply re-enters the controller as a new turn."""
        events: list[StoreEvent] = []
        http_session.store.subscribe(events.append)

        await http_session.controller.handle_turn("Show me your Computer Vision projects")
        suggestion = http_session.messages[-1].suggestions[0]
        http_session.controller.select_suggestion(suggestion)
        await http_session.controller.wait_idle()

        check.equal(http_session.messages[3].content, "Tell me more")
        check.equal(http_session.messages[4].content, "3 earlier messages")
        check.equal(events.count(StoreEvent.MESSAGE_APPENDED), 4)
        check.equal(events.count(StoreEvent.PENDING_CHANGED), 4)
