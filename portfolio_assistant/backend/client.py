"""HTTP client for the assistant backend.

The conversation core only depends on the ``BackendClient`` protocol: give
it the new user input and the prior transcript, get back a reply or an
exception. ``HttpBackendClient`` is the production implementation; it posts
the turn as JSON and validates the answer with pydantic.
"""

import logging
from collections.abc import Sequence
from typing import Protocol

import httpx
from pydantic import ValidationError

from portfolio_assistant.backend.config import BackendConfig, get_backend_config
from portfolio_assistant.models.schemas import (
    BackendReply,
    ChatRequest,
    HistoryEntry,
    Message,
)

logger = logging.getLogger(__name__)


class BackendError(Exception):
    """Raised when the backend cannot produce a reply."""

    pass


class BackendClient(Protocol):
    """Anything that can answer a chat turn."""

    async def send(self, input_text: str, history: Sequence[Message]) -> BackendReply: ...


def build_request(input_text: str, history: Sequence[Message]) -> ChatRequest:
    """Build the wire payload for a turn.

    Only role and content of prior messages are sent; suggestions and
    videos are presentation details the backend does not need back.
    """
    return ChatRequest(
        message=input_text,
        history=[HistoryEntry(role=m.role, content=m.content) for m in history],
    )


class HttpBackendClient:
    """Backend client that posts turns to an HTTP chat endpoint.

    Args:
        config: Optional backend configuration.
                Loads from environment if not provided.
        transport: Optional httpx transport, e.g. ASGITransport for
                   talking to an in-process app.
    """

    def __init__(
        self,
        config: BackendConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config or get_backend_config()
        self._transport = transport

    async def send(self, input_text: str, history: Sequence[Message]) -> BackendReply:
        """Ask the backend for a reply to one turn.

        Args:
            input_text: The user's new message.
            history: Transcript before this turn, oldest first.

        Returns:
            The validated backend reply.

        Raises:
            BackendError: On connection failure, non-2xx status, or a body
                that is not a valid reply.
        """
        payload = build_request(input_text, history).model_dump(mode="json")

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(self._config.chat_url, json=payload)
                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                logger.warning(f"Backend returned HTTP {e.response.status_code}")
                raise BackendError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                logger.warning(f"Backend request failed: {e!r}")
                raise BackendError(f"Connection failed: {e}") from e

        try:
            return BackendReply.model_validate_json(response.content)
        except ValidationError as e:
            raise BackendError(f"Invalid backend reply: {e}") from e


# Module-level singleton instance
_backend_client: HttpBackendClient | None = None


def get_backend_client() -> HttpBackendClient:
    """Get or create the global backend client.

    Returns:
        The HttpBackendClient instance.
    """
    global _backend_client
    if _backend_client is None:
        _backend_client = HttpBackendClient()
    return _backend_client
