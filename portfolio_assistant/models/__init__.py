"""Pydantic models for the transcript and the backend wire format.

Models:
    - Role: Speaker of a message (user or model)
    - VideoRef: Video attached to an assistant reply
    - Message: Immutable transcript entry
    - BackendReply: Successful backend response
    - ChatRequest / HistoryEntry: Payload posted to the backend
"""

from portfolio_assistant.models.schemas import (
    BackendReply,
    ChatRequest,
    HistoryEntry,
    Message,
    Role,
    VideoRef,
)

__all__ = ["BackendReply", "ChatRequest", "HistoryEntry", "Message", "Role", "VideoRef"]
