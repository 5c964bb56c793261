from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Role(str, Enum):
    """Who produced a transcript entry."""

    USER = "user"
    MODEL = "model"


class VideoRef(BaseModel):
    """A video attached to an assistant reply.

    Attributes:
        url: Link to the video.
        title: Optional human-readable title.
    """

    model_config = ConfigDict(frozen=True)

    url: str = Field(..., min_length=1)
    title: str | None = None


class Message(BaseModel):
    """One transcript entry.

    Attributes:
        role: The speaker (user or model).
        content: Markdown text, rendered as-is by the UI.
        suggestions: Follow-up prompts offered by an assistant reply.
        videos: Media attached to an assistant reply.
    """

    model_config = ConfigDict(frozen=True)

    role: Role
    content: str
    suggestions: tuple[str, ...] | None = None
    videos: tuple[VideoRef, ...] | None = None

    @field_validator("suggestions", "videos", mode="after")
    @classmethod
    def empty_to_none(cls, v: tuple | None) -> tuple | None:
        """Treat an empty sequence the same as a missing one."""
        return v or None


class BackendReply(BaseModel):
    """Successful response from the assistant backend.

    Attributes:
        text: The assistant's markdown answer.
        suggestions: Optional follow-up prompts.
        videos: Optional video references.
    """

    text: str
    suggestions: list[str] | None = None
    videos: list[VideoRef] | None = None


class HistoryEntry(BaseModel):
    """Wire shape of a prior message sent to the backend."""

    role: Role
    content: str


class ChatRequest(BaseModel):
    """Request payload posted to the backend chat endpoint.

    Attributes:
        message: The new user input.
        history: Prior transcript, oldest first.
    """

    message: str = Field(..., min_length=1)
    history: list[HistoryEntry] = Field(default_factory=list)
