"""Backend connection settings with environment variable loading.

Pydantic-based configuration for the assistant backend client and the
turn dispatch policy.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

# Load environment variables from .env file
load_dotenv()


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


class BackendConfig(BaseModel):
    """Configuration for talking to the assistant backend.

    Attributes:
        api_base_url: Root URL of the backend service.
        chat_path: Path of the chat endpoint under the base URL.
        request_timeout: Seconds to wait for a reply before failing the turn.
        reject_overlapping_turns: Ignore new turns while one is pending.
    """

    # Values read from the environment are defaults; validate them as well
    model_config = ConfigDict(validate_default=True)

    api_base_url: str = Field(
        default_factory=lambda: os.getenv("API_BASE_URL", "http://localhost:8000"),
        description="Backend root URL",
    )
    chat_path: str = Field(
        default_factory=lambda: os.getenv("BACKEND_CHAT_PATH", "/chat"),
        description="Chat endpoint path",
    )
    request_timeout: float = Field(
        default_factory=lambda: float(os.getenv("BACKEND_TIMEOUT", "60")),
        gt=0.0,
        le=600.0,
        description="Request timeout in seconds",
    )
    reject_overlapping_turns: bool = Field(
        default_factory=lambda: _env_flag("REJECT_OVERLAPPING_TURNS"),
        description="Reject a new turn while another is pending",
    )

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError("API_BASE_URL must start with http:// or https://")
        return v.rstrip("/")

    @field_validator("chat_path")
    @classmethod
    def validate_chat_path(cls, v: str) -> str:
        """Ensure the path starts with a single slash."""
        v = v.strip()
        return "/" + v.lstrip("/")

    @property
    def chat_url(self) -> str:
        return f"{self.api_base_url}{self.chat_path}"


def get_backend_config() -> BackendConfig:
    """Create backend configuration from environment.

    Returns:
        Configured BackendConfig instance.

    Raises:
        ValidationError: If an environment value is invalid.
    """
    return BackendConfig()
