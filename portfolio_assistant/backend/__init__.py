"""Adapter for the external assistant backend.

Responsibilities:
    - Serialize a turn (new input plus prior transcript) to the wire format
    - POST it to the configured chat endpoint with httpx
    - Validate the reply and turn every failure into BackendError

The backend itself (model, retrieval, prompts) lives elsewhere.
"""

from portfolio_assistant.backend.client import (
    BackendClient,
    BackendError,
    HttpBackendClient,
    get_backend_client,
)
from portfolio_assistant.backend.config import BackendConfig, get_backend_config

__all__ = [
    "BackendClient",
    "BackendConfig",
    "BackendError",
    "HttpBackendClient",
    "get_backend_client",
    "get_backend_config",
]
