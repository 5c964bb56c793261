"""FastAPI application factory and configuration.

Hosts the NiceGUI chat page and a health endpoint that reports which
assistant backend turns are relayed to.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from portfolio_assistant import __version__
from portfolio_assistant.backend.config import BackendConfig, get_backend_config

logger = logging.getLogger(__name__)


def create_app(config: BackendConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        config: Backend settings to report. Defaults to the environment.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_backend_config()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info(f"Starting Portfolio Assistant (backend: {config.chat_url})")
        yield
        logger.info("Shutting down Portfolio Assistant...")

    application = FastAPI(
        title="Portfolio Assistant",
        description=(
            "Conversational portfolio assistant. Serves the chat UI and relays "
            "each turn to the assistant backend."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Report service status and the configured backend endpoint."""
        return {
            "status": "healthy",
            "service": "portfolio-assistant",
            "version": __version__,
            "backend": config.chat_url,
        }

    return application


app = create_app()
