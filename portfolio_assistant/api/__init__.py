"""FastAPI host application.

Endpoints:
    - GET /health: Service health status
    - GET /: Chat UI (NiceGUI, mounted at startup)
"""

from portfolio_assistant.api.app import app, create_app

__all__ = ["app", "create_app"]
