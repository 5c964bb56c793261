"""Portfolio Assistant - conversational UI for a portfolio Q&A backend.

Combines FastAPI for hosting, NiceGUI for the chat interface, httpx for
backend calls, and Pydantic for data validation.

Components:
    - conversation: Transcript store and turn dispatch
    - backend: Client for the external assistant backend
    - models: Message and wire schemas
    - ui: Web interface for chat interactions
    - api: Host application and health check
"""

__version__ = "0.1.0"
