"""Integration tests for components working together.

Coverage:
    - HttpBackendClient against a stub FastAPI backend
    - ChatSession turns through the real HTTP adapter
    - Host application health

All HTTP traffic stays in-process via httpx ASGITransport.
"""
