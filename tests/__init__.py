"""Test package for Portfolio Assistant.

Structure:
    - unit/: Models, store, controller, config and view helpers in isolation
    - integration/: HTTP backend client and host app over ASGI transport

Uses in-process backend doubles and stub FastAPI backends rather than a
live assistant. Leverages pytest with pytest-check for soft assertions.
"""
