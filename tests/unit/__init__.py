"""Unit tests for individual components in isolation.

Coverage:
    - models/: Pydantic validation of messages and wire payloads
    - conversation/: Store notification and turn dispatch
    - backend/: Configuration loading and validation
    - ui/: View helpers that do not need NiceGUI

Backend calls are replaced by scripted doubles from conftest.
"""
