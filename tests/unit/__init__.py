"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - models/: Pydantic validation and serialization
    - client/: Configuration loading and validation
    - ui/: Chat state transitions and display helpers

Uses mocks for the backend client when needed. Leverages pytest-check for
multiple assertions per test.
"""
