"""Test package for the Digital Twin chat widget.

Structure:
    - unit/: Individual function and class tests
    - integration/: Client, session and host app working together

The backend is never contacted; integration tests use an in-process fake.
Leverages pytest with pytest-check for soft assertions.
"""
