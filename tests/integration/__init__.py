"""Integration tests for components working together as a system.

No mocks for core functionality - the real TwinClient and ChatSession talk
over httpx to an in-process fake backend, and the host application is
exercised through ASGITransport.

Coverage:
    - POST /chat request/response contract
    - Error mapping for failed and malformed replies
    - Full chat workflow from first message to session reuse
    - Host application endpoints
"""
