"""NiceGUI interface - thin visualization layer for the chat thread.

Responsibilities:
    - Message thread display with avatars and timestamps
    - Loading indicator while a reply is pending
    - Per-visit chat state (messages, loading flag, backend session id)

Contains no backend logic. Delegates the request to the client package.
"""
