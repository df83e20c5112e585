"""FastAPI host for the chat widget.

Endpoints:
    - GET /: Chat page (NiceGUI, mounted in src.main)
    - GET /health: Service health status
    - GET /avatar.png: Assistant avatar, when one is configured
"""

from src.api.app import create_app

__all__ = ["create_app"]
