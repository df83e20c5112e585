"""Digital Twin Chat - web chat widget for a remote digital twin assistant.

Combines NiceGUI for the chat view, FastAPI for hosting, httpx for the
backend call, and Pydantic for data validation.

Components:
    - client: Backend configuration and the POST /chat client
    - ui: Chat state and web interface
    - api: Host application (health check, avatar)
    - models: Message and wire schemas
"""

__version__ = "0.1.0"
