"""Backend client for the digital twin chat service.

Responsibilities:
    - Configuration loading from environment and .env
    - The POST /chat request/response call
    - Mapping every request failure to TwinClientError

The backend itself is an external service; this package only speaks its
HTTP contract.
"""

from src.client.config import ChatConfig, get_chat_config
from src.client.twin_client import TwinClient, TwinClientError

__all__ = ["ChatConfig", "TwinClient", "TwinClientError", "get_chat_config"]
