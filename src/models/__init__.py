"""Pydantic models for the chat thread and the backend wire format.

Provides type safety and validation for everything crossing the HTTP boundary.

Models:
    - Role: Message speaker (user or assistant)
    - Message: Individual immutable message in the conversation
    - ChatRequest: Outgoing request payload for POST /chat
    - ChatResponse: Backend reply with session identifier
"""

from src.models.schemas import ChatRequest, ChatResponse, Message, Role

__all__ = ["ChatRequest", "ChatResponse", "Message", "Role"]
