import uuid
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Speaker of a chat message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single message in the conversation thread.

    Messages live only for the lifetime of the page and are never
    modified once created.

    Attributes:
        id: Unique message identifier.
        role: Who sent the message (user or assistant).
        content: The message text.
        timestamp: Local time the message was created.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    role: Role
    content: str
    timestamp: datetime = Field(default_factory=datetime.now)

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role=Role.ASSISTANT, content=content)


class ChatRequest(BaseModel):
    """Request payload for the backend chat endpoint.

    Attributes:
        message: User's question or prompt.
        session_id: Optional session for conversation continuity.
    """

    message: str = Field(..., min_length=1)
    session_id: str | None = None


class ChatResponse(BaseModel):
    """Response from the backend chat endpoint.

    Attributes:
        session_id: Session identifier issued by the backend.
        response: The assistant's reply.
    """

    session_id: str
    response: str
