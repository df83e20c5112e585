"""Chat client configuration with environment variable loading.

Pydantic-based configuration for the digital twin chat widget.
"""

import os

import httpx
from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

# Load environment variables from .env file
load_dotenv()


class ChatConfig(BaseModel):
    """Configuration for the chat widget and its backend connection.

    Attributes:
        api_url: Base URL of the digital twin backend.
        request_timeout: Seconds to wait for a reply (None waits indefinitely).
        assistant_name: Display name shown in the header and welcome panel.
        tagline: Subtitle shown under the assistant name.
        avatar_path: Local image used as the assistant avatar, if present.
    """

    api_url: str = Field(
        default_factory=lambda: os.getenv("API_URL", "http://localhost:8000"),
        validate_default=True,
        description="Base URL of the chat backend",
    )
    request_timeout: float | None = Field(
        default_factory=lambda: os.getenv("API_TIMEOUT") or None,
        validate_default=True,
        description="Request timeout in seconds (None for no timeout)",
    )
    assistant_name: str = Field(
        default_factory=lambda: os.getenv("TWIN_NAME", "Digital Twin"),
        description="Assistant display name",
    )
    tagline: str = Field(
        default_factory=lambda: os.getenv(
            "TWIN_TAGLINE", "Your AI-powered course companion"
        ),
        description="Subtitle shown under the assistant name",
    )
    avatar_path: str = Field(
        default_factory=lambda: os.getenv("AVATAR_PATH", "static/avatar.png"),
        description="Path to the assistant avatar image",
    )

    @field_validator("api_url")
    @classmethod
    def validate_api_url(cls, v: str) -> str:
        """Require an http(s) URL and drop any trailing slash."""
        v = v.strip()
        if not v.startswith(("http://", "https://")):
            raise ValueError(
                "API_URL must start with http:// or https://"
            )
        try:
            url = httpx.URL(v)
        except httpx.InvalidURL as e:
            raise ValueError(f"API_URL is not a valid URL: {e}") from e
        if not url.host:
            raise ValueError("API_URL must include a host")
        return v.rstrip("/")

    @field_validator("request_timeout")
    @classmethod
    def validate_request_timeout(cls, v: float | None) -> float | None:
        """Reject non-positive timeouts."""
        if v is not None and v <= 0:
            raise ValueError("API_TIMEOUT must be greater than 0")
        return v

    @property
    def chat_url(self) -> str:
        return f"{self.api_url}/chat"


def get_chat_config() -> ChatConfig:
    """Create chat configuration from environment.

    Returns:
        Configured ChatConfig instance.

    Raises:
        ValueError: If API_URL or API_TIMEOUT is invalid.
    """
    return ChatConfig()
