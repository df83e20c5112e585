"""HTTP client for the digital twin backend.

Wraps the single request/response call the widget makes: POST {API_URL}/chat
with the user's message and, once one has been issued, the session id.

Every failure (unreachable backend, non-2xx status, malformed body) surfaces
as a TwinClientError so callers have one exception type to handle.
"""

import logging

import httpx

from src.client.config import ChatConfig, get_chat_config
from src.models.schemas import ChatRequest, ChatResponse

logger = logging.getLogger(__name__)


class TwinClientError(Exception):
    """Raised when a chat request fails for any reason."""

    pass


class TwinClient:
    """Async client for the backend /chat endpoint.

    A fresh httpx.AsyncClient is opened per request; the widget never has
    more than one request in flight.
    """

    def __init__(
        self,
        config: ChatConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: Optional chat configuration.
                    Loads from environment if not provided.
            transport: Optional httpx transport (used to swap in a fake backend).
        """
        self._config = config or get_chat_config()
        self._transport = transport

    @property
    def config(self) -> ChatConfig:
        return self._config

    async def send_message(
        self,
        message: str,
        session_id: str | None = None,
    ) -> ChatResponse:
        """Send a user message and return the assistant's reply.

        Args:
            message: The user's message.
            session_id: Session identifier from a previous reply, if any.

        Returns:
            ChatResponse with the reply text and the backend's session id.

        Raises:
            TwinClientError: If the request fails or the reply is malformed.
        """
        payload = ChatRequest(message=message, session_id=session_id)
        logger.debug(f"POST {self._config.chat_url} (session={session_id or 'new'})")

        async with httpx.AsyncClient(
            timeout=self._config.request_timeout,
            transport=self._transport,
        ) as client:
            try:
                response = await client.post(
                    self._config.chat_url,
                    json=payload.model_dump(exclude_none=True),
                )
                response.raise_for_status()
                return ChatResponse.model_validate(response.json())
            except httpx.HTTPStatusError as e:
                raise TwinClientError(f"HTTP {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise TwinClientError(f"Connection failed: {e}") from e
            except httpx.InvalidURL as e:
                raise TwinClientError(f"Invalid backend URL: {e}") from e
            except ValueError as e:
                # JSON decode errors and pydantic ValidationError
                raise TwinClientError(f"Invalid response from backend: {e}") from e
