"""Chat view state: message thread, loading flag, and backend session id."""

import logging
from collections.abc import Callable
from typing import NamedTuple

from src.client.twin_client import TwinClient, TwinClientError
from src.models.schemas import Message

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."


class ControlState(NamedTuple):
    """Enabled state of the message input and the send button."""

    input_enabled: bool
    send_enabled: bool


class ChatSession:
    """Manages chat state for one page visit.

    Only one request may be outstanding at a time. The loading flag is set
    before the first await, so a second submit arriving while the first is
    in flight is rejected.
    """

    def __init__(
        self,
        client: TwinClient,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self._client = client
        self._messages: list[Message] = []
        self.session_id: str | None = None
        self.is_loading: bool = False
        self.on_change = on_change

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def can_send(self, text: str | None) -> bool:
        return bool(text and text.strip()) and not self.is_loading

    def controls(self, text: str | None) -> ControlState:
        return ControlState(
            input_enabled=not self.is_loading,
            send_enabled=self.can_send(text),
        )

    async def submit(
        self,
        text: str,
        on_accept: Callable[[], None] | None = None,
    ) -> bool:
        """Send a user message and append the reply.

        Args:
            text: The message as typed by the user.
            on_accept: Called once the message is accepted, before the
                request goes out (the page clears its input here).

        Returns:
            True if a request was made, False if the submit was ignored
            (empty input or a request already in flight).
        """
        if not self.can_send(text):
            return False

        self.is_loading = True
        if on_accept is not None:
            on_accept()
        user_message = Message.user(text)
        self._messages.append(user_message)
        self._notify()

        try:
            reply = await self._client.send_message(
                user_message.content, self.session_id
            )
        except TwinClientError as e:
            logger.error(f"Chat request failed: {e}")
            self._messages.append(Message.assistant(FALLBACK_ERROR_MESSAGE))
        else:
            if not self.session_id:
                self.session_id = reply.session_id
                logger.info(f"Started backend session {reply.session_id}")
            self._messages.append(Message.assistant(reply.response))
        finally:
            self.is_loading = False
            self._notify()

        return True

    def reset(self) -> None:
        """Start a new conversation. Ignored while a request is in flight."""
        if self.is_loading:
            return
        self._messages.clear()
        self.session_id = None
        self._notify()

    def _notify(self) -> None:
        if self.on_change is not None:
            self.on_change()
