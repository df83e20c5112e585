"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - chat_config: Config pointing at an in-process fake backend
    - fake_backend: Scriptable stand-in for the digital twin /chat endpoint
    - twin_client: TwinClient wired to the fake backend
    - async_client: HTTPX client for the host application
"""

import json
from collections.abc import AsyncGenerator

import httpx
import pytest
from httpx import ASGITransport, AsyncClient

from src.api.app import create_app
from src.client.config import ChatConfig
from src.client.twin_client import TwinClient

TEST_API_URL = "http://twin.test"


class FakeBackend:
    """In-process stand-in for the backend POST /chat endpoint.

    Issues a session id on the first request and echoes the user's message.
    Set fail_with to an HTTP status code to make the next requests fail.
    """

    def __init__(self, session_id: str = "session-abc123") -> None:
        self.session_id = session_id
        self.requests: list[dict] = []
        self.fail_with: int | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.requests.append(body)

        if self.fail_with is not None:
            return httpx.Response(self.fail_with, json={"detail": "backend error"})

        return httpx.Response(
            200,
            json={
                "session_id": body.get("session_id") or self.session_id,
                "response": f"Echo: {body['message']}",
            },
        )

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)


@pytest.fixture
def chat_config(tmp_path) -> ChatConfig:
    """Config pointing at the fake backend with no avatar on disk."""
    return ChatConfig(
        api_url=TEST_API_URL,
        avatar_path=str(tmp_path / "missing-avatar.png"),
    )


@pytest.fixture
def fake_backend() -> FakeBackend:
    return FakeBackend()


@pytest.fixture
def twin_client(chat_config: ChatConfig, fake_backend: FakeBackend) -> TwinClient:
    """TwinClient that talks to the fake backend."""
    return TwinClient(config=chat_config, transport=fake_backend.transport)


@pytest.fixture
async def async_client(chat_config: ChatConfig) -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app(chat_config))
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
