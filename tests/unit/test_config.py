"""Unit tests for ChatConfig.

Tests configuration validation and environment loading.
"""

from unittest.mock import patch

import pytest
from pydantic import ValidationError

from src.client.config import ChatConfig, get_chat_config


class TestChatConfig:
    """Tests for ChatConfig validation."""

    def test_valid_config_with_all_fields(self) -> None:
        """Config accepts valid values for all fields."""
        config = ChatConfig(
            api_url="https://twin.example.com",
            request_timeout=30,
            assistant_name="Naveen's Digital Twin",
            tagline="Course companion",
            avatar_path="public/avatar.png",
        )

        assert config.api_url == "https://twin.example.com"
        assert config.request_timeout == 30.0
        assert config.assistant_name == "Naveen's Digital Twin"
        assert config.tagline == "Course companion"
        assert config.avatar_path == "public/avatar.png"

    def test_config_with_default_values(self) -> None:
        """Config uses local backend and no timeout when env is empty."""
        with patch.dict("os.environ", {}, clear=True):
            config = ChatConfig()

        assert config.api_url == "http://localhost:8000"
        assert config.request_timeout is None
        assert config.assistant_name == "Digital Twin"
        assert config.avatar_path == "static/avatar.png"

    def test_config_strips_trailing_slash(self) -> None:
        """Trailing slash is dropped so the /chat path joins cleanly."""
        config = ChatConfig(api_url="http://localhost:8000/")

        assert config.api_url == "http://localhost:8000"
        assert config.chat_url == "http://localhost:8000/chat"

    def test_config_keeps_path_prefix(self) -> None:
        """A backend mounted under a path keeps its prefix."""
        config = ChatConfig(api_url="https://api.example.com/twin")

        assert config.chat_url == "https://api.example.com/twin/chat"

    def test_config_fails_without_scheme(self) -> None:
        """Config rejects an API URL without http/https scheme."""
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_url="localhost:8000")

        assert "API_URL must start with http:// or https://" in str(exc_info.value)

    def test_config_fails_with_invalid_port(self) -> None:
        """Config rejects an API URL whose port is not a number."""
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(api_url="http://localhost:notaport")

        assert "API_URL is not a valid URL" in str(exc_info.value)

    def test_config_fails_without_host(self) -> None:
        """Config rejects an API URL with no host."""
        with pytest.raises(ValidationError):
            ChatConfig(api_url="http://")

    def test_config_fails_with_zero_timeout(self) -> None:
        """Config rejects a timeout of zero."""
        with pytest.raises(ValidationError) as exc_info:
            ChatConfig(request_timeout=0)

        assert "API_TIMEOUT" in str(exc_info.value)

    def test_config_fails_with_negative_timeout(self) -> None:
        """Config rejects a negative timeout."""
        with pytest.raises(ValidationError):
            ChatConfig(request_timeout=-5)


class TestGetChatConfig:
    """Tests for get_chat_config factory function."""

    def test_get_config_from_environment(self) -> None:
        """get_chat_config loads values from environment."""
        env = {
            "API_URL": "https://twin.example.com/",
            "API_TIMEOUT": "45",
            "TWIN_NAME": "Ada's Twin",
            "AVATAR_PATH": "/srv/avatar.png",
        }
        with patch.dict("os.environ", env):
            config = get_chat_config()

        assert config.api_url == "https://twin.example.com"
        assert config.request_timeout == 45.0
        assert config.assistant_name == "Ada's Twin"
        assert config.avatar_path == "/srv/avatar.png"

    def test_get_config_empty_timeout_means_none(self) -> None:
        """An empty API_TIMEOUT disables the timeout."""
        with patch.dict("os.environ", {"API_TIMEOUT": ""}):
            config = get_chat_config()

        assert config.request_timeout is None

    def test_get_config_fails_with_invalid_url(self) -> None:
        """get_chat_config raises error when API_URL is malformed."""
        with (
            patch.dict("os.environ", {"API_URL": "ftp://twin.example.com"}),
            pytest.raises(ValidationError),
        ):
            get_chat_config()
