"""FastAPI host application for the chat widget.

Serves the health check and the optional assistant avatar. The NiceGUI chat
page is mounted onto this application in src.main.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import FileResponse

from src.client.config import ChatConfig, get_chat_config
from src.ui.formatting import AVATAR_URL, avatar_available

logger = logging.getLogger(__name__)


def _build_lifespan(config: ChatConfig):
    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
        """Log startup and shutdown of the widget host."""
        logger.info(f"Starting chat widget (backend: {config.api_url})")
        yield
        logger.info("Shutting down chat widget...")

    return lifespan


def create_app(config: ChatConfig | None = None) -> FastAPI:
    """Create and configure the FastAPI host application.

    Args:
        config: Optional chat configuration.
                Loads from environment if not provided.

    Returns:
        Configured FastAPI application instance.
    """
    config = config or get_chat_config()

    application = FastAPI(
        title="Digital Twin Chat",
        description="Chat widget for the digital twin assistant.",
        version="0.1.0",
        docs_url=None,
        redoc_url=None,
        lifespan=_build_lifespan(config),
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "twin-chat"}

    if avatar_available(config.avatar_path):
        avatar_path = config.avatar_path

        @application.get(AVATAR_URL, include_in_schema=False)
        async def avatar() -> FileResponse:
            return FileResponse(avatar_path)

        logger.info(f"Serving assistant avatar from {avatar_path}")
    else:
        logger.info("No assistant avatar found, using default icon")

    return application
