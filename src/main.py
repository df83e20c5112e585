"""Entry point for the digital twin chat widget.

Serves the NiceGUI chat page from the FastAPI host on a single port.
Settings come from the environment, with .env as a fallback source.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# ChatConfig reads the environment, so .env must be applied first
load_dotenv()

# Root logger for every src.* module logger
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def main() -> None:
    """Application entry point.

    Serves the chat page and health check on one port (PORT, default 8080).
    The backend answering questions is reached at API_URL.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    ui.run_with(
        app,
        title="Digital Twin",
        favicon="🤖",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "twin-chat-secret"),
    )

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Chat UI available at http://localhost:{port}/")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


if __name__ == "__main__":
    main()
