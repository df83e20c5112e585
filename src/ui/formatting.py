"""Display helpers for the chat page."""

from datetime import datetime
from functools import lru_cache
from pathlib import Path

AVATAR_URL = "/avatar.png"


def format_timestamp(timestamp: datetime) -> str:
    """Format a message time as local clock time, e.g. '03:07:42 PM'."""
    return timestamp.strftime("%I:%M:%S %p")


def has_avatar(avatar_path: str | Path) -> bool:
    """Check whether a custom assistant avatar image is available."""
    return Path(avatar_path).is_file()


@lru_cache
def avatar_available(avatar_path: str) -> bool:
    """Cached avatar check shared by the /avatar.png route and the page.

    The first answer for a path holds for the life of the process.
    """
    return has_avatar(avatar_path)
