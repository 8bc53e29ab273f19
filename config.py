"""
Configuration for the Redgifs relay bot.
"""

import os
from typing import Dict, Optional

from models import Marker


def require_bot_token() -> str:
    """Return bot token or raise if it is not configured."""
    token = os.getenv("BOT_TOKEN", "").strip()
    if not token:
        raise RuntimeError("Set the BOT_TOKEN environment variable")
    return token


LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE: Optional[str] = os.getenv("LOG_FILE", "").strip() or None

WATCH_LINK_FRAGMENT: str = "redgifs.com/watch/"
MOBILE_VARIANT_SUFFIX: str = "-mobile"

NOT_A_LINK_REPLY: str = "ERROR: Message is not Redgifs link"
URL_NOT_FOUND_REPLY: str = "ERROR: URL not found"
FOREIGN_LINK_REPLY: str = f"ERROR: Link does not contain '{WATCH_LINK_FRAGMENT}'"
VIDEO_NOT_FOUND_REPLY: str = "ERROR: Was not able to find video on the page"

UPLOAD_ACTION_INTERVAL_SECONDS: float = 5.0
FETCH_CHUNK_SIZE: int = 64 * 1024

HTTP_HEADERS: Dict[str, str] = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/121.0.0.0 Safari/537.36"
    ),
}

# Anchors into the watch page <head>; the closing tokens are the attributes
# that follow each value in the served markup.
META_MARKERS: Dict[str, Marker] = {
    "source_url": Marker(
        open_token='meta property="og:video" content="',
        close_token=".mp4",
        keep_close=True,
    ),
    "width": Marker(
        open_token='meta property="og:video:width" content="',
        close_token='"><meta property="og:video:height"',
    ),
    "height": Marker(
        open_token='meta property="og:video:height" content="',
        close_token='"><meta property="og:video:iframe"',
    ),
    "duration_seconds": Marker(
        open_token='meta property="og:video:duration" content="',
        close_token='"><meta property="og:video"',
    ),
}
