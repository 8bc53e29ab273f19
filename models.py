"""
Data models for the relay bot.
"""

from dataclasses import dataclass
from typing import NamedTuple, Optional


class Marker(NamedTuple):
    """Opening/closing token pair that brackets one value in page markup."""

    open_token: str
    close_token: str
    keep_close: bool = False


@dataclass
class ResolvedVideo:
    """Direct video resource extracted from a watch page."""

    source_url: str
    width: Optional[int] = None
    height: Optional[int] = None
    duration_seconds: Optional[int] = None
