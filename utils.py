"""
Utilities for markup scanning and message parsing.
"""

import uuid
from typing import Any, Optional, Sequence

from aiogram.enums import MessageEntityType
from aiogram.types import MessageEntity

from config import (
    FOREIGN_LINK_REPLY,
    MOBILE_VARIANT_SUFFIX,
    URL_NOT_FOUND_REPLY,
    WATCH_LINK_FRAGMENT,
)
from errors import ValidationError
from models import Marker

# Characters that cannot appear inside a single attribute value.
OUT_OF_ATTRIBUTE_CHARS = ('"', "<", "\n", "\r")


def extract_marked_value(text: str, marker: Marker) -> Optional[str]:
    """Return text bracketed by marker tokens, searching the whole body."""
    if not text:
        return None

    start = text.find(marker.open_token)
    if start < 0:
        return None
    start += len(marker.open_token)

    end = text.find(marker.close_token, start)
    if end < 0:
        return None
    if marker.keep_close:
        end += len(marker.close_token)

    value = text[start:end]
    if any(char in value for char in OUT_OF_ATTRIBUTE_CHARS):
        return None
    return value


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse a plain integer, returning None on garbage."""
    if value is None:
        return None
    try:
        return int(value.strip())
    except ValueError:
        return None


def strip_mobile_variant(url: str) -> str:
    """Rewrite a mobile encode URL to its desktop form."""
    return url.replace(MOBILE_VARIANT_SUFFIX, "")


def find_url_entity(entities: Optional[Sequence[MessageEntity]]) -> Optional[MessageEntity]:
    """Return first entity annotated as URL."""
    for entity in entities or ():
        if entity.type == MessageEntityType.URL:
            return entity
    return None


def extract_watch_link(text: str, entities: Optional[Sequence[MessageEntity]]) -> str:
    """
    Pull the watch page link out of message text.

    Entity offsets are counted in UTF-16 code units, so the slice goes
    through ``MessageEntity.extract_from``.
    """
    entity = find_url_entity(entities)
    if entity is None:
        raise ValidationError(URL_NOT_FOUND_REPLY)

    link = entity.extract_from(text)
    if WATCH_LINK_FRAGMENT not in link:
        raise ValidationError(FOREIGN_LINK_REPLY)
    return link


def random_video_filename() -> str:
    return f"{uuid.uuid4().hex[:12]}.mp4"


def describe_chat(chat: Any) -> str:
    """Render ``id:full name @username`` for log lines."""
    name = getattr(chat, "full_name", "") or ""
    username = getattr(chat, "username", None) or ""
    return f"{chat.id}:{name} @{username}"
