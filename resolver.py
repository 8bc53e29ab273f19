"""
Watch page scraping: locate the direct video resource and its metadata.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from config import META_MARKERS
from errors import NotFoundError
from models import Marker, ResolvedVideo
from utils import extract_marked_value, parse_int, strip_mobile_variant

logger = logging.getLogger(__name__)

INTEGER_FIELDS = ("width", "height", "duration_seconds")


class LinkResolver:
    """
    Resolve a watch page URL into a ``ResolvedVideo``.

    Every marker is searched across the full page body on its own, so
    metadata spread over several lines is still picked up.
    """

    def __init__(self, fetcher: Any, markers: Optional[Mapping[str, Marker]] = None):
        self.fetcher = fetcher
        self.markers = dict(META_MARKERS if markers is None else markers)

    async def resolve(self, page_url: str) -> ResolvedVideo:
        body = await self.fetcher.fetch_text(page_url)
        return self.parse_page(page_url, body)

    def parse_page(self, page_url: str, body: str) -> ResolvedVideo:
        raw: Dict[str, Optional[str]] = {
            field: extract_marked_value(body, marker)
            for field, marker in self.markers.items()
        }

        source_url = raw.get("source_url")
        if not source_url:
            logger.warning("No video marker on %s", page_url)
            raise NotFoundError(page_url)

        source_url = strip_mobile_variant(source_url)
        logger.info("Found video url %s", source_url)

        numbers: Dict[str, Optional[int]] = {}
        for field in INTEGER_FIELDS:
            value = raw.get(field)
            if value is None:
                numbers[field] = None
                continue
            numbers[field] = parse_int(value)
            if numbers[field] is None:
                logger.warning("Couldn't get %s from '%s'", field, value)
            else:
                logger.info("Found %s %s", field, numbers[field])

        return ResolvedVideo(source_url=source_url, **numbers)
