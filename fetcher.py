"""
HTTP fetch transport shared by the resolver and the delivery step.
"""

import logging
from typing import TYPE_CHECKING, Any, AsyncGenerator, AsyncIterator, Dict, Optional

import aiohttp
from aiogram.types import InputFile

from config import FETCH_CHUNK_SIZE, HTTP_HEADERS

if TYPE_CHECKING:
    from aiogram import Bot

logger = logging.getLogger(__name__)


class HttpFetcher:
    """Thin wrapper over one lazily created aiohttp session."""

    def __init__(
        self,
        headers: Optional[Dict[str, str]] = None,
        chunk_size: int = FETCH_CHUNK_SIZE,
    ):
        self.headers = dict(HTTP_HEADERS if headers is None else headers)
        self.chunk_size = chunk_size
        self._session: Optional[aiohttp.ClientSession] = None

    def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(headers=self.headers)
        return self._session

    async def fetch_text(self, url: str) -> str:
        """GET a page and return its decoded body regardless of status."""
        session = self._get_session()
        async with session.get(url) as response:
            if response.status != 200:
                logger.warning("Page %s answered with HTTP %s", url, response.status)
            return await response.text(errors="replace")

    async def stream(self, url: str) -> AsyncIterator[bytes]:
        """GET a media resource and yield its body chunk by chunk."""
        session = self._get_session()
        sent = 0
        async with session.get(url) as response:
            response.raise_for_status()
            async for chunk in response.content.iter_chunked(self.chunk_size):
                sent += len(chunk)
                yield chunk
        logger.debug("Streamed %s bytes from %s", sent, url)

    async def close(self) -> None:
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None


class StreamInputFile(InputFile):
    """Upload source that pulls the body from a fetcher while it is sent."""

    def __init__(self, fetcher: Any, url: str, filename: Optional[str] = None):
        super().__init__(filename=filename)
        self.fetcher = fetcher
        self.url = url

    async def read(self, bot: "Bot") -> AsyncGenerator[bytes, None]:
        async for chunk in self.fetcher.stream(self.url):
            yield chunk
