"""
Scoped chat-action ticker kept alive while a video is being delivered.
"""

import asyncio
import contextlib
import logging
from typing import Any, Optional

from aiogram.enums import ChatAction

from config import UPLOAD_ACTION_INTERVAL_SECONDS

logger = logging.getLogger(__name__)


class UploadActionTicker:
    """
    Send ``upload_video`` on enter and then every ``interval`` seconds.

    The background task belongs to the ``async with`` block and is cancelled
    and awaited on exit, including when the body raised.
    """

    def __init__(
        self,
        bot: Any,
        chat_id: int,
        interval: float = UPLOAD_ACTION_INTERVAL_SECONDS,
        action: str = ChatAction.UPLOAD_VIDEO,
    ):
        self.bot = bot
        self.chat_id = chat_id
        self.interval = interval
        self.action = action
        self._task: Optional[asyncio.Task] = None

    async def __aenter__(self) -> "UploadActionTicker":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.stop()

    async def start(self) -> None:
        if self._task is not None:
            raise RuntimeError("Ticker already started")
        await self._send_action()
        self._task = asyncio.create_task(self._tick_loop())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is None:
            return
        task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def _tick_loop(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            await self._send_action()

    async def _send_action(self) -> None:
        try:
            await self.bot.send_chat_action(chat_id=self.chat_id, action=self.action)
        except Exception:
            logger.warning("Chat action for %s failed", self.chat_id, exc_info=True)
