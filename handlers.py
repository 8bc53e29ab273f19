"""
Telegram handlers for the Redgifs relay bot.
"""

import logging
from typing import Any

from aiogram import Bot, Dispatcher
from aiogram.exceptions import TelegramAPIError
from aiogram.types import ErrorEvent, Message

from config import NOT_A_LINK_REPLY, UPLOAD_ACTION_INTERVAL_SECONDS, VIDEO_NOT_FOUND_REPLY
from errors import NotFoundError, ValidationError, describe_transport_error
from fetcher import StreamInputFile
from managers import UploadActionTicker
from models import ResolvedVideo
from resolver import LinkResolver
from utils import describe_chat, extract_watch_link, random_video_filename

logger = logging.getLogger(__name__)


class BotHandlers:
    """Registers the link relay flow and the transport error hook."""

    def __init__(
        self,
        dp: Dispatcher,
        resolver: LinkResolver,
        fetcher: Any,
        action_interval: float = UPLOAD_ACTION_INTERVAL_SECONDS,
    ):
        self.dp = dp
        self.resolver = resolver
        self.fetcher = fetcher
        self.action_interval = action_interval
        self._register_handlers()

    def _register_handlers(self) -> None:
        self.dp.message.register(self.handle_message)
        self.dp.errors.register(self.handle_error)

    async def handle_message(self, message: Message, bot: Bot) -> None:
        chat = message.chat
        chat_id = chat.id
        if chat_id <= 0:
            return

        text = message.text
        if text is None:
            await bot.send_message(chat_id, NOT_A_LINK_REPLY)
            return

        logger.info("Received '%s' from %s", text, describe_chat(chat))

        try:
            link = extract_watch_link(text, message.entities)
        except ValidationError as error:
            await bot.send_message(chat_id, error.reply_text)
            return

        try:
            video = await self.resolver.resolve(link)
        except NotFoundError:
            await bot.send_message(chat_id, VIDEO_NOT_FOUND_REPLY)
            return

        await self._deliver_video(bot, chat, video)

    async def _deliver_video(self, bot: Bot, chat: Any, video: ResolvedVideo) -> None:
        async with UploadActionTicker(bot, chat.id, interval=self.action_interval):
            logger.info("Started sending the video to %s", describe_chat(chat))

            await bot.send_video(
                chat.id,
                StreamInputFile(self.fetcher, video.source_url, filename=random_video_filename()),
                duration=video.duration_seconds,
                width=video.width,
                height=video.height,
            )

            logger.info("Finished sending the video to %s", describe_chat(chat))

    async def handle_error(self, event: ErrorEvent) -> bool:
        error = event.exception
        if isinstance(error, TelegramAPIError):
            logger.error(describe_transport_error(error))
        else:
            logger.error(describe_transport_error(error), exc_info=error)
        return True
