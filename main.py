"""
Entry point for the Redgifs relay bot.
"""

import asyncio
import logging
import sys

from aiogram import Bot, Dispatcher
from dotenv import load_dotenv

load_dotenv()

from config import LOG_FILE, LOG_FORMAT, LOG_LEVEL, require_bot_token  # noqa: E402
from errors import setup_logging  # noqa: E402
from fetcher import HttpFetcher  # noqa: E402
from handlers import BotHandlers  # noqa: E402
from resolver import LinkResolver  # noqa: E402


async def main() -> None:
    logger = setup_logging(level=LOG_LEVEL, format_string=LOG_FORMAT, log_file=LOG_FILE)
    logger.info("Starting relay bot")

    bot = None
    fetcher = None
    try:
        bot = Bot(token=require_bot_token())
        dispatcher = Dispatcher()

        fetcher = HttpFetcher()
        BotHandlers(dp=dispatcher, resolver=LinkResolver(fetcher), fetcher=fetcher)

        me = await bot.get_me()
        logger.info("Start listening for %s", me.username)
        await dispatcher.start_polling(bot)
    except Exception:
        logging.getLogger(__name__).exception("Fatal startup/runtime error")
        sys.exit(1)
    finally:
        if fetcher is not None:
            await fetcher.close()
        if bot is not None:
            await bot.session.close()


if __name__ == "__main__":
    asyncio.run(main())
