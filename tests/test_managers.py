"""
Unit tests for the upload chat-action ticker.
"""

import asyncio
from unittest.mock import AsyncMock

import pytest

from managers import UploadActionTicker


class _Bot:
    def __init__(self, fail=False):
        self.send_chat_action = AsyncMock(side_effect=RuntimeError("flaky") if fail else None)


def test_ticker_sends_immediately_and_repeats():
    bot = _Bot()

    async def scenario():
        ticker = UploadActionTicker(bot, chat_id=42, interval=0.01)
        async with ticker:
            assert bot.send_chat_action.await_count == 1
            assert ticker.running
            await asyncio.sleep(0.06)
        return ticker

    ticker = asyncio.run(scenario())
    assert bot.send_chat_action.await_count >= 2
    assert not ticker.running
    bot.send_chat_action.assert_awaited_with(chat_id=42, action="upload_video")


def test_ticker_stops_after_body_error():
    bot = _Bot()

    async def scenario():
        with pytest.raises(ValueError):
            async with UploadActionTicker(bot, chat_id=42, interval=0.01):
                raise ValueError("boom")
        calls = bot.send_chat_action.await_count
        await asyncio.sleep(0.05)
        return calls

    calls_at_exit = asyncio.run(scenario())
    assert bot.send_chat_action.await_count == calls_at_exit


def test_ticker_survives_failed_action():
    bot = _Bot(fail=True)

    async def scenario():
        async with UploadActionTicker(bot, chat_id=42, interval=0.01) as ticker:
            await asyncio.sleep(0.03)
            return ticker.running

    assert asyncio.run(scenario()) is True
    assert bot.send_chat_action.await_count >= 2


def test_ticker_cannot_start_twice():
    bot = _Bot()

    async def scenario():
        ticker = UploadActionTicker(bot, chat_id=42, interval=10)
        await ticker.start()
        try:
            with pytest.raises(RuntimeError):
                await ticker.start()
        finally:
            await ticker.stop()
        await ticker.stop()

    asyncio.run(scenario())
