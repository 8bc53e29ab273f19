"""
Unit tests for error types and logging setup.
"""

import logging

from aiogram.exceptions import TelegramForbiddenError
from aiogram.methods import SendVideo

from errors import NotFoundError, RelayError, ValidationError, describe_transport_error, setup_logging


def test_error_hierarchy():
    assert issubclass(ValidationError, RelayError)
    assert issubclass(NotFoundError, RelayError)


def test_validation_error_carries_reply():
    error = ValidationError("ERROR: URL not found")
    assert error.reply_text == "ERROR: URL not found"
    assert str(error) == "ERROR: URL not found"


def test_not_found_error_mentions_page():
    error = NotFoundError("https://redgifs.com/watch/abc")
    assert error.page_url == "https://redgifs.com/watch/abc"
    assert "https://redgifs.com/watch/abc" in str(error)


def test_describe_telegram_error():
    error = TelegramForbiddenError(
        method=SendVideo(chat_id=1, video="file-id"),
        message="Forbidden: bot was blocked by the user",
    )
    text = describe_transport_error(error)
    assert text.startswith("Telegram API Error:\n[TelegramForbiddenError]\n")
    assert "bot was blocked" in text


def test_describe_generic_error():
    assert describe_transport_error(ValueError("bad payload")) == "bad payload"
    assert describe_transport_error(TimeoutError()) == "TimeoutError"


def test_setup_logging_with_file(tmp_path):
    log_file = tmp_path / "relay.log"
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        setup_logging(level="debug", log_file=str(log_file))
        logging.getLogger("relay-test").info("hello file")
        for handler in root.handlers:
            handler.flush()

        assert root.level == logging.DEBUG
        assert "hello file" in log_file.read_text(encoding="utf-8")
    finally:
        for handler in root.handlers[:]:
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)
