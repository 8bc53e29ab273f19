"""
Error types and logging utilities.
"""

import logging
from typing import Optional

from aiogram.exceptions import TelegramAPIError


def setup_logging(
    level: str = "INFO",
    format_string: str = "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    log_file: Optional[str] = None,
) -> logging.Logger:
    """Configure root logging once and return module logger."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(numeric_level)

    formatter = logging.Formatter(format_string)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
    return logging.getLogger(__name__)


class RelayError(Exception):
    """Base class for request-scoped failures."""


class ValidationError(RelayError):
    """Inbound message cannot be processed; the message is the reply text."""

    def __init__(self, reply_text: str):
        super().__init__(reply_text)
        self.reply_text = reply_text


class NotFoundError(RelayError):
    """Watch page carries no video URL marker."""

    def __init__(self, page_url: str):
        super().__init__(f"No video found on {page_url}")
        self.page_url = page_url


def describe_transport_error(error: BaseException) -> str:
    """Render a transport failure for the log, tagging Telegram API errors."""
    if isinstance(error, TelegramAPIError):
        return f"Telegram API Error:\n[{type(error).__name__}]\n{error.message}"
    return str(error) or type(error).__name__
