"""Logging configuration for selectorkit."""

import logging

import logfire
from rich.logging import RichHandler

from selectorkit.config import Settings


def resolve_level(level: str) -> int:
    """Map a level name to a numeric logging level.

    'ALL' maps to NOTSET; unknown names fall back to INFO.
    """
    if level.upper() == 'ALL':
        return logging.NOTSET
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        return logging.INFO
    return numeric_level


def setup_logging(settings: Settings | None = None) -> int:
    """Set up console logging and logfire.

    Configures the root logger with a RichHandler and configures logfire,
    sending events to the logfire backend only when a token is available.

    Args:
        settings: Settings to apply. Defaults to Settings.from_env().

    Returns:
        int: The numeric level applied to the root logger.

    """
    if settings is None:
        settings = Settings.from_env()

    numeric_level = resolve_level(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Reuse an existing RichHandler so repeat calls only change the level
    console_handler = next((handler for handler in root_logger.handlers if isinstance(handler, RichHandler)), None)
    if console_handler is None:
        console_handler = RichHandler(rich_tracebacks=True, show_path=False)
        root_logger.addHandler(console_handler)
    console_handler.setLevel(numeric_level)

    logfire.configure(
        token=settings.logfire_token,
        service_name=settings.service_name,
        send_to_logfire='if-token-present',
        console=False,
    )

    return numeric_level
