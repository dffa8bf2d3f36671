"""Logging utilities."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler


LOGGER_NAME = "mdfront"


def setup_logger(
    level: int | str = logging.INFO,
    console: Optional[Console] = None,
    name: str = LOGGER_NAME,
) -> logging.Logger:
    """Set up the package logger with Rich formatting on stderr.

    Args:
        level: Logging level (number or name such as "DEBUG")
        console: Rich console instance (creates a stderr one if None)
        name: Logger name

    Returns:
        Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=True,
        markup=False,
        show_time=False,
    )
    handler.setLevel(level)
    logger.addHandler(handler)

    return logger


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name, usually the calling module's __name__

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
