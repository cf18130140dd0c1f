"""Logging setup shared by all tools."""

import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
DATE_FORMAT = "[%X]"


def setup_logger(name: Optional[str] = None, level: str = "INFO") -> logging.Logger:
    """
    Configure logging for a tool.

    The handler is installed on the top-level package logger (``tools`` for
    ``tools.data_formatter.cli``) so every module of the tool shares it.
    Calling this more than once only updates the level.

    Args:
        name: Logger name, usually ``__name__`` of the calling CLI module
        level: Log level name

    Returns:
        The configured package logger
    """
    root_name = name.partition(".")[0] if name else None
    logger = logging.getLogger(root_name)
    logger.setLevel(level.upper())

    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
        logger.propagate = False

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""
    return logging.getLogger(name)
