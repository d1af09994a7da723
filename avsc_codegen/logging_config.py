"""Logging setup for avsc_codegen.

All modules obtain loggers through :func:`get_logger` so that a single
call to :func:`setup_logging` controls output for the whole package.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "avsc_codegen"

_configured = False


def setup_logging(level: int | str = logging.WARNING, console: Console | None = None) -> None:
    """Install a rich handler on the package logger.

    Args:
        level: Logging level name or number.
        console: Console to log to (defaults to stderr).
    """
    global _configured

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    logger.setLevel(level)

    if not _configured:
        handler = RichHandler(
            console=console or Console(stderr=True),
            show_path=False,
            rich_tracebacks=True,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
        _configured = True


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children."""
    if name is None or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(ROOT_LOGGER_NAME).getChild(name)
