"""Logging setup for the ``jsonpath_tester`` logger tree."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from ..config import JSONPATH_TESTER_CONFIG, LogLevel

ROOT_LOGGER_NAME = "jsonpath_tester"


class _JsonPathRichConsoleHandler(RichHandler):
    """Console handler installed by :func:`configure_logging`."""


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it for ``name``.

    Module names already under the package are used as-is.
    """

    if not name or name == ROOT_LOGGER_NAME:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(
    level: LogLevel | None = None,
    *,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a rich console handler to the package logger.

    Calling this again updates the level but never adds a second handler.
    """

    logger = get_logger()
    logger.setLevel(level or JSONPATH_TESTER_CONFIG.log_level)

    for handler in logger.handlers:
        if isinstance(handler, _JsonPathRichConsoleHandler):
            if console is not None:
                handler.console = console
            return logger

    handler = _JsonPathRichConsoleHandler(
        console=console or Console(stderr=True),
        rich_tracebacks=JSONPATH_TESTER_CONFIG.rich_tracebacks,
        show_path=False,
    )
    logger.addHandler(handler)
    return logger


__all__ = ["ROOT_LOGGER_NAME", "configure_logging", "get_logger"]
