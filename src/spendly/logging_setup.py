"""Centralized logging configuration for the ``spendly`` package.

``configure_logging`` attaches a single ``StreamHandler`` to the package
logger and is called once by the CLI. Library modules only call
``get_logger(__name__)`` and never attach handlers of their own.
"""

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "spendly"
_CONFIGURED = False

DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class _StderrHandler(logging.StreamHandler):
    """StreamHandler that writes to whatever ``sys.stderr`` is at emit time."""

    def __init__(self):
        logging.Handler.__init__(self)

    @property
    def stream(self):
        return sys.stderr

    @stream.setter
    def stream(self, value):
        pass


def parse_level(level: int | str | None) -> int:
    """Resolve a level name, number or None into a logging level.

    None falls back to the ``SPENDLY_LOG_LEVEL`` environment variable, then
    to INFO.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        return logging.INFO
    env_val = os.getenv("SPENDLY_LOG_LEVEL")
    if env_val:
        return parse_level(env_val)
    return logging.INFO


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Configure the package logger exactly once.

    Args:
        level: Level as int or name (e.g. "DEBUG"). None defers to
            ``SPENDLY_LOG_LEVEL``.
        fmt: Optional format string, defaults to ``DEFAULT_FORMAT``
        stream: Output stream. Defaults to the current ``sys.stderr``,
            looked up on every record
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream) if stream is not None else _StderrHandler()
    handler.setLevel(resolved)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(resolved)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, keeping the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
