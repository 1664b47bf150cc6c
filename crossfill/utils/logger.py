"""Logging setup shared by the grid filler and its command line."""

from __future__ import annotations

import logging
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Loggers kept at WARNING or above so HTTP chatter from lookups does not
# bury the per-attempt fill log.
NOISY_LOGGERS = ("urllib3", "requests")


def parse_level(value: int | str) -> int:
    """Map a level name such as ``"debug"`` or a number to a logging level."""

    if isinstance(value, int):
        return value
    text = value.strip().upper()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level {value!r}")
    return level


def configure_logging(level: int | str = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Install a single stream handler on the root logger.

    ``stream`` defaults to stderr so that JSON written to stdout by the
    command line stays machine-readable.
    """

    resolved = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossfill")
