"""Logging helpers for the resultcase namespace.

The library itself only emits records (contract violations). Applications
call configure_logging() once at startup to see them.

Example:
    >>> from resultcase.log import configure_logging
    >>> configure_logging(level="DEBUG")            # human-readable
    >>> configure_logging(fmt="json")               # JSON lines
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TextIO

from .settings import get_settings

ROOT = "resultcase"

logging.getLogger(ROOT).addHandler(logging.NullHandler())

_handler: logging.Handler | None = None


def get_logger(name: str | None = None) -> logging.Logger:
    """Logger under the resultcase namespace."""
    return logging.getLogger(f"{ROOT}.{name}" if name else ROOT)


class JsonFormatter(logging.Formatter):
    """One JSON object per line, for log aggregation."""

    def format(self, record: logging.LogRecord) -> str:
        data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "event": record.getMessage(),
        }
        if record.exc_info:
            data["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(data, default=str)


_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: str | None = None,
    *,
    fmt: str | None = None,
    stream: TextIO | None = None,
) -> logging.Handler:
    """Attach a stream handler to the resultcase logger.

    Args:
        level: Minimum level name. Defaults to settings (DEBUG when debug is on)
        fmt: "text" or "json". Defaults to settings
        stream: Output stream (default: stderr)

    Returns:
        The installed handler. Calling again replaces it.
    """
    global _handler
    settings = get_settings()
    level = (level or ("DEBUG" if settings.debug else settings.logging.level)).upper()
    fmt = fmt or settings.logging.format

    handler = logging.StreamHandler(stream or sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    elif fmt == "text":
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))
    else:
        raise ValueError(f"Unknown format: {fmt}. Use 'text' or 'json'")

    root = logging.getLogger(ROOT)
    if _handler is not None:
        root.removeHandler(_handler)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
    _handler = handler
    return handler
