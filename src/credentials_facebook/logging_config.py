"""Logging helpers for applications embedding the Facebook token plugin."""

from __future__ import annotations
import json
import logging
import os
import sys
from datetime import UTC, datetime
from typing import Any


DEFAULT_LOGGER = "credentials_facebook"

_LOGGER_NAMES: tuple[str, ...] = (
    "uvicorn",
    "uvicorn.access",
    "uvicorn.error",
    "fastapi",
    DEFAULT_LOGGER,
)

_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON including ``extra`` fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _resolve_level(raw: str | None) -> int:
    level = logging.getLevelName((raw or "INFO").strip().upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Apply ``LOG_LEVEL`` and ``LOG_FORMAT`` to the plugin and server loggers."""
    level = _resolve_level(os.getenv("LOG_LEVEL"))
    handler = logging.StreamHandler(sys.stderr)
    if os.getenv("LOG_FORMAT", "text").strip().lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    for name in _LOGGER_NAMES:
        logging.getLogger(name).setLevel(level)

    package_logger = logging.getLogger(DEFAULT_LOGGER)
    for existing in list(package_logger.handlers):
        package_logger.removeHandler(existing)
    package_logger.addHandler(handler)
    package_logger.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return ``name``'s logger, defaulting to the package logger."""
    return logging.getLogger(name or DEFAULT_LOGGER)


__all__ = ["JsonFormatter", "configure_logging", "get_logger"]
