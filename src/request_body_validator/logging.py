"""Structured logging configuration for request-body validation."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

# Attributes attached through ``extra=`` by the validator.
_CONTEXT_ATTRIBUTES: tuple[str, ...] = ("field", "criterion", "value")


class JsonFormatter(logging.Formatter):
    """Render records as single-line JSON objects, including field context."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.now(tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for attribute in _CONTEXT_ATTRIBUTES:
            if hasattr(record, attribute):
                payload[attribute] = getattr(record, attribute)
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, sort_keys=True, default=repr)


def _resolve_level(level: str | int) -> int:
    if isinstance(level, int):
        return level
    normalized = level.upper()
    resolved = logging.getLevelName(normalized)
    if isinstance(resolved, int):
        return resolved
    msg = f"Unsupported log level: {level}"
    raise ValueError(msg)


def configure_logging(
    *,
    log_level: str | int = "INFO",
    log_file: str | Path | None = None,
    console: bool = True,
    logger_name: str | None = None,
) -> logging.Logger:
    """Attach JSON handlers to ``logger_name`` (the root logger by default)."""

    logger = logging.getLogger(logger_name)
    logger.setLevel(_resolve_level(log_level))
    logger.handlers.clear()

    formatter = JsonFormatter()

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if log_file is not None:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
