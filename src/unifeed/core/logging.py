"""Logging for Unifeed.

Every module logs through a child of the ``unifeed`` package logger.
Only the package logger owns a handler, so one call to ``setup_logging``
(made by the CLI, or implicitly from settings on first use) switches
level and format for the whole library.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

from unifeed.core.config import get_settings

PACKAGE_LOGGER = "unifeed"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with context fields merged in."""

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = getattr(record, "context", None)
        if context:
            log_data.update({key: value for key, value in context.items() if value is not None})

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False)


class PlainFormatter(logging.Formatter):
    """Human-readable single line format; context fields are appended as key=value."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        context = getattr(record, "context", None)
        if context:
            pairs = " ".join(f"{key}={value}" for key, value in context.items() if value is not None)
            if pairs:
                line = f"{line} | {pairs}"
        return line


def _level(level: str) -> int:
    return getattr(logging, level.upper(), logging.INFO)


def _formatter(format: str) -> logging.Formatter:
    if format == "structured":
        return StructuredFormatter()
    return PlainFormatter()


def setup_logging(level: str | None = None, format: str | None = None) -> logging.Logger:
    """(Re)configure the package logger.

    Replaces any handler installed earlier, so it is safe to call more
    than once.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR); defaults to settings
        format: "structured" or "plain"; defaults to settings

    Returns:
        The package logger
    """
    settings = get_settings()
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(_level(level or settings.log_level))

    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter(format or settings.log_format))
    root.addHandler(handler)
    root.propagate = False
    return root


def get_logger(name: str) -> logging.Logger:
    """Get a module logger under the package logger.

    The package logger is configured from settings the first time any
    module asks for a logger, unless ``setup_logging`` ran before.
    """
    if not logging.getLogger(PACKAGE_LOGGER).handlers:
        setup_logging()
    return logging.getLogger(name)


class _ContextFilter(logging.Filter):
    def __init__(self, context: dict[str, Any]) -> None:
        super().__init__()
        self.context = context

    def filter(self, record: logging.LogRecord) -> bool:
        record.context = {**getattr(record, "context", {}), **self.context}
        return True


class LogContext:
    """Attach context fields to every record a logger emits inside a block.

    Example:
        >>> logger = get_logger(__name__)
        >>> with LogContext(logger, url="https://example.com/feed.xml"):
        ...     logger.info("Fetching feed")
    """

    def __init__(self, logger: logging.Logger, **context: Any) -> None:
        self.logger = logger
        self._filter = _ContextFilter(context)

    def __enter__(self) -> "LogContext":
        self.logger.addFilter(self._filter)
        return self

    def __exit__(self, *args: Any) -> None:
        self.logger.removeFilter(self._filter)
