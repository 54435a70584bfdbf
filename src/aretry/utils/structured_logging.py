r"""Structured logging utilities for retry loops.

Retry loops tend to run concurrently (one per request, job or task), and
their log lines interleave. This module provides an opt-in JSON formatter
and a context-local correlation ID so that every line produced by one
retry loop can be grouped back together by a log aggregator.

Example:
    Emit JSON lines for the ``aretry`` loggers:

    ```python
    import logging
    from aretry.utils.structured_logging import StructuredFormatter

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())

    logger = logging.getLogger("aretry")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    ```

    Tag all attempts of one loop with the same ID:

    ```python
    from aretry import RetryerBuilder
    from aretry.utils.structured_logging import clear_correlation_id, set_correlation_id

    retryer = RetryerBuilder().retry_if_exception_of_type(OSError).build()
    set_correlation_id("job-42")
    try:
        retryer.call(fetch_report)
    finally:
        clear_correlation_id()
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
import time
from typing import Any

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "aretry_correlation_id", default=None
)

# Attributes set by ``logging.LogRecord`` itself, everything else came from ``extra``
_RECORD_ATTRIBUTES = frozenset(
    {
        "args",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "taskName",
        "thread",
        "threadName",
    }
)


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Returns:
        The current correlation ID, or ``None`` if not set.

    Example:
        ```pycon
        >>> from aretry.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("job-1")
        >>> get_correlation_id()
        'job-1'
        >>> clear_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID of the current context.

    The value is stored in a context variable so each thread and each
    asyncio task sees its own ID.

    Args:
        correlation_id: The ID attached to the following log records.
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID of the current context."""
    _correlation_id.set(None)


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Every object has the keys ``timestamp``, ``level``, ``logger``,
    ``message``, ``module``, ``function`` and ``line``. The correlation ID
    is added when one is set, the formatted traceback is added under
    ``exception`` when the record carries one, and every field passed via
    ``extra`` is copied as is. Values that are not JSON serializable are
    rendered with ``repr``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from io import StringIO
        >>> from aretry.utils.structured_logging import StructuredFormatter
        >>> stream = StringIO()
        >>> handler = logging.StreamHandler(stream)
        >>> handler.setFormatter(StructuredFormatter())
        >>> logger = logging.getLogger("aretry.doctest")
        >>> logger.addHandler(handler)
        >>> logger.setLevel(logging.INFO)
        >>> logger.info("attempt failed", extra={"attempt_number": 2})
        >>> record = json.loads(stream.getvalue())
        >>> record["message"], record["attempt_number"]
        ('attempt failed', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        data: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        correlation_id = get_correlation_id()
        if correlation_id is not None:
            data["correlation_id"] = correlation_id

        if record.exc_info:
            data["exception"] = self.formatException(record.exc_info)

        for key, value in record.__dict__.items():
            if key not in _RECORD_ATTRIBUTES and key not in data:
                data[key] = value

        return json.dumps(data, default=repr)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: ARG002
        """Format the record time as ISO 8601 UTC with milliseconds.

        ``datefmt`` is ignored.
        """
        seconds = time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime(record.created))
        return f"{seconds}.{int(record.msecs):03d}Z"


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Args:
        logger: Logger to use.
        level: Log level (e.g. ``logging.INFO``).
        message: Log message.
        **extra: Fields added to the record. They show up as top-level
            keys when the handler uses ``StructuredFormatter``.

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.utils.structured_logging import log_structured
        >>> log_structured(
        ...     logging.getLogger("aretry.doctest"),
        ...     logging.DEBUG,
        ...     "waiting before retry",
        ...     attempt_number=1,
        ...     sleep_time=0.5,
        ... )

        ```
    """
    logger.log(level, message, extra=extra)
