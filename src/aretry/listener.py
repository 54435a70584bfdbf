r"""Retry listeners notified after every attempt.

Listeners are meant for observability (logging, metrics, alerting). They
are called after each attempt, successful or not, before the retry
decision is made, and cannot influence that decision. An exception raised
by a listener propagates out of ``Retryer.call`` and aborts the loop.

Example:
    ```pycon
    >>> from aretry import RetryerBuilder
    >>> seen = []
    >>> retryer = (
    ...     RetryerBuilder()
    ...     .retry_if_result(lambda result: result is None)
    ...     .with_retry_listener(lambda attempt: seen.append(attempt.attempt_number))
    ...     .build()
    ... )
    >>> retryer.call(lambda: "done")
    'done'
    >>> seen
    [1]

    ```
"""

from __future__ import annotations

__all__ = ["CallbackRetryListener", "LoggingRetryListener", "RetryListener"]

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from aretry.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class RetryListener(ABC):
    """Abstract base class for objects notified of every attempt."""

    @abstractmethod
    def on_retry(self, attempt: Attempt) -> None:
        """Handle the outcome of an attempt.

        Args:
            attempt: The attempt that has just completed.
        """


class CallbackRetryListener(RetryListener):
    """Adapt a plain function to the ``RetryListener`` interface.

    Args:
        callback: Function called with each attempt.
    """

    def __init__(self, callback: Callable[[Attempt], None]) -> None:
        self.callback = callback

    def on_retry(self, attempt: Attempt) -> None:
        self.callback(attempt)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(callback={self.callback!r})"


class LoggingRetryListener(RetryListener):
    """Log one structured record per attempt.

    Each record carries the fields ``attempt_number``,
    ``delay_since_first_attempt``, ``outcome`` and, for attempts that
    raised, ``exception_type``. Combine it with
    ``aretry.utils.structured_logging.StructuredFormatter`` to get JSON
    lines.

    Args:
        logger: The logger to write to. Defaults to this module's logger.
        level: The log level of the records (default: ``logging.INFO``).

    Example:
        ```pycon
        >>> import logging
        >>> from aretry.attempt import Attempt
        >>> from aretry.listener import LoggingRetryListener
        >>> listener = LoggingRetryListener(level=logging.DEBUG)
        >>> listener.on_retry(Attempt.from_exception(OSError("reset"), 2, 0.75))

        ```
    """

    default_logger: logging.Logger = logger

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.INFO) -> None:
        self.logger = logger if logger is not None else self.default_logger
        self.level = level

    def on_retry(self, attempt: Attempt) -> None:
        extra = {
            "attempt_number": attempt.attempt_number,
            "delay_since_first_attempt": attempt.delay_since_first_attempt,
            "outcome": attempt.outcome.value,
        }
        if attempt.has_exception:
            exception_type = type(attempt.exception_cause).__name__
            extra["exception_type"] = exception_type
            message = (
                f"Attempt {attempt.attempt_number} raised {exception_type} "
                f"after {attempt.delay_since_first_attempt:.2f}s"
            )
        else:
            message = (
                f"Attempt {attempt.attempt_number} returned a result "
                f"after {attempt.delay_since_first_attempt:.2f}s"
            )
        log_structured(self.logger, self.level, message, **extra)
