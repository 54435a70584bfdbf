r"""Wait strategy driven by the exception raised by the last attempt."""

from __future__ import annotations

__all__ = ["ExceptionWaitStrategy"]

from typing import TYPE_CHECKING

from aretry.utils.validation import check_exception_type
from aretry.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt


class ExceptionWaitStrategy(BaseWaitStrategy):
    """Wait strategy which derives the sleep time from an exception.

    If the last attempt raised an instance of ``exception_type``,
    ``function`` is called with that exception and its return value is the
    sleep time. Any other attempt gives a sleep time of 0. This is useful
    when the error itself says how long to wait, e.g. a rate limit error
    carrying a retry-after value.

    Args:
        exception_type: The exception class (or tuple of classes) handled
            by ``function``.
        function: Function computing the sleep time in seconds from the
            exception.

    Raises:
        TypeError: If ``exception_type`` is not an exception class.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import ExceptionWaitStrategy
        >>> class RateLimitError(Exception):
        ...     def __init__(self, retry_after: float) -> None:
        ...         super().__init__(retry_after)
        ...         self.retry_after = retry_after
        ...
        >>> strategy = ExceptionWaitStrategy(RateLimitError, lambda exc: exc.retry_after)
        >>> strategy.compute_sleep_time(Attempt.from_exception(RateLimitError(7.0), 1, 0.0))
        7.0
        >>> strategy.compute_sleep_time(Attempt.from_exception(ValueError(), 1, 0.0))
        0.0

        ```
    """

    def __init__(
        self,
        exception_type: type[BaseException] | tuple[type[BaseException], ...],
        function: Callable[[BaseException], float],
    ) -> None:
        check_exception_type("exception_type", exception_type)
        self.exception_type = exception_type
        self.function = function

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        if failed_attempt.has_exception:
            cause = failed_attempt.exception_cause
            if isinstance(cause, self.exception_type):
                return float(self.function(cause))
        return 0.0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(exception_type={self.exception_type!r}, "
            f"function={self.function!r})"
        )
