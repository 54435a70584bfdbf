r"""Exceptions raised by the retry framework.

This module defines the errors that callers of a ``Retryer`` have to
tell apart:

- ``RetryError``: the stop strategy gave up before any attempt was accepted.
- ``ExecutionError``: the operation raised and the rejection predicate
  accepted that outcome as final.
- ``IllegalStateError``: an API was used in a state that forbids it (for
  example setting a builder strategy twice).
"""

from __future__ import annotations

__all__ = ["ExecutionError", "IllegalStateError", "RetryError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class IllegalStateError(RuntimeError):
    """Raised when an object is used in a state that does not allow the
    requested operation.

    Example:
        ```pycon
        >>> from aretry.exceptions import IllegalStateError
        >>> raise IllegalStateError("a stop strategy has already been set")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        aretry.exceptions.IllegalStateError: a stop strategy has already been set

        ```
    """


class ExecutionError(Exception):
    """Wrap an exception raised by a retried operation.

    An ``ExecutionError`` is raised when the operation raised an exception
    and the rejection predicate did not ask for a retry. The original
    exception is available as ``cause`` and is also chained as
    ``__cause__``.

    Args:
        cause: The exception raised by the operation.
        message: Optional error message. Defaults to the representation
            of the cause.

    Example:
        ```pycon
        >>> from aretry.exceptions import ExecutionError
        >>> error = ExecutionError(ValueError("boom"))
        >>> error.cause
        ValueError('boom')
        >>> str(error)
        "ValueError('boom')"

        ```
    """

    def __init__(self, cause: Exception, message: str | None = None) -> None:
        super().__init__(message if message is not None else repr(cause))
        self.cause = cause
        self.__cause__ = cause


class RetryError(Exception):
    """Raised when the stop strategy ends the retry loop.

    If the last attempt raised an exception, that exception is attached as
    ``__cause__`` so it shows up in the traceback.

    Args:
        number_of_failed_attempts: How many attempts were made and
            rejected.
        last_failed_attempt: The last rejected attempt.
        message: Optional error message. A default message mentioning the
            number of attempts is used when omitted.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.exceptions import RetryError
        >>> attempt = Attempt.from_result("foo", attempt_number=3, delay_since_first_attempt=0.5)
        >>> error = RetryError(3, attempt)
        >>> str(error)
        'Retrying failed to complete successfully after 3 attempts.'
        >>> error.number_of_failed_attempts
        3

        ```
    """

    def __init__(
        self,
        number_of_failed_attempts: int,
        last_failed_attempt: Attempt,
        message: str | None = None,
    ) -> None:
        if message is None:
            message = (
                "Retrying failed to complete successfully after "
                f"{number_of_failed_attempts} attempts."
            )
        super().__init__(message)
        self.number_of_failed_attempts = number_of_failed_attempts
        self.last_failed_attempt = last_failed_attempt
        if last_failed_attempt.has_exception:
            self.__cause__ = last_failed_attempt.exception_cause
