r"""Record of a single invocation of a retried operation.

An attempt either returned a result or raised an exception. The retry
loop creates exactly one ``Attempt`` per invocation and hands it to the
listeners, the rejection predicate, the stop strategy and the wait
strategy.
"""

from __future__ import annotations

__all__ = ["Attempt", "AttemptOutcome"]

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from aretry.exceptions import ExecutionError, IllegalStateError


class AttemptOutcome(Enum):
    """Kind of outcome of an attempt."""

    RESULT = "result"
    EXCEPTION = "exception"


@dataclass(frozen=True)
class Attempt:
    """Immutable outcome of one call of the retried operation.

    Use ``Attempt.from_result`` or ``Attempt.from_exception`` to create
    instances. Reading the result of an attempt that raised, or the
    exception of an attempt that returned, raises ``IllegalStateError``.

    Attributes:
        outcome: Whether the call returned a result or raised.
        attempt_number: The number of this attempt, starting from 1.
        delay_since_first_attempt: Seconds elapsed between the start of
            the first attempt and the end of this one.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> attempt = Attempt.from_result(42, attempt_number=1, delay_since_first_attempt=0.0)
        >>> attempt.has_result
        True
        >>> attempt.result
        42
        >>> attempt.get()
        42
        >>> failed = Attempt.from_exception(
        ...     ValueError("boom"), attempt_number=2, delay_since_first_attempt=0.1
        ... )
        >>> failed.has_exception
        True
        >>> failed.exception_cause
        ValueError('boom')

        ```
    """

    outcome: AttemptOutcome
    attempt_number: int
    delay_since_first_attempt: float
    _result: Any = field(default=None, repr=False)
    _exception: Exception | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.attempt_number < 1:
            msg = f"attempt_number must be >= 1, got {self.attempt_number}"
            raise ValueError(msg)
        if self.delay_since_first_attempt < 0:
            msg = (
                "delay_since_first_attempt must be non-negative, "
                f"got {self.delay_since_first_attempt}"
            )
            raise ValueError(msg)
        if self.outcome is AttemptOutcome.EXCEPTION and self._exception is None:
            msg = "an exception attempt requires an exception"
            raise ValueError(msg)
        if self.outcome is AttemptOutcome.RESULT and self._exception is not None:
            msg = "a result attempt must not carry an exception"
            raise ValueError(msg)

    @classmethod
    def from_result(
        cls, result: Any, attempt_number: int, delay_since_first_attempt: float
    ) -> Attempt:
        """Create an attempt for a call that returned ``result``."""
        return cls(
            outcome=AttemptOutcome.RESULT,
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            _result=result,
        )

    @classmethod
    def from_exception(
        cls, exception: Exception, attempt_number: int, delay_since_first_attempt: float
    ) -> Attempt:
        """Create an attempt for a call that raised ``exception``."""
        return cls(
            outcome=AttemptOutcome.EXCEPTION,
            attempt_number=attempt_number,
            delay_since_first_attempt=delay_since_first_attempt,
            _exception=exception,
        )

    @property
    def has_result(self) -> bool:
        """``True`` if the call returned a result."""
        return self.outcome is AttemptOutcome.RESULT

    @property
    def has_exception(self) -> bool:
        """``True`` if the call raised an exception."""
        return self.outcome is AttemptOutcome.EXCEPTION

    @property
    def result(self) -> Any:
        """The value returned by the call.

        Raises:
            IllegalStateError: If the call raised an exception.
        """
        if not self.has_result:
            msg = "The attempt resulted in an exception, not in a result"
            raise IllegalStateError(msg)
        return self._result

    @property
    def exception_cause(self) -> Exception:
        """The exception raised by the call.

        Raises:
            IllegalStateError: If the call returned a result.
        """
        if not self.has_exception:
            msg = "The attempt resulted in a result, not in an exception"
            raise IllegalStateError(msg)
        return self._exception

    def get(self) -> Any:
        """Return the result of the call, or raise its exception wrapped.

        Returns:
            The value returned by the call.

        Raises:
            ExecutionError: If the call raised an exception. The original
                exception is chained as the cause.
        """
        if self.has_exception:
            raise ExecutionError(self._exception) from self._exception
        return self._result
