r"""Stop strategy bounded by the number of attempts."""

from __future__ import annotations

__all__ = ["StopAfterAttemptStrategy"]

from typing import TYPE_CHECKING

from aretry.stop.base import BaseStopStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class StopAfterAttemptStrategy(BaseStopStrategy):
    """Stop strategy which stops after N attempts.

    Args:
        max_attempt_number: The number of attempts after which the
            retryer stops. Must be >= 1.

    Raises:
        ValueError: If ``max_attempt_number`` is lower than 1.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.stop import StopAfterAttemptStrategy
        >>> strategy = StopAfterAttemptStrategy(3)
        >>> [strategy.should_stop(Attempt.from_result(None, n, 0.0)) for n in (1, 2, 3)]
        [False, False, True]

        ```
    """

    def __init__(self, max_attempt_number: int) -> None:
        if max_attempt_number < 1:
            msg = f"max_attempt_number must be >= 1, got {max_attempt_number}"
            raise ValueError(msg)
        self.max_attempt_number = max_attempt_number

    def should_stop(self, failed_attempt: Attempt) -> bool:
        return failed_attempt.attempt_number >= self.max_attempt_number

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_attempt_number={self.max_attempt_number})"
