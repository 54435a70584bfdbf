r"""Incrementing wait strategy."""

from __future__ import annotations

__all__ = ["IncrementingWaitStrategy"]

from typing import TYPE_CHECKING

from aretry.utils.validation import check_non_negative
from aretry.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class IncrementingWaitStrategy(BaseWaitStrategy):
    """Wait strategy which adds a fixed increment after each attempt.

    Calculates the sleep time as:
    ``initial_sleep_time + increment * (attempt_number - 1)``, floored at 0.
    A negative ``increment`` gives a decreasing schedule.

    Args:
        initial_sleep_time: The time to sleep after the first attempt.
            Must be >= 0.
        increment: The time added after each further attempt.

    Raises:
        ValueError: If ``initial_sleep_time`` is negative.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import IncrementingWaitStrategy
        >>> strategy = IncrementingWaitStrategy(1.0, 2.0)
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0.0)) for n in range(1, 6)]
        [1.0, 3.0, 5.0, 7.0, 9.0]

        ```
    """

    def __init__(self, initial_sleep_time: float, increment: float) -> None:
        check_non_negative("initial_sleep_time", initial_sleep_time)
        self.initial_sleep_time = initial_sleep_time
        self.increment = increment

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        sleep_time = self.initial_sleep_time + self.increment * (failed_attempt.attempt_number - 1)
        return max(0.0, sleep_time)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_sleep_time={self.initial_sleep_time}, "
            f"increment={self.increment})"
        )
