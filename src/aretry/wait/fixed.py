r"""Fixed wait strategy."""

from __future__ import annotations

__all__ = ["FixedWaitStrategy"]

from typing import TYPE_CHECKING

from aretry.config import DEFAULT_SLEEP_TIME
from aretry.utils.validation import check_non_negative
from aretry.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class FixedWaitStrategy(BaseWaitStrategy):
    """Wait strategy which sleeps a fixed amount of time.

    With the default ``sleep_time`` of 0 the retryer retries immediately.

    Args:
        sleep_time: The time to sleep in seconds (default: 0.0).

    Raises:
        ValueError: If ``sleep_time`` is negative.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import FixedWaitStrategy
        >>> strategy = FixedWaitStrategy(2.5)
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 1, 0.0))
        2.5
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 10, 0.0))
        2.5

        ```
    """

    def __init__(self, sleep_time: float = DEFAULT_SLEEP_TIME) -> None:
        check_non_negative("sleep_time", sleep_time)
        self.sleep_time = sleep_time

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:  # noqa: ARG002
        return self.sleep_time

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(sleep_time={self.sleep_time})"
