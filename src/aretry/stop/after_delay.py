r"""Stop strategy bounded by the time elapsed since the first attempt."""

from __future__ import annotations

__all__ = ["StopAfterDelayStrategy"]

from typing import TYPE_CHECKING

from aretry.stop.base import BaseStopStrategy
from aretry.utils.validation import check_non_negative

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class StopAfterDelayStrategy(BaseStopStrategy):
    """Stop strategy which stops once a delay has elapsed.

    After a rejected attempt, the strategy compares the time elapsed since
    the start of the first attempt with ``max_delay``. The check only
    happens between attempts, so a single long attempt can overshoot it.

    Args:
        max_delay: The delay in seconds, counted from the first attempt.
            Must be >= 0.

    Raises:
        ValueError: If ``max_delay`` is negative.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.stop import StopAfterDelayStrategy
        >>> strategy = StopAfterDelayStrategy(1.0)
        >>> strategy.should_stop(Attempt.from_result(None, 1, 0.0))
        False
        >>> strategy.should_stop(Attempt.from_result(None, 2, 1.0))
        True

        ```
    """

    def __init__(self, max_delay: float) -> None:
        check_non_negative("max_delay", max_delay)
        self.max_delay = max_delay

    def should_stop(self, failed_attempt: Attempt) -> bool:
        return failed_attempt.delay_since_first_attempt >= self.max_delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(max_delay={self.max_delay})"
