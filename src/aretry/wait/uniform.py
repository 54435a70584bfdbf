r"""Random wait strategy."""

from __future__ import annotations

__all__ = ["RandomWaitStrategy"]

import random
from typing import TYPE_CHECKING

from aretry.utils.validation import check_non_negative
from aretry.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class RandomWaitStrategy(BaseWaitStrategy):
    """Wait strategy which sleeps a random amount of time.

    The sleep time is drawn uniformly from ``[minimum, maximum)``.

    Args:
        minimum: The minimum time to sleep in seconds. Must be >= 0.
        maximum: The maximum time to sleep in seconds. Must be greater
            than ``minimum``.

    Raises:
        ValueError: If ``minimum`` is negative or ``maximum`` is not
            greater than ``minimum``.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import RandomWaitStrategy
        >>> strategy = RandomWaitStrategy(1.0, 2.0)
        >>> 1.0 <= strategy.compute_sleep_time(Attempt.from_result(None, 1, 0.0)) < 2.0
        True

        ```
    """

    def __init__(self, minimum: float, maximum: float) -> None:
        check_non_negative("minimum", minimum)
        if maximum <= minimum:
            msg = (
                "maximum must be greater than minimum but maximum is "
                f"{maximum} and minimum is {minimum}"
            )
            raise ValueError(msg)
        self.minimum = minimum
        self.maximum = maximum

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:  # noqa: ARG002
        return self.minimum + (self.maximum - self.minimum) * random.random()  # noqa: S311

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(minimum={self.minimum}, maximum={self.maximum})"
