r"""Exponential wait strategy."""

from __future__ import annotations

__all__ = ["ExponentialWaitStrategy"]

import logging
from typing import TYPE_CHECKING

from aretry.config import DEFAULT_MAXIMUM_WAIT, DEFAULT_MULTIPLIER
from aretry.wait.base import BaseWaitStrategy
from aretry.wait.utils import check_multiplier_and_maximum_wait

if TYPE_CHECKING:
    from aretry.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialWaitStrategy(BaseWaitStrategy):
    """Exponential wait strategy.

    Calculates the sleep time as:
    ``multiplier * 2 ** (attempt_number - 1)``, capped at ``maximum_wait``.
    The first attempt waits ``multiplier`` seconds. When the power
    overflows a float the cap is used.

    Args:
        multiplier: The multiplier applied to the power of two
            (default: 1.0). Must be > 0.
        maximum_wait: The maximum time to sleep in seconds (default: the
            largest float). Must be >= 0 and greater than ``multiplier``.

    Raises:
        ValueError: If ``multiplier`` is not positive, ``maximum_wait`` is
            negative, or ``multiplier`` is not lower than ``maximum_wait``.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import ExponentialWaitStrategy
        >>> strategy = ExponentialWaitStrategy()
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0.0)) for n in range(1, 6)]
        [1.0, 2.0, 4.0, 8.0, 16.0]
        >>> strategy = ExponentialWaitStrategy(multiplier=0.5, maximum_wait=3.0)
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 10, 0.0))
        3.0

        ```
    """

    def __init__(
        self,
        multiplier: float = DEFAULT_MULTIPLIER,
        maximum_wait: float = DEFAULT_MAXIMUM_WAIT,
    ) -> None:
        check_multiplier_and_maximum_wait(multiplier, maximum_wait)
        self.multiplier = multiplier
        self.maximum_wait = maximum_wait

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        attempt_number = failed_attempt.attempt_number
        if attempt_number == 1:
            return float(self.multiplier)

        try:
            sleep_time = self.multiplier * 2 ** (attempt_number - 1)
        except OverflowError:
            logger.debug(
                f"Exponential wait overflowed on attempt {attempt_number}, "
                f"using maximum_wait={self.maximum_wait}"
            )
            return float(self.maximum_wait)
        return max(0.0, float(min(sleep_time, self.maximum_wait)))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(multiplier={self.multiplier}, "
            f"maximum_wait={self.maximum_wait})"
        )
