r"""Fibonacci wait strategy."""

from __future__ import annotations

__all__ = ["FibonacciWaitStrategy"]

import logging
from typing import TYPE_CHECKING

from aretry.config import DEFAULT_MAXIMUM_WAIT, DEFAULT_MULTIPLIER
from aretry.wait.base import BaseWaitStrategy
from aretry.wait.utils import check_multiplier_and_maximum_wait

if TYPE_CHECKING:
    from aretry.attempt import Attempt

logger: logging.Logger = logging.getLogger(__name__)


class FibonacciWaitStrategy(BaseWaitStrategy):
    """Fibonacci wait strategy.

    Calculates the sleep time as: ``multiplier * fibonacci(attempt_number)``,
    capped at ``maximum_wait``. The Fibonacci sequence (1, 1, 2, 3, 5, 8,
    13, ...) grows more gradually than the exponential one.

    Args:
        multiplier: The multiplier applied to the Fibonacci number
            (default: 1.0). Must be > 0.
        maximum_wait: The maximum time to sleep in seconds (default: the
            largest float). Must be >= 0 and greater than ``multiplier``.

    Raises:
        ValueError: If ``multiplier`` is not positive, ``maximum_wait`` is
            negative, or ``multiplier`` is not lower than ``maximum_wait``.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import FibonacciWaitStrategy
        >>> strategy = FibonacciWaitStrategy()
        >>> [strategy.compute_sleep_time(Attempt.from_result(None, n, 0.0)) for n in range(1, 6)]
        [1.0, 1.0, 2.0, 3.0, 5.0]
        >>> strategy = FibonacciWaitStrategy(multiplier=1.0, maximum_wait=10.0)
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 11, 0.0))  # fib(11) = 89
        10.0

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

    @staticmethod
    def _fibonacci(n: int, limit: float | None = None) -> int:
        """Calculate the nth Fibonacci number.

        Args:
            n: The position in the Fibonacci sequence, with
                ``fibonacci(0) == 0`` and ``fibonacci(1) == 1``.
            limit: If set, the computation stops at the first Fibonacci
                number greater than ``limit`` and returns it.

        Returns:
            The nth Fibonacci number, or the first one above ``limit``.
        """
        if n <= 0:
            return 0

        # Iterative so large attempt numbers do not grow the stack
        previous, current = 0, 1
        for _ in range(n - 1):
            if limit is not None and current > limit:
                break
            previous, current = current, previous + current
        return current

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        attempt_number = failed_attempt.attempt_number
        try:
            fib_number = self._fibonacci(
                attempt_number, limit=self.maximum_wait / self.multiplier
            )
            sleep_time = self.multiplier * fib_number
        except OverflowError:
            logger.debug(
                f"Fibonacci wait overflowed on attempt {attempt_number}, "
                f"using maximum_wait={self.maximum_wait}"
            )
            return float(self.maximum_wait)
        if sleep_time > self.maximum_wait or sleep_time < 0:
            sleep_time = self.maximum_wait
        return max(0.0, float(sleep_time))

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(multiplier={self.multiplier}, "
            f"maximum_wait={self.maximum_wait})"
        )
