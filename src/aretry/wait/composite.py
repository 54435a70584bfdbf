r"""Composite wait strategy."""

from __future__ import annotations

__all__ = ["CompositeWaitStrategy"]

from typing import TYPE_CHECKING

from aretry.wait.base import BaseWaitStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class CompositeWaitStrategy(BaseWaitStrategy):
    """Wait strategy which sums the sleep times of other strategies.

    Every strategy is evaluated against the same attempt, in order, and
    their sleep times are added. A typical use is a backoff plus a random
    jitter.

    Args:
        *wait_strategies: The strategies to combine. At least one is
            required.

    Raises:
        ValueError: If no strategy is given.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.wait import CompositeWaitStrategy, FixedWaitStrategy, IncrementingWaitStrategy
        >>> strategy = CompositeWaitStrategy(FixedWaitStrategy(1.0), IncrementingWaitStrategy(0.0, 2.0))
        >>> strategy.compute_sleep_time(Attempt.from_result(None, 3, 0.0))
        5.0

        ```
    """

    def __init__(self, *wait_strategies: BaseWaitStrategy) -> None:
        if not wait_strategies:
            msg = "wait_strategies must not be empty"
            raise ValueError(msg)
        self.wait_strategies = tuple(wait_strategies)

    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        return float(
            sum(strategy.compute_sleep_time(failed_attempt) for strategy in self.wait_strategies)
        )

    def __repr__(self) -> str:
        strategies = ", ".join(repr(strategy) for strategy in self.wait_strategies)
        return f"{self.__class__.__qualname__}({strategies})"
