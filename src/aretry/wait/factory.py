r"""Factory for wait strategies."""

from __future__ import annotations

__all__ = ["WaitStrategies"]

from typing import TYPE_CHECKING

from aretry.config import DEFAULT_MAXIMUM_WAIT, DEFAULT_MULTIPLIER
from aretry.wait.composite import CompositeWaitStrategy
from aretry.wait.exception import ExceptionWaitStrategy
from aretry.wait.exponential import ExponentialWaitStrategy
from aretry.wait.fibonacci import FibonacciWaitStrategy
from aretry.wait.fixed import FixedWaitStrategy
from aretry.wait.incrementing import IncrementingWaitStrategy
from aretry.wait.uniform import RandomWaitStrategy

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.wait.base import BaseWaitStrategy

_NO_WAIT = FixedWaitStrategy(0.0)


class WaitStrategies:
    """Named constructors for the built-in wait strategies.

    Example:
        ```pycon
        >>> from aretry.wait import WaitStrategies
        >>> WaitStrategies.no_wait()
        FixedWaitStrategy(sleep_time=0.0)
        >>> WaitStrategies.fixed_wait(1.5)
        FixedWaitStrategy(sleep_time=1.5)
        >>> WaitStrategies.join(WaitStrategies.fixed_wait(1.0), WaitStrategies.random_wait(0.0, 0.5))
        CompositeWaitStrategy(FixedWaitStrategy(sleep_time=1.0), RandomWaitStrategy(minimum=0.0, maximum=0.5))

        ```
    """

    @staticmethod
    def no_wait() -> FixedWaitStrategy:
        """Return the shared wait strategy which does not sleep at all.

        Use it with care: a permanently failing operation is then retried
        in a tight loop.
        """
        return _NO_WAIT

    @staticmethod
    def fixed_wait(sleep_time: float) -> FixedWaitStrategy:
        """Return a wait strategy which sleeps ``sleep_time`` seconds."""
        return FixedWaitStrategy(sleep_time)

    @staticmethod
    def random_wait(minimum: float, maximum: float) -> RandomWaitStrategy:
        """Return a wait strategy which sleeps a random time in
        ``[minimum, maximum)``."""
        return RandomWaitStrategy(minimum, maximum)

    @staticmethod
    def incrementing_wait(initial_sleep_time: float, increment: float) -> IncrementingWaitStrategy:
        """Return a wait strategy which sleeps ``initial_sleep_time`` after
        the first attempt and ``increment`` more after each further
        attempt."""
        return IncrementingWaitStrategy(initial_sleep_time, increment)

    @staticmethod
    def exponential_wait(
        multiplier: float = DEFAULT_MULTIPLIER,
        maximum_wait: float = DEFAULT_MAXIMUM_WAIT,
    ) -> ExponentialWaitStrategy:
        """Return a wait strategy with exponential backoff, capped at
        ``maximum_wait``."""
        return ExponentialWaitStrategy(multiplier, maximum_wait)

    @staticmethod
    def fibonacci_wait(
        multiplier: float = DEFAULT_MULTIPLIER,
        maximum_wait: float = DEFAULT_MAXIMUM_WAIT,
    ) -> FibonacciWaitStrategy:
        """Return a wait strategy with Fibonacci backoff, capped at
        ``maximum_wait``."""
        return FibonacciWaitStrategy(multiplier, maximum_wait)

    @staticmethod
    def exception_wait(
        exception_type: type[BaseException] | tuple[type[BaseException], ...],
        function: Callable[[BaseException], float],
    ) -> ExceptionWaitStrategy:
        """Return a wait strategy which computes the sleep time from the
        exception raised by the last attempt."""
        return ExceptionWaitStrategy(exception_type, function)

    @staticmethod
    def join(*wait_strategies: BaseWaitStrategy) -> CompositeWaitStrategy:
        """Return a wait strategy which sums the sleep times of
        ``wait_strategies``."""
        return CompositeWaitStrategy(*wait_strategies)
