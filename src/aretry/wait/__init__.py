r"""Wait strategies computing the delay between attempts.

This package provides the wait strategy interface, fixed, random,
incrementing, exponential, Fibonacci, exception-driven and composite
strategies, and the ``WaitStrategies`` factory.
"""

from __future__ import annotations

__all__ = [
    "BaseWaitStrategy",
    "CompositeWaitStrategy",
    "ExceptionWaitStrategy",
    "ExponentialWaitStrategy",
    "FibonacciWaitStrategy",
    "FixedWaitStrategy",
    "IncrementingWaitStrategy",
    "RandomWaitStrategy",
    "WaitStrategies",
]

from aretry.wait.base import BaseWaitStrategy
from aretry.wait.composite import CompositeWaitStrategy
from aretry.wait.exception import ExceptionWaitStrategy
from aretry.wait.exponential import ExponentialWaitStrategy
from aretry.wait.factory import WaitStrategies
from aretry.wait.fibonacci import FibonacciWaitStrategy
from aretry.wait.fixed import FixedWaitStrategy
from aretry.wait.incrementing import IncrementingWaitStrategy
from aretry.wait.uniform import RandomWaitStrategy
