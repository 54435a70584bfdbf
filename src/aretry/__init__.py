r"""aretry - Retry arbitrary operations with pluggable strategies.

This package executes a zero-argument operation and retries it until the
outcome is accepted or a stop condition fires. The retry behavior is
composed from four independent pieces:

- a rejection predicate deciding which results and exceptions are retried
- a stop strategy deciding when to give up
- a wait strategy computing the delay between attempts
- a block strategy performing that delay

Key Features:
    - Retry on exception types, exception predicates and result predicates
    - Stop after N attempts or after a delay, or never
    - Fixed, random, incrementing, exponential, Fibonacci, exception-driven
      and composite waits
    - Listeners notified after every attempt, with a ready-made structured
      logging listener
    - Distinct errors for exhausted retries, accepted failures and invalid
      configurations

Example:
    ```pycon
    >>> from aretry import RetryerBuilder, StopStrategies, WaitStrategies
    >>> retryer = (
    ...     RetryerBuilder()
    ...     .retry_if_exception_of_type(ConnectionError)
    ...     .with_stop_strategy(StopStrategies.stop_after_attempt(5))
    ...     .with_wait_strategy(WaitStrategies.fibonacci_wait(0.5, 30.0))
    ...     .build()
    ... )
    >>> retryer.call(lambda: "payload")
    'payload'

    ```
"""

from __future__ import annotations

__all__ = [
    "Attempt",
    "AttemptOutcome",
    "BlockStrategies",
    "CallbackRetryListener",
    "ExecutionError",
    "IllegalStateError",
    "LoggingRetryListener",
    "RetryError",
    "RetryListener",
    "Retryer",
    "RetryerBuilder",
    "StopStrategies",
    "WaitStrategies",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from aretry.attempt import Attempt, AttemptOutcome
from aretry.block import BlockStrategies
from aretry.builder import RetryerBuilder
from aretry.exceptions import ExecutionError, IllegalStateError, RetryError
from aretry.listener import CallbackRetryListener, LoggingRetryListener, RetryListener
from aretry.retryer import Retryer
from aretry.stop import StopStrategies
from aretry.wait import WaitStrategies

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
