r"""Retryer executing an operation until it is accepted or the stop
strategy gives up.

The ``Retryer`` class drives the retry loop:

1. call the operation and record the outcome as an ``Attempt``
2. notify the listeners, in registration order
3. if the rejection predicate accepts the attempt, return its result (or
   raise ``ExecutionError`` if the operation raised)
4. if the stop strategy says stop, raise ``RetryError``
5. otherwise compute the wait, block, and start over with the next
   attempt number
"""

from __future__ import annotations

__all__ = ["Retryer"]

import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.attempt import Attempt
from aretry.exceptions import RetryError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from aretry.block.base import BaseBlockStrategy
    from aretry.listener import RetryListener
    from aretry.predicate import BaseAttemptPredicate
    from aretry.stop.base import BaseStopStrategy
    from aretry.wait.base import BaseWaitStrategy

T = TypeVar("T")

logger: logging.Logger = logging.getLogger(__name__)


class Retryer:
    """Execute an operation and retry it according to a set of
    strategies.

    A retryer holds no per-call state: the attempt counter and the start
    time belong to each ``call``, so one instance can be shared and used
    from several threads. Build instances with ``RetryerBuilder``.

    Args:
        stop_strategy: Decides when to stop retrying.
        wait_strategy: Computes how long to wait between attempts.
        block_strategy: Performs the wait.
        rejection_predicate: Returns ``True`` for attempts that must be
            retried.
        listeners: Listeners notified after every attempt.

    Example:
        ```pycon
        >>> from aretry import RetryerBuilder, StopStrategies
        >>> results = iter([None, None, "ready"])
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_result(lambda result: result is None)
        ...     .with_stop_strategy(StopStrategies.stop_after_attempt(5))
        ...     .build()
        ... )
        >>> retryer.call(lambda: next(results))
        'ready'

        ```
    """

    def __init__(
        self,
        stop_strategy: BaseStopStrategy,
        wait_strategy: BaseWaitStrategy,
        block_strategy: BaseBlockStrategy,
        rejection_predicate: Callable[[Attempt], bool],
        listeners: Iterable[RetryListener] = (),
    ) -> None:
        self.stop_strategy = stop_strategy
        self.wait_strategy = wait_strategy
        self.block_strategy = block_strategy
        self.rejection_predicate = rejection_predicate
        self.listeners: tuple[RetryListener, ...] = tuple(listeners)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}("
            f"stop_strategy={self.stop_strategy!r}, "
            f"wait_strategy={self.wait_strategy!r}, "
            f"block_strategy={self.block_strategy!r}, "
            f"rejection_predicate={self.rejection_predicate!r}, "
            f"listeners={self.listeners!r})"
        )

    def call(self, operation: Callable[[], T]) -> T:
        """Execute the operation, retrying it while attempts are rejected.

        Args:
            operation: Zero-argument callable to execute.

        Returns:
            The result of the first accepted attempt.

        Raises:
            ExecutionError: If the operation raised and the rejection
                predicate accepted the attempt. The original exception is
                chained as the cause.
            RetryError: If the stop strategy stopped the loop. If the last
                attempt raised, its exception is chained as the cause.
        """
        start_time = time.monotonic()
        attempt_number = 1
        while True:
            attempt = self._attempt(operation, attempt_number, start_time)

            for listener in self.listeners:
                listener.on_retry(attempt)

            if not self.rejection_predicate(attempt):
                logger.debug(f"Attempt {attempt_number} accepted ({attempt.outcome.value})")
                return attempt.get()

            if self.stop_strategy.should_stop(attempt):
                logger.debug(
                    f"Attempt {attempt_number} rejected, stopping after "
                    f"{attempt.delay_since_first_attempt:.2f}s"
                )
                raise RetryError(attempt_number, attempt)

            sleep_time = self.wait_strategy.compute_sleep_time(attempt)
            logger.debug(
                f"Attempt {attempt_number} rejected, waiting {sleep_time:.2f}s before retry"
            )
            self.block_strategy.block(sleep_time)
            attempt_number += 1

    def wrap(self, operation: Callable[[], T]) -> Callable[[], T]:
        """Wrap the operation into a callable with retry behavior.

        The operation is not called by ``wrap``. Each call of the returned
        function runs a new retry loop with ``call``.

        Args:
            operation: Zero-argument callable to wrap.

        Returns:
            A zero-argument callable returning what ``call(operation)``
            returns.

        Example:
            ```pycon
            >>> from aretry import RetryerBuilder
            >>> fetch = RetryerBuilder().build().wrap(lambda: 42)
            >>> fetch()
            42

            ```
        """

        def wrapped() -> T:
            return self.call(operation)

        return wrapped

    @staticmethod
    def _attempt(operation: Callable[[], Any], attempt_number: int, start_time: float) -> Attempt:
        try:
            result = operation()
        except Exception as exc:  # noqa: BLE001
            logger.debug(
                f"Attempt {attempt_number} raised {type(exc).__name__}: {exc}"
            )
            return Attempt.from_exception(exc, attempt_number, time.monotonic() - start_time)
        return Attempt.from_result(result, attempt_number, time.monotonic() - start_time)
