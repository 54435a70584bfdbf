r"""Builder used to configure and create a ``Retryer``."""

from __future__ import annotations

__all__ = ["RetryerBuilder"]

from typing import TYPE_CHECKING, Any

from aretry.block.factory import BlockStrategies
from aretry.exceptions import IllegalStateError
from aretry.listener import CallbackRetryListener, RetryListener
from aretry.predicate import (
    AnyAttemptPredicate,
    BaseAttemptPredicate,
    ExceptionPredicate,
    ExceptionTypePredicate,
    ResultPredicate,
)
from aretry.retryer import Retryer
from aretry.stop.factory import StopStrategies
from aretry.wait.factory import WaitStrategies

if TYPE_CHECKING:
    from collections.abc import Callable

    from aretry.attempt import Attempt
    from aretry.block.base import BaseBlockStrategy
    from aretry.stop.base import BaseStopStrategy
    from aretry.wait.base import BaseWaitStrategy


class RetryerBuilder:
    """Fluent builder for ``Retryer`` instances.

    Each strategy can be set at most once; setting it again raises
    ``IllegalStateError``. The ``retry_if_*`` methods and
    ``with_retry_listener`` accumulate: an attempt is retried if any
    registered condition matches it, and every listener is notified.

    Strategies left unset default to: never stop, no wait, and sleep the
    current thread. Without any ``retry_if_*`` condition the first attempt
    is always accepted.

    The builder can build several retryers; the conditions and listeners
    added so far are kept between builds.

    Example:
        ```pycon
        >>> from aretry import RetryerBuilder, StopStrategies, WaitStrategies
        >>> retryer = (
        ...     RetryerBuilder()
        ...     .retry_if_exception_of_type(ConnectionError)
        ...     .retry_if_result(lambda result: result is None)
        ...     .with_stop_strategy(StopStrategies.stop_after_attempt(3))
        ...     .with_wait_strategy(WaitStrategies.exponential_wait(0.1, 5.0))
        ...     .build()
        ... )
        >>> retryer.call(lambda: "ok")
        'ok'

        ```
    """

    def __init__(self) -> None:
        self._stop_strategy: BaseStopStrategy | None = None
        self._wait_strategy: BaseWaitStrategy | None = None
        self._block_strategy: BaseBlockStrategy | None = None
        self._predicates: list[BaseAttemptPredicate] = []
        self._listeners: list[RetryListener] = []

    @classmethod
    def new_builder(cls) -> RetryerBuilder:
        """Create a new builder."""
        return cls()

    def with_retry_listener(
        self, listener: RetryListener | Callable[[Attempt], None]
    ) -> RetryerBuilder:
        """Add a listener notified of each attempt.

        Args:
            listener: A ``RetryListener`` or a function taking the
                attempt.

        Returns:
            This builder.
        """
        if not isinstance(listener, RetryListener):
            listener = CallbackRetryListener(listener)
        self._listeners.append(listener)
        return self

    def with_stop_strategy(self, stop_strategy: BaseStopStrategy) -> RetryerBuilder:
        """Set the strategy deciding when to stop retrying.

        Args:
            stop_strategy: The stop strategy.

        Returns:
            This builder.

        Raises:
            IllegalStateError: If a stop strategy has already been set.
        """
        if self._stop_strategy is not None:
            msg = f"a stop strategy has already been set: {self._stop_strategy!r}"
            raise IllegalStateError(msg)
        self._stop_strategy = stop_strategy
        return self

    def with_wait_strategy(self, wait_strategy: BaseWaitStrategy) -> RetryerBuilder:
        """Set the strategy computing the wait between attempts.

        Args:
            wait_strategy: The wait strategy.

        Returns:
            This builder.

        Raises:
            IllegalStateError: If a wait strategy has already been set.
        """
        if self._wait_strategy is not None:
            msg = f"a wait strategy has already been set: {self._wait_strategy!r}"
            raise IllegalStateError(msg)
        self._wait_strategy = wait_strategy
        return self

    def with_block_strategy(self, block_strategy: BaseBlockStrategy) -> RetryerBuilder:
        """Set the strategy performing the wait between attempts.

        Args:
            block_strategy: The block strategy.

        Returns:
            This builder.

        Raises:
            IllegalStateError: If a block strategy has already been set.
        """
        if self._block_strategy is not None:
            msg = f"a block strategy has already been set: {self._block_strategy!r}"
            raise IllegalStateError(msg)
        self._block_strategy = block_strategy
        return self

    def retry_if_exception_of_type(
        self, exception_type: type[BaseException] | tuple[type[BaseException], ...]
    ) -> RetryerBuilder:
        """Retry if the operation raises an instance of ``exception_type``
        (subclasses included).

        Args:
            exception_type: The exception class, or tuple of classes.

        Returns:
            This builder.

        Raises:
            TypeError: If ``exception_type`` is not an exception class.
        """
        self._predicates.append(ExceptionTypePredicate(exception_type))
        return self

    def retry_if_exception(
        self, exception_predicate: Callable[[Exception], bool] | None = None
    ) -> RetryerBuilder:
        """Retry if the operation raises an exception satisfying
        ``exception_predicate``.

        Args:
            exception_predicate: Function called with the raised
                exception. When omitted, any exception is retried.

        Returns:
            This builder.
        """
        if exception_predicate is None:
            self._predicates.append(ExceptionTypePredicate(Exception))
        else:
            self._predicates.append(ExceptionPredicate(exception_predicate))
        return self

    def retry_if_result(self, result_predicate: Callable[[Any], bool]) -> RetryerBuilder:
        """Retry if the operation returns a value satisfying
        ``result_predicate``.

        Args:
            result_predicate: Function called with the returned value.

        Returns:
            This builder.
        """
        self._predicates.append(ResultPredicate(result_predicate))
        return self

    def build(self) -> Retryer:
        """Build a retryer from the current configuration.

        Returns:
            The new retryer.
        """
        return Retryer(
            stop_strategy=(
                self._stop_strategy
                if self._stop_strategy is not None
                else StopStrategies.never_stop()
            ),
            wait_strategy=(
                self._wait_strategy if self._wait_strategy is not None else WaitStrategies.no_wait()
            ),
            block_strategy=(
                self._block_strategy
                if self._block_strategy is not None
                else BlockStrategies.sleep_strategy()
            ),
            rejection_predicate=AnyAttemptPredicate(self._predicates),
            listeners=self._listeners,
        )
