r"""Factory for stop strategies."""

from __future__ import annotations

__all__ = ["StopStrategies"]

from aretry.stop.after_attempt import StopAfterAttemptStrategy
from aretry.stop.after_delay import StopAfterDelayStrategy
from aretry.stop.never import NeverStopStrategy

_NEVER_STOP = NeverStopStrategy()


class StopStrategies:
    """Named constructors for the built-in stop strategies.

    Example:
        ```pycon
        >>> from aretry.stop import StopStrategies
        >>> StopStrategies.never_stop()
        NeverStopStrategy()
        >>> StopStrategies.stop_after_attempt(5)
        StopAfterAttemptStrategy(max_attempt_number=5)
        >>> StopStrategies.stop_after_delay(30.0)
        StopAfterDelayStrategy(max_delay=30.0)

        ```
    """

    @staticmethod
    def never_stop() -> NeverStopStrategy:
        """Return the shared stop strategy which never stops."""
        return _NEVER_STOP

    @staticmethod
    def stop_after_attempt(attempt_number: int) -> StopAfterAttemptStrategy:
        """Return a stop strategy which stops after ``attempt_number``
        attempts."""
        return StopAfterAttemptStrategy(attempt_number)

    @staticmethod
    def stop_after_delay(delay: float) -> StopAfterDelayStrategy:
        """Return a stop strategy which stops once ``delay`` seconds have
        elapsed since the first attempt."""
        return StopAfterDelayStrategy(delay)
