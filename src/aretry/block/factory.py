r"""Factory for block strategies."""

from __future__ import annotations

__all__ = ["BlockStrategies"]

from aretry.block.sleep import SleepBlockStrategy

_SLEEP = SleepBlockStrategy()


class BlockStrategies:
    """Named constructors for the built-in block strategies.

    Example:
        ```pycon
        >>> from aretry.block import BlockStrategies
        >>> BlockStrategies.sleep_strategy()
        SleepBlockStrategy()

        ```
    """

    @staticmethod
    def sleep_strategy() -> SleepBlockStrategy:
        """Return the shared block strategy which sleeps the current
        thread."""
        return _SLEEP
