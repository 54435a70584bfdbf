r"""Block strategy based on ``time.sleep``."""

from __future__ import annotations

__all__ = ["SleepBlockStrategy"]

import time

from aretry.block.base import BaseBlockStrategy
from aretry.utils.validation import check_non_negative


class SleepBlockStrategy(BaseBlockStrategy):
    """Block strategy which puts the current thread to sleep.

    A ``KeyboardInterrupt`` received while sleeping propagates to the
    caller of the retryer.

    Example:
        ```pycon
        >>> from aretry.block import SleepBlockStrategy
        >>> SleepBlockStrategy().block(0.01)

        ```
    """

    def block(self, sleep_time: float) -> None:
        check_non_negative("sleep_time", sleep_time)
        time.sleep(sleep_time)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
