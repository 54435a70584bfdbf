r"""Abstract base class for block strategies."""

from __future__ import annotations

__all__ = ["BaseBlockStrategy"]

from abc import ABC, abstractmethod


class BaseBlockStrategy(ABC):
    """Abstract base class for block strategies.

    A block strategy performs the wait computed by the wait strategy.
    Swapping it makes it possible to run retry loops without real delays,
    for example in tests.

    Warning:
        An implementation that returns without waiting breaks the promise
        made by the configured wait strategy.
    """

    @abstractmethod
    def block(self, sleep_time: float) -> None:
        """Block the caller for ``sleep_time`` seconds.

        Args:
            sleep_time: The time to block in seconds, >= 0.
        """
