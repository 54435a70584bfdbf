r"""Abstract base class for wait strategies."""

from __future__ import annotations

__all__ = ["BaseWaitStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class BaseWaitStrategy(ABC):
    """Abstract base class for wait strategies.

    A wait strategy determines how long to sleep before retrying a
    rejected attempt. Implementations must not keep mutable state so a
    single instance can be shared by concurrent retry loops.
    """

    @abstractmethod
    def compute_sleep_time(self, failed_attempt: Attempt) -> float:
        """Compute the sleep time before the next attempt.

        Args:
            failed_attempt: The last rejected attempt. Its
                ``attempt_number`` is 1 for the first attempt.

        Returns:
            The sleep time in seconds, >= 0.
        """
