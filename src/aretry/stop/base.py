r"""Abstract base class for stop strategies."""

from __future__ import annotations

__all__ = ["BaseStopStrategy"]

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class BaseStopStrategy(ABC):
    """Abstract base class for stop strategies.

    A stop strategy decides, after an attempt has been rejected, whether
    the retryer should give up instead of trying again.
    """

    @abstractmethod
    def should_stop(self, failed_attempt: Attempt) -> bool:
        """Indicate if the retryer should stop retrying.

        Args:
            failed_attempt: The last rejected attempt.

        Returns:
            ``True`` if the retryer must stop, ``False`` otherwise.
        """
