r"""Stop strategy that never stops."""

from __future__ import annotations

__all__ = ["NeverStopStrategy"]

from typing import TYPE_CHECKING

from aretry.stop.base import BaseStopStrategy

if TYPE_CHECKING:
    from aretry.attempt import Attempt


class NeverStopStrategy(BaseStopStrategy):
    """Stop strategy which never stops retrying.

    Be careful when combining it with short waits: a permanently failing
    operation is then retried forever.

    Example:
        ```pycon
        >>> from aretry.attempt import Attempt
        >>> from aretry.stop import NeverStopStrategy
        >>> strategy = NeverStopStrategy()
        >>> strategy.should_stop(Attempt.from_result(None, 1000, 3600.0))
        False

        ```
    """

    def should_stop(self, failed_attempt: Attempt) -> bool:  # noqa: ARG002
        return False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}()"
