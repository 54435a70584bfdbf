r"""Stop strategies deciding when a retryer gives up.

This package provides the stop strategy interface, the built-in
strategies (never stop, stop after N attempts, stop after a delay) and
the ``StopStrategies`` factory.
"""

from __future__ import annotations

__all__ = [
    "BaseStopStrategy",
    "NeverStopStrategy",
    "StopAfterAttemptStrategy",
    "StopAfterDelayStrategy",
    "StopStrategies",
]

from aretry.stop.after_attempt import StopAfterAttemptStrategy
from aretry.stop.after_delay import StopAfterDelayStrategy
from aretry.stop.base import BaseStopStrategy
from aretry.stop.factory import StopStrategies
from aretry.stop.never import NeverStopStrategy
