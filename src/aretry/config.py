r"""Default values used by the retry strategies.

The run-time configuration of a retryer is done with ``RetryerBuilder``.
This module only holds the defaults that the strategies fall back to.
"""

from __future__ import annotations

__all__ = ["DEFAULT_MAXIMUM_WAIT", "DEFAULT_MULTIPLIER", "DEFAULT_SLEEP_TIME"]

import sys

# Sleep time of the "no wait" strategy, in seconds
DEFAULT_SLEEP_TIME = 0.0

# Multiplier of the exponential and Fibonacci wait strategies
# With 1.0 the exponential waits are 1s, 2s, 4s, 8s, ...
DEFAULT_MULTIPLIER = 1.0

# Upper bound of the exponential and Fibonacci wait strategies
# The largest float, i.e. no practical cap
DEFAULT_MAXIMUM_WAIT = sys.float_info.max
