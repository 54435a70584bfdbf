r"""Utility functions shared by the retry strategies and the retryer.

This package provides parameter validation helpers and opt-in structured
logging.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "check_exception_type",
    "check_non_negative",
    "check_positive",
    "clear_correlation_id",
    "get_correlation_id",
    "is_exception_type",
    "log_structured",
    "set_correlation_id",
]

from aretry.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
from aretry.utils.validation import (
    check_exception_type,
    check_non_negative,
    check_positive,
    is_exception_type,
)
