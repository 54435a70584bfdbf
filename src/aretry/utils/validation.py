r"""Parameter validation utilities for retry strategies.

This module provides the checks used by strategy constructors and by the
builder so that invalid configurations fail when they are declared rather
than in the middle of a retry loop.
"""

from __future__ import annotations

__all__ = [
    "check_exception_type",
    "check_non_negative",
    "check_positive",
    "is_exception_type",
]

from typing import Any


def is_exception_type(obj: Any) -> bool:
    """Indicate if an object is an exception class or a tuple of
    exception classes.

    Args:
        obj: The object to check.

    Returns:
        ``True`` if ``obj`` can be used as the second argument of
        ``isinstance`` to match raised exceptions.

    Example:
        ```pycon
        >>> from aretry.utils.validation import is_exception_type
        >>> is_exception_type(ValueError)
        True
        >>> is_exception_type((KeyError, OSError))
        True
        >>> is_exception_type(ValueError("boom"))
        False
        >>> is_exception_type(int)
        False

        ```
    """
    if isinstance(obj, tuple):
        return len(obj) > 0 and all(is_exception_type(item) for item in obj)
    return isinstance(obj, type) and issubclass(obj, BaseException)


def check_exception_type(name: str, value: Any) -> None:
    """Check that a value is an exception class or a tuple of exception
    classes.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        TypeError: If the value is not an exception class.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_exception_type
        >>> check_exception_type("exception_type", RuntimeError)
        >>> check_exception_type("exception_type", "Foo")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        TypeError: exception_type must be an exception class, got 'Foo'

        ```
    """
    if not is_exception_type(value):
        msg = f"{name} must be an exception class, got {value!r}"
        raise TypeError(msg)


def check_non_negative(name: str, value: float) -> None:
    """Check that a numeric value is >= 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is negative.

    Example:
        ```pycon
        >>> from aretry.utils.validation import check_non_negative
        >>> check_non_negative("sleep_time", 0)
        >>> check_non_negative("sleep_time", -1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: sleep_time must be non-negative, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def check_positive(name: str, value: float) -> None:
    """Check that a numeric value is > 0.

    Args:
        name: The parameter name, used in the error message.
        value: The value to check.

    Raises:
        ValueError: If the value is zero or negative.
    """
    if value <= 0:
        msg = f"{name} must be positive, got {value}"
        raise ValueError(msg)
