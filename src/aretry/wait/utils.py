r"""Validation shared by the backoff wait strategies."""

from __future__ import annotations

__all__ = ["check_multiplier_and_maximum_wait"]

from aretry.utils.validation import check_non_negative, check_positive


def check_multiplier_and_maximum_wait(multiplier: float, maximum_wait: float) -> None:
    """Validate the parameters of the exponential and Fibonacci
    strategies.

    Args:
        multiplier: Must be > 0.
        maximum_wait: Must be >= 0 and greater than ``multiplier``.

    Raises:
        ValueError: If one of the constraints is violated.
    """
    check_positive("multiplier", multiplier)
    check_non_negative("maximum_wait", maximum_wait)
    if multiplier >= maximum_wait:
        msg = (
            "multiplier must be less than maximum_wait but multiplier is "
            f"{multiplier} and maximum_wait is {maximum_wait}"
        )
        raise ValueError(msg)
