from __future__ import annotations

import pytest

from aretry.utils.validation import (
    check_exception_type,
    check_non_negative,
    check_positive,
    is_exception_type,
)

#######################################
#     Tests for is_exception_type     #
#######################################


@pytest.mark.parametrize(
    "obj", [Exception, BaseException, ValueError, KeyboardInterrupt, (KeyError, OSError)]
)
def test_is_exception_type_true(obj: object) -> None:
    assert is_exception_type(obj)


@pytest.mark.parametrize(
    "obj", ["Foo", None, 1, int, object, ValueError("boom"), (), (KeyError, "Foo")]
)
def test_is_exception_type_false(obj: object) -> None:
    assert not is_exception_type(obj)


##########################################
#     Tests for check_exception_type     #
##########################################


def test_check_exception_type_valid() -> None:
    check_exception_type("exception_type", RuntimeError)
    check_exception_type("exception_type", (RuntimeError, OSError))


def test_check_exception_type_invalid() -> None:
    with pytest.raises(TypeError, match=r"exception_type must be an exception class, got 'Foo'"):
        check_exception_type("exception_type", "Foo")


########################################
#     Tests for check_non_negative     #
########################################


@pytest.mark.parametrize("value", [0, 0.0, 1, 2.5])
def test_check_non_negative_valid(value: float) -> None:
    check_non_negative("sleep_time", value)


@pytest.mark.parametrize("value", [-1, -0.1])
def test_check_non_negative_invalid(value: float) -> None:
    with pytest.raises(ValueError, match=r"sleep_time must be non-negative, got"):
        check_non_negative("sleep_time", value)


####################################
#     Tests for check_positive     #
####################################


@pytest.mark.parametrize("value", [0.001, 1, 2.5])
def test_check_positive_valid(value: float) -> None:
    check_positive("multiplier", value)


@pytest.mark.parametrize("value", [0, -1.0])
def test_check_positive_invalid(value: float) -> None:
    with pytest.raises(ValueError, match=r"multiplier must be positive, got"):
        check_positive("multiplier", value)
