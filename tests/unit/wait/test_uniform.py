r"""Unit tests for RandomWaitStrategy."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from aretry.attempt import Attempt
from aretry.wait import RandomWaitStrategy


def test_random_wait_strategy_range() -> None:
    strategy = RandomWaitStrategy(0.0, 1.0)
    attempt = Attempt.from_result(None, 1, 0.0)
    sleep_times = [strategy.compute_sleep_time(attempt) for _ in range(1000)]
    assert all(0.0 <= sleep_time < 1.0 for sleep_time in sleep_times)
    # Values are drawn, not repeated
    assert len(set(sleep_times)) > 900


def test_random_wait_strategy_scaling() -> None:
    strategy = RandomWaitStrategy(2.0, 4.0)
    with patch("aretry.wait.uniform.random.random", return_value=0.25):
        assert strategy.compute_sleep_time(Attempt.from_result(None, 1, 0.0)) == 2.5


def test_random_wait_strategy_negative_minimum() -> None:
    with pytest.raises(ValueError, match=r"minimum must be non-negative"):
        RandomWaitStrategy(-1, 1)


@pytest.mark.parametrize(("minimum", "maximum"), [(1, 1), (2, 1)])
def test_random_wait_strategy_maximum_not_greater(minimum: float, maximum: float) -> None:
    with pytest.raises(ValueError, match=r"maximum must be greater than minimum"):
        RandomWaitStrategy(minimum, maximum)
