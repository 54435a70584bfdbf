r"""Unit tests for the RetryerBuilder class."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry.attempt import Attempt
from aretry.block import BaseBlockStrategy, BlockStrategies, SleepBlockStrategy
from aretry.builder import RetryerBuilder
from aretry.exceptions import ExecutionError, IllegalStateError
from aretry.listener import CallbackRetryListener, RetryListener
from aretry.predicate import (
    AnyAttemptPredicate,
    ExceptionPredicate,
    ExceptionTypePredicate,
    ResultPredicate,
)
from aretry.retryer import Retryer
from aretry.stop import NeverStopStrategy, StopStrategies
from aretry.wait import FixedWaitStrategy, WaitStrategies

##############################
#     Tests for defaults     #
##############################


def test_new_builder() -> None:
    assert isinstance(RetryerBuilder.new_builder(), RetryerBuilder)


def test_new_builder_returns_new_instances() -> None:
    assert RetryerBuilder.new_builder() is not RetryerBuilder.new_builder()


def test_build_defaults() -> None:
    retryer = RetryerBuilder().build()
    assert isinstance(retryer, Retryer)
    assert isinstance(retryer.stop_strategy, NeverStopStrategy)
    assert isinstance(retryer.wait_strategy, FixedWaitStrategy)
    assert retryer.wait_strategy.sleep_time == 0.0
    assert isinstance(retryer.block_strategy, SleepBlockStrategy)
    assert isinstance(retryer.rejection_predicate, AnyAttemptPredicate)
    assert retryer.rejection_predicate.predicates == ()
    assert retryer.listeners == ()


def test_build_defaults_are_shared_instances() -> None:
    retryer = RetryerBuilder().build()
    assert retryer.stop_strategy is StopStrategies.never_stop()
    assert retryer.wait_strategy is WaitStrategies.no_wait()
    assert retryer.block_strategy is BlockStrategies.sleep_strategy()


def test_build_without_predicate_accepts_exception() -> None:
    retryer = RetryerBuilder().build()
    with pytest.raises(ExecutionError):
        retryer.call(Mock(side_effect=OSError("reset")))


################################
#     Tests for strategies     #
################################


def test_with_stop_strategy() -> None:
    strategy = StopStrategies.stop_after_attempt(3)
    assert RetryerBuilder().with_stop_strategy(strategy).build().stop_strategy is strategy


def test_with_stop_strategy_twice() -> None:
    builder = RetryerBuilder().with_stop_strategy(StopStrategies.stop_after_attempt(3))
    with pytest.raises(IllegalStateError, match=r"a stop strategy has already been set"):
        builder.with_stop_strategy(StopStrategies.stop_after_attempt(4))


def test_with_wait_strategy() -> None:
    strategy = WaitStrategies.fixed_wait(1.0)
    assert RetryerBuilder().with_wait_strategy(strategy).build().wait_strategy is strategy


def test_with_wait_strategy_twice() -> None:
    builder = RetryerBuilder().with_wait_strategy(WaitStrategies.fixed_wait(1.0))
    with pytest.raises(IllegalStateError, match=r"a wait strategy has already been set"):
        builder.with_wait_strategy(WaitStrategies.fixed_wait(2.0))


def test_with_block_strategy(mock_block: Mock) -> None:
    assert RetryerBuilder().with_block_strategy(mock_block).build().block_strategy is mock_block


def test_with_block_strategy_twice(mock_block: Mock) -> None:
    builder = RetryerBuilder().with_block_strategy(mock_block)
    with pytest.raises(IllegalStateError, match=r"a block strategy has already been set"):
        builder.with_block_strategy(Mock(spec=BaseBlockStrategy))


def test_with_strategy_twice_keeps_first() -> None:
    strategy = StopStrategies.stop_after_attempt(3)
    builder = RetryerBuilder().with_stop_strategy(strategy)
    with pytest.raises(IllegalStateError):
        builder.with_stop_strategy(StopStrategies.never_stop())
    assert builder.build().stop_strategy is strategy


################################
#     Tests for predicates     #
################################


def test_retry_if_exception_of_type() -> None:
    predicate = RetryerBuilder().retry_if_exception_of_type(OSError).build().rejection_predicate
    assert predicate(Attempt.from_exception(ConnectionError(), 1, 0.0))
    assert not predicate(Attempt.from_exception(ValueError(), 1, 0.0))
    assert not predicate(Attempt.from_result("foo", 1, 0.0))


def test_retry_if_exception_of_type_invalid() -> None:
    with pytest.raises(TypeError, match=r"exception_type must be an exception class"):
        RetryerBuilder().retry_if_exception_of_type("Foo")


def test_retry_if_exception_without_predicate() -> None:
    builder = RetryerBuilder().retry_if_exception()
    (predicate,) = builder.build().rejection_predicate.predicates
    assert isinstance(predicate, ExceptionTypePredicate)
    assert predicate(Attempt.from_exception(ValueError(), 1, 0.0))
    assert not predicate(Attempt.from_result(None, 1, 0.0))


def test_retry_if_exception_with_predicate() -> None:
    builder = RetryerBuilder().retry_if_exception(lambda exc: "retry" in str(exc))
    predicate = builder.build().rejection_predicate
    assert isinstance(predicate.predicates[0], ExceptionPredicate)
    assert predicate(Attempt.from_exception(OSError("please retry"), 1, 0.0))
    assert not predicate(Attempt.from_exception(OSError("fatal"), 1, 0.0))


def test_retry_if_result() -> None:
    builder = RetryerBuilder().retry_if_result(lambda result: result is None)
    predicate = builder.build().rejection_predicate
    assert isinstance(predicate.predicates[0], ResultPredicate)
    assert predicate(Attempt.from_result(None, 1, 0.0))
    assert not predicate(Attempt.from_result(1, 1, 0.0))


def test_predicates_are_combined_with_or() -> None:
    predicate = (
        RetryerBuilder()
        .retry_if_exception_of_type(KeyError)
        .retry_if_result(lambda result: result == "foo")
        .build()
        .rejection_predicate
    )
    assert len(predicate.predicates) == 2
    assert predicate(Attempt.from_exception(KeyError(), 1, 0.0))
    assert predicate(Attempt.from_result("foo", 1, 0.0))
    assert not predicate(Attempt.from_result("bar", 1, 0.0))


###############################
#     Tests for listeners     #
###############################


def test_with_retry_listener() -> None:
    listener = Mock(spec=RetryListener)
    assert RetryerBuilder().with_retry_listener(listener).build().listeners == (listener,)


def test_with_retry_listener_callable(mock_listener: Mock) -> None:
    retryer = RetryerBuilder().with_retry_listener(mock_listener).build()
    (listener,) = retryer.listeners
    assert isinstance(listener, CallbackRetryListener)

    retryer.call(lambda: "foo")
    attempt = mock_listener.call_args.args[0]
    assert attempt.result == "foo"


def test_with_retry_listener_keeps_order() -> None:
    listener1 = Mock(spec=RetryListener)
    listener2 = Mock(spec=RetryListener)
    retryer = (
        RetryerBuilder().with_retry_listener(listener1).with_retry_listener(listener2).build()
    )
    assert retryer.listeners == (listener1, listener2)


###########################
#     Tests for reuse     #
###########################


def test_build_twice() -> None:
    builder = RetryerBuilder().retry_if_exception_of_type(OSError)
    retryer1 = builder.build()
    retryer2 = builder.retry_if_result(lambda result: result is None).build()
    assert retryer1 is not retryer2
    assert len(retryer1.rejection_predicate.predicates) == 1
    assert len(retryer2.rejection_predicate.predicates) == 2


def test_build_twice_listeners_not_shared() -> None:
    builder = RetryerBuilder()
    retryer1 = builder.build()
    builder.with_retry_listener(Mock(spec=RetryListener))
    assert retryer1.listeners == ()
    assert len(builder.build().listeners) == 1
