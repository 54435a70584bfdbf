from __future__ import annotations

import logging
import sys

import aretry

logger: logging.Logger = logging.getLogger(__name__)


def check_retry_on_result() -> None:
    logger.info("Checking retry on result...")
    results = iter([None, None, "ready"])
    retryer = (
        aretry.RetryerBuilder()
        .retry_if_result(lambda result: result is None)
        .with_stop_strategy(aretry.StopStrategies.stop_after_attempt(5))
        .with_wait_strategy(aretry.WaitStrategies.fixed_wait(0.01))
        .build()
    )
    assert retryer.call(lambda: next(results)) == "ready"


def check_retry_error() -> None:
    logger.info("Checking retry error...")
    retryer = (
        aretry.RetryerBuilder()
        .retry_if_exception_of_type(ConnectionError)
        .with_stop_strategy(aretry.StopStrategies.stop_after_attempt(3))
        .with_wait_strategy(aretry.WaitStrategies.exponential_wait(0.01, 0.05))
        .with_retry_listener(aretry.LoggingRetryListener())
        .build()
    )

    def operation() -> None:
        raise ConnectionError("unreachable")

    try:
        retryer.call(operation)
    except aretry.RetryError as exc:
        assert exc.number_of_failed_attempts == 3
        assert isinstance(exc.__cause__, ConnectionError)
    else:
        msg = "RetryError was not raised"
        raise AssertionError(msg)


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_retry_on_result()
        check_retry_error()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
