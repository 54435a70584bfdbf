r"""Unit tests for the retry listeners."""

from __future__ import annotations

import json
import logging
from io import StringIO
from unittest.mock import Mock

import pytest

from aretry import listener as listener_module
from aretry.attempt import Attempt
from aretry.listener import CallbackRetryListener, LoggingRetryListener, RetryListener
from aretry.utils.structured_logging import StructuredFormatter


def test_retry_listener_is_abstract() -> None:
    with pytest.raises(TypeError, match=r"Can't instantiate abstract class"):
        RetryListener()  # type: ignore[abstract]


def test_callback_retry_listener() -> None:
    callback = Mock()
    attempt = Attempt.from_result("foo", 1, 0.0)
    CallbackRetryListener(callback).on_retry(attempt)
    callback.assert_called_once_with(attempt)


def test_logging_retry_listener_result(caplog: pytest.LogCaptureFixture) -> None:
    listener = LoggingRetryListener()
    with caplog.at_level(logging.INFO, logger="aretry.listener"):
        listener.on_retry(Attempt.from_result("foo", 2, 1.5))

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.levelno == logging.INFO
    assert record.getMessage() == "Attempt 2 returned a result after 1.50s"
    assert record.attempt_number == 2
    assert record.delay_since_first_attempt == 1.5
    assert record.outcome == "result"
    assert not hasattr(record, "exception_type")


def test_logging_retry_listener_exception(caplog: pytest.LogCaptureFixture) -> None:
    listener = LoggingRetryListener(level=logging.WARNING)
    with caplog.at_level(logging.WARNING, logger="aretry.listener"):
        listener.on_retry(Attempt.from_exception(ConnectionError("reset"), 3, 0.25))

    record = caplog.records[0]
    assert record.levelno == logging.WARNING
    assert record.getMessage() == "Attempt 3 raised ConnectionError after 0.25s"
    assert record.outcome == "exception"
    assert record.exception_type == "ConnectionError"


def test_logging_retry_listener_custom_logger_json() -> None:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("test_logging_retry_listener")
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)

    try:
        LoggingRetryListener(logger).on_retry(Attempt.from_exception(OSError(), 1, 0.0))
        data = json.loads(stream.getvalue())
        assert data["logger"] == "test_logging_retry_listener"
        assert data["attempt_number"] == 1
        assert data["outcome"] == "exception"
        assert data["exception_type"] == "OSError"
    finally:
        logger.removeHandler(handler)


def test_logging_retry_listener_default_logger() -> None:
    assert LoggingRetryListener().logger is listener_module.logger
    assert listener_module.logger.name == "aretry.listener"
