from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from aretry.block import BaseBlockStrategy
from aretry.utils.structured_logging import clear_correlation_id

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_block() -> Mock:
    """Create a mock block strategy recording the requested waits."""
    return Mock(spec=BaseBlockStrategy)


@pytest.fixture
def mock_listener() -> Mock:
    """Create a mock listener for testing listener notifications.

    Returns:
        A Mock object that can be registered with
            ``RetryerBuilder.with_retry_listener``.
    """
    return Mock()


@pytest.fixture(autouse=True)
def reset_correlation_id() -> Generator[None, None, None]:
    """Make sure no correlation ID leaks from one test to another."""
    yield
    clear_correlation_id()
