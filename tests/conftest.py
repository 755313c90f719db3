from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

from tests.helpers import TEST_ADDRESS
from vaultclient.core.config import VaultConfig
from vaultclient.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def config() -> VaultConfig:
    """Create a config with a token and a retry budget of 2."""
    return VaultConfig(
        address=TEST_ADDRESS,
        token="s.test-token",
        max_retries=2,
        retry_interval_milliseconds=10,
    )


@pytest.fixture
def mock_transport() -> Mock:
    """Create a mock transport whose invoke() must be scripted by the
    test."""
    return Mock(spec=HttpxTransport)


@pytest.fixture
def mock_callback() -> Mock:
    """Create a mock callback function for testing callbacks."""
    return Mock()
