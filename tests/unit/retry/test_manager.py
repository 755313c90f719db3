from __future__ import annotations

from unittest.mock import Mock, patch

from tests.helpers import TEST_ADDRESS, create_raw_response
from vaultclient.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo
from vaultclient.core.config import VaultConfig
from vaultclient.exceptions import TerminalError, TransportError, ValidationError
from vaultclient.retry import CallbackManager

TEST_URL = f"{TEST_ADDRESS}/v1/sys/health"


#####################################
#     Tests for CallbackManager     #
#####################################


def test_callback_manager_without_callbacks() -> None:
    """Test that every hook is a no-op without callbacks."""
    manager = CallbackManager(VaultConfig(address=TEST_ADDRESS))

    manager.on_request(TEST_URL, "GET", 0)
    manager.on_retry(TEST_URL, "GET", 0, 1.0, TransportError("boom"))
    manager.on_success(TEST_URL, "GET", 0, create_raw_response(200), 0.0)
    manager.on_failure(TEST_URL, "GET", 0, TerminalError("boom", attempts=1), 0.0)


def test_callback_manager_on_request(mock_callback: Mock) -> None:
    manager = CallbackManager(VaultConfig(address=TEST_ADDRESS, max_retries=3, on_request=mock_callback))

    manager.on_request(TEST_URL, "GET", 0)

    mock_callback.assert_called_once_with(
        RequestInfo(url=TEST_URL, method="GET", attempt=1, max_retries=3)
    )


def test_callback_manager_on_retry(mock_callback: Mock) -> None:
    manager = CallbackManager(VaultConfig(address=TEST_ADDRESS, max_retries=3, on_retry=mock_callback))
    error = ValidationError("bad status", status_code=503)

    manager.on_retry(TEST_URL, "GET", 1, 0.5, error)

    mock_callback.assert_called_once_with(
        RetryInfo(
            url=TEST_URL,
            method="GET",
            attempt=3,
            max_retries=3,
            wait_time=0.5,
            error=error,
            status_code=503,
        )
    )


def test_callback_manager_on_success(mock_callback: Mock) -> None:
    manager = CallbackManager(VaultConfig(address=TEST_ADDRESS, on_success=mock_callback))
    response = create_raw_response(200)

    with patch("time.time", return_value=12.0):
        manager.on_success(TEST_URL, "GET", 0, response, start_time=10.0)

    mock_callback.assert_called_once_with(
        ResponseInfo(
            url=TEST_URL, method="GET", attempt=1, max_retries=0, response=response, total_time=2.0
        )
    )


def test_callback_manager_on_failure(mock_callback: Mock) -> None:
    manager = CallbackManager(VaultConfig(address=TEST_ADDRESS, max_retries=2, on_failure=mock_callback))
    error = TerminalError("giving up", attempts=3, status_code=500)

    with patch("time.time", return_value=5.0):
        manager.on_failure(TEST_URL, "GET", 2, error, start_time=4.0)

    mock_callback.assert_called_once_with(
        FailureInfo(
            url=TEST_URL,
            method="GET",
            attempt=3,
            max_retries=2,
            error=error,
            status_code=500,
            total_time=1.0,
        )
    )
