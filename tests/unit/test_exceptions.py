from __future__ import annotations

import pytest

from vaultclient.exceptions import (
    BuildError,
    TerminalError,
    TransportError,
    ValidationError,
    VaultError,
)

TEST_URL = "https://vault.example.com:8200/v1/sys/health"


################################
#     Tests for VaultError     #
################################


def test_vault_error_attributes() -> None:
    cause = OSError("connection reset")
    error = VaultError("boom", method="GET", url=TEST_URL, status_code=500, cause=cause)

    assert str(error) == "boom"
    assert error.message == "boom"
    assert error.method == "GET"
    assert error.url == TEST_URL
    assert error.status_code == 500
    assert error.cause is cause


def test_vault_error_defaults() -> None:
    error = VaultError("boom")

    assert error.method is None
    assert error.url is None
    assert error.status_code is None
    assert error.cause is None


@pytest.mark.parametrize("error_cls", [BuildError, TransportError, ValidationError])
def test_vault_error_subclasses(error_cls: type[VaultError]) -> None:
    with pytest.raises(VaultError, match=r"boom"):
        raise error_cls("boom", method="GET", url=TEST_URL)


###################################
#     Tests for TerminalError     #
###################################


def test_terminal_error_attempts() -> None:
    cause = ValidationError("Vault responded with HTTP status code: 503", status_code=503)
    error = TerminalError("giving up", attempts=4, status_code=503, cause=cause)

    assert isinstance(error, VaultError)
    assert error.attempts == 4
    assert error.status_code == 503
    assert error.cause is cause


def test_terminal_error_requires_attempts() -> None:
    with pytest.raises(TypeError):
        TerminalError("giving up")
