r"""Unit tests for the secret path wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.helpers import TEST_ADDRESS, create_raw_response, create_transport
from vaultclient import TerminalError, Vault, VaultConfig

if TYPE_CHECKING:
    from unittest.mock import Mock


def make_vault(transport: Mock, **kwargs) -> Vault:
    return Vault(VaultConfig(address=TEST_ADDRESS, token="s.abc", **kwargs), transport=transport)


def test_logical_read() -> None:
    transport = create_transport(create_raw_response(200, payload={"data": {"value": "world"}}))

    response = make_vault(transport).logical().read("secret/hello")

    assert response.data == {"value": "world"}
    request = transport.invoke.call_args.args[0]
    assert request.method == "GET"
    assert request.url == f"{TEST_ADDRESS}/v1/secret/hello"
    assert request.headers == {"X-Vault-Token": "s.abc"}


def test_logical_read_not_found(mock_sleep: Mock) -> None:
    transport = create_transport(create_raw_response(404), create_raw_response(404))

    with pytest.raises(TerminalError) as exc_info:
        make_vault(transport, max_retries=1).logical().read("secret/missing")

    assert exc_info.value.status_code == 404
    assert transport.invoke.call_count == 2


@pytest.mark.parametrize("status_code", [200, 204])
def test_logical_write(status_code: int) -> None:
    transport = create_transport(create_raw_response(status_code))

    response = make_vault(transport).logical().write("secret/hello", {"value": "world"})

    assert response.status_code == status_code
    request = transport.invoke.call_args.args[0]
    assert request.method == "POST"
    assert request.json == {"value": "world"}


def test_logical_write_no_data() -> None:
    transport = create_transport(create_raw_response(204))

    make_vault(transport).logical().write("secret/hello")

    assert transport.invoke.call_args.args[0].json == {}


def test_logical_list() -> None:
    transport = create_transport(
        create_raw_response(200, payload={"data": {"keys": ["hello", "nested/"]}})
    )

    keys = make_vault(transport).logical().list("secret")

    assert keys == ["hello", "nested/"]
    request = transport.invoke.call_args.args[0]
    assert request.method == "GET"
    assert request.params == {"list": "true"}


def test_logical_delete() -> None:
    transport = create_transport(create_raw_response(204))

    response = make_vault(transport).logical().delete("secret/hello")

    assert response.status_code == 204
    assert transport.invoke.call_args.args[0].method == "DELETE"


def test_logical_delete_rejects_200(mock_sleep: Mock) -> None:
    transport = create_transport(create_raw_response(200))

    with pytest.raises(TerminalError):
        make_vault(transport).logical().delete("secret/hello")
