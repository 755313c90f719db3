r"""Unit tests for the auth backend wrapper."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.helpers import TEST_ADDRESS, create_raw_response, create_transport
from vaultclient import Vault, VaultConfig
from vaultclient.responses import AuthResponse, LookupResponse

if TYPE_CHECKING:
    from unittest.mock import Mock

AUTH_PAYLOAD = {"auth": {"client_token": "s.new", "policies": ["default"], "renewable": True}}


def make_vault(transport: Mock, token: str | None = None) -> Vault:
    return Vault(VaultConfig(address=TEST_ADDRESS, token=token), transport=transport)


def test_login_by_app_role() -> None:
    transport = create_transport(create_raw_response(200, payload=AUTH_PAYLOAD))

    response = make_vault(transport).auth().login_by_app_role("role-1", "secret-1")

    assert isinstance(response, AuthResponse)
    assert response.auth_client_token == "s.new"
    request = transport.invoke.call_args.args[0]
    assert request.method == "POST"
    assert request.url == f"{TEST_ADDRESS}/v1/auth/approle/login"
    assert request.json == {"role_id": "role-1", "secret_id": "secret-1"}
    assert request.headers == {}


def test_login_by_app_role_custom_mount() -> None:
    transport = create_transport(create_raw_response(200, payload=AUTH_PAYLOAD))

    make_vault(transport).auth().login_by_app_role("role-1", "secret-1", path="ci-approle")

    assert transport.invoke.call_args.args[0].path == "auth/ci-approle/login"


def test_login_by_userpass() -> None:
    transport = create_transport(create_raw_response(200, payload=AUTH_PAYLOAD))

    response = make_vault(transport).auth().login_by_userpass("bob", "hunter2")

    assert response.auth_client_token == "s.new"
    request = transport.invoke.call_args.args[0]
    assert request.path == "auth/userpass/login/bob"
    assert request.json == {"password": "hunter2"}


def test_lookup_self() -> None:
    transport = create_transport(
        create_raw_response(200, payload={"data": {"id": "s.abc", "ttl": 300}})
    )

    response = make_vault(transport, token="s.abc").auth().lookup_self()

    assert isinstance(response, LookupResponse)
    assert response.id == "s.abc"
    assert response.ttl == 300
    request = transport.invoke.call_args.args[0]
    assert request.method == "GET"
    assert request.headers == {"X-Vault-Token": "s.abc"}


def test_renew_self() -> None:
    transport = create_transport(create_raw_response(200, payload=AUTH_PAYLOAD))

    make_vault(transport, token="s.abc").auth().renew_self()

    request = transport.invoke.call_args.args[0]
    assert request.path == "auth/token/renew-self"
    assert request.json == {}


def test_renew_self_increment() -> None:
    transport = create_transport(create_raw_response(200, payload=AUTH_PAYLOAD))

    make_vault(transport, token="s.abc").auth().renew_self(increment=3600)

    assert transport.invoke.call_args.args[0].json == {"increment": 3600}


def test_revoke_self() -> None:
    transport = create_transport(create_raw_response(204))

    response = make_vault(transport, token="s.abc").auth().revoke_self()

    assert response.status_code == 204
    assert transport.invoke.call_args.args[0].path == "auth/token/revoke-self"
