r"""Typed results returned by the endpoint wrappers.

Each result keeps the accepted raw response and the retry count of
``VaultResponse`` and adds fields extracted from the JSON body.
Extraction is tolerant: a field that is missing or has an unexpected
type is ``None``. Some reconfigured success codes (for example a health
check with ``active_code=204``) come with an empty body, in which case
every extracted field is ``None`` and only ``status_code`` describes
the outcome.
"""

from __future__ import annotations

__all__ = [
    "AuthResponse",
    "HealthResponse",
    "LogicalResponse",
    "LookupResponse",
    "SealResponse",
]

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vaultclient.response import VaultResponse

if TYPE_CHECKING:
    from typing import Self

    from vaultclient.response import RawResponse


def _get_bool(payload: dict[str, Any], key: str) -> bool | None:
    value = payload.get(key)
    return value if isinstance(value, bool) else None


def _get_int(payload: dict[str, Any], key: str) -> int | None:
    value = payload.get(key)
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return None


def _get_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    return value if isinstance(value, str) else None


def _get_dict(payload: dict[str, Any], key: str) -> dict[str, Any]:
    value = payload.get(key)
    return value if isinstance(value, dict) else {}


def _get_str_list(payload: dict[str, Any], key: str) -> list[str]:
    value = payload.get(key)
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _to_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value)


@dataclass(frozen=True)
class HealthResponse(VaultResponse):
    """Result of ``sys/health``.

    Example:
        ```pycon
        >>> from vaultclient.response import RawResponse
        >>> from vaultclient.responses import HealthResponse
        >>> raw = RawResponse(200, body=b'{"initialized": true, "sealed": false, "standby": false}')
        >>> response = HealthResponse.from_raw(raw, retries=0)
        >>> response.initialized, response.sealed, response.version
        (True, False, None)
        >>> HealthResponse.from_raw(RawResponse(204), retries=0).sealed is None
        True

        ```
    """

    initialized: bool | None = None
    sealed: bool | None = None
    standby: bool | None = None
    server_time_utc: int | None = None
    version: str | None = None
    cluster_name: str | None = None
    cluster_id: str | None = None

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        payload = rest_response.json()
        return cls(
            rest_response=rest_response,
            retries=retries,
            initialized=_get_bool(payload, "initialized"),
            sealed=_get_bool(payload, "sealed"),
            standby=_get_bool(payload, "standby"),
            server_time_utc=_get_int(payload, "server_time_utc"),
            version=_get_str(payload, "version"),
            cluster_name=_get_str(payload, "cluster_name"),
            cluster_id=_get_str(payload, "cluster_id"),
        )


@dataclass(frozen=True)
class LogicalResponse(VaultResponse):
    """Result of a read, write, list or delete on a secret path.

    ``data`` holds every value of the secret as a string (non-string
    JSON values are re-encoded as JSON); ``data_object`` holds the
    decoded values.

    Warning:
        The response does not know which secrets engine answered. A
        ``data`` object holding both a ``data`` object and a
        ``metadata`` key is taken for a KV version 2 read and its nested
        ``data`` is unwrapped. A KV version 1 secret whose own keys include
        these two is unwrapped as well. Read such a secret from the raw
        payload, ``response.json()["data"]``.

    Example:
        ```pycon
        >>> from vaultclient.response import RawResponse
        >>> from vaultclient.responses import LogicalResponse
        >>> raw = RawResponse(200, body=b'{"lease_duration": 60, "data": {"user": "bob", "port": 5432}}')
        >>> response = LogicalResponse.from_raw(raw, retries=1)
        >>> response.data
        {'user': 'bob', 'port': '5432'}
        >>> response.lease_duration, response.retries
        (60, 1)

        ```
    """

    data: dict[str, str] = field(default_factory=dict)
    data_object: dict[str, Any] = field(default_factory=dict)
    list_data: list[str] = field(default_factory=list)
    lease_id: str | None = None
    renewable: bool | None = None
    lease_duration: int | None = None

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        payload = rest_response.json()
        data = _get_dict(payload, "data")
        if isinstance(data.get("data"), dict) and "metadata" in data:
            data = data["data"]
        return cls(
            rest_response=rest_response,
            retries=retries,
            data={key: _to_text(value) for key, value in data.items()},
            data_object=dict(data),
            list_data=_get_str_list(data, "keys"),
            lease_id=_get_str(payload, "lease_id"),
            renewable=_get_bool(payload, "renewable"),
            lease_duration=_get_int(payload, "lease_duration"),
        )


@dataclass(frozen=True)
class AuthResponse(VaultResponse):
    """Result of a login or token renewal.

    Example:
        ```pycon
        >>> from vaultclient.response import RawResponse
        >>> from vaultclient.responses import AuthResponse
        >>> raw = RawResponse(200, body=b'{"auth": {"client_token": "s.xyz", "policies": ["default"]}}')
        >>> response = AuthResponse.from_raw(raw, retries=0)
        >>> response.auth_client_token, response.policies
        ('s.xyz', ['default'])

        ```
    """

    auth_client_token: str | None = None
    token_accessor: str | None = None
    policies: list[str] = field(default_factory=list)
    auth_lease_duration: int | None = None
    auth_renewable: bool | None = None
    app_id: str | None = None
    username: str | None = None

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        auth = _get_dict(rest_response.json(), "auth")
        metadata = _get_dict(auth, "metadata")
        return cls(
            rest_response=rest_response,
            retries=retries,
            auth_client_token=_get_str(auth, "client_token"),
            token_accessor=_get_str(auth, "accessor"),
            policies=_get_str_list(auth, "policies"),
            auth_lease_duration=_get_int(auth, "lease_duration"),
            auth_renewable=_get_bool(auth, "renewable"),
            app_id=_get_str(metadata, "app-id"),
            username=_get_str(metadata, "username"),
        )


@dataclass(frozen=True)
class LookupResponse(VaultResponse):
    """Result of ``auth/token/lookup-self``."""

    accessor: str | None = None
    display_name: str | None = None
    id: str | None = None
    num_uses: int | None = None
    path: str | None = None
    policies: list[str] = field(default_factory=list)
    renewable: bool | None = None
    ttl: int | None = None
    creation_ttl: int | None = None
    username: str | None = None

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        data = _get_dict(rest_response.json(), "data")
        return cls(
            rest_response=rest_response,
            retries=retries,
            accessor=_get_str(data, "accessor"),
            display_name=_get_str(data, "display_name"),
            id=_get_str(data, "id"),
            num_uses=_get_int(data, "num_uses"),
            path=_get_str(data, "path"),
            policies=_get_str_list(data, "policies"),
            renewable=_get_bool(data, "renewable"),
            ttl=_get_int(data, "ttl"),
            creation_ttl=_get_int(data, "creation_ttl"),
            username=_get_str(_get_dict(data, "meta"), "username"),
        )


@dataclass(frozen=True)
class SealResponse(VaultResponse):
    """Result of ``sys/seal-status``."""

    sealed: bool | None = None
    threshold: int | None = None
    number_of_shares: int | None = None
    progress: int | None = None

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        payload = rest_response.json()
        return cls(
            rest_response=rest_response,
            retries=retries,
            sealed=_get_bool(payload, "sealed"),
            threshold=_get_int(payload, "t"),
            number_of_shares=_get_int(payload, "n"),
            progress=_get_int(payload, "progress"),
        )
