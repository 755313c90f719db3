r"""Translate a logical Vault operation into a transport-ready request.

The builder is pure: it reads the immutable configuration and the
call's arguments and returns a fresh ``OperationRequest``. The retry
loop calls it again on every attempt.
"""

from __future__ import annotations

__all__ = ["API_PREFIX", "TOKEN_HEADER", "OperationRequest", "build_request", "stringify"]

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx

from vaultclient.core.validation import validate_address
from vaultclient.exceptions import BuildError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vaultclient.core.config import VaultConfig

API_PREFIX = "/v1/"

TOKEN_HEADER = "X-Vault-Token"


@dataclass(frozen=True)
class OperationRequest:
    """A fully resolved request, ready to hand to a transport.

    Attributes:
        method: The HTTP method (e.g. "GET", "POST").
        url: The absolute request URL.
        path: The operation path, relative to ``/v1/``.
        headers: The request headers.
        params: The query parameters. Absent optional arguments are
            never present here.
        json: Optional JSON body.
        ssl_pem_utf8: PEM trust material, passed through unchanged.
        ssl_verify: Certificate verification flag. ``None`` means the
            platform default.
        open_timeout: Connect timeout in seconds.
        read_timeout: Read timeout in seconds.
    """

    method: str
    url: str
    path: str
    headers: dict[str, str] = field(default_factory=dict)
    params: dict[str, str] = field(default_factory=dict)
    json: Any = None
    ssl_pem_utf8: str | None = None
    ssl_verify: bool | None = None
    open_timeout: float | None = None
    read_timeout: float | None = None


def stringify(value: Any) -> str:
    r"""Convert a query parameter value to its wire representation.

    Booleans are lowercased, everything else goes through ``str``.

    Example:
        ```pycon
        >>> from vaultclient.request import stringify
        >>> stringify(True), stringify(429), stringify("")
        ('true', '429', '')

        ```
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_request(
    config: VaultConfig,
    method: str,
    path: str,
    *,
    params: Mapping[str, Any | None] | None = None,
    json: Any = None,
) -> OperationRequest:
    r"""Build the request for one attempt of an operation.

    Args:
        config: The connection configuration.
        method: The HTTP method.
        path: The operation path relative to ``/v1/`` (e.g. ``"sys/health"``).
        params: Optional query parameters. A ``None`` value means the
            argument was not provided and the parameter is omitted; any
            other value, including an empty string, is sent.
        json: Optional JSON body.

    Returns:
        The request descriptor.

    Raises:
        BuildError: If the configured address is not a valid http(s) URL,
            or if the joined URL cannot be parsed (e.g. a path holding
            control characters).

    Example:
        ```pycon
        >>> from vaultclient.core.config import VaultConfig
        >>> from vaultclient.request import build_request
        >>> config = VaultConfig(address="http://127.0.0.1:8200", token="s.abc")
        >>> request = build_request(config, "GET", "sys/health", params={"standbyok": True, "activecode": None})
        >>> request.url
        'http://127.0.0.1:8200/v1/sys/health'
        >>> request.params
        {'standbyok': 'true'}
        >>> request.headers
        {'X-Vault-Token': 's.abc'}

        ```
    """
    validate_address(config.address)
    url = config.address.rstrip("/") + API_PREFIX + path.lstrip("/")
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        msg = f"invalid Vault path {path!r}: {exc}"
        raise BuildError(msg, method=method.upper(), url=url, cause=exc) from exc
    headers: dict[str, str] = {}
    if config.token is not None:
        headers[TOKEN_HEADER] = config.token
    query: dict[str, str] = {}
    for name, value in (params or {}).items():
        if value is not None:
            query[name] = stringify(value)
    return OperationRequest(
        method=method.upper(),
        url=url,
        path=path,
        headers=headers,
        params=query,
        json=json,
        ssl_pem_utf8=config.ssl_pem_utf8,
        ssl_verify=config.ssl_verify,
        open_timeout=config.open_timeout,
        read_timeout=config.read_timeout,
    )
