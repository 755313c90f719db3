r"""Execute one HTTP exchange for an ``OperationRequest`` over httpx.

The transport performs a single attempt and never retries. Any failure
of the exchange itself (connection refused, timeout, TLS failure,
malformed response) is reported as ``TransportError`` so that the retry
loop can tell it apart from a rejected status code.
"""

from __future__ import annotations

__all__ = ["HttpxTransport", "Transport", "resolve_verify"]

import logging
import ssl
from typing import TYPE_CHECKING, Protocol

import httpx

from vaultclient.exceptions import BuildError, TransportError
from vaultclient.response import RawResponse

if TYPE_CHECKING:
    from vaultclient.request import OperationRequest

logger: logging.Logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Contract of the component that performs one HTTP exchange."""

    def invoke(self, request: OperationRequest) -> RawResponse:
        """Perform the request and return the raw response.

        Raises:
            TransportError: If the exchange fails before a complete
                response is received.
        """


def resolve_verify(request: OperationRequest) -> ssl.SSLContext | bool:
    r"""Map the request TLS settings to httpx's ``verify`` argument.

    * ``ssl_verify is False`` disables verification.
    * PEM trust material, when present, replaces the default CA bundle.
    * Otherwise the platform default verification is used.

    Args:
        request: The request whose TLS settings are resolved.

    Returns:
        ``False``, ``True`` or an ``ssl.SSLContext`` trusting the PEM
        certificates.

    Raises:
        BuildError: If the PEM material cannot be loaded.
    """
    if request.ssl_verify is False:
        return False
    if request.ssl_pem_utf8 is None:
        return True
    try:
        return ssl.create_default_context(cadata=request.ssl_pem_utf8)
    except (ssl.SSLError, ValueError) as exc:
        msg = f"unable to load PEM trust material: {exc}"
        raise BuildError(msg, method=request.method, url=request.url, cause=exc) from exc


class HttpxTransport:
    r"""Transport built on ``httpx``.

    Without a client, every invocation opens a short-lived
    ``httpx.Client`` configured from the request TLS settings, so no
    state is shared between calls. With a client, the client's own TLS
    configuration and connection pool are used and only the timeouts
    are taken from the request.

    Args:
        client: Optional ``httpx.Client`` to send requests with.

    Example:
        ```pycon
        >>> import httpx
        >>> from vaultclient.core.config import VaultConfig
        >>> from vaultclient.request import build_request
        >>> from vaultclient.transport import HttpxTransport
        >>> client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        >>> transport = HttpxTransport(client=client)
        >>> request = build_request(VaultConfig(address="http://vault:8200"), "GET", "sys/health")
        >>> transport.invoke(request).status_code
        200

        ```
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client | None:
        return self._client

    def invoke(self, request: OperationRequest) -> RawResponse:
        timeout = httpx.Timeout(request.read_timeout, connect=request.open_timeout)
        try:
            if self._client is not None:
                response = self._send(self._client, request, timeout)
            else:
                with httpx.Client(verify=resolve_verify(request), timeout=timeout) as client:
                    response = self._send(client, request, timeout)
        except httpx.TimeoutException as exc:
            logger.debug(f"{request.method} request to {request.url} timed out: {exc}")
            msg = f"{request.method} request to {request.url} timed out: {exc}"
            raise TransportError(msg, method=request.method, url=request.url, cause=exc) from exc
        except (httpx.RequestError, httpx.StreamError) as exc:
            error_type = type(exc).__name__
            logger.debug(f"{request.method} request to {request.url} encountered {error_type}: {exc}")
            msg = f"{request.method} request to {request.url} failed: {error_type}: {exc}"
            raise TransportError(msg, method=request.method, url=request.url, cause=exc) from exc
        return RawResponse.from_httpx(response)

    @staticmethod
    def _send(
        client: httpx.Client, request: OperationRequest, timeout: httpx.Timeout
    ) -> httpx.Response:
        return client.request(
            request.method,
            request.url,
            params=request.params,
            headers=request.headers,
            json=request.json,
            timeout=timeout,
        )
