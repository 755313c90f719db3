r"""Raw responses, status validation and the caller-facing result type.

``validate_status`` decides success from the status code alone and never
looks at the body. ``VaultResponse`` wraps an accepted response together
with the number of retries that were needed, and tolerates empty or
unexpected bodies so that a success decided by the status code is never
turned into an error by payload parsing.
"""

from __future__ import annotations

__all__ = ["RawResponse", "VaultResponse", "validate_status"]

import json
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from vaultclient.exceptions import ValidationError

if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet
    from typing import Self

    import httpx

logger: logging.Logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawResponse:
    """An HTTP response as returned by the transport.

    Attributes:
        status_code: The HTTP status code.
        headers: The response headers.
        body: The raw response body.
    """

    status_code: int
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def from_httpx(cls, response: httpx.Response) -> RawResponse:
        """Create a raw response from an ``httpx.Response`` whose body has
        been read."""
        return cls(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )

    def json(self) -> dict[str, Any]:
        r"""Decode the body as a JSON object.

        Returns:
            The decoded object, or an empty dict if the body is empty,
            is not valid JSON, or is not a JSON object.

        Example:
            ```pycon
            >>> from vaultclient.response import RawResponse
            >>> RawResponse(200, body=b'{"sealed": false}').json()
            {'sealed': False}
            >>> RawResponse(204).json()
            {}

            ```
        """
        if not self.body:
            return {}
        try:
            payload = json.loads(self.body)
        except ValueError:
            logger.debug(f"Ignoring non-JSON response body ({len(self.body)} bytes)")
            return {}
        return payload if isinstance(payload, dict) else {}


def validate_status(
    response: RawResponse,
    accepted: AbstractSet[int],
    *,
    method: str,
    url: str,
) -> None:
    """Check a response status code against the accepted status codes.

    Args:
        response: The response to validate.
        accepted: The status codes considered a success for this call.
        method: The HTTP method name, used in error messages.
        url: The URL that was requested, used in error messages.

    Raises:
        ValidationError: If the status code is not accepted. The error
            carries the status code but not the body.

    Example:
        ```pycon
        >>> from vaultclient.response import RawResponse, validate_status
        >>> validate_status(RawResponse(200), {200}, method="GET", url="http://vault/v1/sys/health")
        >>> validate_status(RawResponse(503), {200}, method="GET", url="http://vault/v1/sys/health")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        vaultclient.exceptions.ValidationError: Vault responded with HTTP status code: 503

        ```
    """
    if response.status_code in accepted:
        return
    logger.debug(f"{method} request to {url} returned unaccepted status {response.status_code}")
    raise ValidationError(
        f"Vault responded with HTTP status code: {response.status_code}",
        method=method,
        url=url,
        status_code=response.status_code,
    )


@dataclass(frozen=True)
class VaultResponse:
    """The result of a successful call.

    Attributes:
        rest_response: The accepted raw response.
        retries: The number of attempts beyond the first that were
            needed (0 when the first attempt succeeded).
    """

    rest_response: RawResponse
    retries: int = 0

    @classmethod
    def from_raw(cls, rest_response: RawResponse, retries: int) -> Self:
        """Build the result for an accepted response.

        Subclasses extract their fields from the JSON body. Extraction
        never raises: fields missing from the body are ``None``.
        """
        return cls(rest_response=rest_response, retries=retries)

    @property
    def status_code(self) -> int:
        return self.rest_response.status_code

    @property
    def headers(self) -> dict[str, str]:
        return self.rest_response.headers

    @property
    def body(self) -> bytes:
        return self.rest_response.body

    def json(self) -> dict[str, Any]:
        """Decode the body as a JSON object, or return an empty dict."""
        return self.rest_response.json()
