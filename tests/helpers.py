r"""Shared test helpers.

This module contains common test infrastructure used across multiple
test files to reduce duplication.
"""

from __future__ import annotations

__all__ = [
    "TEST_ADDRESS",
    "create_raw_response",
    "create_transport",
    "mock_httpx_client",
]

import json
from typing import TYPE_CHECKING, Any
from unittest.mock import Mock

import httpx

from vaultclient.response import RawResponse
from vaultclient.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Callable

TEST_ADDRESS = "https://vault.example.com:8200"


def create_raw_response(status_code: int = 200, payload: Any = None, body: bytes = b"") -> RawResponse:
    """Create a raw response, with ``payload`` encoded as the JSON body if
    given."""
    if payload is not None:
        body = json.dumps(payload).encode()
    return RawResponse(status_code=status_code, headers={}, body=body)


def create_transport(*outcomes: RawResponse | Exception) -> Mock:
    """Create a mock transport returning or raising ``outcomes`` in
    order, one per attempt."""
    transport = Mock(spec=HttpxTransport)
    transport.invoke.side_effect = list(outcomes)
    return transport


def mock_httpx_client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    """Create an ``httpx.Client`` whose requests are answered by
    ``handler``."""
    return httpx.Client(transport=httpx.MockTransport(handler))
