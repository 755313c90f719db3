r"""Hooks called by the retry loop around every Vault call.

A hook receives a small dataclass describing the attempt and must not
raise. Hooks are plain callables stored on ``VaultConfig``:

- ``on_request``: before each attempt is sent
- ``on_retry``: after a failed attempt, before sleeping
- ``on_success``: once a response with an accepted status arrives
- ``on_failure``: once the retry budget is spent

Example:
    ```pycon
    >>> from vaultclient import Vault, VaultConfig
    >>> from vaultclient.callbacks import RetryInfo
    >>> def log_retry(info: RetryInfo) -> None:
    ...     print(f"{info.method} {info.url}: attempt {info.attempt}, status {info.status_code}")
    ...
    >>> config = VaultConfig(address="http://127.0.0.1:8200", max_retries=3, on_retry=log_retry)
    >>> response = Vault(config).debug().health()  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "FailureInfo",
    "RequestInfo",
    "ResponseInfo",
    "RetryInfo",
    "invoke_on_failure",
    "invoke_on_request",
    "invoke_on_retry",
    "invoke_on_success",
]

import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Callable

    from vaultclient.response import RawResponse


@dataclass
class RequestInfo:
    """Passed to ``on_request``.

    ``attempt`` counts from 1, so it ranges over
    ``1 .. max_retries + 1``.
    """

    url: str
    method: str
    attempt: int
    max_retries: int


@dataclass
class RetryInfo:
    """Passed to ``on_retry``.

    Attributes:
        url: The full request URL, ``/v1/`` prefix included.
        method: The HTTP verb.
        attempt: The attempt about to be made, counting from 1. The
            first retry is attempt 2.
        max_retries: The retry budget of the config.
        wait_time: Seconds the loop sleeps before the next attempt.
        error: The ``TransportError`` or ``ValidationError`` of the
            failed attempt.
        status_code: The rejected status code, ``None`` when no response
            arrived.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    wait_time: float
    error: Exception
    status_code: int | None


@dataclass
class ResponseInfo:
    """Passed to ``on_success``.

    ``total_time`` covers every attempt and every sleep, in seconds.
    """

    url: str
    method: str
    attempt: int
    max_retries: int
    response: RawResponse
    total_time: float


@dataclass
class FailureInfo:
    """Passed to ``on_failure`` with the ``TerminalError`` about to be
    raised."""

    url: str
    method: str
    attempt: int
    max_retries: int
    error: Exception
    status_code: int | None
    total_time: float


def invoke_on_request(
    on_request: Callable[[RequestInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
) -> None:
    """Call ``on_request``, if set, for the zero-based ``attempt``."""
    if on_request is not None:
        on_request(RequestInfo(url=url, method=method, attempt=attempt + 1, max_retries=max_retries))


def invoke_on_retry(
    on_retry: Callable[[RetryInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    sleep_time: float,
    error: Exception,
    status_code: int | None,
) -> None:
    """Call ``on_retry``, if set, after the zero-based ``attempt``
    failed.

    The hook sees the upcoming attempt, so ``attempt + 2``.
    """
    if on_retry is not None:
        on_retry(
            RetryInfo(
                url=url,
                method=method,
                attempt=attempt + 2,
                max_retries=max_retries,
                wait_time=sleep_time,
                error=error,
                status_code=status_code,
            )
        )


def invoke_on_success(
    on_success: Callable[[ResponseInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    response: RawResponse,
    start_time: float,
) -> None:
    """Call ``on_success``, if set, with the time elapsed since
    ``start_time``."""
    if on_success is not None:
        on_success(
            ResponseInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                response=response,
                total_time=time.time() - start_time,
            )
        )


def invoke_on_failure(
    on_failure: Callable[[FailureInfo], None] | None,
    *,
    url: str,
    method: str,
    attempt: int,
    max_retries: int,
    error: Exception,
    status_code: int | None,
    start_time: float,
) -> None:
    """Call ``on_failure``, if set, after the zero-based ``attempt`` spent
    the retry budget."""
    if on_failure is not None:
        on_failure(
            FailureInfo(
                url=url,
                method=method,
                attempt=attempt + 1,
                max_retries=max_retries,
                error=error,
                status_code=status_code,
                total_time=time.time() - start_time,
            )
        )
