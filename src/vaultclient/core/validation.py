r"""Parameter validation utilities for the connection configuration.

This module provides validation functions to ensure configuration
values meet their constraints before any request is built.
"""

from __future__ import annotations

__all__ = ["validate_address", "validate_retry_params", "validate_timeout"]

import math

import httpx

from vaultclient.exceptions import BuildError


def validate_timeout(name: str, timeout: float) -> None:
    """Validate a timeout parameter.

    Args:
        name: The parameter name, used in the error message.
        timeout: Maximum seconds to wait. Must be finite and > 0.

    Raises:
        ValueError: If timeout is <= 0, infinite or NaN.

    Example:
        ```pycon
        >>> from vaultclient.core.validation import validate_timeout
        >>> validate_timeout("open_timeout", 10.0)
        >>> validate_timeout("open_timeout", 0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: open_timeout must be > 0, got 0

        ```
    """
    if not math.isfinite(timeout) or timeout <= 0:
        msg = f"{name} must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(max_retries: int, retry_interval_milliseconds: int) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retry attempts. Must be >= 0. A
            value of 0 means no retries (only the initial attempt).
        retry_interval_milliseconds: Fixed delay between attempts.
            Must be >= 0.

    Raises:
        ValueError: If either value is negative.

    Example:
        ```pycon
        >>> from vaultclient.core.validation import validate_retry_params
        >>> validate_retry_params(max_retries=3, retry_interval_milliseconds=1000)
        >>> validate_retry_params(max_retries=-1, retry_interval_milliseconds=0)  # doctest: +SKIP

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if retry_interval_milliseconds < 0:
        msg = f"retry_interval_milliseconds must be >= 0, got {retry_interval_milliseconds}"
        raise ValueError(msg)


def validate_address(address: str) -> httpx.URL:
    """Parse and validate the base address of the Vault server.

    Args:
        address: The base address, e.g. ``"https://vault.example.com:8200"``.

    Returns:
        The parsed URL.

    Raises:
        BuildError: If the address is not an absolute http(s) URL, or
            carries credentials, a query string or a fragment.

    Example:
        ```pycon
        >>> from vaultclient.core.validation import validate_address
        >>> validate_address("https://vault.example.com:8200").host
        'vault.example.com'

        ```
    """
    try:
        url = httpx.URL(address)
    except (httpx.InvalidURL, TypeError) as exc:
        msg = f"invalid Vault address {address!r}: {exc}"
        raise BuildError(msg, cause=exc) from exc
    if url.scheme not in ("http", "https") or not url.host:
        msg = f"invalid Vault address {address!r}: expected an absolute http(s) URL"
        raise BuildError(msg)
    if url.userinfo or url.query or url.fragment:
        msg = f"invalid Vault address {address!r}: credentials, query and fragment are not allowed"
        raise BuildError(msg)
    return url
