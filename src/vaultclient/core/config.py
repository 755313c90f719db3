r"""Connection configuration and defaults for the Vault client.

This module provides configuration constants, the per-family sets of
accepted HTTP status codes, and the immutable ``VaultConfig`` object
shared by every operation of a client instance.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ACCEPTED_STATUS_CODES",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_INTERVAL_MILLISECONDS",
    "DEFAULT_TIMEOUT",
    "DELETE_ACCEPTED_STATUS_CODES",
    "HEALTH_ACCEPTED_STATUS_CODES",
    "WRITE_ACCEPTED_STATUS_CODES",
    "VaultConfig",
    "accepted_status_codes",
    "read_pem_file",
]

import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import TYPE_CHECKING, Any

from vaultclient.core.validation import validate_retry_params, validate_timeout
from vaultclient.exceptions import BuildError

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from vaultclient.callbacks import FailureInfo, RequestInfo, ResponseInfo, RetryInfo


# Default open (connect) and read timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Default maximum number of retry attempts
# Total attempts = max_retries + 1 (initial attempt)
DEFAULT_MAX_RETRIES = 0

# Default fixed delay between two attempts
DEFAULT_RETRY_INTERVAL_MILLISECONDS = 1000

# Status codes accepted by most read operations
DEFAULT_ACCEPTED_STATUS_CODES = frozenset({200})

# sys/health answers with a status code describing the node state
# 200: initialized, unsealed and active
# 429: unsealed and standby
# 500: sealed (or not initialized)
HEALTH_ACCEPTED_STATUS_CODES = frozenset({200, 429, 500})

# Writes answer 200 with a payload, or 204 without one
WRITE_ACCEPTED_STATUS_CODES = frozenset({200, 204})

DELETE_ACCEPTED_STATUS_CODES = frozenset({204})

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def accepted_status_codes(defaults: frozenset[int], *overrides: int | None) -> frozenset[int]:
    """Merge caller overrides into a family's default accepted status
    codes.

    Args:
        defaults: The operation family's default accepted status codes.
        *overrides: Extra status codes. ``None`` values are ignored.

    Returns:
        The accepted status codes for one call.

    Example:
        ```pycon
        >>> from vaultclient.core.config import (
        ...     HEALTH_ACCEPTED_STATUS_CODES,
        ...     accepted_status_codes,
        ... )
        >>> sorted(accepted_status_codes(HEALTH_ACCEPTED_STATUS_CODES, 204, None))
        [200, 204, 429, 500]

        ```
    """
    return defaults | {code for code in overrides if code is not None}


def read_pem_file(path: str | os.PathLike[str]) -> str:
    """Read PEM-encoded trust material from a file.

    Args:
        path: The path to the PEM file.

    Returns:
        The UTF-8 contents of the file.

    Raises:
        BuildError: If the file cannot be read.
    """
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        msg = f"unable to read PEM file {os.fspath(path)!r}: {exc}"
        raise BuildError(msg, cause=exc) from exc


@dataclass(frozen=True)
class VaultConfig:
    """Connection configuration for a Vault client.

    The configuration is immutable: it is built once and shared
    read-only by every operation, including operations running
    concurrently on other threads. Use :meth:`merge` to derive a
    modified copy.

    Args:
        address: Base address of the Vault server, without the ``/v1``
            prefix (e.g. ``"https://vault.example.com:8200"``).
        token: Optional token sent in the ``X-Vault-Token`` header.
        open_timeout: Seconds to wait while opening a connection.
        read_timeout: Seconds to wait for response data.
        ssl_pem_utf8: Optional PEM-encoded certificates to trust.
        ssl_verify: Whether to verify the server certificate. ``None``
            uses the platform default (verify).
            Both TLS fields apply to the short-lived clients the default
            transport opens. ``Vault`` refuses them when an
            ``httpx.Client`` is injected.
        max_retries: Maximum number of retry attempts. Must be >= 0.
        retry_interval_milliseconds: Fixed delay between attempts.
            Must be >= 0.
        on_request: Optional callback called before each attempt.
        on_retry: Optional callback called before each retry delay.
        on_success: Optional callback called when a call succeeds.
        on_failure: Optional callback called when retries are exhausted.

    Example:
        ```pycon
        >>> from vaultclient.core.config import VaultConfig
        >>> config = VaultConfig(address="https://vault.example.com:8200", token="s.abc")
        >>> config.max_retries
        0
        >>> merged = config.merge(max_retries=5)
        >>> merged.max_retries
        5
        >>> config.max_retries  # Original unchanged
        0

        ```
    """

    address: str
    token: str | None = None
    open_timeout: float = DEFAULT_TIMEOUT
    read_timeout: float = DEFAULT_TIMEOUT
    ssl_pem_utf8: str | None = None
    ssl_verify: bool | None = None
    max_retries: int = DEFAULT_MAX_RETRIES
    retry_interval_milliseconds: int = DEFAULT_RETRY_INTERVAL_MILLISECONDS
    on_request: Callable[[RequestInfo], None] | None = None
    on_retry: Callable[[RetryInfo], None] | None = None
    on_success: Callable[[ResponseInfo], None] | None = None
    on_failure: Callable[[FailureInfo], None] | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout("open_timeout", self.open_timeout)
        validate_timeout("read_timeout", self.read_timeout)
        validate_retry_params(
            max_retries=self.max_retries,
            retry_interval_milliseconds=self.retry_interval_milliseconds,
        )

    def __repr__(self) -> str:
        token = None if self.token is None else "***"
        return (
            f"{self.__class__.__qualname__}(address={self.address!r}, token={token!r}, "
            f"open_timeout={self.open_timeout}, read_timeout={self.read_timeout}, "
            f"ssl_verify={self.ssl_verify}, max_retries={self.max_retries}, "
            f"retry_interval_milliseconds={self.retry_interval_milliseconds})"
        )

    @property
    def retry_interval(self) -> float:
        """The fixed delay between two attempts, in seconds."""
        return self.retry_interval_milliseconds / 1000

    def merge(self, **overrides: Any) -> VaultConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new VaultConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from vaultclient.core.config import VaultConfig
            >>> config = VaultConfig(address="http://127.0.0.1:8200")
            >>> config.merge(token="s.abc", ssl_verify=None).token
            's.abc'

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None, **overrides: Any
    ) -> VaultConfig:
        """Create a config from ``VAULT_*`` environment variables.

        Recognized variables are ``VAULT_ADDR``, ``VAULT_TOKEN``,
        ``VAULT_OPEN_TIMEOUT``, ``VAULT_READ_TIMEOUT``, ``VAULT_SSL_CERT``
        (path to a PEM file), ``VAULT_SSL_VERIFY``, ``VAULT_MAX_RETRIES``
        and ``VAULT_RETRY_INTERVAL_MILLISECONDS``. Non-None keyword
        overrides take precedence over the environment.

        Args:
            environ: The mapping to read from. Defaults to ``os.environ``.
            **overrides: Explicit values for any ``VaultConfig`` field.

        Returns:
            The configuration.

        Raises:
            BuildError: If no address is available, or if a variable
                holds a malformed value.

        Example:
            ```pycon
            >>> from vaultclient.core.config import VaultConfig
            >>> env = {"VAULT_ADDR": "http://127.0.0.1:8200", "VAULT_MAX_RETRIES": "3"}
            >>> config = VaultConfig.from_env(env)
            >>> config.address, config.max_retries
            ('http://127.0.0.1:8200', 3)

            ```
        """
        environ = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if "VAULT_ADDR" in environ:
            values["address"] = environ["VAULT_ADDR"]
        if "VAULT_TOKEN" in environ:
            values["token"] = environ["VAULT_TOKEN"]
        if "VAULT_OPEN_TIMEOUT" in environ:
            values["open_timeout"] = _parse_number(environ, "VAULT_OPEN_TIMEOUT", float)
        if "VAULT_READ_TIMEOUT" in environ:
            values["read_timeout"] = _parse_number(environ, "VAULT_READ_TIMEOUT", float)
        if "VAULT_SSL_CERT" in environ:
            values["ssl_pem_utf8"] = read_pem_file(environ["VAULT_SSL_CERT"])
        if "VAULT_SSL_VERIFY" in environ:
            values["ssl_verify"] = _parse_bool(environ, "VAULT_SSL_VERIFY")
        if "VAULT_MAX_RETRIES" in environ:
            values["max_retries"] = _parse_number(environ, "VAULT_MAX_RETRIES", int)
        if "VAULT_RETRY_INTERVAL_MILLISECONDS" in environ:
            values["retry_interval_milliseconds"] = _parse_number(
                environ, "VAULT_RETRY_INTERVAL_MILLISECONDS", int
            )
        values.update({k: v for k, v in overrides.items() if v is not None})
        if not values.get("address"):
            msg = "no Vault address configured (set VAULT_ADDR or pass address=...)"
            raise BuildError(msg)
        return cls(**values)


def _parse_number(environ: Mapping[str, str], name: str, kind: type) -> Any:
    raw = environ[name]
    try:
        return kind(raw.strip())
    except ValueError as exc:
        msg = f"{name} must be a valid {kind.__name__}, got {raw!r}"
        raise BuildError(msg, cause=exc) from exc


def _parse_bool(environ: Mapping[str, str], name: str) -> bool:
    raw = environ[name].strip().lower()
    if raw in _TRUE_VALUES:
        return True
    if raw in _FALSE_VALUES:
        return False
    msg = f"{name} must be a boolean, got {environ[name]!r}"
    raise BuildError(msg)
