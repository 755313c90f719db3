r"""Exception hierarchy raised by the Vault client.

Every failed call surfaces exactly one of these errors. ``BuildError``
is raised before any request leaves the process, ``TransportError`` and
``ValidationError`` are raised by a single attempt and absorbed by the
retry loop, and ``TerminalError`` is what callers see once the retry
budget is spent.
"""

from __future__ import annotations

__all__ = [
    "BuildError",
    "TerminalError",
    "TransportError",
    "ValidationError",
    "VaultError",
]


class VaultError(Exception):
    """Base class for all errors raised by the Vault client.

    Args:
        message: Human-readable description of the failure.
        method: The HTTP method of the failed request, if known.
        url: The URL of the failed request, if known.
        status_code: The HTTP status code observed, if any.
        cause: The underlying exception, if any.

    Example:
        ```pycon
        >>> from vaultclient.exceptions import VaultError
        >>> error = VaultError("boom", method="GET", url="https://vault:8200/v1/sys/health")
        >>> error.method
        'GET'
        >>> str(error)
        'boom'

        ```
    """

    def __init__(
        self,
        message: str,
        *,
        method: str | None = None,
        url: str | None = None,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.method = method
        self.url = url
        self.status_code = status_code
        self.cause = cause


class BuildError(VaultError):
    """Raised when a request cannot be built from the configuration.

    A malformed configuration fails identically on every attempt, so
    this error is never retried.
    """


class TransportError(VaultError):
    """Raised when the HTTP exchange itself fails (connection refused,
    timeout, TLS failure, malformed response)."""


class ValidationError(VaultError):
    """Raised when a response arrives with a status code outside the
    operation's accepted set.

    Only the status code is kept; the body is never inspected.
    """


class TerminalError(VaultError):
    """Raised once the retry budget is exhausted.

    Args:
        message: Human-readable description of the failure.
        attempts: The total number of attempts performed.
        **kwargs: See :class:`VaultError`. ``cause`` holds the last
            ``TransportError`` or ``ValidationError``.

    Example:
        ```pycon
        >>> from vaultclient.exceptions import TerminalError, ValidationError
        >>> last = ValidationError("bad status", status_code=503)
        >>> error = TerminalError("giving up", attempts=3, cause=last, status_code=503)
        >>> error.attempts, error.status_code
        (3, 503)

        ```
    """

    def __init__(self, message: str, *, attempts: int, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.attempts = attempts
