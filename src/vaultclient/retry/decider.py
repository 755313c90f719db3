r"""Decision logic for accepting responses and absorbing failures.

This module provides the RetryDecider class that holds the accepted
status codes of one call and decides which failures the retry loop may
absorb.
"""

from __future__ import annotations

__all__ = ["RETRYABLE_ERRORS", "RetryDecider"]

from typing import TYPE_CHECKING

from vaultclient.exceptions import TransportError, ValidationError
from vaultclient.response import validate_status

if TYPE_CHECKING:
    from collections.abc import Set as AbstractSet

    from vaultclient.response import RawResponse

# Failures of a single attempt that are retried. Anything else, including
# BuildError and interrupts, propagates immediately.
RETRYABLE_ERRORS = (TransportError, ValidationError)


class RetryDecider:
    """Decides whether an attempt succeeded and whether to retry.

    Args:
        accepted: The status codes considered a success.

    Example:
        ```pycon
        >>> from vaultclient.exceptions import BuildError, TransportError
        >>> from vaultclient.retry import RetryDecider
        >>> decider = RetryDecider(frozenset({200}))
        >>> decider.should_retry(TransportError("connection refused"), attempt=0, max_retries=1)
        True
        >>> decider.should_retry(TransportError("connection refused"), attempt=1, max_retries=1)
        False
        >>> decider.should_retry(BuildError("bad address"), attempt=0, max_retries=1)
        False

        ```
    """

    def __init__(self, accepted: AbstractSet[int]) -> None:
        self.accepted = frozenset(accepted)

    def check_response(self, response: RawResponse, *, method: str, url: str) -> None:
        """Validate the response status code.

        Raises:
            ValidationError: If the status code is not accepted.
        """
        validate_status(response, self.accepted, method=method, url=url)

    def should_retry(self, error: BaseException, attempt: int, max_retries: int) -> bool:
        """Determine if a failed attempt should be retried.

        Args:
            error: The failure of the attempt.
            attempt: The failed attempt number (0-indexed).
            max_retries: Maximum number of retries.

        Returns:
            ``True`` if the error is retryable and budget remains.
        """
        return isinstance(error, RETRYABLE_ERRORS) and attempt < max_retries
