r"""Retry strategy for calculating the delay between attempts.

This module provides the RetryStrategy class for calculating retry
delays.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging
from typing import TYPE_CHECKING

from vaultclient.backoff import ConstantBackoff

if TYPE_CHECKING:
    from vaultclient.backoff import BaseBackoffStrategy

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating the delay before the next attempt.

    Args:
        backoff_strategy: Delay policy. Defaults to a one second
            ``ConstantBackoff``.

    Attributes:
        backoff_strategy: Delay policy.

    Example:
        ```pycon
        >>> from vaultclient.backoff import ConstantBackoff
        >>> from vaultclient.retry import RetryStrategy
        >>> strategy = RetryStrategy(ConstantBackoff.from_milliseconds(10))
        >>> strategy.calculate_delay(0), strategy.calculate_delay(1)
        (0.01, 0.01)

        ```
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy | None = None) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else ConstantBackoff()
        )

    def calculate_delay(self, attempt: int) -> float:
        """Calculate delay before next retry.

        Args:
            attempt: The failed attempt number (0-indexed).

        Returns:
            Sleep time in seconds.
        """
        sleep_time = self.backoff_strategy.calculate(attempt)
        logger.debug(f"Waiting {sleep_time:.3f}s before retry")
        return sleep_time
