r"""Abstract base class for retry delay policies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for retry delay policies.

    A policy determines how long to wait before the next attempt of a
    failed call, based on the attempt number.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the delay before a given retry.

        Args:
            attempt: The failed attempt number (0-indexed). For example,
                attempt=0 precedes the first retry.

        Returns:
            The delay in seconds before the next attempt.
        """
