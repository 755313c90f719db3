r"""Fixed-interval retry delay policy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from vaultclient.backoff.base import BaseBackoffStrategy


class ConstantBackoff(BaseBackoffStrategy):
    """Fixed delay policy.

    Returns the same delay for every retry, regardless of the attempt
    number. The worst-case latency of a call is therefore predictable:
    ``max_retries * (attempt latency + delay)`` on top of the first
    attempt. There is deliberately no growth and no jitter.

    Args:
        delay: The fixed delay in seconds (default: 1.0).

    Example:
        ```pycon
        >>> from vaultclient.backoff import ConstantBackoff
        >>> backoff = ConstantBackoff(delay=0.25)
        >>> backoff.calculate(0)
        0.25
        >>> backoff.calculate(10)
        0.25
        >>> ConstantBackoff.from_milliseconds(1500).delay
        1.5

        ```
    """

    def __init__(self, delay: float = 1.0) -> None:
        if delay < 0:
            msg = f"delay must be non-negative, got {delay}"
            raise ValueError(msg)

        self.delay = delay

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(delay={self.delay})"

    @classmethod
    def from_milliseconds(cls, milliseconds: int) -> ConstantBackoff:
        """Create a policy from a delay expressed in milliseconds."""
        return cls(delay=milliseconds / 1000)

    def calculate(self, attempt: int) -> float:  # noqa: ARG002
        """Calculate constant delay.

        Args:
            attempt: The failed attempt number (0-indexed, unused).

        Returns:
            The fixed delay value.
        """
        return self.delay
