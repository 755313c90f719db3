r"""Retry package implementing class-based composition pattern.

Public API:
    - RetryExecutor: Drives the attempt loop of every operation
    - RetryStrategy: Strategy for calculating retry delays
    - RetryDecider: Logic for accepting responses and absorbing failures
    - CallbackManager: Manager for callback invocations
"""

from __future__ import annotations

__all__ = ["RETRYABLE_ERRORS", "CallbackManager", "RetryDecider", "RetryExecutor", "RetryStrategy"]

from vaultclient.retry.decider import RETRYABLE_ERRORS, RetryDecider
from vaultclient.retry.executor import RetryExecutor
from vaultclient.retry.manager import CallbackManager
from vaultclient.retry.strategy import RetryStrategy
