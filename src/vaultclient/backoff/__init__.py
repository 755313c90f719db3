r"""Retry delay policies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "ConstantBackoff"]

from vaultclient.backoff.base import BaseBackoffStrategy
from vaultclient.backoff.constant import ConstantBackoff
