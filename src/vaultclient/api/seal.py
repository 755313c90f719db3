r"""Operations on ``/v1/sys/seal-status``."""

from __future__ import annotations

__all__ = ["Seal"]

from typing import TYPE_CHECKING

from vaultclient.responses import SealResponse

if TYPE_CHECKING:
    from vaultclient.retry import RetryExecutor


class Seal:
    """Seal status of a Vault server."""

    def __init__(self, executor: RetryExecutor) -> None:
        self._executor = executor

    def seal_status(self) -> SealResponse:
        """Return the seal status and unseal progress of the server."""
        return self._executor.execute("GET", "sys/seal-status", response_cls=SealResponse)
