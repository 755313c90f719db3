r"""Operations on ``/v1/sys/health``."""

from __future__ import annotations

__all__ = ["Debug"]

from typing import TYPE_CHECKING

from vaultclient.core.config import HEALTH_ACCEPTED_STATUS_CODES, accepted_status_codes
from vaultclient.responses import HealthResponse

if TYPE_CHECKING:
    from vaultclient.retry import RetryExecutor


class Debug:
    r"""Health checks of a Vault server.

    Not meant to be constructed directly: use ``Vault.debug()``.

    Args:
        executor: The executor shared by the client.
    """

    def __init__(self, executor: RetryExecutor) -> None:
        self._executor = executor

    def health(
        self,
        standby_ok: bool | None = None,
        active_code: int | None = None,
        standby_code: int | None = None,
        sealed_code: int | None = None,
    ) -> HealthResponse:
        r"""Return the health status of the Vault server.

        Vault answers ``sys/health`` with a status code that encodes the
        node state (200 active, 429 standby, 500 sealed), so all three
        are accepted. Any code overridden through the optional arguments
        is accepted as well.

        Warning:
            Some overridden codes (for example ``active_code=204``) make
            Vault answer with an empty body. The returned response then
            has ``None`` in its extracted fields and ``status_code`` must
            be checked instead.

        Args:
            standby_ok: Return the active status code from a standby node.
            active_code: Status code returned by an active node.
            standby_code: Status code returned by a standby node.
            sealed_code: Status code returned by a sealed node.

        Returns:
            The health response.

        Raises:
            TerminalError: If every attempt failed.

        Example:
            ```pycon
            >>> from vaultclient import Vault, VaultConfig
            >>> vault = Vault(VaultConfig(address="http://127.0.0.1:8200"))
            >>> response = vault.debug().health(standby_ok=True)  # doctest: +SKIP
            >>> response.sealed  # doctest: +SKIP
            False

            ```
        """
        return self._executor.execute(
            "GET",
            "sys/health",
            params={
                "standbyok": standby_ok,
                "activecode": active_code,
                "standbycode": standby_code,
                "sealedcode": sealed_code,
            },
            accepted=accepted_status_codes(
                HEALTH_ACCEPTED_STATUS_CODES, active_code, standby_code, sealed_code
            ),
            response_cls=HealthResponse,
        )
