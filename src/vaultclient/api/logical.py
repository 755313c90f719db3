r"""Operations on secret paths (``/v1/secret/...`` and other mounts)."""

from __future__ import annotations

__all__ = ["Logical"]

from typing import TYPE_CHECKING, Any

from vaultclient.core.config import (
    DEFAULT_ACCEPTED_STATUS_CODES,
    DELETE_ACCEPTED_STATUS_CODES,
    WRITE_ACCEPTED_STATUS_CODES,
)
from vaultclient.responses import LogicalResponse

if TYPE_CHECKING:
    from collections.abc import Mapping

    from vaultclient.retry import RetryExecutor


class Logical:
    r"""Read, write, list and delete secrets.

    Not meant to be constructed directly: use ``Vault.logical()``.

    Example:
        ```pycon
        >>> from vaultclient import Vault, VaultConfig
        >>> vault = Vault(VaultConfig(address="http://127.0.0.1:8200", token="s.abc"))
        >>> vault.logical().write("secret/hello", {"value": "world"})  # doctest: +SKIP
        >>> vault.logical().read("secret/hello").data["value"]  # doctest: +SKIP
        'world'

        ```
    """

    def __init__(self, executor: RetryExecutor) -> None:
        self._executor = executor

    def read(self, path: str) -> LogicalResponse:
        """Read the secret stored at ``path``.

        KV version 2 payloads are unwrapped, see ``LogicalResponse``.
        """
        return self._executor.execute(
            "GET",
            path,
            accepted=DEFAULT_ACCEPTED_STATUS_CODES,
            response_cls=LogicalResponse,
        )

    def write(self, path: str, data: Mapping[str, Any] | None = None) -> LogicalResponse:
        """Write ``data`` to ``path``.

        Vault answers 200 when the endpoint returns data (for example
        ``auth/approle/role/<name>/secret-id``) and 204 otherwise; both
        are accepted.

        Args:
            path: The secret path.
            data: The key/value pairs to write. ``None`` sends an empty
                object.

        Returns:
            The write response.
        """
        return self._executor.execute(
            "POST",
            path,
            json=dict(data or {}),
            accepted=WRITE_ACCEPTED_STATUS_CODES,
            response_cls=LogicalResponse,
        )

    def list(self, path: str) -> list[str]:
        """List the keys stored under ``path``.

        Returns:
            The key names. Sub-paths end with ``/``.
        """
        response = self._executor.execute(
            "GET",
            path,
            params={"list": True},
            accepted=DEFAULT_ACCEPTED_STATUS_CODES,
            response_cls=LogicalResponse,
        )
        return response.list_data

    def delete(self, path: str) -> LogicalResponse:
        """Delete the secret stored at ``path``."""
        return self._executor.execute(
            "DELETE",
            path,
            accepted=DELETE_ACCEPTED_STATUS_CODES,
            response_cls=LogicalResponse,
        )
