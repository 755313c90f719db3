r"""Operations on auth backends (``/v1/auth/...``)."""

from __future__ import annotations

__all__ = ["Auth"]

from typing import TYPE_CHECKING

from vaultclient.core.config import DELETE_ACCEPTED_STATUS_CODES
from vaultclient.response import VaultResponse
from vaultclient.responses import AuthResponse, LookupResponse

if TYPE_CHECKING:
    from vaultclient.retry import RetryExecutor


class Auth:
    r"""Log in with an auth backend and manage the current token.

    Not meant to be constructed directly: use ``Vault.auth()``.

    Example:
        ```pycon
        >>> from vaultclient import Vault, VaultConfig
        >>> vault = Vault(VaultConfig(address="http://127.0.0.1:8200"))
        >>> token = vault.auth().login_by_app_role(role_id, secret_id).auth_client_token  # doctest: +SKIP

        ```
    """

    def __init__(self, executor: RetryExecutor) -> None:
        self._executor = executor

    def login_by_app_role(
        self, role_id: str, secret_id: str, path: str = "approle"
    ) -> AuthResponse:
        """Log in with the AppRole backend mounted at ``auth/<path>``.

        Args:
            role_id: The role ID.
            secret_id: The secret ID.
            path: The mount path of the backend.

        Returns:
            The auth response holding the client token.
        """
        return self._executor.execute(
            "POST",
            f"auth/{path}/login",
            json={"role_id": role_id, "secret_id": secret_id},
            response_cls=AuthResponse,
        )

    def login_by_userpass(
        self, username: str, password: str, path: str = "userpass"
    ) -> AuthResponse:
        """Log in with the Username & Password backend mounted at
        ``auth/<path>``."""
        return self._executor.execute(
            "POST",
            f"auth/{path}/login/{username}",
            json={"password": password},
            response_cls=AuthResponse,
        )

    def lookup_self(self) -> LookupResponse:
        """Return the properties of the configured token."""
        return self._executor.execute(
            "GET", "auth/token/lookup-self", response_cls=LookupResponse
        )

    def renew_self(self, increment: int | None = None) -> AuthResponse:
        """Renew the lease of the configured token.

        Args:
            increment: Optional lease extension, in seconds. Vault uses
                the token's TTL when absent.
        """
        body = {} if increment is None else {"increment": increment}
        return self._executor.execute(
            "POST", "auth/token/renew-self", json=body, response_cls=AuthResponse
        )

    def revoke_self(self) -> VaultResponse:
        """Revoke the configured token and all of its children."""
        return self._executor.execute(
            "POST",
            "auth/token/revoke-self",
            accepted=DELETE_ACCEPTED_STATUS_CODES,
        )
