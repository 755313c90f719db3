r"""Entry point of the library.

The ``Vault`` class holds the immutable configuration and the shared
``RetryExecutor``, and hands out the endpoint wrappers.
"""

from __future__ import annotations

__all__ = ["Vault"]

from typing import TYPE_CHECKING

from vaultclient.api import Auth, Debug, Logical, Seal
from vaultclient.retry import RetryExecutor
from vaultclient.transport import HttpxTransport

if TYPE_CHECKING:
    from types import TracebackType
    from typing import Self

    import httpx

    from vaultclient.core.config import VaultConfig
    from vaultclient.transport import Transport


class Vault:
    r"""Client for the HTTP API of a Vault server.

    A ``Vault`` instance is safe to share between threads: its
    configuration is immutable and every call builds its own request.

    Two transport setups are supported:

    **Default**: no client is given. Every attempt opens a short-lived
    ``httpx.Client`` configured with the timeouts and TLS settings of
    ``config``.

    .. code-block:: python

        from vaultclient import Vault, VaultConfig

        vault = Vault(VaultConfig(address="https://vault.example.com:8200", token="s.abc"))
        response = vault.logical().read("secret/hello")

    **Shared client**: an ``httpx.Client`` is passed and reused for
    every attempt, with its own TLS settings and connection pool. Use
    ``Vault`` as a context manager to close that client on exit.

    .. code-block:: python

        import httpx
        from vaultclient import Vault, VaultConfig

        config = VaultConfig(address="https://vault.example.com:8200", token="s.abc")
        with Vault(config, client=httpx.Client(verify="/etc/ssl/vault-ca.pem")) as vault:
            response = vault.logical().read("secret/hello")

    Args:
        config: The connection configuration.
        client: Optional ``httpx.Client`` to send every request with.
        transport: Optional transport. Takes precedence over ``client``.

    Raises:
        ValueError: If ``client`` is given together with ``ssl_verify``
            or ``ssl_pem_utf8`` in ``config``. The client brings its own
            TLS configuration.
    """

    def __init__(
        self,
        config: VaultConfig,
        *,
        client: httpx.Client | None = None,
        transport: Transport | None = None,
    ) -> None:
        if client is not None and (config.ssl_verify is not None or config.ssl_pem_utf8 is not None):
            msg = (
                "ssl_verify and ssl_pem_utf8 cannot be combined with an httpx.Client: "
                "configure TLS on the client instead"
            )
            raise ValueError(msg)
        self._config = config
        self._client = client
        if transport is None:
            transport = HttpxTransport(client=client)
        self._transport = transport
        self._executor = RetryExecutor(config, transport=transport)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self._config!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> VaultConfig:
        return self._config

    def close(self) -> None:
        """Close the ``httpx.Client`` given to the constructor, if any."""
        if self._client is not None:
            self._client.close()

    def with_retries(self, max_retries: int, retry_interval_milliseconds: int) -> Vault:
        """Return a client using a different retry policy.

        The new client shares the transport of this one; neither
        configuration is modified.

        Example:
            ```pycon
            >>> from vaultclient import Vault, VaultConfig
            >>> vault = Vault(VaultConfig(address="http://127.0.0.1:8200"))
            >>> vault.with_retries(5, 500).config.max_retries
            5
            >>> vault.config.max_retries
            0

            ```
        """
        config = self._config.merge(
            max_retries=max_retries, retry_interval_milliseconds=retry_interval_milliseconds
        )
        return Vault(config, transport=self._transport)

    def auth(self) -> Auth:
        return Auth(self._executor)

    def debug(self) -> Debug:
        return Debug(self._executor)

    def logical(self) -> Logical:
        return Logical(self._executor)

    def seal(self) -> Seal:
        return Seal(self._executor)
