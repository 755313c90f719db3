r"""vaultclient - Python client for the HTTP API of Vault.

Every operation goes through the same engine: the request is built from
an immutable ``VaultConfig``, sent over httpx, its status code checked
against the operation's accepted set, and transient failures retried a
bounded number of times with a fixed delay.

Key Features:
    - Immutable, thread-safe connection configuration (``VAULT_*``
      environment variables supported)
    - Token authentication through the ``X-Vault-Token`` header
    - Custom PEM trust material and TLS verification switch
    - Bounded retries with a fixed interval, retry count reported on
      every response
    - Lifecycle callbacks for logging, metrics and alerting
    - Endpoint wrappers for health, secrets, auth backends and seal status

Example:
    ```pycon
    >>> from vaultclient import Vault, VaultConfig
    >>> config = VaultConfig(
    ...     address="https://vault.example.com:8200",
    ...     token="s.abc",
    ...     max_retries=5,
    ...     retry_interval_milliseconds=1000,
    ... )
    >>> vault = Vault(config)
    >>> response = vault.logical().read("secret/hello")  # doctest: +SKIP
    >>> response.data, response.retries  # doctest: +SKIP
    ({'value': 'world'}, 0)

    ```
"""

from __future__ import annotations

__all__ = [
    "BuildError",
    "TerminalError",
    "TransportError",
    "ValidationError",
    "Vault",
    "VaultConfig",
    "VaultError",
    "VaultResponse",
    "__version__",
]

from importlib.metadata import PackageNotFoundError, version

from vaultclient.client import Vault
from vaultclient.core.config import VaultConfig
from vaultclient.exceptions import (
    BuildError,
    TerminalError,
    TransportError,
    ValidationError,
    VaultError,
)
from vaultclient.response import VaultResponse

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
