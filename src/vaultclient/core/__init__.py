r"""Core configuration and validation shared by every operation.

This package contains the immutable connection configuration, the
per-family accepted status codes, and the parameter validation helpers.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_ACCEPTED_STATUS_CODES",
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_RETRY_INTERVAL_MILLISECONDS",
    "DEFAULT_TIMEOUT",
    "DELETE_ACCEPTED_STATUS_CODES",
    "HEALTH_ACCEPTED_STATUS_CODES",
    "WRITE_ACCEPTED_STATUS_CODES",
    "VaultConfig",
    "accepted_status_codes",
    "read_pem_file",
    "validate_address",
    "validate_retry_params",
    "validate_timeout",
]

from vaultclient.core.config import (
    DEFAULT_ACCEPTED_STATUS_CODES,
    DEFAULT_MAX_RETRIES,
    DEFAULT_RETRY_INTERVAL_MILLISECONDS,
    DEFAULT_TIMEOUT,
    DELETE_ACCEPTED_STATUS_CODES,
    HEALTH_ACCEPTED_STATUS_CODES,
    WRITE_ACCEPTED_STATUS_CODES,
    VaultConfig,
    accepted_status_codes,
    read_pem_file,
)
from vaultclient.core.validation import (
    validate_address,
    validate_retry_params,
    validate_timeout,
)
