r"""Endpoint wrappers.

Each wrapper only supplies the method, path, optional parameters and
accepted status codes of its operations; the request itself is executed
by the shared ``RetryExecutor``.
"""

from __future__ import annotations

__all__ = ["Auth", "Debug", "Logical", "Seal"]

from vaultclient.api.auth import Auth
from vaultclient.api.debug import Debug
from vaultclient.api.logical import Logical
from vaultclient.api.seal import Seal
