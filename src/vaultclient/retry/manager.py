r"""Dispatch of the hooks configured on ``VaultConfig`` to the retry loop."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING

from vaultclient.callbacks import (
    invoke_on_failure,
    invoke_on_request,
    invoke_on_retry,
    invoke_on_success,
)

if TYPE_CHECKING:
    from vaultclient.core.config import VaultConfig
    from vaultclient.response import RawResponse


class CallbackManager:
    """Binds the hooks and retry budget of one config to the loop.

    Attributes:
        config: The config holding the hooks.
    """

    def __init__(self, config: VaultConfig) -> None:
        self.config = config

    def on_request(self, url: str, method: str, attempt: int) -> None:
        invoke_on_request(
            self.config.on_request,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
        )

    def on_retry(
        self,
        url: str,
        method: str,
        attempt: int,
        sleep_time: float,
        error: Exception,
    ) -> None:
        invoke_on_retry(
            self.config.on_retry,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            sleep_time=sleep_time,
            error=error,
            status_code=getattr(error, "status_code", None),
        )

    def on_success(
        self,
        url: str,
        method: str,
        attempt: int,
        response: RawResponse,
        start_time: float,
    ) -> None:
        invoke_on_success(
            self.config.on_success,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            response=response,
            start_time=start_time,
        )

    def on_failure(
        self,
        url: str,
        method: str,
        attempt: int,
        error: Exception,
        start_time: float,
    ) -> None:
        """Invoke on_failure callback.

        Args:
            url: The URL that was requested.
            method: The HTTP method.
            attempt: Final attempt number (0-indexed).
            error: The terminal error.
            start_time: Timestamp when the call started.
        """
        invoke_on_failure(
            self.config.on_failure,
            url=url,
            method=method,
            attempt=attempt,
            max_retries=self.config.max_retries,
            error=error,
            status_code=getattr(error, "status_code", None),
            start_time=start_time,
        )
