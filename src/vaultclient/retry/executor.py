r"""Retry executor driving every Vault operation.

Each call runs an attempt loop on the calling thread:

1. build the request from the configuration and the call arguments,
2. invoke the transport,
3. validate the status code against the call's accepted set.

A ``TransportError`` or ``ValidationError`` consumes one retry: the
executor sleeps for the fixed retry interval and starts over from step
1. Once ``max_retries`` retries have been used, the last failure is
wrapped in a ``TerminalError``. A ``BuildError`` is raised immediately.

The delay uses ``time.sleep`` and holds no lock. It is not absorbed:
``KeyboardInterrupt`` or any other exception raised while sleeping
aborts the call and reaches the caller unchanged.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
import time
from typing import TYPE_CHECKING, Any, TypeVar

from vaultclient.backoff import ConstantBackoff
from vaultclient.core.config import DEFAULT_ACCEPTED_STATUS_CODES
from vaultclient.exceptions import TerminalError, ValidationError
from vaultclient.request import build_request
from vaultclient.response import VaultResponse
from vaultclient.retry.decider import RETRYABLE_ERRORS, RetryDecider
from vaultclient.retry.manager import CallbackManager
from vaultclient.retry.strategy import RetryStrategy
from vaultclient.transport import HttpxTransport

if TYPE_CHECKING:
    from collections.abc import Mapping
    from collections.abc import Set as AbstractSet

    from vaultclient.core.config import VaultConfig
    from vaultclient.exceptions import VaultError
    from vaultclient.transport import Transport

logger: logging.Logger = logging.getLogger(__name__)

T = TypeVar("T", bound=VaultResponse)


class RetryExecutor:
    r"""Executes Vault operations with bounded, fixed-delay retries.

    The executor holds no per-call state, so one instance can serve
    concurrent calls from several threads.

    Args:
        config: The connection configuration.
        transport: The transport used for each attempt. Defaults to
            ``HttpxTransport()``.

    Example:
        ```pycon
        >>> import httpx
        >>> from vaultclient.core.config import VaultConfig
        >>> from vaultclient.retry import RetryExecutor
        >>> from vaultclient.transport import HttpxTransport
        >>> client = httpx.Client(transport=httpx.MockTransport(lambda r: httpx.Response(200)))
        >>> executor = RetryExecutor(
        ...     VaultConfig(address="http://vault:8200"), transport=HttpxTransport(client)
        ... )
        >>> response = executor.execute("GET", "sys/health")
        >>> response.status_code, response.retries
        (200, 0)

        ```
    """

    def __init__(self, config: VaultConfig, transport: Transport | None = None) -> None:
        self.config = config
        self.transport: Transport = transport if transport is not None else HttpxTransport()
        self.strategy = RetryStrategy(
            ConstantBackoff.from_milliseconds(config.retry_interval_milliseconds)
        )
        self.callbacks = CallbackManager(config)

    def execute(
        self,
        method: str,
        path: str,
        *,
        params: Mapping[str, Any | None] | None = None,
        json: Any = None,
        accepted: AbstractSet[int] = DEFAULT_ACCEPTED_STATUS_CODES,
        response_cls: type[T] = VaultResponse,
    ) -> T:
        """Execute an operation with retries.

        Args:
            method: The HTTP method.
            path: The operation path relative to ``/v1/``.
            params: Optional query parameters. ``None`` values are omitted.
            json: Optional JSON body.
            accepted: The status codes considered a success.
            response_cls: The result type built from the accepted response.

        Returns:
            The result, with ``retries`` set to the number of retries
            that were needed.

        Raises:
            BuildError: If the request cannot be built.
            TerminalError: If every attempt failed.
        """
        decider = RetryDecider(accepted)
        max_retries = self.config.max_retries
        start_time = time.time()
        attempt = 0
        while True:
            request = build_request(self.config, method, path, params=params, json=json)
            self.callbacks.on_request(request.url, request.method, attempt)
            try:
                response = self.transport.invoke(request)
                decider.check_response(response, method=request.method, url=request.url)
            except RETRYABLE_ERRORS as exc:
                logger.debug(
                    f"{request.method} request to {request.url} failed "
                    f"(attempt {attempt + 1}/{max_retries + 1}): {exc}"
                )
                if not decider.should_retry(exc, attempt, max_retries):
                    error = self._terminal_error(request.method, request.url, attempt, exc)
                    self.callbacks.on_failure(request.url, request.method, attempt, error, start_time)
                    raise error from exc
                sleep_time = self.strategy.calculate_delay(attempt)
                self.callbacks.on_retry(request.url, request.method, attempt, sleep_time, exc)
                attempt += 1
                time.sleep(sleep_time)
                continue

            if attempt > 0:
                logger.debug(
                    f"{request.method} request to {request.url} succeeded on attempt {attempt + 1}"
                )
            self.callbacks.on_success(request.url, request.method, attempt, response, start_time)
            return response_cls.from_raw(response, retries=attempt)

    @staticmethod
    def _terminal_error(method: str, url: str, attempt: int, cause: VaultError) -> TerminalError:
        status_code = cause.status_code if isinstance(cause, ValidationError) else None
        if status_code is not None:
            message = f"{method} request to {url} failed with status {status_code} after {attempt + 1} attempts"
        else:
            message = f"{method} request to {url} failed after {attempt + 1} attempts: {cause}"
        return TerminalError(
            message,
            attempts=attempt + 1,
            method=method,
            url=url,
            status_code=status_code,
            cause=cause,
        )
