"""
PayzCore API clients.

Example usage:
    ```python
    from payzcore import PayzCore

    with PayzCore("pk_live_xxx") as client:
        created = client.payments.create(amount=50, external_ref="user-123", network="TRC20")
        print(created.payment.address)
    ```

    ```python
    from payzcore import AsyncPayzCore

    async with AsyncPayzCore("mk_xxx", master_key=True) as client:
        projects = await client.projects.list()
    ```
"""
from __future__ import annotations

import asyncio
import logging
import os
import time
from typing import Any, Optional

import httpx

from .config import DEFAULT_BASE_URL, DEFAULT_MAX_RETRIES, DEFAULT_TIMEOUT, ClientConfig
from .models.errors import PayzCoreError
from .resources.payments import AsyncPaymentsResource, PaymentsResource
from .resources.projects import AsyncProjectsResource, ProjectsResource

logger = logging.getLogger(__name__)

USER_AGENT = "payzcore-python/0.1.0"
RETRY_BASE_DELAY = 0.2  # seconds


def backoff_delay(attempt: int) -> float:
    """Seconds to wait before retry number ``attempt`` (1 for the first retry)."""
    return RETRY_BASE_DELAY * 2 ** (attempt - 1)


def is_retryable_status(status_code: int) -> bool:
    """Any status from 500 up is retried; 429 and other 4xx are final."""
    return status_code >= 500


def _decode_error_body(response: httpx.Response) -> dict[str, Any]:
    try:
        body = response.json()
    except ValueError:
        return {"error": response.reason_phrase or "Unknown error"}
    return body if isinstance(body, dict) else {}


def error_from_response(response: httpx.Response) -> PayzCoreError:
    """Build the typed error for a non-2xx response."""
    return PayzCoreError.from_response(
        response.status_code,
        _decode_error_body(response),
        response.headers,
    )


def _decode_success(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError as exc:
        raise PayzCoreError(
            "Invalid JSON in API response",
            response.status_code,
            "invalid_response",
        ) from exc


def _transport_error(exc: httpx.RequestError) -> PayzCoreError:
    code = "timeout_error" if isinstance(exc, httpx.TimeoutException) else "network_error"
    error = PayzCoreError(f"{type(exc).__name__}: {exc}", 0, code)
    error.__cause__ = exc
    return error


class _BaseClient:
    """Configuration and request preparation shared by the sync and async clients."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        master_key: bool = False,
        config: Optional[ClientConfig] = None,
    ):
        if not api_key:
            raise ValueError(
                "PayzCore API key is required. Pass your pk_live_xxx or mk_xxx key."
            )
        self._api_key = api_key
        self._config = config or ClientConfig(
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            master_key=master_key,
        )

    @classmethod
    def from_env(cls, **kwargs: Any):
        """Create a client from ``PAYZCORE_API_KEY`` and the other ``PAYZCORE_*`` variables."""
        kwargs.setdefault("config", ClientConfig.from_env())
        return cls(os.getenv("PAYZCORE_API_KEY"), **kwargs)

    @property
    def config(self) -> ClientConfig:
        return self._config

    def _url(self, path: str) -> str:
        return f"{self._config.base_url}{path}"

    def _headers(self, has_body: bool) -> dict[str, str]:
        headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
            self._config.auth_header: self._api_key,
        }
        if has_body:
            headers["Content-Type"] = "application/json"
        return headers

    def _check_retryable(
        self, method: str, path: str, attempt: int, response: httpx.Response
    ) -> PayzCoreError:
        """Return the error for a retryable response, raise it otherwise."""
        error = error_from_response(response)
        if not is_retryable_status(response.status_code):
            raise error
        self._log_failure(method, path, attempt, error)
        return error

    def _on_transport_error(
        self, method: str, path: str, attempt: int, exc: httpx.RequestError
    ) -> PayzCoreError:
        error = _transport_error(exc)
        self._log_failure(method, path, attempt, error)
        return error

    def _log_failure(self, method: str, path: str, attempt: int, error: PayzCoreError) -> None:
        logger.warning(
            "PayzCore %s %s failed (attempt %d/%d): %s",
            method,
            path,
            attempt + 1,
            self._config.max_retries + 1,
            error,
        )

    def _log_retry(self, method: str, path: str, attempt: int, delay: float) -> None:
        logger.debug("Retrying PayzCore %s %s in %.2fs (retry %d)", method, path, delay, attempt)


class PayzCore(_BaseClient):
    """
    Synchronous PayzCore API client.

    Provides access to:
    - payments: Create, list, fetch, cancel and confirm payments
    - projects: Create and list projects (master key only)

    Args:
        api_key: Project API key (``pk_live_...``) or master key (``mk_...``)
        base_url: PayzCore API base URL
        timeout: Timeout in seconds (default: 30). httpx applies it to each
            phase of an attempt (connect, read, write, pool) rather than as
            a total deadline, so a server trickling bytes can hold one
            attempt open longer
        max_retries: Retries on 5xx and network failures (default: 2)
        master_key: Send the key as ``x-master-key`` (default: False)
        config: Pre-built :class:`ClientConfig`, overrides the four options above
        http_client: Optional ``httpx.Client`` to send requests with
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        master_key: bool = False,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        super().__init__(
            api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            master_key=master_key,
            config=config,
        )
        self._owns_client = http_client is None
        self._client = http_client or httpx.Client()

        self.payments = PaymentsResource(self)
        self.projects = ProjectsResource(self)

    def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send one logical request, retrying 5xx and network failures.

        Returns the decoded JSON body of the first 2xx response.

        Raises:
            PayzCoreError: or one of its subclasses, see ``models.errors``
        """
        url = self._url(path)
        headers = self._headers(body is not None)
        last_error: Optional[PayzCoreError] = None

        for attempt in range(self._config.max_retries + 1):
            if attempt > 0:
                delay = backoff_delay(attempt)
                self._log_retry(method, path, attempt, delay)
                time.sleep(delay)

            try:
                response = self._client.request(
                    method,
                    url,
                    json=body,
                    headers=headers,
                    timeout=self._config.timeout,
                    follow_redirects=True,
                )
            except httpx.RequestError as e:
                last_error = self._on_transport_error(method, path, attempt, e)
                continue

            if response.is_success:
                return _decode_success(response)
            last_error = self._check_retryable(method, path, attempt, response)

        if last_error is None:
            last_error = PayzCoreError("Request failed after retries", 0, "network_error")
        raise last_error

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, body: Any) -> Any:
        return self.request("POST", path, body)

    def patch(self, path: str, body: Any) -> Any:
        return self.request("PATCH", path, body)

    def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "PayzCore":
        return self

    def __exit__(self, *args) -> None:
        self.close()


class AsyncPayzCore(_BaseClient):
    """
    Async version of :class:`PayzCore`.

    Requests on one instance may run concurrently; each keeps its own retry
    state.

    Example:
        ```python
        async with AsyncPayzCore("pk_live_xxx") as client:
            detail = await client.payments.get("pay_123")
        ```
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        max_retries: int = DEFAULT_MAX_RETRIES,
        master_key: bool = False,
        config: Optional[ClientConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        super().__init__(
            api_key,
            base_url=base_url,
            timeout=timeout,
            max_retries=max_retries,
            master_key=master_key,
            config=config,
        )
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient()

        self.payments = AsyncPaymentsResource(self)
        self.projects = AsyncProjectsResource(self)

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Send one logical request, retrying 5xx and network failures."""
        url = self._url(path)
        headers = self._headers(body is not None)
        last_error: Optional[PayzCoreError] = None

        for attempt in range(self._config.max_retries + 1):
            if attempt > 0:
                delay = backoff_delay(attempt)
                self._log_retry(method, path, attempt, delay)
                await asyncio.sleep(delay)

            try:
                response = await self._client.request(
                    method,
                    url,
                    json=body,
                    headers=headers,
                    timeout=self._config.timeout,
                    follow_redirects=True,
                )
            except httpx.RequestError as e:
                last_error = self._on_transport_error(method, path, attempt, e)
                continue

            if response.is_success:
                return _decode_success(response)
            last_error = self._check_retryable(method, path, attempt, response)

        if last_error is None:
            last_error = PayzCoreError("Request failed after retries", 0, "network_error")
        raise last_error

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any) -> Any:
        return await self.request("POST", path, body)

    async def patch(self, path: str, body: Any) -> Any:
        return await self.request("PATCH", path, body)

    async def close(self) -> None:
        """Close the HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "AsyncPayzCore":
        return self

    async def __aexit__(self, *args) -> None:
        await self.close()
