"""
Async HTTP Transport for the GIN client.

Same request semantics as HTTPTransport, on top of the httpx async client.
"""

import asyncio
import time
from collections.abc import Callable, Coroutine
from typing import Any

import httpx

from ginclient.exceptions import GinError, NetworkError
from ginclient.logging import log_http_request, log_http_response
from ginclient.session import Session
from ginclient.transport import (
    AUTH_NONE,
    EXPECT_JSON,
    JSON_ACCEPT,
    BaseTransport,
    RetryConfig,
)


class AsyncHTTPTransport(BaseTransport):
    """
    Async HTTP transport layer.

    Handles:
    - Bearer header attachment according to each operation's policy
    - JSON / text response decoding
    - Exponential backoff with jitter when retries are enabled
    - Error response parsing into typed exceptions
    """

    def __init__(
        self,
        session: Session,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize async HTTP transport.

        Args:
            session: Session providing configuration and the current token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            transport: Optional httpx async transport (e.g. httpx.MockTransport)
        """
        super().__init__(session, timeout, retry_config)
        self._client = httpx.AsyncClient(
            timeout=timeout,
            transport=transport,
            headers={"Accept": JSON_ACCEPT},
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "AsyncHTTPTransport":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.close()

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        body: Any = None,
        auth: str = AUTH_NONE,
        expect: str = EXPECT_JSON,
    ) -> Any:
        """
        Make a request against one of the GIN services.

        See HTTPTransport.request for the meaning of the arguments.
        """
        headers = self._build_headers(auth, expect)

        async def make_request() -> httpx.Response:
            log_http_request(method, url, headers, body)
            return await self._client.request(
                method, url, params=params, json=body, headers=headers
            )

        response = await self._execute_with_retry(method, make_request)
        return self._decode(response, expect)

    async def _execute_with_retry(
        self, method: str, request_fn: Callable[[], Coroutine[Any, Any, httpx.Response]]
    ) -> httpx.Response:
        """
        Execute a request, retrying retryable failures if configured.

        Args:
            method: HTTP method, which decides whether a retry is allowed
            request_fn: Async function that makes the HTTP request

        Returns:
            Successful HTTP response

        Raises:
            GinError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = await request_fn()
                elapsed_ms = (time.monotonic() - started) * 1000
                log_http_response(response.status_code, str(response.url), None, elapsed_ms)

                if response.status_code < 400:
                    return response

                error = self._parse_error_response(response)

                if not self._should_retry(response.status_code, attempt, method):
                    raise error

                last_error = error

                retry_after = response.headers.get("Retry-After")
                wait_time = self._get_backoff_time(attempt, retry_after)
                await asyncio.sleep(wait_time)

            except httpx.RequestError as e:
                if not self._can_retry(method, attempt):
                    raise NetworkError(str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                await asyncio.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, GinError):
                raise last_error
            raise NetworkError(str(last_error))

        raise NetworkError("Request failed with no error details")
