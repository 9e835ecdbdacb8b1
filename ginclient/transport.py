"""
HTTP Transport for the GIN client.

Handles HTTP communication with the auth and repository services: bearer
header attachment, response decoding, optional retry, and error mapping.
"""

import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import httpx

from ginclient.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    GinError,
    NetworkError,
    NotFoundError,
    RateLimitedError,
    RemoteError,
    ServerError,
)
from ginclient.logging import log_http_request, log_http_response
from ginclient.session import Session

# Bearer header policies
AUTH_NONE = "none"  # never attach
AUTH_OPTIONAL = "optional"  # attach when logged in
AUTH_REQUIRED = "required"  # fail before sending when logged out

# Response decoding
EXPECT_JSON = "json"
EXPECT_TEXT = "text"
EXPECT_NONE = "none"

JSON_ACCEPT = "application/json"
TEXT_ACCEPT = "text/plain, text/html, */*"


@dataclass
class RetryConfig:
    """
    Configuration for automatic retry behavior.

    Retries are disabled by default; pass a RetryConfig with max_retries > 0
    to opt in. Only methods in retry_methods are repeated, so a create or
    update that failed in transit is reported rather than sent twice.
    """

    max_retries: int = 0
    backoff_factor: float = 2.0
    retry_on: list[int] = field(default_factory=lambda: [429, 502, 503, 504])
    retry_methods: frozenset[str] = frozenset({"GET", "HEAD"})  # never repeat writes
    respect_retry_after: bool = True
    max_backoff: float = 60.0  # Maximum backoff time in seconds
    jitter: float = 0.1  # Jitter factor (0.1 = ±10%)


class BaseTransport:
    """Request building and response handling shared by sync and async transports."""

    def __init__(
        self,
        session: Session,
        timeout: float = 30.0,
        retry_config: RetryConfig | None = None,
    ) -> None:
        """
        Initialize transport state.

        Args:
            session: Session providing the current token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
        """
        self.session = session
        self.timeout = timeout
        self.retry_config = retry_config or RetryConfig()

    def _build_headers(self, auth: str, expect: str = EXPECT_JSON) -> dict[str, str]:
        headers = {"Accept": TEXT_ACCEPT if expect == EXPECT_TEXT else JSON_ACCEPT}
        if auth != AUTH_NONE:
            headers.update(self.session.auth_headers(required=auth == AUTH_REQUIRED))
        return headers

    def _decode(self, response: httpx.Response, expect: str) -> Any:
        if expect == EXPECT_NONE:
            return None
        if expect == EXPECT_TEXT:
            return response.text
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise RemoteError(
                "INVALID_RESPONSE",
                "Response body is not valid JSON",
                response.status_code,
                response.text,
            ) from e

    def _can_retry(self, method: str, attempt: int) -> bool:
        if attempt >= self.retry_config.max_retries:
            return False
        return method.upper() in self.retry_config.retry_methods

    def _should_retry(self, status_code: int, attempt: int, method: str = "GET") -> bool:
        """
        Determine if a request should be retried.

        Args:
            status_code: HTTP status code
            attempt: Current attempt number (0-indexed)
            method: HTTP method of the request

        Returns:
            True if the request should be retried
        """
        if not self._can_retry(method, attempt):
            return False

        return status_code in self.retry_config.retry_on

    def _get_backoff_time(
        self, attempt: int, retry_after: str | None
    ) -> float:
        """
        Calculate backoff time for retry.

        Uses exponential backoff with jitter, respecting Retry-After header
        if present.

        Args:
            attempt: Current attempt number (0-indexed)
            retry_after: Value of Retry-After header (if present)

        Returns:
            Time to wait in seconds
        """
        if retry_after and self.retry_config.respect_retry_after:
            try:
                return float(retry_after)
            except ValueError:
                pass  # Fall through to exponential backoff

        base_wait = self.retry_config.backoff_factor ** attempt

        jitter_range = base_wait * self.retry_config.jitter
        jitter = random.uniform(-jitter_range, jitter_range)
        wait_time = base_wait + jitter

        return min(wait_time, self.retry_config.max_backoff)

    def _parse_error_response(self, response: httpx.Response) -> RemoteError:
        """
        Parse an error response into a typed exception.

        The GIN services answer errors either with a JSON object
        ({"code", "error", "message", "reasons"}) or with plain text. The
        decoded body is kept on the exception as is.

        Args:
            response: HTTP response with error status

        Returns:
            Appropriate RemoteError subclass
        """
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text or None

        status_code = response.status_code
        code = f"HTTP_{status_code}"
        if isinstance(body, dict):
            message = body.get("message") or body.get("error") or response.reason_phrase
        elif isinstance(body, str) and body.strip():
            message = body.strip()
        else:
            message = response.reason_phrase or f"HTTP {status_code}"

        if status_code == 401:
            return AuthenticationError(code, message, status_code, body)
        elif status_code == 403:
            return AuthorizationError(code, message, status_code, body)
        elif status_code == 404:
            return NotFoundError(code, message, status_code, body)
        elif status_code == 409:
            return ConflictError(code, message, status_code, body)
        elif status_code == 429:
            retry_after_str = response.headers.get("Retry-After", "60")
            try:
                retry_after = int(retry_after_str)
            except ValueError:
                retry_after = 60
            return RateLimitedError(code, message, retry_after, status_code, body)
        elif status_code >= 500:
            return ServerError(code, message, status_code, body)
        else:
            return RemoteError(code, message, status_code, body)


class HTTPTransport(BaseTransport):
    """
    Blocking HTTP transport.

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
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize HTTP transport.

        Args:
            session: Session providing configuration and the current token
            timeout: Request timeout in seconds
            retry_config: Configuration for retry behavior
            transport: Optional httpx transport (e.g. httpx.MockTransport)
        """
        super().__init__(session, timeout, retry_config)
        self._client = httpx.Client(
            timeout=timeout,
            transport=transport,
            headers={"Accept": JSON_ACCEPT},
        )

    def close(self) -> None:
        """Close the HTTP client."""
        self._client.close()

    def __enter__(self) -> "HTTPTransport":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()

    def request(
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

        Args:
            method: HTTP method
            url: Absolute URL
            params: Query parameters
            body: JSON request body
            auth: Bearer header policy (AUTH_NONE, AUTH_OPTIONAL, AUTH_REQUIRED)
            expect: Response decoding (EXPECT_JSON, EXPECT_TEXT, EXPECT_NONE)

        Returns:
            Decoded response body

        Raises:
            NotAuthenticatedError: If auth is AUTH_REQUIRED and no token is set
            RemoteError: On non-2xx responses
            NetworkError: On connection failures
        """
        headers = self._build_headers(auth, expect)

        def make_request() -> httpx.Response:
            log_http_request(method, url, headers, body)
            return self._client.request(
                method, url, params=params, json=body, headers=headers
            )

        response = self._execute_with_retry(method, make_request)
        return self._decode(response, expect)

    def _execute_with_retry(
        self, method: str, request_fn: Callable[[], httpx.Response]
    ) -> httpx.Response:
        """
        Execute a request, retrying retryable failures if configured.

        Args:
            method: HTTP method, which decides whether a retry is allowed
            request_fn: Function that makes the HTTP request

        Returns:
            Successful HTTP response

        Raises:
            GinError: On non-retryable errors or after max retries
        """
        last_error: Exception | None = None

        for attempt in range(self.retry_config.max_retries + 1):
            try:
                started = time.monotonic()
                response = request_fn()
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
                time.sleep(wait_time)

            except httpx.RequestError as e:
                if not self._can_retry(method, attempt):
                    raise NetworkError(str(e)) from e

                last_error = e
                wait_time = self._get_backoff_time(attempt, None)
                time.sleep(wait_time)

        # Should not reach here, but just in case
        if last_error:
            if isinstance(last_error, GinError):
                raise last_error
            raise NetworkError(str(last_error))

        raise NetworkError("Request failed with no error details")
