"""
Mock GIN services for testing.

Provides a MockGinServer that answers requests of GinClient and
AsyncGinClient through an httpx.MockTransport, without network access,
and a Navigator that records redirects instead of opening a browser.
"""

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

import httpx

from ginclient.navigator import Navigator


@dataclass
class MockResponse:
    """Configuration for a mock response."""

    data: Any = None  # dict/list are sent as JSON, str as text, None as empty body
    status_code: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    error: Exception | None = None  # raised instead of answering, e.g. httpx.ConnectError
    call_count: int = 0


@dataclass
class MockCall:
    """Record of a request received by the mock server."""

    method: str
    url: str  # without query string
    params: dict[str, str]
    headers: httpx.Headers  # case-insensitive
    body: Any
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))


class MockGinServer:
    """
    Scripted stand-in for the GIN auth and repository services.

    Example:
        ```python
        server = MockGinServer()
        server.configure("GET", "https://repo.example.org/repos/public", data=[])
        client = GinClient(config, transport=server.transport())

        client.repos.list_public()
        assert server.was_called("GET", "https://repo.example.org/repos/public")
        ```
    """

    def __init__(self) -> None:
        self._routes: dict[tuple[str, str], MockResponse] = {}
        self.calls: list[MockCall] = []

    def configure(
        self,
        method: str,
        url: str,
        data: Any = None,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
        error: Exception | None = None,
    ) -> None:
        """Configure the response for requests to method + url (query ignored)."""
        self._routes[(method.upper(), url)] = MockResponse(
            data=data,
            status_code=status_code,
            headers=dict(headers or {}),
            error=error,
        )

    def transport(self) -> httpx.MockTransport:
        """Transport to pass to GinClient or AsyncGinClient."""
        return httpx.MockTransport(self.handle)

    def handle(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url).split("?", 1)[0]
        self._record_call(request, url)

        route = self._routes.get((request.method, url))
        if route is None:
            return httpx.Response(
                404,
                json={
                    "code": 404,
                    "error": "Not Found",
                    "message": f"No mock route for {request.method} {url}",
                },
            )

        route.call_count += 1
        if route.error is not None:
            raise route.error
        if isinstance(route.data, (dict, list)):
            return httpx.Response(route.status_code, json=route.data, headers=route.headers)
        if isinstance(route.data, str):
            return httpx.Response(route.status_code, text=route.data, headers=route.headers)
        return httpx.Response(route.status_code, headers=route.headers)

    def _record_call(self, request: httpx.Request, url: str) -> None:
        body = json.loads(request.content) if request.content else None
        self.calls.append(MockCall(
            method=request.method,
            url=url,
            params=dict(request.url.params),
            headers=request.headers,
            body=body,
        ))

    def was_called(self, method: str, url: str | None = None) -> bool:
        """Check if a request with this method (and url) was received."""
        return self.call_count(method, url) > 0

    def call_count(self, method: str, url: str | None = None) -> int:
        """Get the number of requests with this method (and url)."""
        return len(self.get_calls(method, url))

    def get_calls(self, method: str | None = None, url: str | None = None) -> list[MockCall]:
        """
        Get recorded requests.

        Args:
            method: Filter by HTTP method (optional)
            url: Filter by URL without query string (optional)
        """
        return [
            call
            for call in self.calls
            if (method is None or call.method == method.upper())
            and (url is None or call.url == url)
        ]

    def reset(self) -> None:
        """Clear all recorded requests and configured responses."""
        self._routes.clear()
        self.calls.clear()


class RecordingNavigator(Navigator):
    """Navigator that keeps the URLs it was sent to."""

    def __init__(
        self,
        origin: str = "http://localhost:8080",
        user_agent: str = "ginclient-test",
    ) -> None:
        self.origin = origin
        self.user_agent = user_agent
        self.urls: list[str] = []

    def navigate(self, url: str) -> None:
        self.urls.append(url)

    @property
    def last_url(self) -> str | None:
        return self.urls[-1] if self.urls else None
