"""
GIN async client.

Provides the async interface for interacting with the GIN services.
"""

import os
from typing import Any

import httpx

from ginclient.async_clients import (
    AsyncAccountsClient,
    AsyncAuthClient,
    AsyncKeysClient,
    AsyncReposClient,
)
from ginclient.async_transport import AsyncHTTPTransport
from ginclient.config import GinConfig
from ginclient.navigator import DEFAULT_ORIGIN, BrowserNavigator, Navigator
from ginclient.session import Session
from ginclient.storage import FileTokenStore, TokenStore
from ginclient.transport import RetryConfig
from ginclient.types.token import Token


class AsyncGinClient:
    """
    Async client for interacting with the GIN services.

    Every network operation is a coroutine that completes once, with the
    parsed result or with an exception.

    Example:
        ```python
        import asyncio
        from ginclient import AsyncGinClient, GinConfig

        async def main():
            config = GinConfig(
                auth_url="https://auth.gin.g-node.org",
                repo_url="https://repo.gin.g-node.org",
                client_id="gin",
            )
            async with AsyncGinClient(config) as client:
                repos = await client.repos.list_public()
                print(client.repos.filter_repos("ephys", repos))

        asyncio.run(main())
        ```
    """

    DEFAULT_TIMEOUT = 30.0

    def __init__(
        self,
        config: GinConfig,
        token_store: TokenStore | None = None,
        navigator: Navigator | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the async GIN client.

        Args:
            config: Service URLs and OAuth client credentials
            token_store: Where the token is persisted (default: in memory)
            navigator: Redirect target (default: system web browser)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (default: no retries)
            transport: Optional httpx async transport, e.g. for testing
        """
        self.config = config
        self.timeout = timeout
        self.session = Session(config, token_store=token_store, navigator=navigator)

        self._transport = AsyncHTTPTransport(
            session=self.session,
            timeout=timeout,
            retry_config=retry_config,
            transport=transport,
        )

        # Initialize async resource clients
        self.accounts = AsyncAccountsClient(self._transport)
        self.keys = AsyncKeysClient(self._transport)
        self.repos = AsyncReposClient(self._transport)
        self.auth = AsyncAuthClient(self._transport, self.accounts)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "AsyncGinClient":
        """
        Create an async client from environment variables.

        See GinClient.from_env for the variables read.

        Raises:
            ConfigurationError: If required environment variables are missing
        """
        config = GinConfig.from_env()
        token_store = FileTokenStore(os.environ.get("GIN_TOKEN_FILE") or None)
        navigator = BrowserNavigator(origin=os.environ.get("GIN_ORIGIN", DEFAULT_ORIGIN))

        return cls(
            config,
            token_store=token_store,
            navigator=navigator,
            timeout=timeout,
            retry_config=retry_config,
        )

    @property
    def token(self) -> Token | None:
        """The token of the logged in session, if any."""
        return self.session.token

    @property
    def transport(self) -> AsyncHTTPTransport:
        """Get the underlying async HTTP transport (for advanced use cases)."""
        return self._transport

    async def close(self) -> None:
        """Close the client and release resources."""
        await self._transport.close()

    async def __aenter__(self) -> "AsyncGinClient":
        """Async context manager entry."""
        return self

    async def __aexit__(self, *args: Any) -> None:
        """Async context manager exit - closes the client."""
        await self.close()
