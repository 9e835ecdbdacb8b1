"""
GIN client.

Provides the primary interface for interacting with the GIN services.
"""

import os
from typing import Any

import httpx

from ginclient.clients import AccountsClient, AuthClient, KeysClient, ReposClient
from ginclient.config import GinConfig
from ginclient.navigator import DEFAULT_ORIGIN, BrowserNavigator, Navigator
from ginclient.session import Session
from ginclient.storage import FileTokenStore, TokenStore
from ginclient.transport import HTTPTransport, RetryConfig
from ginclient.types.token import Token


class GinClient:
    """
    Main client for interacting with the GIN services.

    Aggregates all resource clients around one session.

    Example:
        ```python
        from ginclient import GinClient, GinConfig

        config = GinConfig(
            auth_url="https://auth.gin.g-node.org",
            repo_url="https://repo.gin.g-node.org",
            client_id="gin",
        )
        with GinClient(config) as client:
            client.auth.restore()
            for repo in client.repos.list_shared():
                print(repo.owner, repo.name)
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
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """
        Initialize the GIN client.

        Args:
            config: Service URLs and OAuth client credentials
            token_store: Where the token is persisted (default: in memory)
            navigator: Redirect target (default: system web browser)
            timeout: Request timeout in seconds (default: 30.0)
            retry_config: Configuration for retry behavior (default: no retries)
            transport: Optional httpx transport, e.g. for testing
        """
        self.config = config
        self.timeout = timeout
        self.session = Session(config, token_store=token_store, navigator=navigator)

        self._transport = HTTPTransport(
            session=self.session,
            timeout=timeout,
            retry_config=retry_config,
            transport=transport,
        )

        # Initialize resource clients
        self.accounts = AccountsClient(self._transport)
        self.keys = KeysClient(self._transport)
        self.repos = ReposClient(self._transport)
        self.auth = AuthClient(self._transport, self.accounts)

    @classmethod
    def from_env(
        cls,
        timeout: float = DEFAULT_TIMEOUT,
        retry_config: RetryConfig | None = None,
    ) -> "GinClient":
        """
        Create a client from environment variables.

        Environment variables:
            GIN_AUTH_URL, GIN_REPO_URL, GIN_CLIENT_ID: see GinConfig.from_env (required)
            GIN_DOI_URL, GIN_CLIENT_SECRET: see GinConfig.from_env (optional)
            GIN_ORIGIN: Origin the provider redirects back to (optional)
            GIN_TOKEN_FILE: Token store location (optional, default:
                ~/.config/ginclient/storage.json)

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
    def transport(self) -> HTTPTransport:
        """Get the underlying HTTP transport (for advanced use cases)."""
        return self._transport

    def close(self) -> None:
        """Close the client and release resources."""
        self._transport.close()

    def __enter__(self) -> "GinClient":
        """Context manager entry."""
        return self

    def __exit__(self, *args: Any) -> None:
        """Context manager exit - closes the client."""
        self.close()
