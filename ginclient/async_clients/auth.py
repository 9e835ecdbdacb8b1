"""Async authentication client."""

import asyncio
from typing import TYPE_CHECKING

from ginclient.clients.auth import _auth_error
from ginclient.exceptions import AuthError, RemoteError
from ginclient.logging import log_auth_operation
from ginclient.redirects import (
    authorize_url,
    encode_component,
    generate_state,
    logout_url,
    registration_url,
)
from ginclient.transport import AUTH_NONE, EXPECT_TEXT
from ginclient.types.accounts import Account
from ginclient.types.token import Token

if TYPE_CHECKING:
    from ginclient.async_clients.accounts import AsyncAccountsClient
    from ginclient.async_transport import AsyncHTTPTransport
    from ginclient.session import Session


class AsyncAuthClient:
    """
    Async client for login, logout and session restore.

    Redirects (authorize, register, logout) only hand a URL to the
    navigator and stay plain methods. Token store reads and writes made by
    login and restore run in a worker thread, so a FileTokenStore does not
    block the event loop.
    """

    def __init__(
        self, transport: "AsyncHTTPTransport", accounts: "AsyncAccountsClient"
    ) -> None:
        """
        Initialize the async auth client.

        Args:
            transport: Async HTTP transport for making requests
            accounts: Accounts client used to load the logged in account
        """
        self.transport = transport
        self.accounts = accounts

    @property
    def session(self) -> "Session":
        return self.transport.session

    def authorize(self) -> None:
        """Send the user to the provider's login page."""
        session = self.session
        state = generate_state(session.config.client_id, session.navigator.user_agent)
        log_auth_operation("authorize")
        session.navigator.navigate(authorize_url(session.config, session.navigator.origin, state))

    async def login(self, token_str: str) -> Account:
        """
        Validate an access token and log in with it.

        Raises:
            AuthError: If the provider rejects the token
        """
        url = f"{self.session.config.auth_url}/oauth/validate/{encode_component(token_str)}"
        try:
            data = await self.transport.request("GET", url, auth=AUTH_NONE)
        except RemoteError as e:
            raise _auth_error(e) from e
        try:
            token = Token.from_dict(data)
        except ValueError as e:
            raise AuthError("INVALID_TOKEN", str(e), body=data) from e

        await asyncio.to_thread(self.session.set_token, token, True)
        log_auth_operation("login", token.login, token.jti)
        return await self.accounts.get(token.login)

    def logout(self) -> None:
        """
        Drop the current token and send the user to the provider's logout page.

        Removes the stored token synchronously; with a file-backed store,
        call from a thread (asyncio.to_thread) when the loop must not block.
        """
        session = self.session
        token = session.token
        if token is None:
            return
        session.clear_token()
        log_auth_operation("logout", token.login, token.jti)
        session.navigator.navigate(logout_url(session.config, session.navigator.origin, token))

    async def restore(self) -> Account:
        """
        Resume the session stored by an earlier login.

        Raises:
            NoTokenError: If no token is stored
            ExpiredTokenError: If the stored token has expired
        """
        token = await asyncio.to_thread(self.session.load_stored_token)
        self.session.set_token(token)
        log_auth_operation("restore", token.login, token.jti)
        return await self.accounts.get(token.login)

    def register(self) -> None:
        """Send the user to the provider's account registration page."""
        session = self.session
        state = generate_state(session.config.client_id, session.navigator.user_agent)
        log_auth_operation("register")
        session.navigator.navigate(
            registration_url(session.config, session.navigator.origin, state)
        )

    async def get_static_file(self, url: str) -> str:
        """Fetch a static document as text."""
        return await self.transport.request("GET", url, auth=AUTH_NONE, expect=EXPECT_TEXT)
