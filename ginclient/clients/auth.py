"""Authentication client: OAuth redirects and the token lifecycle."""

from typing import TYPE_CHECKING

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
    from ginclient.clients.accounts import AccountsClient
    from ginclient.session import Session
    from ginclient.transport import HTTPTransport


def _auth_error(error: RemoteError) -> AuthError:
    return AuthError(error.code, error.message, error.status_code, error.body)


class AuthClient:
    """
    Client for login, logout and session restore.

    Owns the token lifecycle: login and restore adopt a token into the
    session, logout drops it. Account data for the logged in user is
    fetched through the accounts client.
    """

    def __init__(self, transport: "HTTPTransport", accounts: "AccountsClient") -> None:
        """
        Initialize the auth client.

        Args:
            transport: HTTP transport for making requests
            accounts: Accounts client used to load the logged in account
        """
        self.transport = transport
        self.accounts = accounts

    @property
    def session(self) -> "Session":
        return self.transport.session

    def authorize(self) -> None:
        """
        Send the user to the provider's login page.

        On success the provider redirects to {origin}/oauth/login with an
        access token, which the application passes to login().
        """
        session = self.session
        state = generate_state(session.config.client_id, session.navigator.user_agent)
        log_auth_operation("authorize")
        session.navigator.navigate(authorize_url(session.config, session.navigator.origin, state))

    def login(self, token_str: str) -> Account:
        """
        Validate an access token and log in with it.

        Args:
            token_str: Access token as received from the provider redirect

        Returns:
            The account the token belongs to

        Raises:
            AuthError: If the provider rejects the token
        """
        url = f"{self.session.config.auth_url}/oauth/validate/{encode_component(token_str)}"
        try:
            data = self.transport.request("GET", url, auth=AUTH_NONE)
        except RemoteError as e:
            raise _auth_error(e) from e
        try:
            token = Token.from_dict(data)
        except ValueError as e:
            raise AuthError("INVALID_TOKEN", str(e), body=data) from e

        self.session.set_token(token, persist=True)
        log_auth_operation("login", token.login, token.jti)
        return self.accounts.get(token.login)

    def logout(self) -> None:
        """
        Drop the current token and send the user to the provider's logout page.

        Does nothing when not logged in.
        """
        session = self.session
        token = session.token
        if token is None:
            return
        session.clear_token()
        log_auth_operation("logout", token.login, token.jti)
        session.navigator.navigate(logout_url(session.config, session.navigator.origin, token))

    def restore(self) -> Account:
        """
        Resume the session stored by an earlier login.

        Returns:
            The account the stored token belongs to

        Raises:
            NoTokenError: If no token is stored
            ExpiredTokenError: If the stored token has expired
        """
        token = self.session.load_stored_token()
        self.session.set_token(token)
        log_auth_operation("restore", token.login, token.jti)
        return self.accounts.get(token.login)

    def register(self) -> None:
        """Send the user to the provider's account registration page."""
        session = self.session
        state = generate_state(session.config.client_id, session.navigator.user_agent)
        log_auth_operation("register")
        session.navigator.navigate(
            registration_url(session.config, session.navigator.origin, state)
        )

    def get_static_file(self, url: str) -> str:
        """Fetch a static document (e.g. a page under config.static_content) as text."""
        return self.transport.request("GET", url, auth=AUTH_NONE, expect=EXPECT_TEXT)
