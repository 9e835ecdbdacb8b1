"""Async accounts resource client."""

from typing import TYPE_CHECKING

from ginclient.clients.accounts import _parse_account, account_url
from ginclient.transport import AUTH_OPTIONAL, AUTH_REQUIRED, EXPECT_NONE
from ginclient.types.accounts import Account

if TYPE_CHECKING:
    from ginclient.async_transport import AsyncHTTPTransport


class AsyncAccountsClient:
    """Async client for account records on the auth service."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async accounts client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _auth_url(self) -> str:
        return self.transport.session.config.auth_url

    async def get(self, login: str) -> Account:
        """Get an account; the bearer token is sent when logged in."""
        data = await self.transport.request(
            "GET",
            account_url(self._auth_url, login),
            auth=AUTH_OPTIONAL,
        )
        return _parse_account(data)

    async def search(self, text: str) -> list[Account]:
        """Search accounts by login, name or e-mail."""
        data = await self.transport.request(
            "GET",
            f"{self._auth_url}/api/accounts",
            params={"q": text},
            auth=AUTH_OPTIONAL,
        )
        return [_parse_account(item) for item in data or []]

    async def update(self, account: Account) -> Account:
        """Update the profile of an account."""
        data = await self.transport.request(
            "PUT",
            account_url(self._auth_url, account.login),
            body=account.to_dict(),
            auth=AUTH_REQUIRED,
        )
        return _parse_account(data)

    async def update_password(
        self,
        login: str,
        password_old: str,
        password_new: str,
        password_new_repeat: str,
    ) -> None:
        """Change the password of an account."""
        await self.transport.request(
            "PUT",
            account_url(self._auth_url, login, "password"),
            body={
                "password_old": password_old,
                "password_new": password_new,
                "password_new_repeat": password_new_repeat,
            },
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    async def update_email(self, login: str, email: str, password: str) -> None:
        """Change the e-mail address of an account."""
        await self.transport.request(
            "PUT",
            account_url(self._auth_url, login, "email"),
            body={"password": password, "email": email},
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )
