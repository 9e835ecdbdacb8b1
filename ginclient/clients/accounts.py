"""Accounts resource client."""

from typing import TYPE_CHECKING, Any

from ginclient.redirects import encode_component
from ginclient.transport import AUTH_OPTIONAL, AUTH_REQUIRED, EXPECT_NONE
from ginclient.types.accounts import Account, Affiliation, Email
from ginclient.types.token import parse_timestamp

if TYPE_CHECKING:
    from ginclient.transport import HTTPTransport


def _parse_account(data: dict[str, Any]) -> Account:
    """Parse an account object of the auth service."""
    email = data.get("email")
    affiliation = data.get("affiliation")
    return Account(
        login=data["login"],
        title=data.get("title"),
        first_name=data.get("first_name") or "",
        middle_name=data.get("middle_name"),
        last_name=data.get("last_name") or "",
        email=Email(
            email=email.get("email", ""),
            is_public=email.get("is_public", False),
        ) if isinstance(email, dict) else None,
        affiliation=Affiliation(
            institute=affiliation.get("institute", ""),
            department=affiliation.get("department", ""),
            city=affiliation.get("city", ""),
            country=affiliation.get("country", ""),
            is_public=affiliation.get("is_public", False),
        ) if isinstance(affiliation, dict) else None,
        url=data.get("url"),
        created_at=parse_timestamp(data.get("created_at")),
        updated_at=parse_timestamp(data.get("updated_at")),
    )


def account_url(auth_url: str, login: str, *parts: str) -> str:
    """URL of an account resource on the auth service."""
    url = f"{auth_url}/api/accounts/{encode_component(login)}"
    for part in parts:
        url += f"/{part}"
    return url


class AccountsClient:
    """Client for account records on the auth service."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the accounts client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _auth_url(self) -> str:
        return self.transport.session.config.auth_url

    def get(self, login: str) -> Account:
        """
        Get an account.

        Public profile data is returned for anonymous callers; the bearer
        token is sent when logged in.

        Raises:
            NotFoundError: If the account does not exist
        """
        data = self.transport.request(
            "GET",
            account_url(self._auth_url, login),
            auth=AUTH_OPTIONAL,
        )
        return _parse_account(data)

    def search(self, text: str) -> list[Account]:
        """Search accounts by login, name or e-mail."""
        data = self.transport.request(
            "GET",
            f"{self._auth_url}/api/accounts",
            params={"q": text},
            auth=AUTH_OPTIONAL,
        )
        return [_parse_account(item) for item in data or []]

    def update(self, account: Account) -> Account:
        """
        Update the profile of an account.

        Args:
            account: Account with the new profile values

        Returns:
            The account as stored by the service

        Raises:
            NotAuthenticatedError: If not logged in
            AuthorizationError: If the token may not edit this account
        """
        data = self.transport.request(
            "PUT",
            account_url(self._auth_url, account.login),
            body=account.to_dict(),
            auth=AUTH_REQUIRED,
        )
        return _parse_account(data)

    def update_password(
        self,
        login: str,
        password_old: str,
        password_new: str,
        password_new_repeat: str,
    ) -> None:
        """
        Change the password of an account.

        Raises:
            NotAuthenticatedError: If not logged in
            RemoteError: If the old password is wrong or the new ones differ
        """
        self.transport.request(
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

    def update_email(self, login: str, email: str, password: str) -> None:
        """
        Change the e-mail address of an account.

        The current password is required by the service.
        """
        self.transport.request(
            "PUT",
            account_url(self._auth_url, login, "email"),
            body={"password": password, "email": email},
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )
