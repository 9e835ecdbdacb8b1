"""Async SSH keys resource client."""

from typing import TYPE_CHECKING

from ginclient.clients.accounts import account_url
from ginclient.clients.keys import _fingerprint, _parse_key
from ginclient.transport import AUTH_REQUIRED
from ginclient.types.accounts import SSHKey

if TYPE_CHECKING:
    from ginclient.async_transport import AsyncHTTPTransport


class AsyncKeysClient:
    """Async client for the SSH public keys of an account."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async keys client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _auth_url(self) -> str:
        return self.transport.session.config.auth_url

    async def list(self, login: str) -> list[SSHKey]:
        """List the keys of an account."""
        data = await self.transport.request(
            "GET",
            account_url(self._auth_url, login, "keys"),
            auth=AUTH_REQUIRED,
        )
        return [_parse_key(item) for item in data or []]

    async def create(
        self,
        login: str,
        public_key: str,
        description: str = "",
        temporary: bool = False,
    ) -> SSHKey:
        """Register a public key for an account."""
        data = await self.transport.request(
            "POST",
            account_url(self._auth_url, login, "keys"),
            body={
                "key": public_key,
                "description": description,
                "temporary": temporary,
            },
            auth=AUTH_REQUIRED,
        )
        return _parse_key(data)

    async def remove(self, key: SSHKey | str) -> SSHKey | None:
        """Remove a key, given the key or its fingerprint."""
        data = await self.transport.request(
            "DELETE",
            f"{self._auth_url}/api/keys",
            params={"fingerprint": _fingerprint(key)},
            auth=AUTH_REQUIRED,
        )
        return _parse_key(data) if isinstance(data, dict) else None
