"""SSH keys resource client."""

from typing import TYPE_CHECKING, Any

from ginclient.clients.accounts import account_url
from ginclient.transport import AUTH_REQUIRED
from ginclient.types.accounts import SSHKey
from ginclient.types.token import parse_timestamp

if TYPE_CHECKING:
    from ginclient.transport import HTTPTransport


def _parse_key(data: dict[str, Any]) -> SSHKey:
    """Parse an SSH key object; the key text is sent as "key"."""
    return SSHKey(
        fingerprint=data["fingerprint"],
        public_key=data.get("key") if "key" in data else data.get("public_key", ""),
        description=data.get("description") or "",
        login=data.get("login"),
        temporary=data.get("temporary", False),
        url=data.get("url"),
        created_at=parse_timestamp(data.get("created_at")),
        updated_at=parse_timestamp(data.get("updated_at")),
    )


def _fingerprint(key: SSHKey | str) -> str:
    return key.fingerprint if isinstance(key, SSHKey) else key


class KeysClient:
    """Client for the SSH public keys of an account."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the keys client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _auth_url(self) -> str:
        return self.transport.session.config.auth_url

    def list(self, login: str) -> list[SSHKey]:
        """
        List the keys of an account.

        Raises:
            NotAuthenticatedError: If not logged in
        """
        data = self.transport.request(
            "GET",
            account_url(self._auth_url, login, "keys"),
            auth=AUTH_REQUIRED,
        )
        return [_parse_key(item) for item in data or []]

    def create(
        self,
        login: str,
        public_key: str,
        description: str = "",
        temporary: bool = False,
    ) -> SSHKey:
        """
        Register a public key for an account.

        Args:
            login: Account the key belongs to
            public_key: Key in OpenSSH format ("ssh-rsa AAAA... comment")
            description: Free-form label
            temporary: Whether the service may expire the key

        Returns:
            The stored key, including its fingerprint

        Raises:
            NotAuthenticatedError: If not logged in
            RemoteError: If the key is malformed or already registered
        """
        data = self.transport.request(
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

    def remove(self, key: SSHKey | str) -> SSHKey | None:
        """
        Remove a key.

        Args:
            key: The key, or its fingerprint

        Returns:
            The removed key if the service echoes it, else None
        """
        data = self.transport.request(
            "DELETE",
            f"{self._auth_url}/api/keys",
            params={"fingerprint": _fingerprint(key)},
            auth=AUTH_REQUIRED,
        )
        return _parse_key(data) if isinstance(data, dict) else None
