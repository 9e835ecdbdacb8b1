"""GIN client resource clients."""

from ginclient.clients.accounts import AccountsClient
from ginclient.clients.auth import AuthClient
from ginclient.clients.keys import KeysClient
from ginclient.clients.repos import ReposClient

__all__ = [
    "AuthClient",
    "AccountsClient",
    "KeysClient",
    "ReposClient",
]
