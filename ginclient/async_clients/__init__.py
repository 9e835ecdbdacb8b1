"""GIN client async resource clients."""

from ginclient.async_clients.accounts import AsyncAccountsClient
from ginclient.async_clients.auth import AsyncAuthClient
from ginclient.async_clients.keys import AsyncKeysClient
from ginclient.async_clients.repos import AsyncReposClient

__all__ = [
    "AsyncAuthClient",
    "AsyncAccountsClient",
    "AsyncKeysClient",
    "AsyncReposClient",
]
