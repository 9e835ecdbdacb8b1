"""GIN client - Python client for the G-Node GIN services."""

from ginclient.async_client import AsyncGinClient
from ginclient.client import GinClient
from ginclient.config import GinConfig
from ginclient.exceptions import (
    AuthenticationError,
    AuthError,
    AuthorizationError,
    ConfigurationError,
    ConflictError,
    ExpiredTokenError,
    GinError,
    NetworkError,
    NoTokenError,
    NotAuthenticatedError,
    NotFoundError,
    RateLimitedError,
    RemoteError,
    ServerError,
    SessionError,
    ValidationError,
)
from ginclient.logging import configure_logging, get_logger
from ginclient.navigator import BrowserNavigator, Navigator
from ginclient.session import Session
from ginclient.storage import TOKEN_KEY, FileTokenStore, MemoryTokenStore, TokenStore
from ginclient.transport import HTTPTransport, RetryConfig
from ginclient.types import (
    AccessLevel,
    Account,
    Branch,
    Collaborator,
    Commit,
    Repository,
    SSHKey,
    Token,
    TreeEntry,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Main Clients
    "GinClient",
    "AsyncGinClient",
    # Configuration and session
    "GinConfig",
    "Session",
    "TokenStore",
    "MemoryTokenStore",
    "FileTokenStore",
    "TOKEN_KEY",
    "Navigator",
    "BrowserNavigator",
    # Types
    "Token",
    "Account",
    "SSHKey",
    "Repository",
    "Collaborator",
    "AccessLevel",
    "Branch",
    "TreeEntry",
    "Commit",
    # Exceptions
    "GinError",
    "ConfigurationError",
    "ValidationError",
    "NetworkError",
    "RemoteError",
    "AuthError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "RateLimitedError",
    "ServerError",
    "SessionError",
    "NoTokenError",
    "ExpiredTokenError",
    "NotAuthenticatedError",
    # Transport
    "HTTPTransport",
    "RetryConfig",
    # Logging
    "configure_logging",
    "get_logger",
]
