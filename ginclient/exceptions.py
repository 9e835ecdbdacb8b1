"""GIN client exception classes."""

from typing import Any


class GinError(Exception):
    """Base exception for all GIN client errors."""

    kind = "error"

    def __init__(
        self,
        code: str,
        message: str,
        status_code: int | None = None,
        body: Any = None,
    ) -> None:
        self.code = code
        self.message = message
        self.status_code = status_code
        self.body = body
        super().__init__(f"[{code}] {message}")


class ConfigurationError(GinError):
    """Raised when client configuration is invalid or missing."""

    kind = "configuration"

    def __init__(self, message: str) -> None:
        super().__init__("CONFIGURATION_ERROR", message)


class ValidationError(GinError):
    """Raised when input is rejected locally, before any request is made."""

    kind = "validation"

    def __init__(self, message: str, code: str = "VALIDATION_ERROR") -> None:
        super().__init__(code, message)


class NetworkError(GinError):
    """Raised when a request could not be completed at the connection level."""

    kind = "network"

    def __init__(self, message: str) -> None:
        super().__init__("CONNECTION_ERROR", message)


class RemoteError(GinError):
    """Raised when a service answers with a non-2xx status."""

    kind = "remote"


class AuthError(RemoteError):
    """Raised when the identity provider rejects a token at login."""

    pass


class AuthenticationError(RemoteError):
    """Raised on 401 responses."""

    pass


class AuthorizationError(RemoteError):
    """Raised when access is denied."""

    pass


class NotFoundError(RemoteError):
    """Raised when a resource is not found."""

    pass


class ConflictError(RemoteError):
    """Raised on conflicts (existing repository, duplicate key, etc.)."""

    pass


class RateLimitedError(RemoteError):
    """Raised when rate limited."""

    def __init__(
        self,
        code: str,
        message: str,
        retry_after: int,
        status_code: int | None = 429,
        body: Any = None,
    ) -> None:
        super().__init__(code, message, status_code, body)
        self.retry_after = retry_after


class ServerError(RemoteError):
    """Raised on server errors (5xx)."""

    pass


class SessionError(GinError):
    """Base class for problems with the locally held session token."""

    kind = "session"


class NoTokenError(SessionError):
    """Raised by restore() when the token store holds no usable token."""

    def __init__(self, message: str = "No token in token store") -> None:
        super().__init__("NO_TOKEN", message)


class ExpiredTokenError(SessionError):
    """Raised by restore() when the stored token is past its expiry."""

    def __init__(self, message: str = "Token was expired") -> None:
        super().__init__("TOKEN_EXPIRED", message)


class NotAuthenticatedError(SessionError):
    """Raised when an operation needs a token and none is set."""

    def __init__(self, message: str = "Operation requires a logged in session") -> None:
        super().__init__("NOT_AUTHENTICATED", message)
