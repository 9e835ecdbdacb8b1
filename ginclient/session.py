"""
Session context shared by all resource clients of one GIN client.
"""

import threading

from ginclient.config import GinConfig
from ginclient.exceptions import ExpiredTokenError, NoTokenError, NotAuthenticatedError
from ginclient.logging import get_logger, log_auth_operation
from ginclient.navigator import BrowserNavigator, Navigator
from ginclient.storage import TOKEN_KEY, MemoryTokenStore, TokenStore
from ginclient.types.token import Token

logger = get_logger("auth")


class Session:
    """
    Configuration plus the current token.

    The token is the only mutable state. It is swapped under a lock by
    login, logout and restore and read once per request when the request
    is built.
    """

    def __init__(
        self,
        config: GinConfig,
        token_store: TokenStore | None = None,
        navigator: Navigator | None = None,
    ) -> None:
        """
        Initialize the session.

        Args:
            config: Deployment configuration
            token_store: Where the token is persisted (default: in memory)
            navigator: Redirect target (default: system web browser)
        """
        self.config = config
        self.token_store = token_store or MemoryTokenStore()
        self.navigator = navigator or BrowserNavigator()
        self._token: Token | None = None
        self._lock = threading.Lock()

    @property
    def token(self) -> Token | None:
        with self._lock:
            return self._token

    def set_token(self, token: Token, persist: bool = False) -> None:
        """Adopt token as the current token, optionally writing it to the store."""
        with self._lock:
            self._token = token
            if persist:
                self.token_store.set(TOKEN_KEY, token.to_json())

    def clear_token(self) -> Token | None:
        """Drop the current and the stored token, returning the dropped one."""
        with self._lock:
            token, self._token = self._token, None
            self.token_store.remove(TOKEN_KEY)
        return token

    def load_stored_token(self) -> Token:
        """
        Read the persisted token and check that it can be reused.

        Raises:
            NoTokenError: If nothing usable is stored
            ExpiredTokenError: If the stored token is past its expiry
        """
        raw = self.token_store.get(TOKEN_KEY)
        if not raw:
            raise NoTokenError()
        try:
            token = Token.from_json(raw)
        except ValueError as e:
            logger.warning("Stored token could not be parsed: %s", e)
            raise NoTokenError("Stored token could not be parsed") from e
        if token.is_expired():
            log_auth_operation("restore_rejected", token.login, token.jti)
            raise ExpiredTokenError()
        return token

    def auth_headers(self, required: bool = False) -> dict[str, str]:
        """
        Bearer header for the current token.

        Args:
            required: Raise instead of returning no header when logged out

        Raises:
            NotAuthenticatedError: If required and no token is set
        """
        token = self.token
        if token is None:
            if required:
                raise NotAuthenticatedError()
            return {}
        return {"Authorization": f"Bearer {token.jti}"}

    def require_token(self) -> Token:
        token = self.token
        if token is None:
            raise NotAuthenticatedError()
        return token
