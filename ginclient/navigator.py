"""
Navigation side effects.

authorize, register, logout and request_doi do not call an API; they send
the user agent to a page of the auth or DOI service. A Navigator performs
that hand-over and describes the application the user comes from.
"""

import webbrowser
from abc import ABC, abstractmethod

from ginclient.logging import get_logger, mask_sensitive_data

DEFAULT_ORIGIN = "http://localhost:8080"
DEFAULT_USER_AGENT = "ginclient-python"

logger = get_logger("auth")


class Navigator(ABC):
    """Where redirects go, and who is being redirected."""

    origin: str
    user_agent: str

    @abstractmethod
    def navigate(self, url: str) -> None:
        """Send the user to url."""


class BrowserNavigator(Navigator):
    """Navigator that opens redirect targets in the system web browser."""

    def __init__(
        self,
        origin: str = DEFAULT_ORIGIN,
        user_agent: str = DEFAULT_USER_AGENT,
    ) -> None:
        """
        Initialize the navigator.

        Args:
            origin: Origin of the application the provider redirects back to
                (scheme, host and port, no trailing slash)
            user_agent: User agent string the anti-replay state is bound to
        """
        self.origin = origin.rstrip("/")
        self.user_agent = user_agent

    def navigate(self, url: str) -> None:
        if not webbrowser.open(url):
            logger.warning("No browser available, open %s manually", mask_sensitive_data(url))
