"""
Redirect URLs for the browser-facing parts of the OAuth flow and DOI requests.

Implements the anti-replay state and the query strings sent to the auth and
DOI services.
"""

import hashlib
import uuid
from urllib.parse import quote

from ginclient.config import GinConfig
from ginclient.types.token import Token

AUTHORIZE_SCOPE = "account-read account-write repo-read repo-write"
REGISTRATION_SCOPE = "account-create"

# Characters encodeURIComponent leaves alone, on top of quote()'s defaults
_URI_COMPONENT_SAFE = "!*'()"


def encode_component(value: str) -> str:
    """Percent-encode a single URL component (spaces become %20)."""
    return quote(value, safe=_URI_COMPONENT_SAFE)


def encode_query(params: list[tuple[str, str]]) -> str:
    """Encode ordered key/value pairs as a query string."""
    return "&".join(f"{encode_component(k)}={encode_component(v)}" for k, v in params)


def compute_state_hash(client_id: str, user_agent: str, nonce: str) -> str:
    """
    Compute the OAuth state value for one authorization round trip.

    The state is computed as SHA256(client_id + ":" + user_agent + ":" + nonce)
    and returned as a hex string.

    Args:
        client_id: OAuth client id the request is made for
        user_agent: User agent of the application being redirected
        nonce: Fresh UUID v4

    Returns:
        Hex-encoded SHA256 hash
    """
    data = f"{client_id}:{user_agent}:{nonce}"
    return hashlib.sha256(data.encode("utf-8")).hexdigest()


def generate_state(client_id: str, user_agent: str) -> str:
    """Generate a fresh state value bound to client id and user agent."""
    return compute_state_hash(client_id, user_agent, str(uuid.uuid4()))


def authorize_url(config: GinConfig, origin: str, state: str) -> str:
    """URL of the provider's authorization page (implicit token grant)."""
    params = [
        ("response_type", "token"),
        ("client_id", config.client_id),
        ("redirect_uri", f"{origin}/oauth/login"),
        ("scope", AUTHORIZE_SCOPE),
        ("state", state),
    ]
    return f"{config.auth_url}/oauth/authorize?{encode_query(params)}"


def registration_url(config: GinConfig, origin: str, state: str) -> str:
    """URL of the provider's account registration page."""
    params = [
        ("response_type", "client"),
        ("client_id", config.client_id),
        ("redirect_uri", origin),
        ("scope", REGISTRATION_SCOPE),
        ("state", state),
    ]
    return f"{config.auth_url}/oauth/registration_init?{encode_query(params)}"


def logout_url(config: GinConfig, origin: str, token: Token) -> str:
    """URL that ends the provider session for token and returns to origin."""
    return (
        f"{config.auth_url}/oauth/logout/{encode_component(token.jti)}"
        f"?redirect_uri={encode_component(origin)}"
    )


def doi_request_url(
    config: GinConfig, token: Token, owner: str, repo_name: str, branch: str
) -> str:
    """URL of the DOI service's request form for a repository branch."""
    params = [
        ("repo", f"{branch}:{owner}/{repo_name}"),
        ("user", token.login),
        ("token", f"Bearer {token.jti}"),
    ]
    return f"{config.doi_url}?{encode_query(params)}"
