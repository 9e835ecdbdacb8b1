"""
Pytest fixtures for GIN client testing.

Provides wire-format factories and common fixtures for testing code that
uses the GIN client.
"""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Generator

import pytest

from ginclient.client import GinClient
from ginclient.config import GinConfig
from ginclient.storage import MemoryTokenStore
from ginclient.testing.mock import MockGinServer, RecordingNavigator
from ginclient.types.repos import Repository
from ginclient.types.token import Token

AUTH_URL = "https://auth.gin.test"
REPO_URL = "https://repo.gin.test"
DOI_URL = "https://doi.gin.test/register"


# ============================================================================
# Helper Functions
# ============================================================================


def create_mock_token_data(
    login: str = "alice",
    jti: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
    **claims: Any,
) -> dict[str, Any]:
    """Build a token object as returned by the validate endpoint."""
    exp = datetime.now(timezone.utc) + expires_in
    data: dict[str, Any] = {
        "url": f"{AUTH_URL}/api/tokens/{jti or 'token'}",
        "jti": jti or uuid.uuid4().hex,
        "exp": exp.isoformat(),
        "iat": datetime.now(timezone.utc).isoformat(),
        "iss": AUTH_URL,
        "login": login,
        "account_url": f"{AUTH_URL}/api/accounts/{login}",
        "scope": "account-read account-write repo-read repo-write",
        "client_id": "gin",
    }
    data.update(claims)
    return data


def create_mock_token(
    login: str = "alice",
    jti: str | None = None,
    expires_in: timedelta = timedelta(hours=1),
) -> Token:
    """Create a Token with sensible defaults."""
    return Token.from_dict(create_mock_token_data(login, jti, expires_in))


def create_mock_account_data(login: str = "alice", **overrides: Any) -> dict[str, Any]:
    """Build an account object as returned by the auth service."""
    data: dict[str, Any] = {
        "url": f"{AUTH_URL}/api/accounts/{login}",
        "login": login,
        "title": None,
        "first_name": login.capitalize(),
        "middle_name": None,
        "last_name": "Example",
        "email": {"email": f"{login}@example.org", "is_public": False},
        "affiliation": {
            "institute": "G-Node",
            "department": "Neuroinformatics",
            "city": "Munich",
            "country": "Germany",
            "is_public": True,
        },
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-15T10:30:00Z",
    }
    data.update(overrides)
    return data


def create_mock_repository_data(
    name: str = "mock-repo",
    owner: str = "alice",
    description: str = "",
    public: bool = True,
) -> dict[str, Any]:
    """Build a repository object as returned by the repository service."""
    return {
        "URL": f"{REPO_URL}/users/{owner}/repos/{name}",
        "Name": name,
        "Owner": owner,
        "Description": description,
        "Public": public,
    }


def create_mock_repository(
    name: str = "mock-repo",
    owner: str = "alice",
    description: str | None = None,
    public: bool = True,
) -> Repository:
    """Create a Repository with sensible defaults."""
    return Repository(
        name=name,
        owner=owner,
        description=description,
        public=public,
        url=f"{REPO_URL}/users/{owner}/repos/{name}",
    )


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def gin_config() -> GinConfig:
    """Provide a configuration pointing at the mock services."""
    return GinConfig(
        auth_url=AUTH_URL,
        repo_url=REPO_URL,
        doi_url=DOI_URL,
        client_id="gin",
        client_secret="secret",
    )


@pytest.fixture
def mock_server() -> Generator[MockGinServer, None, None]:
    """
    Provide a MockGinServer.

    Example:
        ```python
        def test_my_feature(mock_server, gin_client):
            mock_server.configure("GET", f"{REPO_URL}/repos/public", data=[])
            assert gin_client.repos.list_public() == []
        ```
    """
    server = MockGinServer()
    yield server
    server.reset()


@pytest.fixture
def navigator() -> RecordingNavigator:
    """Provide a navigator that records redirects."""
    return RecordingNavigator()


@pytest.fixture
def token_store() -> MemoryTokenStore:
    """Provide an empty in-memory token store."""
    return MemoryTokenStore()


@pytest.fixture
def gin_client(
    gin_config: GinConfig,
    mock_server: MockGinServer,
    token_store: MemoryTokenStore,
    navigator: RecordingNavigator,
) -> Generator[GinClient, None, None]:
    """Provide a GinClient wired to the mock server."""
    client = GinClient(
        gin_config,
        token_store=token_store,
        navigator=navigator,
        transport=mock_server.transport(),
    )
    yield client
    client.close()


@pytest.fixture
def sample_token() -> Token:
    """Provide a token valid for one hour."""
    return create_mock_token()


@pytest.fixture
def logged_in_client(gin_client: GinClient, sample_token: Token) -> GinClient:
    """Provide a GinClient with sample_token adopted in its session."""
    gin_client.session.set_token(sample_token)
    return gin_client
