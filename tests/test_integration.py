"""
Integration tests for the GIN client.

These tests run read-only requests against a live GIN deployment. They use
anonymous access only and never log in.
"""

import os

import pytest

from ginclient import GinClient, GinConfig
from ginclient.exceptions import NotAuthenticatedError, NotFoundError

# Skip all integration tests if no deployment is configured
pytestmark = pytest.mark.skipif(
    os.environ.get("GIN_INTEGRATION_TESTS") != "1",
    reason="Integration tests require GIN_INTEGRATION_TESTS=1 and GIN_* URLs",
)


@pytest.fixture
def live_client():
    config = GinConfig(
        auth_url=os.environ.get("GIN_AUTH_URL", "https://auth.gin.g-node.org"),
        repo_url=os.environ.get("GIN_REPO_URL", "https://repo.gin.g-node.org"),
        client_id=os.environ.get("GIN_CLIENT_ID", "gin"),
    )
    with GinClient(config) as client:
        yield client


class TestAnonymousAccess:
    """Requests that do not need a token."""

    def test_list_public_and_filter(self, live_client) -> None:
        repos = live_client.repos.list_public()

        assert all(repo.public for repo in repos)
        assert live_client.repos.filter_repos("", repos) == repos

    def test_missing_repository(self, live_client) -> None:
        with pytest.raises(NotFoundError):
            live_client.repos.get_repo("no-such-user-x", "no-such-repo")

    def test_required_auth_is_local(self, live_client) -> None:
        with pytest.raises(NotAuthenticatedError):
            live_client.repos.list_commits("any", "repo", "master")
