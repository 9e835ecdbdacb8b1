"""
Tests for GIN client testing utilities.

Verifies that MockGinServer, RecordingNavigator and the factories work correctly.
"""

import httpx
import pytest

from ginclient import GinClient
from ginclient.exceptions import NetworkError, NotFoundError
from ginclient.testing import (
    REPO_URL,
    MockGinServer,
    RecordingNavigator,
    create_mock_repository,
    create_mock_token,
)

PUBLIC = f"{REPO_URL}/repos/public"


class TestMockGinServer:
    """Tests for MockGinServer."""

    def test_unconfigured_route_is_not_found(self, gin_client) -> None:
        """Requests without a configured response get a 404."""
        with pytest.raises(NotFoundError) as exc_info:
            gin_client.repos.list_public()

        assert "No mock route" in exc_info.value.message

    def test_call_tracking(self, gin_client, mock_server) -> None:
        """Requests are recorded with method, url, params and body."""
        mock_server.configure("GET", PUBLIC, data=[])

        gin_client.repos.list_public()
        gin_client.repos.list_public()

        assert mock_server.was_called("GET", PUBLIC)
        assert mock_server.call_count("GET", PUBLIC) == 2
        assert mock_server.call_count("get") == 2
        assert not mock_server.was_called("POST")
        assert mock_server.calls[0].body is None
        assert mock_server.calls[0].timestamp <= mock_server.calls[1].timestamp

    def test_configured_error(self, gin_client, mock_server) -> None:
        """A configured exception is raised in place of a response."""
        mock_server.configure("GET", PUBLIC, error=httpx.ReadTimeout("timed out"))

        with pytest.raises(NetworkError):
            gin_client.repos.list_public()

    def test_reset(self, mock_server) -> None:
        """reset() drops recorded calls and configured routes."""
        mock_server.configure("GET", PUBLIC, data=[])
        with httpx.Client(transport=mock_server.transport()) as http:
            assert http.get(PUBLIC).status_code == 200

            mock_server.reset()

            assert mock_server.calls == []
            assert http.get(PUBLIC).status_code == 404

    def test_standalone_use(self, gin_config) -> None:
        """The server can be wired to a client without the fixtures."""
        server = MockGinServer()
        server.configure("GET", PUBLIC, data=[{"Name": "r", "Owner": "o"}])

        with GinClient(gin_config, transport=server.transport()) as client:
            repos = client.repos.list_public()

        assert repos[0].name == "r"


class TestRecordingNavigator:
    """Tests for RecordingNavigator."""

    def test_records_urls(self) -> None:
        navigator = RecordingNavigator(origin="https://app.example.org")

        assert navigator.last_url is None
        navigator.navigate("https://a")
        navigator.navigate("https://b")

        assert navigator.urls == ["https://a", "https://b"]
        assert navigator.last_url == "https://b"
        assert navigator.origin == "https://app.example.org"


class TestFactories:
    """Tests for the factory helpers."""

    def test_create_mock_token(self) -> None:
        token = create_mock_token(login="bob", jti="abc")

        assert (token.login, token.jti) == ("bob", "abc")
        assert not token.is_expired()
        assert create_mock_token().jti != create_mock_token().jti

    def test_create_mock_repository(self) -> None:
        repo = create_mock_repository("data", owner="bob")

        assert repo.url == f"{REPO_URL}/users/bob/repos/data"
        assert repo.public is True
