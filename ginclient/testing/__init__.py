"""GIN client testing utilities.

Provides a mock server, a recording navigator and fixtures for testing
applications that use the GIN client.
"""

from ginclient.testing.fixtures import (
    AUTH_URL,
    DOI_URL,
    REPO_URL,
    create_mock_account_data,
    create_mock_repository,
    create_mock_repository_data,
    create_mock_token,
    create_mock_token_data,
)
from ginclient.testing.mock import MockCall, MockGinServer, MockResponse, RecordingNavigator

__all__ = [
    # Mock services
    "MockGinServer",
    "MockCall",
    "MockResponse",
    "RecordingNavigator",
    # Helper functions
    "create_mock_token",
    "create_mock_token_data",
    "create_mock_account_data",
    "create_mock_repository",
    "create_mock_repository_data",
    # Mock service URLs
    "AUTH_URL",
    "REPO_URL",
    "DOI_URL",
]
