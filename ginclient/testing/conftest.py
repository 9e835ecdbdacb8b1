"""
Pytest plugin for GIN client testing fixtures.

This module re-exports all fixtures from fixtures.py so they can be
automatically discovered by pytest.

To use these fixtures in your tests, add this to your conftest.py:

    pytest_plugins = ["ginclient.testing.conftest"]

Or import the fixtures directly:

    from ginclient.testing.fixtures import gin_client, mock_server
"""

# Re-export all fixtures for pytest auto-discovery
from ginclient.testing.fixtures import (
    gin_client,
    gin_config,
    logged_in_client,
    mock_server,
    navigator,
    sample_token,
    token_store,
)

__all__ = [
    "gin_config",
    "mock_server",
    "navigator",
    "token_store",
    "gin_client",
    "sample_token",
    "logged_in_client",
]
