#!/usr/bin/env python3
"""
Basic GIN client usage example.

Runs offline: the client is wired to a MockGinServer, so no deployment or
account is needed.
Run with: python examples/basic_usage.py
"""

from ginclient import GinClient, GinConfig, ValidationError
from ginclient.testing import (
    AUTH_URL,
    REPO_URL,
    MockGinServer,
    RecordingNavigator,
    create_mock_account_data,
    create_mock_repository_data,
    create_mock_token_data,
)

print("=== GIN Client Basic Usage Example ===\n")

server = MockGinServer()
navigator = RecordingNavigator()
config = GinConfig(auth_url=AUTH_URL, repo_url=REPO_URL, client_id="gin")
client = GinClient(config, navigator=navigator, transport=server.transport())

# 1. Login redirect
print("1. Starting login...")
client.auth.authorize()
print(f"   Redirected to: {navigator.last_url[:70]}...")
print("\n   OK: authorize redirect built\n")

# 2. Login with the token from the redirect
print("2. Logging in...")
server.configure("GET", f"{AUTH_URL}/oauth/validate/access-token", data=create_mock_token_data())
server.configure("GET", f"{AUTH_URL}/api/accounts/alice", data=create_mock_account_data())
account = client.auth.login("access-token")
print(f"   Logged in as: {account.login}, token expires {client.token.exp:%Y-%m-%d %H:%M}")
print("\n   OK: login working\n")

# 3. Listing and filtering
print("3. Listing public repositories...")
server.configure("GET", f"{REPO_URL}/repos/public", data=[
    create_mock_repository_data("ephys-2024", description="Tetrode recordings"),
    create_mock_repository_data("imaging", owner="bob", description="Calcium imaging"),
])
repos = client.repos.list_public()
for repo in client.repos.filter_repos("RECORDINGS", repos):
    print(f"   Match: {repo.owner}/{repo.name}")
print("\n   OK: filtering working\n")

# 4. Name validation happens before any request
print("4. Validating repository names...")
for name in ("no spaces", "ab", "x" * 21):
    try:
        client.repos.create("alice", name)
    except ValidationError as e:
        print(f"   {name!r}: {e.message}")
assert not server.was_called("POST")
print("\n   OK: validation working\n")

# 5. Logout
print("5. Logging out...")
client.auth.logout()
print(f"   Token cleared: {client.token is None}")
print(f"   Requests made: {len(server.calls)}")

client.close()
print("\n=== All basic checks passed! ===")
