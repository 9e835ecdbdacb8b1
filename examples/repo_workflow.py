#!/usr/bin/env python3
"""
GIN Python client - Repository Workflow Example

This example demonstrates a logged-in session:
1. Resume the stored session, or log in with an access token
2. Browse public and shared repositories
3. Create a repository and add a collaborator
4. Walk the root directory of a branch

Configure with GIN_AUTH_URL, GIN_REPO_URL and GIN_CLIENT_ID. Pass the access
token from the provider redirect as the first argument to log in.
"""

import logging
import sys

from ginclient import AccessLevel, GinClient, configure_logging
from ginclient.exceptions import (
    ConflictError,
    ExpiredTokenError,
    GinError,
    NoTokenError,
    ValidationError,
)


def log_in(client: GinClient):
    """Resume the stored session, or log in with the token given on the command line."""
    try:
        return client.auth.restore()
    except (NoTokenError, ExpiredTokenError) as e:
        if len(sys.argv) < 2:
            print(f"   {e.message}; opening the login page")
            client.auth.authorize()
            sys.exit(0)
    return client.auth.login(sys.argv[1])


def main() -> None:
    """Run the repository workflow example."""
    print("=== GIN Python Client Example ===\n")
    configure_logging(level=logging.WARNING)

    with GinClient.from_env() as client:
        try:
            # Step 1: Session
            print("1. Logging in...")
            account = log_in(client)
            print(f"   Logged in as {account.login} ({account.first_name} {account.last_name})")

            # Step 2: Browse
            print("\n2. Browsing repositories...")
            public = client.repos.list_public()
            shared = client.repos.list_shared()
            print(f"   {len(public)} public, {len(shared)} shared with you")
            for repo in client.repos.filter_repos("ephys", public)[:5]:
                print(f"   - {repo.owner}/{repo.name}: {repo.description or ''}")

            # Step 3: Create a repository
            print("\n3. Creating repository...")
            name = "example-data"
            try:
                repo = client.repos.create(account.login, name, "Created by the example")
                print(f"   Created {repo.owner}/{repo.name}")
            except ConflictError:
                print(f"   {account.login}/{name} already exists")
            except ValidationError as e:
                print(f"   Invalid name: {e.message}")
                sys.exit(1)

            client.repos.put_collaborator(account.login, name, "bob", AccessLevel.PULL)
            for collaborator in client.repos.get_repo_collaborators(account.login, name):
                print(f"   Collaborator {collaborator.login}: {collaborator.access_level}")

            # Step 4: Browse the default branch
            print("\n4. Listing master...")
            branch = client.repos.get_branch(account.login, name, "master")
            print(f"   Head: {branch.commit}")
            for entry in client.repos.get_directory_section(account.login, name, "master", ""):
                print(f"   {entry.type:5} {entry.name}")

            print("\n=== Workflow Complete ===")

        except GinError as e:
            print(f"\nError ({e.kind}): [{e.code}] {e.message}")
            sys.exit(1)


if __name__ == "__main__":
    main()
