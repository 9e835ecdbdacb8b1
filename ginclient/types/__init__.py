"""GIN client type definitions.

This module exports all data model types used by the client.
"""

from ginclient.types.accounts import Account, Affiliation, Email, SSHKey
from ginclient.types.repos import (
    AccessLevel,
    Branch,
    Collaborator,
    Commit,
    Repository,
    TreeEntry,
)
from ginclient.types.token import Token, parse_timestamp

__all__ = [
    # Session
    "Token",
    "parse_timestamp",
    # Account types
    "Account",
    "Affiliation",
    "Email",
    "SSHKey",
    # Repository types
    "AccessLevel",
    "Repository",
    "Collaborator",
    "Branch",
    "TreeEntry",
    "Commit",
]
