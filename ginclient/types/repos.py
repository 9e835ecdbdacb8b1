"""Repository-related data models."""

from dataclasses import dataclass


class AccessLevel:
    """Collaborator access levels understood by the repository service."""

    PULL = "can-pull"
    PUSH = "can-push"
    ADMIN = "is-admin"

    ALL = (PULL, PUSH, ADMIN)


@dataclass
class Repository:
    """Repository information, identified by (owner, name)."""

    name: str
    owner: str
    description: str | None = None
    public: bool = False
    url: str | None = None


@dataclass
class Collaborator:
    """Non-owner account with access to a repository."""

    login: str
    access_level: str  # "can-pull", "can-push", "is-admin"


@dataclass
class Branch:
    """Named branch and the commit it points to."""

    name: str
    commit: str


@dataclass
class TreeEntry:
    """One entry of a directory listing."""

    id: str  # opaque object id, used with get_text_file_content
    name: str
    type: str  # "blob", "tree", ...
    mode: str | None = None


@dataclass
class Commit:
    """Commit summary as listed for a branch."""

    commit: str
    author: str
    committer: str | None
    date_iso: str | None
    date_relative: str | None
    subject: str
    changes: list[str]
