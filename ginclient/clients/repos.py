"""Repositories resource client."""

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from ginclient.exceptions import ValidationError
from ginclient.logging import log_auth_operation
from ginclient.redirects import doi_request_url, encode_component
from ginclient.transport import AUTH_NONE, AUTH_OPTIONAL, AUTH_REQUIRED, EXPECT_NONE, EXPECT_TEXT
from ginclient.types.repos import Branch, Collaborator, Commit, Repository, TreeEntry

if TYPE_CHECKING:
    from ginclient.transport import HTTPTransport

REPO_NAME_PATTERN = re.compile(r"^[a-zA-Z0-9\-_.]*$")
REPO_NAME_MIN_LENGTH = 3
REPO_NAME_MAX_LENGTH = 20


def _get(data: dict[str, Any], pascal: str, snake: str, default: Any = None) -> Any:
    """Get value from dict, trying PascalCase first then snake_case."""
    return data.get(pascal) if pascal in data else data.get(snake, default)


def _parse_repository(data: dict[str, Any]) -> Repository:
    """Parse repository data handling both PascalCase and snake_case."""
    return Repository(
        name=_get(data, "Name", "name"),
        owner=_get(data, "Owner", "owner"),
        description=_get(data, "Description", "description"),
        public=bool(_get(data, "Public", "public", False)),
        url=_get(data, "URL", "url"),
    )


def _parse_collaborators(data: Any) -> list[Collaborator]:
    """Parse a collaborator list, or a {login: access_level} mapping."""
    if isinstance(data, dict):
        return [Collaborator(login=login, access_level=level) for login, level in data.items()]
    return [
        Collaborator(
            login=_get(item, "User", "login"),
            access_level=_get(item, "AccessLevel", "access_level"),
        )
        for item in data or []
    ]


def _parse_branch(data: dict[str, Any]) -> Branch:
    return Branch(
        name=_get(data, "Name", "name"),
        commit=_get(data, "Commit", "commit"),
    )


def _parse_tree_entry(data: dict[str, Any]) -> TreeEntry:
    return TreeEntry(
        id=_get(data, "Id", "id"),
        name=_get(data, "Name", "name"),
        type=_get(data, "Type", "type"),
        mode=_get(data, "Mode", "mode"),
    )


def _parse_commit(data: dict[str, Any]) -> Commit:
    return Commit(
        commit=_get(data, "Commit", "commit"),
        author=_get(data, "Author", "author"),
        committer=_get(data, "Committer", "committer"),
        date_iso=_get(data, "DateIso", "date_iso"),
        date_relative=_get(data, "DateRelative", "date_relative"),
        subject=_get(data, "Subject", "subject", ""),
        changes=_get(data, "Changes", "changes") or [],
    )


def validate_repo_name(name: str | None) -> str:
    """
    Check a repository name before it is sent to the service.

    Raises:
        ValidationError: If the name has characters other than letters,
            digits, "-", "_" and ".", or is not 3 to 20 characters long
    """
    name = name or ""
    if not REPO_NAME_PATTERN.fullmatch(name):
        raise ValidationError(
            "Use only alphanumeric characters without whitespaces as repository name.",
            code="INVALID_REPO_NAME",
        )
    if not REPO_NAME_MIN_LENGTH <= len(name) <= REPO_NAME_MAX_LENGTH:
        raise ValidationError(
            f"Repository name must be between {REPO_NAME_MIN_LENGTH} and "
            f"{REPO_NAME_MAX_LENGTH} characters long",
            code="INVALID_REPO_NAME_LENGTH",
        )
    return name


def filter_repos(search_text: str | None, repos: Iterable[Repository]) -> list[Repository]:
    """
    Filter repositories by a case-insensitive substring.

    A repository matches when its name, description and owner, joined
    together, contain search_text. Empty search text matches everything.
    Input order is kept.
    """
    needle = (search_text or "").lower()
    return [
        repo
        for repo in repos
        if needle in f"{repo.name or ''}{repo.description or ''}{repo.owner or ''}".lower()
    ]


def repo_url(base_url: str, owner: str, name: str, *parts: str) -> str:
    """URL of a repository resource; parts are encoded one segment each."""
    url = f"{base_url}/users/{encode_component(owner)}/repos/{encode_component(name)}"
    for part in parts:
        url += f"/{encode_component(part)}"
    return url


def browse_url(base_url: str, owner: str, name: str, branch: str, path: str) -> str:
    """URL of a directory listing; path keeps its "/" separators."""
    encoded_path = "/".join(encode_component(p) for p in path.strip("/").split("/"))
    return f"{repo_url(base_url, owner, name, 'browse', branch)}/{encoded_path}"


def settings_patch(description: str | None, public: bool | None) -> dict[str, Any]:
    patch: dict[str, Any] = {}
    if description is not None:
        patch["description"] = description
    if public is not None:
        patch["public"] = public
    if not patch:
        raise ValidationError("Nothing to update", code="EMPTY_PATCH")
    return patch


class ReposClient:
    """Client for repository-related operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        """
        Initialize the repos client.

        Args:
            transport: HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _repo_url(self) -> str:
        return self.transport.session.config.repo_url

    def filter_repos(
        self, search_text: str | None, repos: Iterable[Repository]
    ) -> list[Repository]:
        """Filter repositories locally; see filter_repos()."""
        return filter_repos(search_text, repos)

    def list_public(self) -> list[Repository]:
        """List all public repositories."""
        data = self.transport.request("GET", f"{self._repo_url}/repos/public", auth=AUTH_NONE)
        return [_parse_repository(repo) for repo in data or []]

    def list_shared(self) -> list[Repository]:
        """List repositories shared with the logged in account (public ones when anonymous)."""
        data = self.transport.request("GET", f"{self._repo_url}/repos/shared", auth=AUTH_OPTIONAL)
        return [_parse_repository(repo) for repo in data or []]

    def list_user_repos(self, login: str) -> list[Repository]:
        """List the repositories of an account visible to the caller."""
        data = self.transport.request(
            "GET",
            f"{self._repo_url}/users/{encode_component(login)}/repos",
            auth=AUTH_OPTIONAL,
        )
        return [_parse_repository(repo) for repo in data or []]

    def get_repo(self, owner: str, name: str) -> Repository:
        """
        Get repository information.

        Raises:
            NotFoundError: If the repository does not exist or is hidden
        """
        data = self.transport.request(
            "GET", repo_url(self._repo_url, owner, name), auth=AUTH_OPTIONAL
        )
        return _parse_repository(data)

    def get_repo_collaborators(self, owner: str, name: str) -> list[Collaborator]:
        """List the collaborators of a repository with their access levels."""
        data = self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "collaborators"), auth=AUTH_OPTIONAL
        )
        return _parse_collaborators(data)

    def get_branch(self, owner: str, name: str, branch: str) -> Branch:
        """Get a branch and its head commit."""
        data = self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "branches", branch), auth=AUTH_OPTIONAL
        )
        return _parse_branch(data)

    def get_directory_section(
        self, owner: str, name: str, branch: str, path: str
    ) -> list[TreeEntry]:
        """
        List a directory of a branch.

        Args:
            owner: Repository owner
            name: Repository name
            branch: Branch name
            path: Directory path inside the repository ("" for the root)

        Returns:
            Entries of the directory; entry ids are used to fetch file content
        """
        data = self.transport.request(
            "GET", browse_url(self._repo_url, owner, name, branch, path), auth=AUTH_OPTIONAL
        )
        return [_parse_tree_entry(entry) for entry in data or []]

    def get_text_file_content(self, owner: str, name: str, object_id: str) -> str:
        """Fetch the content of a file object as text."""
        return self.transport.request(
            "GET",
            repo_url(self._repo_url, owner, name, "objects", object_id),
            auth=AUTH_OPTIONAL,
            expect=EXPECT_TEXT,
        )

    def create(
        self,
        login: str,
        name: str,
        description: str = "",
        public: bool = False,
    ) -> Repository:
        """
        Create a new repository.

        The name is checked locally first; an invalid name never reaches
        the service.

        Args:
            login: Account that will own the repository
            name: Repository name (3 to 20 of [a-zA-Z0-9-_.])
            description: Optional repository description
            public: Whether the repository is publicly visible

        Returns:
            The created repository

        Raises:
            ValidationError: If the name is invalid
            NotAuthenticatedError: If not logged in
            ConflictError: If the repository already exists
        """
        name = validate_repo_name(name)
        data = self.transport.request(
            "POST",
            f"{self._repo_url}/users/{encode_component(login)}/repos",
            body={"name": name, "description": description, "public": public},
            auth=AUTH_REQUIRED,
        )
        return _parse_repository(data)

    def update(
        self,
        owner: str,
        name: str,
        description: str | None = None,
        public: bool | None = None,
    ) -> None:
        """
        Update repository settings.

        Only the given settings are sent.

        Raises:
            ValidationError: If no setting is given
            NotAuthenticatedError: If not logged in
        """
        self.transport.request(
            "PATCH",
            repo_url(self._repo_url, owner, name, "settings"),
            body=settings_patch(description, public),
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    def put_collaborator(
        self, owner: str, name: str, login: str, access_level: str
    ) -> None:
        """
        Add a collaborator or change their access level.

        Args:
            access_level: One of AccessLevel.PULL, AccessLevel.PUSH, AccessLevel.ADMIN
        """
        self.transport.request(
            "PUT",
            repo_url(self._repo_url, owner, name, "collaborators", login),
            body={"Permission": access_level},
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    def remove_collaborator(self, owner: str, name: str, login: str) -> None:
        """Revoke a collaborator's access."""
        self.transport.request(
            "DELETE",
            repo_url(self._repo_url, owner, name, "collaborators", login),
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    def request_doi(self, owner: str, name: str, branch: str) -> None:
        """
        Send the user to the DOI service to request a DOI for a branch.

        Raises:
            NotAuthenticatedError: If not logged in
        """
        session = self.transport.session
        token = session.require_token()
        url = doi_request_url(session.config, token, owner, name, branch)
        log_auth_operation("request_doi", token.login)
        session.navigator.navigate(url)

    def list_commits(self, owner: str, name: str, branch: str) -> list[Commit]:
        """List the commits of a branch, newest first."""
        data = self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "commits", branch), auth=AUTH_REQUIRED
        )
        return [_parse_commit(commit) for commit in data or []]
