"""Async repositories resource client."""

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ginclient.clients.repos import (
    _parse_branch,
    _parse_collaborators,
    _parse_commit,
    _parse_repository,
    _parse_tree_entry,
    browse_url,
    filter_repos,
    repo_url,
    settings_patch,
    validate_repo_name,
)
from ginclient.logging import log_auth_operation
from ginclient.redirects import doi_request_url, encode_component
from ginclient.transport import AUTH_NONE, AUTH_OPTIONAL, AUTH_REQUIRED, EXPECT_NONE, EXPECT_TEXT
from ginclient.types.repos import Branch, Collaborator, Commit, Repository, TreeEntry

if TYPE_CHECKING:
    from ginclient.async_transport import AsyncHTTPTransport


class AsyncReposClient:
    """Async client for repository-related operations."""

    def __init__(self, transport: "AsyncHTTPTransport") -> None:
        """
        Initialize the async repos client.

        Args:
            transport: Async HTTP transport for making requests
        """
        self.transport = transport

    @property
    def _repo_url(self) -> str:
        return self.transport.session.config.repo_url

    def filter_repos(
        self, search_text: str | None, repos: Iterable[Repository]
    ) -> list[Repository]:
        """Filter repositories locally. No I/O, so not a coroutine."""
        return filter_repos(search_text, repos)

    async def list_public(self) -> list[Repository]:
        """List all public repositories."""
        data = await self.transport.request(
            "GET", f"{self._repo_url}/repos/public", auth=AUTH_NONE
        )
        return [_parse_repository(repo) for repo in data or []]

    async def list_shared(self) -> list[Repository]:
        """List repositories shared with the logged in account."""
        data = await self.transport.request(
            "GET", f"{self._repo_url}/repos/shared", auth=AUTH_OPTIONAL
        )
        return [_parse_repository(repo) for repo in data or []]

    async def list_user_repos(self, login: str) -> list[Repository]:
        """List the repositories of an account visible to the caller."""
        data = await self.transport.request(
            "GET",
            f"{self._repo_url}/users/{encode_component(login)}/repos",
            auth=AUTH_OPTIONAL,
        )
        return [_parse_repository(repo) for repo in data or []]

    async def get_repo(self, owner: str, name: str) -> Repository:
        """Get repository information."""
        data = await self.transport.request(
            "GET", repo_url(self._repo_url, owner, name), auth=AUTH_OPTIONAL
        )
        return _parse_repository(data)

    async def get_repo_collaborators(self, owner: str, name: str) -> list[Collaborator]:
        """List the collaborators of a repository with their access levels."""
        data = await self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "collaborators"), auth=AUTH_OPTIONAL
        )
        return _parse_collaborators(data)

    async def get_branch(self, owner: str, name: str, branch: str) -> Branch:
        """Get a branch and its head commit."""
        data = await self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "branches", branch), auth=AUTH_OPTIONAL
        )
        return _parse_branch(data)

    async def get_directory_section(
        self, owner: str, name: str, branch: str, path: str
    ) -> list[TreeEntry]:
        """List a directory of a branch."""
        data = await self.transport.request(
            "GET", browse_url(self._repo_url, owner, name, branch, path), auth=AUTH_OPTIONAL
        )
        return [_parse_tree_entry(entry) for entry in data or []]

    async def get_text_file_content(self, owner: str, name: str, object_id: str) -> str:
        """Fetch the content of a file object as text."""
        return await self.transport.request(
            "GET",
            repo_url(self._repo_url, owner, name, "objects", object_id),
            auth=AUTH_OPTIONAL,
            expect=EXPECT_TEXT,
        )

    async def create(
        self,
        login: str,
        name: str,
        description: str = "",
        public: bool = False,
    ) -> Repository:
        """
        Create a new repository.

        Raises:
            ValidationError: If the name is invalid (no request is made)
        """
        name = validate_repo_name(name)
        data = await self.transport.request(
            "POST",
            f"{self._repo_url}/users/{encode_component(login)}/repos",
            body={"name": name, "description": description, "public": public},
            auth=AUTH_REQUIRED,
        )
        return _parse_repository(data)

    async def update(
        self,
        owner: str,
        name: str,
        description: str | None = None,
        public: bool | None = None,
    ) -> None:
        """Update repository settings; only the given settings are sent."""
        await self.transport.request(
            "PATCH",
            repo_url(self._repo_url, owner, name, "settings"),
            body=settings_patch(description, public),
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    async def put_collaborator(
        self, owner: str, name: str, login: str, access_level: str
    ) -> None:
        """Add a collaborator or change their access level."""
        await self.transport.request(
            "PUT",
            repo_url(self._repo_url, owner, name, "collaborators", login),
            body={"Permission": access_level},
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    async def remove_collaborator(self, owner: str, name: str, login: str) -> None:
        """Revoke a collaborator's access."""
        await self.transport.request(
            "DELETE",
            repo_url(self._repo_url, owner, name, "collaborators", login),
            auth=AUTH_REQUIRED,
            expect=EXPECT_NONE,
        )

    def request_doi(self, owner: str, name: str, branch: str) -> None:
        """Send the user to the DOI service to request a DOI for a branch."""
        session = self.transport.session
        token = session.require_token()
        url = doi_request_url(session.config, token, owner, name, branch)
        log_auth_operation("request_doi", token.login)
        session.navigator.navigate(url)

    async def list_commits(self, owner: str, name: str, branch: str) -> list[Commit]:
        """List the commits of a branch."""
        data = await self.transport.request(
            "GET", repo_url(self._repo_url, owner, name, "commits", branch), auth=AUTH_REQUIRED
        )
        return [_parse_commit(commit) for commit in data or []]
