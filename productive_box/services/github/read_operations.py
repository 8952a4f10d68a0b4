"""
GitHub API read operations.

Provides all read-only operations a run needs:
- Viewer identity (GraphQL)
- Repositories the viewer contributed to (GraphQL)
- Committed dates on a repository's default branch (GraphQL)
- Gist contents (REST)
"""

import asyncio
import logging
from typing import Any

from productive_box.services.github.exceptions import GitHubAPIError
from productive_box.services.github.helpers import (
    handle_error_response,
    parse_graphql_response,
    read_json,
)
from productive_box.services.github.http_client import auth_headers, get_github_client
from productive_box.services.github.queries import (
    COMMITTED_DATES_QUERY,
    CONTRIBUTED_REPOS_QUERY,
    VIEWER_QUERY,
)
from productive_box.services.github.types import Gist, GistFile, RepoRef, ViewerIdentity

logger = logging.getLogger(__name__)


class GitHubReadOperations:
    """
    Read-only operations for GitHub API.

    Uses the shared HTTP client singleton so the per-repository fan-out
    reuses pooled connections.
    """

    GRAPHQL_PATH = "/graphql"

    def __init__(self, token: str):
        self.token = token
        self._headers = auth_headers(token)

    async def _graphql(
        self,
        query: str,
        variables: dict[str, Any] | None,
        resource: str,
    ) -> dict[str, Any]:
        client = get_github_client()
        payload: dict[str, Any] = {"query": query}
        if variables:
            payload["variables"] = variables

        response = await client.post(self.GRAPHQL_PATH, headers=self._headers, json=payload)
        return parse_graphql_response(response, resource)

    async def get_viewer(self) -> ViewerIdentity:
        """Fetch login and node id of the token's owner."""
        data = await self._graphql(VIEWER_QUERY, None, "viewer")
        viewer = data.get("viewer") or {}
        if not viewer.get("login") or not viewer.get("id"):
            raise GitHubAPIError("Viewer identity missing from GitHub response")
        return ViewerIdentity(login=viewer["login"], id=viewer["id"])

    async def get_contributed_repos(self, login: str, limit: int = 100) -> list[RepoRef]:
        """
        Fetch repositories the user contributed to, excluding forks.

        Args:
            login: GitHub username
            limit: Number of repositories to request (single page, max 100)

        Returns:
            Repository references in response order
        """
        data = await self._graphql(
            CONTRIBUTED_REPOS_QUERY,
            {"login": login, "limit": min(limit, 100)},
            f"contributed repositories of {login}",
        )
        user = data.get("user") or {}
        nodes = (user.get("repositoriesContributedTo") or {}).get("nodes") or []

        repos: list[RepoRef] = []
        for node in nodes:
            if not node or node.get("isFork"):
                continue
            name = node.get("name")
            owner = (node.get("owner") or {}).get("login")
            if not name or not owner:
                logger.debug(f"Skipping repository node without name/owner: {node!r}")
                continue
            repos.append(RepoRef(name=name, owner=owner))
        return repos

    async def get_committed_dates(
        self,
        author_id: str,
        repo: RepoRef,
        limit: int = 100,
    ) -> list[str]:
        """
        Fetch committed dates of the author's commits on the default branch.

        A repository without a default branch (empty repo) has no history
        and yields an empty list.

        Returns:
            Raw ISO 8601 ``committedDate`` strings, in response order
        """
        data = await self._graphql(
            COMMITTED_DATES_QUERY,
            {
                "owner": repo.owner,
                "name": repo.name,
                "authorId": author_id,
                "limit": min(limit, 100),
            },
            repo.full_name,
        )
        repository = data.get("repository") or {}
        ref = repository.get("defaultBranchRef")
        if not ref:
            return []

        history = (ref.get("target") or {}).get("history") or {}
        return [
            edge["node"].get("committedDate")
            for edge in history.get("edges") or []
            if edge and edge.get("node")
        ]

    async def get_committed_dates_for_repos(
        self,
        author_id: str,
        repos: list[RepoRef],
        limit: int = 100,
    ) -> list[list[str]]:
        """
        Fetch committed dates for all repositories concurrently.

        Fail-fast: the first failing request cancels the requests still in
        flight and propagates; results already received are discarded.

        Returns:
            One list of committed dates per repository, in ``repos`` order
        """
        logger.info(f"Fetching commit history for {len(repos)} repositories")
        try:
            async with asyncio.TaskGroup() as tg:
                tasks = [
                    tg.create_task(self.get_committed_dates(author_id, repo, limit))
                    for repo in repos
                ]
        except ExceptionGroup as eg:
            # Siblings are cancelled, so the group holds the first failure
            raise eg.exceptions[0] from None
        return [task.result() for task in tasks]

    async def get_gist(self, gist_id: str) -> Gist:
        """Fetch a gist with its files."""
        client = get_github_client()
        response = await client.get(f"/gists/{gist_id}", headers=self._headers)
        handle_error_response(response, f"gist {gist_id}")

        data = read_json(response, f"gist {gist_id}")
        files = {
            name: GistFile(filename=file_data.get("filename") or name, content=file_data.get("content"))
            for name, file_data in (data.get("files") or {}).items()
        }
        return Gist(id=data.get("id", gist_id), description=data.get("description"), files=files)
