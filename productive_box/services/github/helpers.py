"""
GitHub API helper utilities.

Error response processing shared by the GraphQL reads and gist writes.
"""

import logging
from typing import Any

import httpx

from productive_box.services.github.exceptions import GitHubAPIError, GitHubGraphQLError

logger = logging.getLogger(__name__)


class RateLimitInfo:
    """Rate limit information from GitHub API response."""

    def __init__(self, response: httpx.Response) -> None:
        self.remaining = response.headers.get("X-RateLimit-Remaining")
        self.reset = response.headers.get("X-RateLimit-Reset")

    @property
    def reset_timestamp(self) -> int | None:
        """Get reset timestamp as integer, or None if not available."""
        return int(self.reset) if self.reset else None

    @property
    def is_exhausted(self) -> bool:
        """Check if rate limit is exhausted."""
        return self.remaining is not None and int(self.remaining) == 0


def handle_error_response(response: httpx.Response, resource: str) -> None:
    """
    Raise for non-success responses from GitHub API.

    Args:
        response: The HTTP response from GitHub API
        resource: What was requested, for error context (e.g. "gist abc123")

    Raises:
        GitHubAPIError: For authentication, authorization, or other API errors
    """
    if response.status_code in (200, 201):
        return

    rate_info = RateLimitInfo(response)

    if response.status_code == 401:
        raise GitHubAPIError("Invalid or expired GitHub token", 401)
    elif response.status_code == 404:
        raise GitHubAPIError(f"Resource not found: {resource}", 404)
    elif response.status_code in (403, 429):
        if rate_info.is_exhausted or response.status_code == 429:
            raise GitHubAPIError(
                "GitHub API rate limit exceeded",
                response.status_code,
                rate_limit_reset=rate_info.reset_timestamp,
            )
        raise GitHubAPIError(f"GitHub API forbidden: {resource}", 403)
    elif response.status_code == 422:
        raise GitHubAPIError(f"GitHub rejected the request for {resource}", 422)
    else:
        raise GitHubAPIError(
            f"GitHub API error: {response.status_code}", response.status_code
        )


def read_json(response: httpx.Response, resource: str) -> dict[str, Any]:
    """
    Decode a successful response body as a JSON object.

    Raises:
        GitHubAPIError: When the body is not a JSON object
    """
    try:
        body = response.json()
    except ValueError as e:
        raise GitHubAPIError(
            f"Invalid JSON from GitHub for {resource}", response.status_code
        ) from e
    if not isinstance(body, dict):
        raise GitHubAPIError(
            f"Unexpected response body from GitHub for {resource}", response.status_code
        )
    return body


def parse_graphql_response(response: httpx.Response, resource: str) -> dict[str, Any]:
    """
    Return the ``data`` object of a GraphQL response.

    Raises:
        GitHubAPIError: For HTTP-level failures or a body that is not JSON
        GitHubGraphQLError: When the body carries an ``errors`` array
    """
    handle_error_response(response, resource)

    body = read_json(response, resource)
    errors = body.get("errors")
    if errors:
        logger.debug(f"GraphQL errors for {resource}: {errors!r}")
        raise GitHubGraphQLError(errors)

    data: dict[str, Any] = body.get("data") or {}
    return data
