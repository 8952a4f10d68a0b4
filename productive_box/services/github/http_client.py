"""
Shared HTTP client for GitHub API operations.

One AsyncClient serves the GraphQL reads and the gist REST calls of a run.
The per-repository history fan-out reuses its pooled connections instead of
opening one connection per repository.
"""

import logging

import httpx

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
API_VERSION = "2022-11-28"
USER_AGENT = "productive-box"

_client: httpx.AsyncClient | None = None


def get_github_client() -> httpx.AsyncClient:
    """
    Get or create the shared HTTP client for GitHub API calls.

    The client carries the API base URL and the version headers; the token
    is passed per request so the client never holds credentials.
    """
    global _client
    if _client is None or _client.is_closed:
        _client = httpx.AsyncClient(
            base_url=GITHUB_API_URL,
            headers={
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": USER_AGENT,
            },
            timeout=httpx.Timeout(30.0, connect=5.0),
            limits=httpx.Limits(max_connections=20, max_keepalive_connections=10),
            http2=True,
        )
        logger.debug("Created GitHub HTTP client")
    return _client


def auth_headers(token: str) -> dict[str, str]:
    """Per-request authorization header for a personal access token."""
    return {"Authorization": f"Bearer {token}"}


async def close_github_client() -> None:
    """Close the shared HTTP client at the end of a run."""
    global _client
    if _client is not None and not _client.is_closed:
        await _client.aclose()
        _client = None
        logger.debug("Closed GitHub HTTP client")
