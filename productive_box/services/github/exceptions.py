"""Exceptions for GitHub service."""


class GitHubAPIError(Exception):
    """Error from GitHub API."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        rate_limit_reset: int | None = None,
    ):
        self.message = message
        self.status_code = status_code
        self.rate_limit_reset = rate_limit_reset  # Unix timestamp when rate limit resets
        super().__init__(message)


class GitHubGraphQLError(GitHubAPIError):
    """GraphQL request returned HTTP 200 with an ``errors`` payload.

    GitHub reports query-level failures (unknown repository, bad node id,
    insufficient scopes) inside the response body instead of the status
    code, so these are surfaced separately from transport errors.
    """

    def __init__(self, errors: list[dict]):
        self.errors = errors
        messages = "; ".join(str(e.get("message", e)) for e in errors) or "unknown error"
        super().__init__(f"GitHub GraphQL error: {messages}", status_code=200)


class GistFileNotFoundError(GitHubAPIError):
    """The gist file to overwrite could not be identified."""

    def __init__(self, gist_id: str, filename: str | None, available: list[str]):
        self.gist_id = gist_id
        self.filename = filename
        self.available = available

        if filename:
            message = f"Gist {gist_id} has no file named {filename!r} (files: {available})"
        elif not available:
            message = f"Gist {gist_id} has no files"
        else:
            message = (
                f"Gist {gist_id} has {len(available)} files; "
                "set PRODUCTIVE_GIST_FILE to choose one"
            )

        super().__init__(message, status_code=404)
