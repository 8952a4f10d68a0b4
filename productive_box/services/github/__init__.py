"""
GitHub service package.

Usage: `from productive_box.services.github import GitHubReadOperations`

Module structure:
- read_operations.py: GraphQL reads (viewer, repos, history) and gist read
- write_operations.py: Gist update
- queries.py: GraphQL documents
- helpers.py: Error response handling
- http_client.py: Shared AsyncClient
- types.py: Data types
- exceptions.py: Custom exceptions
"""

from productive_box.services.github.exceptions import (
    GistFileNotFoundError,
    GitHubAPIError,
    GitHubGraphQLError,
)
from productive_box.services.github.helpers import RateLimitInfo, handle_error_response
from productive_box.services.github.http_client import close_github_client, get_github_client
from productive_box.services.github.read_operations import GitHubReadOperations
from productive_box.services.github.types import Gist, GistFile, RepoRef, ViewerIdentity
from productive_box.services.github.write_operations import (
    GitHubWriteOperations,
    select_gist_file,
)

__all__ = [
    # Operation classes
    "GitHubReadOperations",
    "GitHubWriteOperations",
    "select_gist_file",
    # HTTP client lifecycle
    "close_github_client",
    "get_github_client",
    # Utilities
    "handle_error_response",
    "RateLimitInfo",
    # Exceptions
    "GistFileNotFoundError",
    "GitHubAPIError",
    "GitHubGraphQLError",
    # Types
    "Gist",
    "GistFile",
    "RepoRef",
    "ViewerIdentity",
]
