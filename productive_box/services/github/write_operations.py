"""
GitHub API write operations.

Provides the single mutation a run performs: replacing a gist file.
"""

import logging
from collections.abc import Collection

from productive_box.services.github.exceptions import GistFileNotFoundError
from productive_box.services.github.helpers import handle_error_response
from productive_box.services.github.http_client import auth_headers, get_github_client
from productive_box.services.github.types import Gist

logger = logging.getLogger(__name__)


def select_gist_file(
    gist: Gist,
    filename: str | None = None,
    previous_names: Collection[str] = (),
) -> str:
    """
    Identify the gist file to overwrite.

    Every update renames the file to the report title, so after the first
    run the configured name no longer matches. Resolution order:

    1. ``filename``, if the gist has a file with that name
    2. the single file whose name is one of ``previous_names``
    3. without a configured ``filename``, the gist's only file

    Args:
        gist: The gist as currently stored
        filename: Configured file name, if any
        previous_names: Names an earlier update may have given the file

    Returns:
        The current name of the target file

    Raises:
        GistFileNotFoundError: If none of the rules picks exactly one file
    """
    available = sorted(gist.files)
    if filename and filename in gist.files:
        return filename

    renamed = [name for name in available if name in previous_names]
    if len(renamed) == 1:
        return renamed[0]

    if filename:
        raise GistFileNotFoundError(gist.id, filename, available)
    if len(available) != 1:
        raise GistFileNotFoundError(gist.id, None, available)
    return available[0]


class GitHubWriteOperations:
    """Write operations for GitHub API."""

    def __init__(self, token: str):
        self.token = token
        self._headers = auth_headers(token)

    async def update_gist_file(
        self,
        gist_id: str,
        current_filename: str,
        new_filename: str,
        content: str,
    ) -> None:
        """
        Replace a gist file wholesale, renaming it in the same request.

        Args:
            gist_id: Gist identifier
            current_filename: Name of the file as currently stored
            new_filename: Name the file should have afterwards
            content: Full new file content
        """
        client = get_github_client()
        response = await client.patch(
            f"/gists/{gist_id}",
            headers=self._headers,
            json={
                "files": {
                    current_filename: {
                        "filename": new_filename,
                        "content": content,
                    }
                }
            },
        )
        handle_error_response(response, f"gist {gist_id}")
        logger.info(f"Updated gist {gist_id}: {current_filename!r} -> {new_filename!r}")
