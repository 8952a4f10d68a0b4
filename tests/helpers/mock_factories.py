"""Factories for unit tests.

Builds settings and GitHub payloads with the same shapes the real API
returns, so tests never depend on the environment of the machine.
"""

from __future__ import annotations

import httpx

from productive_box.config.settings import DEFAULT_END_TAG, DEFAULT_START_TAG, Settings

TOKEN = "ghp_test_token_12345"
GIST_ID = "aa5a315d61ae9438b18d"

README_TEMPLATE = (
    "# Hi there\n"
    "\n"
    "Some intro text.\n"
    f"{DEFAULT_START_TAG}\n"
    "stale content\n"
    f"{DEFAULT_END_TAG}\n"
    "\n"
    "Footer stays put.\n"
)


def make_settings(**overrides: object) -> Settings:
    """Settings with every field explicit; ignores env vars and .env."""
    values: dict[str, object] = {
        "gh_token": TOKEN,
        "productive_gist_id": GIST_ID,
        "productive_gist_file": "",
        "timezone": "UTC",
        "markdown_file": "",
        "productive_start_tag": DEFAULT_START_TAG,
        "productive_end_tag": DEFAULT_END_TAG,
        "contributed_repo_limit": 100,
        "commit_history_limit": 100,
        "debug": False,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


def make_response(
    status_code: int = 200,
    json_data: object = None,
    headers: dict[str, str] | None = None,
) -> httpx.Response:
    """Build a fake httpx.Response with the given status, JSON body, and headers."""
    return httpx.Response(
        status_code=status_code,
        json=json_data,
        headers=headers or {},
    )


def viewer_payload(login: str = "octocat", node_id: str = "MDQ6VXNlcjE=") -> dict:
    return {"data": {"viewer": {"login": login, "id": node_id}}}


def repos_payload(*nodes: dict | None) -> dict:
    return {"data": {"user": {"repositoriesContributedTo": {"nodes": list(nodes)}}}}


def repo_node(name: str, owner: str = "octocat", is_fork: bool = False) -> dict:
    return {"name": name, "isFork": is_fork, "owner": {"login": owner}}


def history_payload(*committed_dates: str) -> dict:
    edges = [{"node": {"committedDate": d}} for d in committed_dates]
    return {
        "data": {
            "repository": {
                "defaultBranchRef": {"target": {"history": {"edges": edges}}}
            }
        }
    }


def gist_payload(gist_id: str = GIST_ID, files: dict[str, str] | None = None) -> dict:
    files = {"productive-box.md": "old"} if files is None else files
    return {
        "id": gist_id,
        "description": "productive box",
        "files": {
            name: {"filename": name, "content": content} for name, content in files.items()
        },
    }
