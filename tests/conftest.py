"""Shared fixtures for all tests.

Provides:
- Reset of the shared GitHub HTTP client between tests
- A markdown document with a tagged region on disk
"""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.helpers.mock_factories import README_TEMPLATE


@pytest.fixture
def anyio_backend() -> str:
    """The application runs on asyncio (asyncio.run / asyncio.TaskGroup)."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _reset_github_client():
    """Each test starts without a cached client."""
    import productive_box.services.github.http_client as mod

    original = mod._client
    mod._client = None
    yield
    mod._client = original


@pytest.fixture
def readme(tmp_path: Path) -> Path:
    """README.md containing the default productive-box tags."""
    path = tmp_path / "README.md"
    path.write_text(README_TEMPLATE, encoding="utf-8")
    return path
