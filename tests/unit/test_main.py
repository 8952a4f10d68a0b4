"""Unit tests for the command-line entry point."""

from unittest.mock import AsyncMock, patch

import pytest

from productive_box import main as main_module
from productive_box.services.publish_orchestrator import PublishResult, PublishStatus

from tests.helpers.mock_factories import make_settings


class TestUpdateProductiveBox:
    """Tests for the single-run wrapper."""

    @patch("productive_box.main.close_github_client", new_callable=AsyncMock)
    @patch("productive_box.main.PublishOrchestrator")
    @pytest.mark.anyio
    async def test_closes_client_after_run(self, mock_orchestrator, mock_close):
        expected = PublishResult(PublishStatus.NO_COMMITS)
        mock_orchestrator.return_value.run = AsyncMock(return_value=expected)

        result = await main_module.update_productive_box(make_settings())

        assert result is expected
        mock_close.assert_awaited_once()

    @patch("productive_box.main.close_github_client", new_callable=AsyncMock)
    @patch("productive_box.main.PublishOrchestrator")
    @pytest.mark.anyio
    async def test_closes_client_on_error(self, mock_orchestrator, mock_close):
        mock_orchestrator.return_value.run = AsyncMock(side_effect=RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            await main_module.update_productive_box(make_settings())

        mock_close.assert_awaited_once()


class TestMain:
    """Tests for the process exit code."""

    @pytest.mark.parametrize(
        ("status", "code"),
        [
            (PublishStatus.PUBLISHED, 0),
            (PublishStatus.NO_COMMITS, 0),
            (PublishStatus.PARTIAL, 1),
            (PublishStatus.PUBLISH_FAILED, 1),
            (PublishStatus.FETCH_FAILED, 1),
            (PublishStatus.CONFIG_ERROR, 1),
        ],
    )
    @patch("productive_box.main.setup_logging")
    @patch("productive_box.main.update_productive_box", new_callable=AsyncMock)
    def test_exit_code(self, mock_update, _mock_logging, status, code):
        mock_update.return_value = PublishResult(status, errors=["x"])

        with pytest.raises(SystemExit) as exc_info:
            main_module.main()

        assert exc_info.value.code == code
