"""
Publish Orchestrator for the productivity report.

Coordinates one run:
1. Fetch viewer identity
2. Fetch contributed repositories (forks excluded)
3. Fetch commit history of every repository (parallel, fail-fast)
4. Build the time-of-day histogram
5. Render report lines and title
6. Publish to the gist
7. Publish to the markdown document (if configured)

Any failure in steps 1-4 ends the run before either sink is touched.
The document links to the gist, so it is only written after the gist
update succeeded. A document failure leaves the updated gist in place.
"""

import logging
import os
import shutil
import tempfile
from dataclasses import dataclass, field
from datetime import tzinfo
from enum import Enum

import httpx

from productive_box.config.settings import Settings
from productive_box.core.exceptions import ConfigurationError
from productive_box.services.github import (
    GitHubAPIError,
    GitHubReadOperations,
    GitHubWriteOperations,
    select_gist_file,
)
from productive_box.services.productivity import (
    Histogram,
    InvalidTimestampError,
    InvalidTimezoneError,
    RegionError,
    build_histogram,
    build_markdown_section,
    combine_histograms,
    patch_region,
    render_bar_chart,
    render_report_lines,
    resolve_timezone,
    select_title,
)
from productive_box.services.productivity.report import DAY_TITLE, NIGHT_TITLE, BarRenderer

logger = logging.getLogger(__name__)

# Errors that mean GitHub could not be read
FETCH_ERRORS = (GitHubAPIError, httpx.HTTPError)


class PublishStatus(str, Enum):
    PUBLISHED = "published"
    PARTIAL = "partial"  # gist written, document failed
    PUBLISH_FAILED = "publish_failed"
    NO_COMMITS = "no_commits"
    FETCH_FAILED = "fetch_failed"
    CONFIG_ERROR = "config_error"


@dataclass
class PublishResult:
    """Outcome of a run."""

    status: PublishStatus
    histogram: Histogram | None = None
    title: str | None = None
    lines: list[str] = field(default_factory=list)
    gist_updated: bool = False
    document_updated: bool = False
    errors: list[str] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.status in (PublishStatus.PUBLISHED, PublishStatus.NO_COMMITS)


class FetchFailed(Exception):
    """A read step failed; carries the stage for the diagnostic."""

    def __init__(self, stage: str, cause: Exception):
        self.stage = stage
        self.cause = cause
        super().__init__(f"Unable to get {stage}: {cause}")


class PublishOrchestrator:
    """
    Runs the collect -> aggregate -> render -> publish pipeline.

    The GitHub operation objects and the bar renderer can be injected;
    by default they are built from ``settings``.
    """

    def __init__(
        self,
        settings: Settings,
        reader: GitHubReadOperations | None = None,
        writer: GitHubWriteOperations | None = None,
        bar: BarRenderer = render_bar_chart,
    ) -> None:
        self.settings = settings
        self.reader = reader or GitHubReadOperations(settings.gh_token)
        self.writer = writer or GitHubWriteOperations(settings.gh_token)
        self.bar = bar

    async def run(self) -> PublishResult:
        """Execute one run and report what happened."""
        try:
            tz = self._check_configuration()
        except (ConfigurationError, InvalidTimezoneError) as e:
            logger.error(str(e))
            return PublishResult(PublishStatus.CONFIG_ERROR, errors=[str(e)])

        try:
            histogram = await self.collect_histogram(tz)
        except FetchFailed as e:
            logger.error(str(e))
            return PublishResult(PublishStatus.FETCH_FAILED, errors=[str(e)])

        logger.info(
            f"Histogram: morning={histogram.morning} daytime={histogram.daytime} "
            f"evening={histogram.evening} night={histogram.night}"
        )
        if histogram.total == 0:
            logger.info("No commits found, nothing to publish")
            return PublishResult(PublishStatus.NO_COMMITS, histogram=histogram)

        lines = render_report_lines(histogram, self.bar)
        title = select_title(histogram)
        result = PublishResult(
            PublishStatus.PUBLISH_FAILED,
            histogram=histogram,
            title=title,
            lines=lines,
        )

        try:
            await self.publish_gist(title, lines)
            result.gist_updated = True
        except FETCH_ERRORS as e:
            logger.error(f"Unable to update gist\n{e}")
            result.errors.append(f"gist: {e}")
            # The document heading links to the gist, so it is left alone
            return result

        result.status = PublishStatus.PUBLISHED
        if self.settings.markdown_enabled:
            try:
                self.publish_document(title, lines)
                result.document_updated = True
            except (OSError, UnicodeError, RegionError) as e:
                logger.error(f"Unable to update {self.settings.markdown_file}\n{e}")
                result.errors.append(f"document: {e}")
                result.status = PublishStatus.PARTIAL
        return result

    def _check_configuration(self) -> tzinfo:
        missing = self.settings.missing_required()
        if missing:
            raise ConfigurationError(missing)
        return resolve_timezone(self.settings.timezone)

    async def collect_histogram(self, tz: tzinfo) -> Histogram:
        """
        Read identity, repositories and histories, then aggregate.

        Raises:
            FetchFailed: If any read fails or returns an unparseable timestamp
        """
        try:
            viewer = await self.reader.get_viewer()
        except FETCH_ERRORS as e:
            raise FetchFailed("username and id", e) from e

        try:
            repos = await self.reader.get_contributed_repos(
                viewer.login, self.settings.contributed_repo_limit
            )
        except FETCH_ERRORS as e:
            raise FetchFailed("the contributed repos", e) from e
        logger.info(f"Found {len(repos)} contributed repositories for {viewer.login}")

        try:
            histories = await self.reader.get_committed_dates_for_repos(
                viewer.id, repos, self.settings.commit_history_limit
            )
        except FETCH_ERRORS as e:
            raise FetchFailed("the commit info", e) from e

        try:
            return combine_histograms(build_histogram(dates, tz) for dates in histories)
        except InvalidTimestampError as e:
            raise FetchFailed("valid commit timestamps", e) from e

    async def publish_gist(self, title: str, lines: list[str]) -> None:
        """Rename the tracked gist file to the title and replace its content."""
        gist_id = self.settings.productive_gist_id
        gist = await self.reader.get_gist(gist_id)
        filename = select_gist_file(
            gist,
            self.settings.productive_gist_file or None,
            previous_names=(DAY_TITLE, NIGHT_TITLE),
        )
        await self.writer.update_gist_file(gist_id, filename, title, "\n".join(lines))

    def publish_document(self, title: str, lines: list[str]) -> None:
        """Rewrite the tagged region of the markdown document."""
        path = self.settings.markdown_file
        section = build_markdown_section(title, lines, self.settings.productive_gist_id)

        # newline="" keeps the document's line endings byte-identical
        with open(path, encoding="utf-8", newline="") as f:
            document = f.read()

        patched = patch_region(
            document,
            self.settings.productive_start_tag,
            self.settings.productive_end_tag,
            section,
        )

        _replace_file(path, patched)
        logger.info(f"Updated {path}")


def _replace_file(path: str, content: str) -> None:
    """Write ``content`` to a sibling temp file, then swap it in atomically."""
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".productive-box-", suffix=".tmp")
    try:
        # newline="" keeps the document's line endings byte-identical
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
            f.write(content)
        shutil.copymode(path, tmp_path)
        os.replace(tmp_path, path)
    except Exception:
        os.unlink(tmp_path)
        raise
