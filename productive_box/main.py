"""
Update the productive-box gist and markdown document.

Usage:
    python -m productive_box
    productive-box
"""

import asyncio
import logging
import sys

from productive_box.config import Settings, settings
from productive_box.services.github import close_github_client
from productive_box.services.publish_orchestrator import PublishOrchestrator, PublishResult


def setup_logging(debug: bool = False) -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("hpack").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


async def update_productive_box(run_settings: Settings) -> PublishResult:
    """Run the pipeline once, closing the shared HTTP client afterwards."""
    try:
        return await PublishOrchestrator(run_settings).run()
    finally:
        await close_github_client()


def main() -> None:
    """Entry point; exits non-zero when the run did not fully succeed."""
    setup_logging(settings.debug)
    result = asyncio.run(update_productive_box(settings))

    if result.succeeded:
        logger.info(f"Done: {result.status.value}")
        sys.exit(0)

    logger.error(f"Finished with status {result.status.value}")
    for error in result.errors:
        logger.error(f"  {error}")
    sys.exit(1)


if __name__ == "__main__":
    main()
