"""
Productivity report package.

Module structure:
- histogram.py: Commit timestamps -> four-bucket local-time histogram
- report.py: Report lines, bar chart, title, markdown section
- region.py: Tagged region replacement in text documents
- exceptions.py: Custom exceptions
"""

from productive_box.services.productivity.exceptions import (
    EmptyHistogramError,
    InvalidTimestampError,
    InvalidTimezoneError,
    ProductivityError,
    RegionError,
    RegionNotFoundError,
    RegionOrderError,
)
from productive_box.services.productivity.histogram import (
    Bucket,
    Histogram,
    build_histogram,
    bucket_for_hour,
    combine_histograms,
    parse_commit_timestamp,
    resolve_timezone,
)
from productive_box.services.productivity.region import extract_region, patch_region
from productive_box.services.productivity.report import (
    build_markdown_section,
    render_bar_chart,
    render_report_lines,
    select_title,
)

__all__ = [
    # Histogram
    "Bucket",
    "Histogram",
    "build_histogram",
    "bucket_for_hour",
    "combine_histograms",
    "parse_commit_timestamp",
    "resolve_timezone",
    # Report
    "build_markdown_section",
    "render_bar_chart",
    "render_report_lines",
    "select_title",
    # Region
    "extract_region",
    "patch_region",
    # Exceptions
    "EmptyHistogramError",
    "InvalidTimestampError",
    "InvalidTimezoneError",
    "ProductivityError",
    "RegionError",
    "RegionNotFoundError",
    "RegionOrderError",
]
