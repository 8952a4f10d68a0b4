"""
Tagged region surgery on text documents.

A region is the text strictly between a start tag and an end tag. Only the
region changes; everything up to and including the start tag, and from the
end tag onward, is copied verbatim.
"""

from productive_box.services.productivity.exceptions import (
    RegionNotFoundError,
    RegionOrderError,
)


def locate_region(document: str, start_tag: str, end_tag: str) -> tuple[int, int]:
    """
    Find the region bounds.

    Returns:
        ``(s, e)`` where ``s`` is the index right after the first start tag
        and ``e`` is the index of the first end tag

    Raises:
        ValueError: If either tag is empty
        RegionNotFoundError: If either tag is absent
        RegionOrderError: If the end tag begins before the start tag ends
    """
    if not start_tag or not end_tag:
        raise ValueError("Region tags must be non-empty")

    start_index = document.find(start_tag)
    if start_index == -1:
        raise RegionNotFoundError(start_tag)

    end_index = document.find(end_tag)
    if end_index == -1:
        raise RegionNotFoundError(end_tag)

    inner_start = start_index + len(start_tag)
    if end_index < inner_start:
        raise RegionOrderError(start_tag, end_tag)

    return inner_start, end_index


def patch_region(document: str, start_tag: str, end_tag: str, new_inner: str) -> str:
    """Replace the region between the tags with ``new_inner``."""
    s, e = locate_region(document, start_tag, end_tag)
    return document[:s] + new_inner + document[e:]


def extract_region(document: str, start_tag: str, end_tag: str) -> str:
    """Return the current region between the tags."""
    s, e = locate_region(document, start_tag, end_tag)
    return document[s:e]
