"""Exceptions for the productivity report pipeline."""


class ProductivityError(Exception):
    """Base error for histogram and report construction."""


class InvalidTimestampError(ProductivityError):
    """A commit timestamp could not be parsed into an instant."""

    def __init__(self, raw: object):
        self.raw = raw
        super().__init__(f"Invalid commit timestamp: {raw!r}")


class InvalidTimezoneError(ProductivityError):
    """The configured timezone is not a known IANA zone."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown timezone: {name!r}")


class EmptyHistogramError(ProductivityError):
    """Percentages were requested for a histogram with no commits."""

    def __init__(self) -> None:
        super().__init__("Cannot render a report for zero commits")


class RegionError(Exception):
    """Base error for tagged document regions."""


class RegionNotFoundError(RegionError):
    """A start or end tag is missing from the document."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Tag not found in document: {tag!r}")


class RegionOrderError(RegionError):
    """The end tag occurs before the start tag."""

    def __init__(self, start_tag: str, end_tag: str):
        self.start_tag = start_tag
        self.end_tag = end_tag
        super().__init__(f"End tag {end_tag!r} appears before start tag {start_tag!r}")
