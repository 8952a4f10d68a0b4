"""
Time-of-day histogram of commit timestamps.

Each commit is placed into exactly one of four buckets by its local hour:

    night    [0, 6)
    morning  [6, 12)
    daytime  [12, 18)
    evening  [18, 24)

The ranges are half-open and partition the day, so every hour lands in
exactly one bucket. The timezone is always an explicit argument.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import UTC, datetime, tzinfo
from enum import Enum
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from tzlocal import get_localzone

from productive_box.services.productivity.exceptions import (
    InvalidTimestampError,
    InvalidTimezoneError,
)

logger = logging.getLogger(__name__)


class Bucket(str, Enum):
    """Time-of-day buckets, in report order."""

    MORNING = "morning"
    DAYTIME = "daytime"
    EVENING = "evening"
    NIGHT = "night"


# Inclusive-low, exclusive-high local hour ranges
BUCKET_HOURS: dict[Bucket, tuple[int, int]] = {
    Bucket.MORNING: (6, 12),
    Bucket.DAYTIME: (12, 18),
    Bucket.EVENING: (18, 24),
    Bucket.NIGHT: (0, 6),
}


def bucket_for_hour(hour: int) -> Bucket:
    """Return the bucket that claims a local hour (0-23)."""
    for bucket, (low, high) in BUCKET_HOURS.items():
        if low <= hour < high:
            return bucket
    raise ValueError(f"Hour out of range: {hour}")


@dataclass(frozen=True)
class Histogram:
    """Commit counts per time-of-day bucket."""

    morning: int = 0
    daytime: int = 0
    evening: int = 0
    night: int = 0

    def __post_init__(self) -> None:
        for bucket in Bucket:
            if getattr(self, bucket.value) < 0:
                raise ValueError(f"Negative count for {bucket.value}")

    @property
    def total(self) -> int:
        return self.morning + self.daytime + self.evening + self.night

    @property
    def day_total(self) -> int:
        return self.morning + self.daytime

    @property
    def night_total(self) -> int:
        return self.evening + self.night

    def count(self, bucket: Bucket) -> int:
        return getattr(self, bucket.value)

    def counts(self) -> list[tuple[Bucket, int]]:
        """Counts in fixed report order."""
        return [(bucket, self.count(bucket)) for bucket in Bucket]

    def __add__(self, other: "Histogram") -> "Histogram":
        if not isinstance(other, Histogram):
            return NotImplemented
        return Histogram(
            morning=self.morning + other.morning,
            daytime=self.daytime + other.daytime,
            evening=self.evening + other.evening,
            night=self.night + other.night,
        )


def parse_commit_timestamp(raw: str | datetime) -> datetime:
    """
    Parse a GitHub ``committedDate`` into an aware datetime.

    Accepts ISO 8601 with a ``Z`` suffix or a numeric offset. Naive values
    are taken as UTC.

    Raises:
        InvalidTimestampError: If the value is not a parseable instant
    """
    if isinstance(raw, datetime):
        parsed = raw
    elif isinstance(raw, str):
        try:
            parsed = datetime.fromisoformat(raw.strip().replace("Z", "+00:00"))
        except ValueError as e:
            raise InvalidTimestampError(raw) from e
    else:
        raise InvalidTimestampError(raw)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


def resolve_timezone(name: str | None) -> tzinfo:
    """
    Resolve a timezone setting.

    Args:
        name: IANA zone name. Empty or None selects the platform's local
            zone with its full DST rules, so every commit gets the offset
            in force at its own instant. Never UTC implicitly.

    Raises:
        InvalidTimezoneError: If ``name`` is not a known zone, or the local
            zone cannot be determined
    """
    if not name:
        try:
            local = get_localzone()
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise InvalidTimezoneError("<local>") from e
        logger.info(f"No timezone configured, using local timezone {local}")
        return local
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise InvalidTimezoneError(name) from e


def build_histogram(timestamps: Iterable[str | datetime], tz: tzinfo) -> Histogram:
    """
    Count commits per bucket by their local hour in ``tz``.

    Raises:
        InvalidTimestampError: On the first unparseable timestamp
    """
    counts = {bucket: 0 for bucket in Bucket}
    for raw in timestamps:
        local = parse_commit_timestamp(raw).astimezone(tz)
        counts[bucket_for_hour(local.hour)] += 1

    return Histogram(**{bucket.value: n for bucket, n in counts.items()})


def combine_histograms(histograms: Iterable[Histogram]) -> Histogram:
    """Sum per-repository histograms."""
    return sum(histograms, Histogram())
