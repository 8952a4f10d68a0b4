"""
Text rendering of a commit-time histogram.

Produces the four aligned report lines shown in the gist and the markdown
document, the day/night title, and the markdown section wrapping them.
"""

from collections.abc import Callable

from productive_box.services.productivity.exceptions import EmptyHistogramError
from productive_box.services.productivity.histogram import Bucket, Histogram

BarRenderer = Callable[[float, int], str]

LABELS: dict[Bucket, str] = {
    Bucket.MORNING: "🌞 Morning",
    Bucket.DAYTIME: "🌆 Daytime",
    Bucket.EVENING: "🌃 Evening",
    Bucket.NIGHT: "🌙 Night",
}

DAY_TITLE = "I'm an early 🐤"
NIGHT_TITLE = "I'm a night 🦉"

LABEL_WIDTH = 10
COUNT_WIDTH = 14
BAR_WIDTH = 21
PERCENT_WIDTH = 5

# Empty cell first, then 1/8 through 8/8 blocks
BAR_GLYPHS = "░▏▎▍▌▋▊▉█"


def render_bar_chart(percent: float, width: int) -> str:
    """
    Render a horizontal bar of exactly ``width`` characters.

    Resolution is 1/8 of a character: full blocks, one partial block, then
    empty cells.
    """
    percent = min(max(percent, 0.0), 100.0)
    eighths = int(width * 8 * percent / 100)
    full, partial = divmod(eighths, 8)
    if full >= width:
        return BAR_GLYPHS[8] * width

    bar = BAR_GLYPHS[8] * full + BAR_GLYPHS[partial]
    return bar.ljust(width, BAR_GLYPHS[0])


def percentages(histogram: Histogram) -> list[tuple[Bucket, float]]:
    """Share of commits per bucket, in report order."""
    total = histogram.total
    if total == 0:
        raise EmptyHistogramError()
    return [(bucket, count / total * 100) for bucket, count in histogram.counts()]


def render_report_lines(histogram: Histogram, bar: BarRenderer = render_bar_chart) -> list[str]:
    """
    One aligned line per bucket: label, commit count, bar, percentage.

    Raises:
        EmptyHistogramError: If the histogram holds no commits
    """
    lines = []
    for bucket, percent in percentages(histogram):
        count = histogram.count(bucket)
        line = [
            LABELS[bucket].ljust(LABEL_WIDTH),
            f"{count:>5} commits".ljust(COUNT_WIDTH),
            bar(percent, BAR_WIDTH),
            f"{percent:.1f}".rjust(PERCENT_WIDTH) + "%",
        ]
        lines.append(" ".join(line))
    return lines


def select_title(histogram: Histogram) -> str:
    """Day title only when day commits strictly outnumber night commits."""
    if histogram.day_total > histogram.night_total:
        return DAY_TITLE
    return NIGHT_TITLE


def build_markdown_section(title: str, lines: list[str], gist_id: str) -> str:
    """Heading linking to the gist, followed by the lines in a fenced block."""
    heading = f'\n#### <a href="https://gist.github.com/{gist_id}" target="_blank">{title}</a>\n'
    body = "\n".join(lines)
    return f"{heading}```text\n{body}\n```\n"
