"""Pure heading classification - no I/O dependencies."""

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Iterator

from .frontmatter import FRONTMATTER_DELIMITER
from .headings import NoteFormat, marker, parse_strict


class HeadingKind(Enum):
    """Recognized heading types."""

    DATE = "date"  # Owns a section for one calendar day
    MONTH = "month"  # Closes a month separator


@dataclass(frozen=True)
class Heading:
    """A recognized heading line."""

    kind: HeadingKind
    day: date

    @property
    def is_date(self) -> bool:
        return self.kind is HeadingKind.DATE

    def same_month(self, other: date) -> bool:
        return (self.day.year, self.day.month) == (other.year, other.month)

    def month_before(self, other: date) -> bool:
        """True when this heading's month precedes other's month."""
        return (self.day.year, self.day.month) < (other.year, other.month)


def _heading_text(line: str, level: int) -> str | None:
    prefix = marker(level) + " "
    if line.startswith(prefix):
        return line[len(prefix) :]
    return None


def classify_line(line: str, fmt: NoteFormat) -> Heading | None:
    """
    Classify a line as a date heading, a month heading, or neither.

    The date parse is tried first. Unrelated headings, body text and
    headings with unparseable dates all return None.
    """
    text = _heading_text(line, fmt.heading_level)
    if text is not None:
        day = parse_strict(text, fmt.date_format)
        if day is not None:
            return Heading(HeadingKind.DATE, day)

    if fmt.has_month_headings:
        text = _heading_text(line, fmt.heading_level - 1)
        if text is not None:
            day = parse_strict(text, fmt.month_format)
            if day is not None:
                return Heading(HeadingKind.MONTH, day)

    return None


def scan_headings(
    lines: list[str],
    fmt: NoteFormat,
    start: int = 0,
) -> Iterator[tuple[int, Heading]]:
    """Yield (index, heading) for every recognized heading from start."""
    for i in range(start, len(lines)):
        heading = classify_line(lines[i], fmt)
        if heading is not None:
            yield i, heading


def separator_start(
    lines: list[str],
    index: int,
    fmt: NoteFormat,
    start: int = 0,
    month: date | None = None,
) -> int | None:
    """
    Index of the month separator sitting directly above lines[index].

    A separator is a blank line, a ``---`` rule and a month heading. Returns
    None when the three lines above index (bounded by start) are not one,
    or when month is given and the separator names a different month.
    """
    first = index - 3
    if first < start:
        return None
    if lines[first] != "" or lines[first + 1] != FRONTMATTER_DELIMITER:
        return None
    heading = classify_line(lines[first + 2], fmt)
    if heading is None or heading.kind is not HeadingKind.MONTH:
        return None
    if month is not None and not heading.same_month(month):
        return None
    return first
