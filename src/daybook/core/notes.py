"""Pure section lookup and insertion - no I/O dependencies.

A note is a single markdown document holding one section per day, newest
first. Sections are located by scanning date headings; month separators
are only written when an earlier month is about to follow a new section.
"""

from dataclasses import dataclass
from datetime import date

from .frontmatter import FRONTMATTER_DELIMITER, skip_frontmatter
from .headings import NoteFormat, as_date
from .scanner import HeadingKind, classify_line, scan_headings, separator_start


@dataclass(frozen=True)
class NoteUpdate:
    """Result of placing a section for a date."""

    text: str
    index: int
    created: bool


@dataclass(frozen=True)
class Section:
    """A date heading found in a note."""

    index: int
    day: date


def split_lines(text: str) -> list[str]:
    """Split a document into lines. The empty document has none."""
    return text.split("\n") if text else []


def join_lines(lines: list[str]) -> str:
    return "\n".join(lines)


def insert_for_date(text: str, target: date, fmt: NoteFormat) -> NoteUpdate:
    """
    Ensure the note has a section for target, keeping newest-first order.

    Pure function - no I/O. Single pass over the headings:

    - a section for target already exists: text is returned unchanged with
      the index of its heading
    - the first earlier date found: the new section goes directly above it,
      followed by a month separator when that date is in an earlier month
    - only later dates found: the new section is appended; the index is the
      last line of the previous document
    - no date headings: the new section goes right after any frontmatter

    Args:
        text: Current note contents
        target: Day to place (a datetime is reduced to its date)
        fmt: Heading format for the note

    Returns:
        NoteUpdate with the new text, line index and whether it changed
    """
    target = as_date(target)
    lines = split_lines(text)
    start = skip_frontmatter(lines)
    section = [fmt.date_heading(target), fmt.default_entry]
    saw_later_date = False

    for i, heading in scan_headings(lines, fmt, start):
        if not heading.is_date:
            continue

        if heading.day > target:
            saw_later_date = True
            continue

        if heading.day == target:
            return NoteUpdate(text=text, index=i, created=False)

        at = i
        if fmt.has_month_headings and heading.month_before(target):
            existing = separator_start(lines, i, fmt, start, month=heading.day)
            if existing is None:
                section += ["", FRONTMATTER_DELIMITER, fmt.month_heading(heading.day)]
            else:
                # The earlier month is already introduced; go above its separator
                at = existing
        lines[at:at] = section
        return NoteUpdate(text=join_lines(lines), index=at, created=True)

    if saw_later_date:
        index = len(lines) - 1
        lines.extend(section)
        return NoteUpdate(text=join_lines(lines), index=index, created=True)

    lines[start:start] = section
    return NoteUpdate(text=join_lines(lines), index=start, created=True)


def find_section(text: str, target: date, fmt: NoteFormat) -> int | None:
    """Line index of the date heading for target, or None if absent."""
    target = as_date(target)
    lines = split_lines(text)
    for i, heading in scan_headings(lines, fmt, skip_frontmatter(lines)):
        if heading.is_date and heading.day == target:
            return i
    return None


def list_sections(text: str, fmt: NoteFormat) -> list[Section]:
    """All date headings in document order."""
    lines = split_lines(text)
    return [
        Section(index=i, day=heading.day)
        for i, heading in scan_headings(lines, fmt, skip_frontmatter(lines))
        if heading.is_date
    ]


def read_section(text: str, target: date, fmt: NoteFormat) -> str | None:
    """
    The section for target: its heading and body.

    The body ends before the next recognized heading. A month separator
    closing the section is not part of it.
    """
    index = find_section(text, target, fmt)
    if index is None:
        return None

    lines = split_lines(text)
    end = len(lines)
    for i in range(index + 1, len(lines)):
        heading = classify_line(lines[i], fmt)
        if heading is None:
            continue
        end = i
        if heading.kind is HeadingKind.MONTH:
            end = separator_start(lines, i + 1, fmt, index + 1) or i
        break

    return join_lines(lines[index:end])
