"""Functional core - pure note logic with no I/O."""

from .headings import NoteFormat, format_date, marker, parse_strict, render_date_heading, render_month_heading
from .frontmatter import skip_frontmatter
from .scanner import Heading, HeadingKind, classify_line, scan_headings
from .notes import NoteUpdate, Section, find_section, insert_for_date, list_sections, read_section
from .migrate import migrate_headings
from .month_grid import is_weekend, month_weeks, shift_month

__all__ = [
    # Headings
    "NoteFormat",
    "format_date",
    "marker",
    "parse_strict",
    "render_date_heading",
    "render_month_heading",
    # Frontmatter
    "skip_frontmatter",
    # Scanner
    "Heading",
    "HeadingKind",
    "classify_line",
    "scan_headings",
    # Notes
    "NoteUpdate",
    "Section",
    "find_section",
    "insert_for_date",
    "list_sections",
    "read_section",
    # Migration
    "migrate_headings",
    # Month grid
    "is_weekend",
    "month_weeks",
    "shift_month",
]
