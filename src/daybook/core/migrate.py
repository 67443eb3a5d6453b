"""Pure heading-level migration - no I/O dependencies."""

import re

from .headings import NoteFormat, marker, parse_strict

_HEADING_RE = re.compile(r"^(#{1,6}) (.*)$")


def migrate_headings(text: str, new_level: int, fmt: NoteFormat) -> str:
    """
    Rewrite date and month heading markers for a new heading level.

    Pure function - no I/O. Any ``#`` to ``######`` heading is considered,
    whatever level it currently has, since the note may predate the level
    change. Date headings get ``new_level`` markers and month headings one
    fewer; everything else is left alone. With ``new_level`` 1 there is no
    month level, so month headings keep their markers.

    The whole document is scanned, frontmatter included.
    """
    lines = text.split("\n")
    date_marker = marker(new_level)
    month_marker = marker(new_level - 1) if new_level >= 2 else None

    for i, line in enumerate(lines):
        match = _HEADING_RE.match(line)
        if not match:
            continue

        heading_text = match.group(2)
        if parse_strict(heading_text, fmt.date_format) is not None:
            new_marker = date_marker
        elif month_marker and parse_strict(heading_text, fmt.month_format) is not None:
            new_marker = month_marker
        else:
            continue
        lines[i] = f"{new_marker} {heading_text}"

    return "\n".join(lines)
