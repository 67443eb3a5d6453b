"""Pure heading and date-pattern logic - no I/O dependencies.

Date patterns use moment.js-style tokens (``DD-MM-YYYY, dddd``,
``MMMM YYYY``) so existing notes keep their heading format.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime
from functools import lru_cache
from typing import Callable

MARKER_CHAR = "#"

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Indexed by moment day number: 0 = Sunday
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)

_TOKEN_RE = re.compile(
    r"\[[^\]]*\]|YYYY|YY|MMMM|MMM|MM|M|Do|DD|D|dddd|ddd|dd|d|HH|H|hh|h|mm|m|ss|s|A|a"
)


def marker(level: int) -> str:
    """Heading marker for a nesting level, e.g. 3 -> '###'."""
    return MARKER_CHAR * level


def weekday_number(day: date) -> int:
    """Day of week with Sunday = 0."""
    return (day.weekday() + 1) % 7


def _ordinal(n: int) -> str:
    if 11 <= n % 100 <= 13:
        return f"{n}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def _names(names) -> str:
    return "(?i:" + "|".join(names) + ")"


@dataclass(frozen=True)
class _Token:
    """A pattern token: its regex, the field it fills, and how to render it."""

    regex: str
    field: str | None
    render: Callable[[date], str]


_TOKENS: dict[str, _Token] = {
    "YYYY": _Token(r"\d{4}", "year", lambda d: f"{d.year:04d}"),
    "YY": _Token(r"\d{2}", "short_year", lambda d: f"{d.year % 100:02d}"),
    "MMMM": _Token(_names(MONTH_NAMES), "month_name", lambda d: MONTH_NAMES[d.month - 1]),
    "MMM": _Token(_names(n[:3] for n in MONTH_NAMES), "month_name", lambda d: MONTH_NAMES[d.month - 1][:3]),
    "MM": _Token(r"\d{2}", "month", lambda d: f"{d.month:02d}"),
    "M": _Token(r"\d{1,2}", "month", lambda d: str(d.month)),
    "Do": _Token(r"\d{1,2}(?:st|nd|rd|th)", "day", lambda d: _ordinal(d.day)),
    "DD": _Token(r"\d{2}", "day", lambda d: f"{d.day:02d}"),
    "D": _Token(r"\d{1,2}", "day", lambda d: str(d.day)),
    "dddd": _Token(_names(WEEKDAY_NAMES), "weekday_name", lambda d: WEEKDAY_NAMES[weekday_number(d)]),
    "ddd": _Token(_names(n[:3] for n in WEEKDAY_NAMES), "weekday_name", lambda d: WEEKDAY_NAMES[weekday_number(d)][:3]),
    "dd": _Token(_names(n[:2] for n in WEEKDAY_NAMES), "weekday_name", lambda d: WEEKDAY_NAMES[weekday_number(d)][:2]),
    "d": _Token(r"[0-6]", "weekday", lambda d: str(weekday_number(d))),
    # Time of day is accepted but ignored; dates render as midnight.
    "HH": _Token(r"\d{2}", None, lambda d: "00"),
    "H": _Token(r"\d{1,2}", None, lambda d: "0"),
    "hh": _Token(r"\d{2}", None, lambda d: "12"),
    "h": _Token(r"\d{1,2}", None, lambda d: "12"),
    "mm": _Token(r"\d{2}", None, lambda d: "00"),
    "m": _Token(r"\d{1,2}", None, lambda d: "0"),
    "ss": _Token(r"\d{2}", None, lambda d: "00"),
    "s": _Token(r"\d{1,2}", None, lambda d: "0"),
    "A": _Token(r"(?i:am|pm)", None, lambda d: "AM"),
    "a": _Token(r"(?i:am|pm)", None, lambda d: "am"),
}


def _name_index(value: str, names: tuple[str, ...]) -> int:
    value = value.lower()
    for i, name in enumerate(names):
        if name.lower().startswith(value):
            return i
    raise ValueError(value)


class DatePattern:
    """A compiled moment-style date pattern.

    ``format`` renders a date; ``parse`` is strict: the whole text must
    match the pattern and describe a real calendar date.
    """

    def __init__(self, pattern: str):
        self.pattern = pattern
        self._parts: list[str | _Token] = []

        pos = 0
        for match in _TOKEN_RE.finditer(pattern):
            if match.start() > pos:
                self._parts.append(pattern[pos : match.start()])
            text = match.group()
            if text.startswith("["):
                self._parts.append(text[1:-1])
            else:
                self._parts.append(_TOKENS[text])
            pos = match.end()
        if pos < len(pattern):
            self._parts.append(pattern[pos:])

        regex = []
        self._fields: list[str | None] = []
        for part in self._parts:
            if isinstance(part, str):
                regex.append(re.escape(part))
            else:
                regex.append(f"({part.regex})")
                self._fields.append(part.field)
        self._regex = re.compile("".join(regex))

    def __repr__(self) -> str:
        return f"DatePattern({self.pattern!r})"

    def format(self, day: date) -> str:
        return "".join(part if isinstance(part, str) else part.render(day) for part in self._parts)

    def parse(self, text: str) -> date | None:
        """Parse text into a date, or None if it does not match exactly."""
        found = self._regex.fullmatch(text)
        if not found:
            return None

        values: dict[str, int] = {}
        for field, raw in zip(self._fields, found.groups()):
            if field is None:
                continue
            match field:
                case "month_name":
                    field, value = "month", _name_index(raw, MONTH_NAMES) + 1
                case "weekday_name":
                    field, value = "weekday", _name_index(raw, WEEKDAY_NAMES)
                case "short_year":
                    value = int(raw)
                    field, value = "year", value + (1900 if value > 68 else 2000)
                case "day":
                    value = int(raw.rstrip("stndrh"))
                case _:
                    value = int(raw)
            # The same field appearing twice must agree
            if values.setdefault(field, value) != value:
                return None

        try:
            result = date(
                values.get("year", date.today().year),
                values.get("month", 1),
                values.get("day", 1),
            )
        except ValueError:
            return None

        if "weekday" in values and values["weekday"] != weekday_number(result):
            return None
        return result


@lru_cache(maxsize=64)
def compile_pattern(pattern: str) -> DatePattern:
    return DatePattern(pattern)


def format_date(day: date, pattern: str) -> str:
    return compile_pattern(pattern).format(as_date(day))


def parse_strict(text: str, pattern: str) -> date | None:
    """Parse text under pattern, requiring an exact match."""
    return compile_pattern(pattern).parse(text)


def as_date(value: date) -> date:
    """Reduce a datetime to its calendar day."""
    if isinstance(value, datetime):
        return value.date()
    return value


def render_date_heading(day: date, level: int, date_format: str) -> str:
    return f"{marker(level)} {format_date(day, date_format)}"


def render_month_heading(day: date, level: int, month_format: str) -> str:
    """Month heading one level shallower than date headings."""
    return f"{marker(level - 1)} {format_date(day, month_format)}"


@dataclass(frozen=True)
class NoteFormat:
    """How sections are rendered and recognized in a note."""

    heading_level: int = 3
    date_format: str = "DD-MM-YYYY, dddd"
    month_format: str = "MMMM YYYY"
    default_entry: str = "- entry"

    @property
    def has_month_headings(self) -> bool:
        """Month headings sit one level above date headings, so h1 has none."""
        return self.heading_level >= 2

    def date_heading(self, day: date) -> str:
        return render_date_heading(day, self.heading_level, self.date_format)

    def month_heading(self, day: date) -> str:
        return render_month_heading(day, self.heading_level, self.month_format)
