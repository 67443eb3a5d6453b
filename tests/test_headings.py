"""Tests for heading markers and date patterns."""

from datetime import date, datetime

import pytest

from daybook.core.headings import (
    NoteFormat,
    compile_pattern,
    format_date,
    marker,
    parse_strict,
    render_date_heading,
    render_month_heading,
)


class TestMarker:
    @pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
    def test_repeats_hash(self, level):
        assert marker(level) == "#" * level


class TestFormatDate:
    def test_numeric_pattern(self):
        assert format_date(date(2024, 5, 29), "DD-MM-YYYY") == "29-05-2024"

    def test_default_pattern_includes_weekday(self):
        assert format_date(date(2024, 5, 29), "DD-MM-YYYY, dddd") == "29-05-2024, Wednesday"

    def test_month_pattern(self):
        assert format_date(date(2024, 4, 15), "MMMM YYYY") == "April 2024"

    def test_short_names_and_ordinals(self):
        assert format_date(date(2024, 5, 1), "ddd Do MMM YY") == "Wed 1st May 24"
        assert format_date(date(2024, 5, 12), "Do") == "12th"
        assert format_date(date(2024, 5, 22), "Do") == "22nd"
        assert format_date(date(2024, 5, 23), "Do") == "23rd"

    def test_unpadded_tokens(self):
        assert format_date(date(2024, 3, 7), "D/M/YYYY") == "7/3/2024"

    def test_escaped_literal(self):
        assert format_date(date(2024, 5, 29), "[Week of] YYYY-MM-DD") == "Week of 2024-05-29"

    def test_datetime_uses_calendar_day(self):
        assert format_date(datetime(2024, 5, 29, 23, 59), "DD-MM-YYYY") == "29-05-2024"


class TestParseStrict:
    def test_exact_match(self):
        assert parse_strict("29-05-2024", "DD-MM-YYYY") == date(2024, 5, 29)

    def test_rejects_trailing_text(self):
        assert parse_strict("29-05-2024 notes", "DD-MM-YYYY") is None

    def test_rejects_leading_text(self):
        assert parse_strict("x29-05-2024", "DD-MM-YYYY") is None

    def test_rejects_impossible_date(self):
        assert parse_strict("31-02-2024", "DD-MM-YYYY") is None

    def test_month_pattern_defaults_to_first_day(self):
        assert parse_strict("April 2024", "MMMM YYYY") == date(2024, 4, 1)

    def test_month_names_ignore_case(self):
        assert parse_strict("april 2024", "MMMM YYYY") == date(2024, 4, 1)

    def test_date_text_is_not_a_month(self):
        assert parse_strict("29-05-2024", "MMMM YYYY") is None

    def test_month_text_is_not_a_date(self):
        assert parse_strict("April 2024", "DD-MM-YYYY") is None

    def test_weekday_must_agree_with_date(self):
        assert parse_strict("29-05-2024, Wednesday", "DD-MM-YYYY, dddd") == date(2024, 5, 29)
        assert parse_strict("29-05-2024, Monday", "DD-MM-YYYY, dddd") is None

    def test_time_of_day_is_ignored(self):
        assert parse_strict("2024-05-29 14:30", "YYYY-MM-DD HH:mm") == date(2024, 5, 29)

    def test_two_digit_years(self):
        assert parse_strict("29/05/24", "DD/MM/YY") == date(2024, 5, 29)
        assert parse_strict("01/01/99", "DD/MM/YY") == date(1999, 1, 1)

    def test_ordinal_day(self):
        assert parse_strict("May 3rd, 2024", "MMM Do, YYYY") == date(2024, 5, 3)

    def test_empty_text(self):
        assert parse_strict("", "DD-MM-YYYY") is None

    def test_round_trips_its_own_output(self):
        pattern = "dddd, MMMM Do YYYY"
        day = date(2023, 12, 31)
        assert parse_strict(format_date(day, pattern), pattern) == day


class TestCompilePattern:
    def test_is_cached(self):
        assert compile_pattern("DD-MM-YYYY") is compile_pattern("DD-MM-YYYY")


class TestRenderHeadings:
    def test_date_heading(self):
        assert render_date_heading(date(2024, 5, 29), 3, "DD-MM-YYYY") == "### 29-05-2024"

    def test_month_heading_is_one_level_up(self):
        assert render_month_heading(date(2024, 5, 29), 3, "MMMM YYYY") == "## May 2024"

    def test_note_format_helpers(self):
        fmt = NoteFormat(heading_level=4, date_format="YYYY-MM-DD")
        assert fmt.date_heading(date(2024, 5, 29)) == "#### 2024-05-29"
        assert fmt.month_heading(date(2024, 5, 29)) == "### May 2024"

    def test_level_one_has_no_month_headings(self):
        assert NoteFormat(heading_level=1).has_month_headings is False
        assert NoteFormat(heading_level=2).has_month_headings is True
