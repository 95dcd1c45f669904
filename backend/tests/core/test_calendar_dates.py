"""Tests for calendar date formatting/parsing — pure, locale-independent."""

from datetime import date

import pytest

from tracker.core.calendar_dates import format_calendar_date, parse_calendar_date


def test_format_pads_day():
    assert format_calendar_date(date(2024, 1, 1)) == "Mon Jan 01 2024"


def test_format_weekday_and_month_names():
    assert format_calendar_date(date(2023, 12, 31)) == "Sun Dec 31 2023"


def test_parse_iso_date():
    assert parse_calendar_date("2024-01-15") == date(2024, 1, 15)


def test_parse_iso_datetime_discards_time():
    assert parse_calendar_date("2024-01-15T23:59:00") == date(2024, 1, 15)


def test_parse_display_form():
    assert parse_calendar_date("Mon Jan 15 2024") == date(2024, 1, 15)


def test_parse_strips_whitespace():
    assert parse_calendar_date("  2024-02-29 ") == date(2024, 2, 29)


def test_display_form_round_trips():
    d = date(2024, 7, 4)
    assert parse_calendar_date(format_calendar_date(d)) == d


@pytest.mark.parametrize("raw", ["", "   ", "yesterday", "2024-13-01", "Xyz Jan 01 2024", "Mon Foo 01 2024"])
def test_parse_rejects_malformed(raw):
    with pytest.raises(ValueError):
        parse_calendar_date(raw)
