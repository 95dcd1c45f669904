"""Tests for build_exercise_log — filter order, inclusivity, limit, no re-sort."""

from datetime import date

from tracker.core.exercise_log import build_exercise_log, present_exercise


def _entries():
    return [
        {"description": "a", "duration": 10, "date": "2024-02-01"},
        {"description": "b", "duration": 20, "date": "2024-01-01"},
        {"description": "c", "duration": 30, "date": "2024-01-15"},
    ]


def test_no_filters_returns_all_in_insertion_order():
    log = build_exercise_log(_entries())
    assert [e["description"] for e in log] == ["a", "b", "c"]


def test_dates_presented_in_calendar_form():
    assert present_exercise(_entries()[0]) == {
        "description": "a", "duration": 10, "date": "Thu Feb 01 2024",
    }


def test_from_is_inclusive():
    log = build_exercise_log(_entries(), date_from=date(2024, 1, 15))
    assert [e["description"] for e in log] == ["a", "c"]


def test_to_is_inclusive():
    log = build_exercise_log(_entries(), date_to=date(2024, 1, 15))
    assert [e["description"] for e in log] == ["b", "c"]


def test_limit_applies_after_date_filters():
    log = build_exercise_log(
        _entries(), date_from=date(2024, 1, 10), limit=1,
    )
    assert [e["description"] for e in log] == ["a"]


def test_limit_zero_yields_empty():
    assert build_exercise_log(_entries(), limit=0) == []


def test_limit_larger_than_log_keeps_everything():
    assert len(build_exercise_log(_entries(), limit=10)) == 3


def test_empty_window():
    log = build_exercise_log(
        _entries(), date_from=date(2025, 1, 1), date_to=date(2025, 12, 31),
    )
    assert log == []
