"""Exercise Log — pure filtering of a user's embedded exercises. No IO.

Invariants:
    - Filters apply in fixed order: from (inclusive), to (inclusive), then limit
    - Insertion order is preserved; entries are never re-sorted
    - limit=0 yields an empty log; limit=None means no truncation
"""

from datetime import date

from tracker.core.calendar_dates import format_calendar_date, parse_calendar_date


def entry_date(entry: dict) -> date:
    """Read the stored date of an embedded exercise entry."""
    return parse_calendar_date(entry["date"])


def present_exercise(entry: dict) -> dict:
    """Stored exercise entry → public shape with calendar-form date."""
    return {
        "description": entry["description"],
        "duration": entry["duration"],
        "date": format_calendar_date(entry_date(entry)),
    }


def build_exercise_log(
    exercises: list[dict],
    date_from: date | None = None,
    date_to: date | None = None,
    limit: int | None = None,
) -> list[dict]:
    """Filter and truncate stored exercises into the public log view."""
    selected = [
        entry for entry in exercises
        if (date_from is None or entry_date(entry) >= date_from)
        and (date_to is None or entry_date(entry) <= date_to)
    ]
    if limit is not None:
        selected = selected[:limit]
    return [present_exercise(entry) for entry in selected]
