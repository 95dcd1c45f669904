"""Calendar Dates — the one date-only representation used for exercises.

Invariants:
    - Exercise dates are datetime.date values; time-of-day and timezone never survive parsing
    - format_calendar_date output is locale-independent ("Mon Jan 01 2024")
    - parse_calendar_date raises ValueError for anything it cannot read

Design Decisions:
    - Day/month names spelled out here instead of strftime("%a %b"): strftime
      follows the process locale
"""

from datetime import date, datetime

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


def format_calendar_date(value: date) -> str:
    """Render a date as 'Mon Jan 01 2024'."""
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} "
        f"{value.day:02d} {value.year:04d}"
    )


def parse_calendar_date(raw: str) -> date:
    """Parse ISO dates, ISO datetimes, or the 'Mon Jan 01 2024' form.

    >>> parse_calendar_date("2024-01-15")
    datetime.date(2024, 1, 15)
    >>> parse_calendar_date("Mon Jan 15 2024")
    datetime.date(2024, 1, 15)
    """
    text = raw.strip()
    if not text:
        raise ValueError("date is empty")
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass
    return _parse_display_form(text)


def _parse_display_form(text: str) -> date:
    parts = text.split()
    if len(parts) != 4:
        raise ValueError(f"unrecognized date: {text!r}")
    weekday, month, day, year = parts
    if weekday.title() not in _WEEKDAYS or month.title() not in _MONTHS:
        raise ValueError(f"unrecognized date: {text!r}")
    if not (day.isdigit() and year.isdigit()):
        raise ValueError(f"unrecognized date: {text!r}")
    # weekday is informational only; the numeric fields decide the date
    return date(int(year), _MONTHS.index(month.title()) + 1, int(day))
