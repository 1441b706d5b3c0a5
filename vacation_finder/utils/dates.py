from datetime import date, datetime
from typing import Any

from vacation_finder.errors import DateParseError


_WEEKDAYS = {
    "es": ["lun", "mar", "mié", "jue", "vie", "sáb", "dom"],
    "en": ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"],
}
_MONTHS = {
    "es": ["ene", "feb", "mar", "abr", "may", "jun", "jul", "ago", "sept", "oct", "nov", "dic"],
    "en": ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"],
}


def parse_flight_date(value: Any) -> date:
    """Coerce an ISO-8601 date (or datetime) into a calendar date.

    Time of day is dropped: every flight is anchored at midnight.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise DateParseError(value, f"Flight date must be an ISO-8601 string, got {type(value).__name__}")

    text = value.strip()
    if not text:
        raise DateParseError(value)
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError as e:
        raise DateParseError(value) from e


def days_between(start: date, end: date) -> int:
    return (end - start).days


def format_date(value: date, locale: str = "es") -> str:
    """Short calendar date, e.g. 'vie, 5 ene 2024' / 'Fri, 5 Jan 2024'."""
    weekdays = _WEEKDAYS.get(locale, _WEEKDAYS["es"])
    months = _MONTHS.get(locale, _MONTHS["es"])
    return f"{weekdays[value.weekday()]}, {value.day} {months[value.month - 1]} {value.year}"
