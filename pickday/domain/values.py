"""Pure functions over DateValue.

This module contains the functional core for selected values:
- No I/O operations (no console, no files)
- No side effects
- Formatting never raises; parsing user text raises ValueError
"""

from datetime import datetime

from pickday.dates import month_day_label
from pickday.domain.models import CalendarLocale, DateValue, Range, Single

RANGE_SEPARATOR = ".."


def equals(first: DateValue | None, second: DateValue | None) -> bool:
    """Structural equality: same variant and equal timestamps.

    A Single never equals a Range, even when their timestamps coincide.
    """
    if isinstance(first, Single) and isinstance(second, Single):
        return first.date == second.date
    if isinstance(first, Range) and isinstance(second, Range):
        return first.start == second.start and first.end == second.end
    return first is None and second is None


def describe(value: DateValue, calendar_locale: CalendarLocale | None = None) -> str:
    """Human-readable description of a value.

    Args:
        value: Value to describe.
        calendar_locale: Locale for month names. Unknown locales fall back
            to the default names.

    Returns:
        "Month dd" for a single date, "Month dd - Month dd" for a range.
    """
    calendar_locale = calendar_locale or CalendarLocale()
    if isinstance(value, Single):
        return month_day_label(value.date, calendar_locale)
    return f"{month_day_label(value.start, calendar_locale)} - {month_day_label(value.end, calendar_locale)}"


def _parse_timestamp(text: str) -> datetime:
    try:
        return datetime.fromisoformat(text.strip())
    except ValueError as e:
        raise ValueError(f"Could not parse date '{text.strip()}' (expected YYYY-MM-DD or YYYY-MM-DDTHH:MM)") from e


def parse_date_value(text: str) -> DateValue:
    """Parse "YYYY-MM-DD" or "YYYY-MM-DDTHH:MM" as a Single or "START..END" as a Range.

    Raises:
        ValueError: If either timestamp is malformed or the range ends
            before it starts.
    """
    if RANGE_SEPARATOR in text:
        start_text, end_text = text.split(RANGE_SEPARATOR, 1)
        start = _parse_timestamp(start_text)
        end = _parse_timestamp(end_text)
        if end < start:
            raise ValueError(f"Range ends before it starts: {text}")
        return Range(start, end)
    return Single(_parse_timestamp(text))


def format_date_value(value: DateValue) -> str:
    """Inverse of parse_date_value, to minute precision."""
    if isinstance(value, Single):
        return value.date.isoformat(timespec="minutes")
    return f"{value.start.isoformat(timespec='minutes')}{RANGE_SEPARATOR}{value.end.isoformat(timespec='minutes')}"
