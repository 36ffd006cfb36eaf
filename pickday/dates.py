"""Date utilities for pickday.

Pure functions for calendar grid calculations and formatting. Calendar
arithmetic here never raises: a failure is logged and degrades to an
empty grid or an unchanged date. Only the parse_* helpers, which read
user input, raise ValueError.
"""

import calendar
import locale
import logging
from collections.abc import Sequence
from datetime import date, datetime, time, timedelta

from pickday.domain.models import CalendarLocale, LocaleName, Month

logger = logging.getLogger(__name__)

DAYS_IN_A_WEEK = 7
WEEKS_IN_A_MONTH = 5
GRID_SIZE = DAYS_IN_A_WEEK * WEEKS_IN_A_MONTH

WEEKDAY_NAMES = {name.lower(): index for index, name in enumerate(calendar.day_name)}


def start_of_day(moment: datetime) -> datetime:
    """Normalize a timestamp to midnight of the same day."""
    return moment.replace(hour=0, minute=0, second=0, microsecond=0)


def start_of_month(moment: datetime) -> datetime:
    """Midnight on the first day of the timestamp's month."""
    return start_of_day(moment).replace(day=1)


def is_same_day(first: datetime, second: datetime) -> bool:
    return first.date() == second.date()


def is_same_month(first: datetime, second: datetime) -> bool:
    return (first.year, first.month) == (second.year, second.month)


def weekday_index(day: date, first_weekday: int) -> int:
    """Position of a day within its week, where 0 is the locale's first weekday."""
    return (day.weekday() - first_weekday) % DAYS_IN_A_WEEK


def calendar_days(month: datetime, calendar_locale: CalendarLocale) -> list[datetime]:
    """Calculate the 5x7 grid of days to display for a month.

    The grid starts on the locale's first weekday on or before the first of
    the month and runs for 35 consecutive days, so it may include trailing
    days of the previous month and leading days of the next one.

    Args:
        month: Any timestamp within the month to display.
        calendar_locale: Supplies the first day of the week.

    Returns:
        35 timestamps at midnight, or an empty list if the grid falls
        outside the representable date range.
    """
    try:
        first = start_of_month(month)
        grid_start = first - timedelta(days=weekday_index(first, calendar_locale.first_weekday))
        return [grid_start + timedelta(days=offset) for offset in range(GRID_SIZE)]
    except (OverflowError, ValueError) as e:
        logger.debug("Could not build calendar grid for %s: %s", month, e)
        return []


def combine(day: datetime, time_of_day: time | datetime) -> datetime:
    """Keep the date of `day` and take hour, minute and second from `time_of_day`.

    Returns:
        The combined timestamp, or `day` unchanged if they cannot be combined.
    """
    if isinstance(time_of_day, datetime):
        time_of_day = time_of_day.time()
    try:
        return datetime(
            day.year,
            day.month,
            day.day,
            time_of_day.hour,
            time_of_day.minute,
            time_of_day.second,
            tzinfo=day.tzinfo,
        )
    except (TypeError, ValueError) as e:
        logger.debug("Could not combine %s with %s: %s", day, time_of_day, e)
        return day


def add_months(month: datetime, delta: int) -> datetime:
    """Shift to the first day of the month `delta` months away.

    Returns:
        The shifted month, or `month` unchanged past the supported years.
    """
    first = start_of_month(month)
    year, month_index = divmod(first.year * 12 + first.month - 1 + delta, 12)
    try:
        return first.replace(year=year, month=month_index + 1)
    except ValueError as e:
        logger.debug("Could not move %s by %d months: %s", month, delta, e)
        return month


def _localized_names(names: Sequence[str], locale_name: LocaleName | None) -> list[str]:
    if not locale_name:
        return list(names)
    try:
        with calendar.different_locale(locale_name):
            return list(names)
    except (locale.Error, TypeError, ValueError) as e:
        logger.debug("Locale %r unavailable, using default names: %s", locale_name, e)
        return list(names)


def month_names(locale_name: LocaleName | None = None) -> list[str]:
    """Full month names, index 1 = January, in the given locale."""
    return _localized_names(calendar.month_name, locale_name)


def weekday_symbols(calendar_locale: CalendarLocale) -> list[str]:
    """Short weekday names starting from the locale's first weekday."""
    names = _localized_names(calendar.day_abbr, calendar_locale.name)
    first = calendar_locale.first_weekday
    return names[first:] + names[:first]


def month_day_label(day: datetime, calendar_locale: CalendarLocale) -> str:
    """Format as "Month dd", e.g. "May 05"."""
    return f"{month_names(calendar_locale.name)[day.month]} {day.day:02d}"


def month_label(month: datetime, calendar_locale: CalendarLocale) -> str:
    """Format as "Month yyyy", e.g. "March 2024"."""
    return f"{month_names(calendar_locale.name)[month.month]} {month.year}"


def long_date_label(day: datetime, calendar_locale: CalendarLocale) -> str:
    """Format as "dd Month yyyy", e.g. "05 May 2024"."""
    return f"{day.day:02d} {month_names(calendar_locale.name)[day.month]} {day.year}"


def day_label(day: datetime) -> str:
    return str(day.day)


def parse_month(month: Month) -> datetime:
    """Parse a YYYY-MM month into midnight on its first day.

    Raises:
        ValueError: If the month is not in YYYY-MM format.
    """
    return datetime.strptime(month, "%Y-%m")


def parse_time(text: str) -> time:
    """Parse HH:MM or HH:MM:SS.

    Raises:
        ValueError: If the text is not a valid time of day.
    """
    for fmt in ("%H:%M", "%H:%M:%S"):
        try:
            return datetime.strptime(text.strip(), fmt).time()
        except ValueError:
            continue
    raise ValueError(f"Could not parse time '{text}' (expected HH:MM)")


def parse_weekday(text: str) -> int:
    """Parse a weekday name ("sunday", "Mon") or number (0 = Monday).

    Raises:
        ValueError: If the text names no weekday.
    """
    value = text.strip().lower()
    if value.isdigit() and 0 <= int(value) <= 6:
        return int(value)
    matches = [index for name, index in WEEKDAY_NAMES.items() if len(value) >= 3 and name.startswith(value)]
    if len(matches) != 1:
        raise ValueError(f"Unknown weekday '{text}'")
    return matches[0]
