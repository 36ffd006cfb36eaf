"""Domain type definitions for pickday.

These types describe what a date picker selects, independent of how it is
displayed:
- Month: Month in YYYY-MM format
- LocaleName: Locale identifier used for month and weekday names
- CalendarLocale: Locale name plus first day of the week
- Single / Range: The two variants of a selected DateValue
"""

import calendar
from dataclasses import dataclass
from datetime import datetime
from typing import NewType

# Month is always in YYYY-MM format (e.g., "2025-01")
Month = NewType("Month", str)

# Locale identifier such as "en_US.UTF-8" or "de_DE"
LocaleName = NewType("LocaleName", str)


@dataclass(frozen=True)
class CalendarLocale:
    """Calendar conventions used to lay out and label a month.

    first_weekday follows the standard library convention
    (0 = Monday ... 6 = Sunday). A name of None uses the process locale.
    """

    name: LocaleName | None = None
    first_weekday: int = calendar.SUNDAY

    def __post_init__(self) -> None:
        if isinstance(self.first_weekday, bool) or not isinstance(self.first_weekday, int):
            raise ValueError(f"first_weekday must be an integer, got {self.first_weekday!r}")
        if not 0 <= self.first_weekday <= 6:
            raise ValueError(f"first_weekday must be between 0 and 6, got {self.first_weekday}")


@dataclass(frozen=True)
class Single:
    """Value for single selection mode."""

    date: datetime


@dataclass(frozen=True)
class Range:
    """Value for range selection mode, from start to end inclusive.

    Ordering is not enforced: callers that build a Range directly are
    responsible for start <= end. Use Range.between to get an ordered one.
    """

    start: datetime
    end: datetime

    @classmethod
    def between(cls, first: datetime, second: datetime) -> "Range":
        """Build a range from two endpoints given in any order."""
        if second < first:
            return cls(second, first)
        return cls(first, second)

    def contains(self, moment: datetime) -> bool:
        return self.start <= moment <= self.end


# Currently selected value of a date picker
DateValue = Single | Range
