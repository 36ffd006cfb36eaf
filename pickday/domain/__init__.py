"""Domain models and types for pickday.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Selection logic separated from rendering and prompting
"""

from pickday.domain.models import CalendarLocale, DateValue, LocaleName, Month, Range, Single

__all__ = ["CalendarLocale", "DateValue", "LocaleName", "Month", "Range", "Single"]
