"""Selection state machine for the date picker.

DatePicker holds the transient view state of one picker (displayed month,
range mode, pending range start, pending times of day) and turns user
interactions into new values written through a Binding. The host owns the
value; whenever it changes, value_changed() resynchronizes the view state.
"""

import logging
from collections.abc import Callable
from datetime import datetime, time
from enum import Enum
from typing import Any

from pickday.binding import Binding, State
from pickday.dates import (
    DAYS_IN_A_WEEK,
    add_months,
    calendar_days,
    combine,
    is_same_day,
    is_same_month,
    long_date_label,
    month_label,
    start_of_day,
    start_of_month,
    weekday_symbols,
)
from pickday.domain.models import CalendarLocale, DateValue, Range, Single
from pickday.domain.values import equals

logger = logging.getLogger(__name__)

DEFAULT_RANGE_MODE_LABEL = "Range Mode"
DEFAULT_INCLUDES_TIME_LABEL = "Include Time"
EMPTY_DATE_LABEL = "Choose date"


class SelectionState(Enum):
    """Where the picker is in the selection flow."""

    NO_SELECTION = "no_selection"
    SINGLE_SELECTED = "single_selected"
    RANGE_FIRST_PICKED = "range_first_picked"
    RANGE_SELECTED = "range_selected"


class DayTone(Enum):
    """How a grid cell should be emphasized."""

    TODAY = "today"
    CURRENT_MONTH = "current_month"
    ADJACENT_MONTH = "adjacent_month"


class DatePicker:
    """A date picker supporting both single and range selection modes."""

    def __init__(
        self,
        date_value: Binding[DateValue | None],
        includes_time: Binding[bool],
        *,
        calendar_locale: CalendarLocale | None = None,
        range_mode_label: str = DEFAULT_RANGE_MODE_LABEL,
        includes_time_label: str = DEFAULT_INCLUDES_TIME_LABEL,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        """Create a picker.

        Args:
            date_value: Binding to the host-owned selected value.
            includes_time: Binding to the host-owned "include time" flag.
            calendar_locale: Month/weekday names and first day of the week.
            range_mode_label: Display text for the range mode toggle.
            includes_time_label: Display text for the include time toggle.
            clock: Source of "now", used for today's highlight and the
                month shown when nothing is selected.
        """
        self._date_value = date_value
        self._includes_time = includes_time
        self.calendar_locale = calendar_locale or CalendarLocale()
        self.range_mode_label = range_mode_label
        self.includes_time_label = includes_time_label
        self._clock = clock

        now = clock()
        self.is_range_mode = False
        self.pending_start: datetime | None = None
        self.start_time: time = now.time()
        self.end_time: time = now.time()
        self.current_month = start_of_month(now)
        self.days = calendar_days(self.current_month, self.calendar_locale)
        self.value_changed(date_value.get())

    @classmethod
    def bound_to(
        cls,
        date_value: State[DateValue | None],
        includes_time: State[bool],
        **options: Any,
    ) -> "DatePicker":
        """Create a picker over host states and observe them for changes."""
        picker = cls(date_value.binding(), includes_time.binding(), **options)
        date_value.observe(picker.value_changed)
        return picker

    # Bound values

    @property
    def value(self) -> DateValue | None:
        return self._date_value.get()

    @property
    def includes_time(self) -> bool:
        return self._includes_time.get()

    def set_includes_time(self, includes_time: bool) -> None:
        self._includes_time.set(includes_time)

    def _write(self, value: DateValue | None) -> None:
        logger.debug("Picker writes %r", value)
        self._date_value.set(value)

    # Synchronization

    def value_changed(self, value: DateValue | None) -> None:
        """Bring view state in line with a new bound value.

        Called for every change of the bound value, whether it came from
        this picker or from the host. Pending selections are discarded.
        """
        self.pending_start = None
        if value is None:
            self.show_month(self._clock())
            return

        if isinstance(value, Single):
            if not is_same_month(value.date, self.current_month):
                self.show_month(value.date)
            self.is_range_mode = False
            self.start_time = value.date.time()
        else:
            if not is_same_month(value.end, self.current_month):
                self.show_month(value.end)
            self.is_range_mode = True
            self.start_time = value.start.time()
            self.end_time = value.end.time()

    def show_month(self, month: datetime) -> None:
        """Display the month containing `month`."""
        self.current_month = start_of_month(month)
        self.days = calendar_days(self.current_month, self.calendar_locale)

    # Interactions

    def select_day(self, day: datetime) -> None:
        """Handle a tap on a grid day."""
        day = start_of_day(day)
        if not self.is_range_mode:
            self._write(Single(day))
            return

        if self.pending_start is None:
            self.pending_start = day
            return

        new_value = Range.between(self.pending_start, day)
        self.pending_start = None
        if equals(self.value, new_value):
            self.value_changed(self.value)
        else:
            self._write(new_value)

    def toggle_range_mode(self) -> None:
        """Switch between single and range mode, clearing the selection."""
        self.is_range_mode = not self.is_range_mode
        self.pending_start = None
        self._write(None)

    def clear(self) -> None:
        self._write(None)

    def show_previous_month(self) -> None:
        self.show_month(add_months(self.current_month, -1))

    def show_next_month(self) -> None:
        self.show_month(add_months(self.current_month, 1))

    def show_current_month(self) -> None:
        self.show_month(self._clock())

    @property
    def is_showing_current_month(self) -> bool:
        return is_same_month(self.current_month, self._clock())

    def set_start_time(self, time_of_day: time) -> None:
        """Apply a time of day to the single date or to the range start."""
        self.start_time = time_of_day
        value = self.value
        if value is None or not self.includes_time:
            return
        if isinstance(value, Single):
            self._write(Single(combine(value.date, time_of_day)))
        else:
            self._write(Range(combine(value.start, time_of_day), value.end))

    def set_end_time(self, time_of_day: time) -> None:
        """Apply a time of day to the range end. Only meaningful in range mode."""
        self.end_time = time_of_day
        value = self.value
        if not self.is_range_mode or not isinstance(value, Range) or not self.includes_time:
            return
        self._write(Range(value.start, combine(value.end, time_of_day)))

    # Presentation

    @property
    def state(self) -> SelectionState:
        value = self.value
        if self.pending_start is not None:
            return SelectionState.RANGE_FIRST_PICKED
        if value is None:
            return SelectionState.NO_SELECTION
        if isinstance(value, Single):
            return SelectionState.SINGLE_SELECTED
        return SelectionState.RANGE_SELECTED

    @property
    def weeks(self) -> list[list[datetime]]:
        return [self.days[i : i + DAYS_IN_A_WEEK] for i in range(0, len(self.days), DAYS_IN_A_WEEK)]

    @property
    def title(self) -> str:
        return month_label(self.current_month, self.calendar_locale)

    @property
    def weekday_symbols(self) -> list[str]:
        return weekday_symbols(self.calendar_locale)

    def should_highlight(self, day: datetime) -> bool:
        """Whether a grid day is part of the current or pending selection."""
        value = self.value
        if isinstance(value, Single):
            return is_same_day(day, value.date)
        if self.pending_start is not None:
            return is_same_day(day, self.pending_start)
        if isinstance(value, Range):
            return value.contains(day)
        return False

    def day_tone(self, day: datetime) -> DayTone:
        if is_same_day(day, self._clock()):
            return DayTone.TODAY
        if is_same_month(day, self.current_month):
            return DayTone.CURRENT_MONTH
        return DayTone.ADJACENT_MONTH

    @property
    def start_date_label(self) -> str:
        value = self.value
        if value is None:
            return EMPTY_DATE_LABEL
        return long_date_label(value.date if isinstance(value, Single) else value.start, self.calendar_locale)

    @property
    def end_date_label(self) -> str:
        value = self.value
        if value is None:
            return EMPTY_DATE_LABEL
        return long_date_label(value.date if isinstance(value, Single) else value.end, self.calendar_locale)
