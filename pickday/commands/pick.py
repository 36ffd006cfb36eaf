"""Pick command for choosing a date or date range interactively."""

import re
import sys
from dataclasses import replace
from datetime import datetime
from pathlib import Path

import typer
from rich.console import Console, Group
from rich.table import Table

from pickday.binding import State
from pickday.config import PickerSettings, load_settings
from pickday.dates import day_label, parse_month, parse_time, parse_weekday
from pickday.domain.models import CalendarLocale, DateValue, LocaleName, Month
from pickday.domain.selection import DatePicker, DayTone
from pickday.domain.values import describe, format_date_value, parse_date_value

console = Console()

DAY_STYLES = {
    DayTone.TODAY: "bold red",
    DayTone.CURRENT_MONTH: "white",
    DayTone.ADJACENT_MONTH: "dim",
}

ACTIONS_HELP = (
    "day number or YYYY-MM-DD to select, < / > to change month, t for this month, "
    "r to toggle range mode, i to toggle time, s HH:MM / e HH:MM to set start / end time, "
    "c to clear, q to finish"
)


def resolve_settings(
    settings: PickerSettings,
    includes_time: bool | None = None,
    first_weekday: str | None = None,
    locale_name: str | None = None,
) -> PickerSettings:
    """Apply command line overrides on top of configured settings.

    Raises:
        ValueError: If first_weekday names no weekday.
    """
    calendar_locale = settings.calendar_locale
    if first_weekday is not None:
        calendar_locale = replace(calendar_locale, first_weekday=parse_weekday(first_weekday))
    if locale_name is not None:
        calendar_locale = replace(calendar_locale, name=LocaleName(locale_name) if locale_name else None)

    return replace(
        settings,
        calendar_locale=calendar_locale,
        includes_time=settings.includes_time if includes_time is None else includes_time,
    )


def format_day_cell(picker: DatePicker, day: datetime) -> str:
    """Day number styled by tone, reversed when highlighted."""
    style = DAY_STYLES[picker.day_tone(day)]
    if picker.should_highlight(day):
        style = f"{style} reverse"
    return f"[{style}]{day_label(day)}[/{style}]"


def build_month_table(picker: DatePicker, show_today_hint: bool = True) -> Table:
    """Build the month grid for the picker's displayed month."""
    title = picker.title
    if show_today_hint and not picker.is_showing_current_month:
        title = f"{title} [dim](t: today)[/dim]"

    table = Table(title=title)
    for symbol in picker.weekday_symbols:
        table.add_column(symbol, justify="right", style="bold")

    for week in picker.weeks:
        table.add_row(*(format_day_cell(picker, day) for day in week))

    return table


def format_toggle(label: str, is_on: bool) -> str:
    mark = "[green]●[/green]" if is_on else "[dim]○[/dim]"
    return f"{mark} {label}"


def render_picker(picker: DatePicker) -> Group:
    """Render the full picker: toggles, grid, time options and current value."""
    parts: list[Table | str] = [
        format_toggle(picker.range_mode_label, picker.is_range_mode),
        build_month_table(picker),
        format_toggle(picker.includes_time_label, picker.includes_time),
    ]

    if picker.includes_time:
        parts.append(f"  {picker.start_date_label} [cyan]{picker.start_time.strftime('%H:%M')}[/cyan]")
        if picker.is_range_mode:
            parts.append(f"  {picker.end_date_label} [cyan]{picker.end_time.strftime('%H:%M')}[/cyan]")

    value = picker.value
    if value is None:
        if picker.pending_start is not None:
            parts.append(f"[yellow]Range start:[/yellow] {picker.pending_start.date().isoformat()}")
        else:
            parts.append("[dim]No date selected[/dim]")
    else:
        parts.append(f"[bold]Selected:[/bold] {describe(value, picker.calendar_locale)}")

    return Group(*parts)


def find_day(picker: DatePicker, choice: str) -> datetime | None:
    """Resolve a day number in the displayed month or an ISO date.

    Returns:
        The matching day, or None if the choice names no day.
    """
    if choice.isdigit():
        number = int(choice)
        for day in picker.days:
            if day.day == number and day.month == picker.current_month.month:
                return day
        return None

    try:
        return datetime.fromisoformat(choice)
    except ValueError:
        return None


def handle_action(picker: DatePicker, choice: str) -> bool:
    """Apply one user action to the picker.

    Args:
        picker: Picker to drive.
        choice: Raw user input.

    Returns:
        False when the user is finished, True to keep prompting.

    Raises:
        ValueError: If the input is not a recognised action.
    """
    choice = choice.strip()
    command = choice.lower()

    if command == "q":
        return False
    if command == "<":
        picker.show_previous_month()
    elif command == ">":
        picker.show_next_month()
    elif command == "t":
        picker.show_current_month()
    elif command == "r":
        picker.toggle_range_mode()
    elif command == "i":
        picker.set_includes_time(not picker.includes_time)
    elif command == "c":
        picker.clear()
    elif match := re.fullmatch(r"([se])\s+(\S+)", command):
        if not picker.includes_time:
            raise ValueError("Turn on time with 'i' first")
        time_of_day = parse_time(match.group(2))
        if match.group(1) == "s":
            picker.set_start_time(time_of_day)
        else:
            picker.set_end_time(time_of_day)
    else:
        day = find_day(picker, choice)
        if day is None:
            raise ValueError(f"Unknown action '{choice}'")
        picker.select_day(day)

    return True


def run_picker(picker: DatePicker) -> None:
    """Prompt for actions until the user finishes."""
    console.print(f"[dim]{ACTIONS_HELP}[/dim]\n")
    while True:
        console.print(render_picker(picker))
        choice = typer.prompt("\nAction", type=str, default="q")
        console.print()
        try:
            if not handle_action(picker, choice):
                return
        except ValueError as e:
            console.print(f"[red]{e}[/red]\n")


def print_result(value: DateValue | None, calendar_locale: CalendarLocale) -> None:
    if value is None:
        console.print("[yellow]No date selected[/yellow]")
        return
    console.print(f"[green]✓[/green] {describe(value, calendar_locale)}")
    console.print(format_date_value(value))


def pick_command(
    value: str | None = None,
    month: str | None = None,
    includes_time: bool | None = None,
    first_weekday: str | None = None,
    locale_name: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Choose a date or range interactively and print the result."""
    try:
        settings = resolve_settings(load_settings(config_path), includes_time, first_weekday, locale_name)
        initial_value = parse_date_value(value) if value else None
        initial_month = parse_month(Month(month)) if month else None
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    date_value: State[DateValue | None] = State(initial_value)
    includes_time_state = State(settings.includes_time)
    picker = DatePicker.bound_to(
        date_value,
        includes_time_state,
        calendar_locale=settings.calendar_locale,
        range_mode_label=settings.range_mode_label,
        includes_time_label=settings.includes_time_label,
    )
    if initial_month is not None:
        picker.show_month(initial_month)

    try:
        run_picker(picker)
    except typer.Abort:
        console.print("\n[yellow]Cancelled[/yellow]")
        sys.exit(1)

    print_result(date_value.value, settings.calendar_locale)
