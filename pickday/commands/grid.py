"""Grid and describe commands for printing calendar data without prompting."""

import sys
from pathlib import Path

from rich.console import Console

from pickday.binding import Binding
from pickday.commands.pick import build_month_table, resolve_settings
from pickday.config import load_settings
from pickday.dates import parse_month
from pickday.domain.models import Month
from pickday.domain.selection import DatePicker
from pickday.domain.values import describe, parse_date_value

console = Console()


def grid_command(
    month: str | None = None,
    first_weekday: str | None = None,
    locale_name: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Print the day grid for a month."""
    try:
        settings = resolve_settings(load_settings(config_path), None, first_weekday, locale_name)
        target_month = parse_month(Month(month)) if month else None
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    picker = DatePicker(
        Binding.constant(None),
        Binding.constant(False),
        calendar_locale=settings.calendar_locale,
    )
    if target_month is not None:
        picker.show_month(target_month)

    if not picker.days:
        console.print("[yellow]No grid available for this month[/yellow]")
        return

    console.print(build_month_table(picker, show_today_hint=False))


def describe_command(
    value: str,
    locale_name: str | None = None,
    config_path: Path | None = None,
) -> None:
    """Print the human-readable description of a date or range."""
    try:
        settings = resolve_settings(load_settings(config_path), locale_name=locale_name)
        date_value = parse_date_value(value)
    except ValueError as e:
        console.print(f"[red]{e}[/red]", style="bold")
        sys.exit(1)

    console.print(describe(date_value, settings.calendar_locale))
