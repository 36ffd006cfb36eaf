"""CLI entry point for pickday."""

import logging

import typer

from pickday.commands.admin import init_command
from pickday.commands.grid import describe_command, grid_command
from pickday.commands.pick import pick_command

app = typer.Typer(
    name="pickday",
    help="Pick a date or a date range from a calendar in your terminal",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Pick a date or a date range from a calendar in your terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the pickday configuration file."""
    init_command(force)


@app.command()
def pick(
    value: str = typer.Option(None, "--value", help="Initial value (YYYY-MM-DD, YYYY-MM-DDTHH:MM or START..END)"),
    month: str = typer.Option(None, "--month", help="Month to show first (YYYY-MM)"),
    includes_time: bool = typer.Option(None, "--time/--no-time", help="Include time of day (overrides config)"),
    first_weekday: str = typer.Option(None, "--first-weekday", help="First day of the week, e.g. sunday or monday"),
    locale_name: str = typer.Option(None, "--locale", help="Locale for month and weekday names"),
) -> None:
    """Choose a date or a date range interactively."""
    pick_command(value, month, includes_time, first_weekday, locale_name)


@app.command()
def grid(
    month: str = typer.Option(None, "--month", help="Month to show (YYYY-MM, default: this month)"),
    first_weekday: str = typer.Option(None, "--first-weekday", help="First day of the week, e.g. sunday or monday"),
    locale_name: str = typer.Option(None, "--locale", help="Locale for month and weekday names"),
) -> None:
    """Show the calendar grid for a month."""
    grid_command(month, first_weekday, locale_name)


@app.command()
def describe(
    value: str,
    locale_name: str = typer.Option(None, "--locale", help="Locale for month names"),
) -> None:
    """Describe a date (YYYY-MM-DD) or a range (START..END) in words."""
    describe_command(value, locale_name)


if __name__ == "__main__":
    app()
