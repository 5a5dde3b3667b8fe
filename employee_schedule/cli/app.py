"""
Main CLI application using Typer.
"""

import json
import logging
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..config import AppConfig, build_service, load_config
from ..domain.calendar import CalendarClassifier
from ..domain.exceptions import EmployeeNotFoundError, ScheduleError, ScheduleStoreError
from ..domain.models import DateRange, DaySchedule, WEEKDAY_NAMES
from ..domain.validator import parse_date

app = typer.Typer(
    name="employee-schedule",
    help="Resolve employee working schedules, weekends and holidays excluded",
    add_completion=False
)

console = Console()

logger = logging.getLogger(__name__)

EXIT_INVALID_REQUEST = 1
EXIT_STORE_FAILURE = 2

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")
]


@app.callback()
def main(
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging.")] = False,
):
    """
    Employee schedule tools.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def _format_hours(day_schedule: DaySchedule) -> str:
    minutes = sum(time_range.duration_minutes() for time_range in day_schedule.time_ranges)
    return f"{minutes // 60}:{minutes % 60:02d}"


@app.command()
def show(
    employee_id: Annotated[str, typer.Argument(help="Employee identifier")],
    start: Annotated[str, typer.Option("--start", help="Start date (YYYY-MM-DD)")],
    end: Annotated[Optional[str], typer.Option("--end", help="End date (YYYY-MM-DD). Defaults to the start date")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print the JSON payload instead of a table.")] = False,
    config_file: ConfigOption = None,
):
    """
    Show the working schedule of an employee.

    Examples:

        employee-schedule show 1 --start 2021-01-11

        employee-schedule show 2 --start 2021-02-22 --end 2021-02-28 --json
    """
    config = _load_config_or_exit(config_file)

    try:
        service = build_service(config)
        response = service.get_schedule(employee_id, start, end if end is not None else start)
    except EmployeeNotFoundError as e:
        console.print(f"[bold red]Invalid request:[/bold red] {e}")
        raise typer.Exit(EXIT_INVALID_REQUEST)
    except ScheduleError as e:
        console.print(f"[bold red]Schedule data unavailable:[/bold red] {e}")
        raise typer.Exit(EXIT_STORE_FAILURE)

    if as_json:
        console.print_json(json.dumps(response.to_payload()))
        if not response.ok:
            raise typer.Exit(EXIT_INVALID_REQUEST)
        return

    if not response.ok:
        console.print("[bold red]Invalid request:[/bold red]")
        for error in response.errors:
            console.print(f"  {error.field}: {error.message}")
        raise typer.Exit(EXIT_INVALID_REQUEST)

    if not response.schedule:
        console.print("[yellow]No working days in the requested range.[/yellow]")
        return

    table = Table(
        title=f"Schedule of employee {employee_id}",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Day", style="bold yellow")
    table.add_column("Weekday")
    table.add_column("Time ranges")
    table.add_column("Hours", justify="right")

    for day_schedule in response.schedule:
        table.add_row(
            day_schedule.day.isoformat(),
            WEEKDAY_NAMES[day_schedule.day.weekday()].capitalize(),
            ", ".join(str(time_range) for time_range in day_schedule.time_ranges),
            _format_hours(day_schedule)
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def holidays(
    start: Annotated[str, typer.Option("--start", help="Start date (YYYY-MM-DD)")],
    end: Annotated[str, typer.Option("--end", help="End date (YYYY-MM-DD)")],
    config_file: ConfigOption = None,
):
    """
    List the holidays within a date range.
    """
    config = _load_config_or_exit(config_file)

    start_date = parse_date(start)
    end_date = parse_date(end)
    if start_date is None or end_date is None or start_date > end_date:
        console.print("[bold red]Error:[/bold red] --start and --end must be valid dates with start <= end")
        raise typer.Exit(1)

    date_range = DateRange(start=start_date, end=end_date)

    try:
        holiday_set = build_service(config).holidays(date_range)
    except ScheduleStoreError as e:
        console.print(f"[bold red]Schedule data unavailable:[/bold red] {e}")
        raise typer.Exit(EXIT_STORE_FAILURE)

    if not len(holiday_set):
        console.print("[yellow]No holidays in the requested range.[/yellow]")
        return

    classifier = CalendarClassifier(holidays=holiday_set, weekend_days=config.weekend_days)

    table = Table(title=f"Holidays {date_range}", show_header=True, header_style="bold cyan")
    table.add_column("Day", style="bold yellow")
    table.add_column("Weekday")
    table.add_column("Note", style="dim")

    for day in holiday_set:
        table.add_row(
            day.isoformat(),
            WEEKDAY_NAMES[day.weekday()].capitalize(),
            "falls on a weekend" if classifier.is_weekend(day) else ""
        )

    console.print()
    console.print(table)
    console.print()


@app.command()
def serve(
    host: Annotated[Optional[str], typer.Option("--host", help="Host to bind to")] = None,
    port: Annotated[Optional[int], typer.Option("--port", "-p", help="Port to bind to")] = None,
    config_file: ConfigOption = None,
):
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    from ..api.app import create_app

    config = _load_config_or_exit(config_file)

    root_logger = logging.getLogger()
    if not root_logger.isEnabledFor(logging.DEBUG):
        root_logger.setLevel(config.log_level_value)

    try:
        service = build_service(config)
    except ScheduleStoreError as e:
        console.print(f"[bold red]Schedule data unavailable:[/bold red] {e}")
        raise typer.Exit(EXIT_STORE_FAILURE)

    logger.info("Using %s schedule store", config.store.backend)

    bind_host = host or config.server.host
    bind_port = port or config.server.port
    console.print(f"[bold cyan]Serving employee schedules on http://{bind_host}:{bind_port}[/bold cyan]")

    uvicorn.run(create_app(service=service), host=bind_host, port=bind_port, log_level=config.log_level.lower())


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]employee-schedule[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
