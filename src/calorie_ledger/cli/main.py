"""
Command-line interface for Calorie Ledger.

Provides the interactive numbered menu plus one-shot commands for adding an
entry and printing each report.
"""

from dataclasses import dataclass

import typer

from calorie_ledger.domain.calories import CalorieLog, Day
from calorie_ledger.infrastructure.storage.text_store import CalorieFileStore
from calorie_ledger.services.reporting import ReportingService
from calorie_ledger.utils.exceptions import (
    CalorieLedgerError,
    InvalidAmountError,
    InvalidDayError,
    StorageError,
)
from calorie_ledger.utils.logging_config import get_logger, setup_logging
from calorie_ledger.utils.parameters import DEFAULT_CONFIG_PATH, ParameterLoader

app = typer.Typer(help="Calorie Ledger - Weekly calorie logging")

logger = get_logger(__name__)

MENU_OPTIONS = [
    "Add Calories for a Day",
    "View Weekly Breakdown",
    "View Weekly Total",
    "View Monthly Estimate",
    "View All Entries",
    "Save and Exit",
]


@dataclass
class Session:
    """State shared by every command of one invocation."""

    params: ParameterLoader
    store: CalorieFileStore
    log: CalorieLog

    @property
    def reporting(self) -> ReportingService:
        return ReportingService(self.log, self.params.get_reporting_config())


def init_session(config_path: str, data_file: str | None = None) -> Session:
    """
    Initialize configuration, logging and the calorie log.

    A log that fails to load is reported and replaced by an empty one.

    Args:
        config_path: Path to configuration file. The default path may be absent.
        data_file: Optional override for the calorie data file.

    Returns:
        Session holding the loaded log.
    """
    params = ParameterLoader(config_path, required=config_path != DEFAULT_CONFIG_PATH)
    setup_logging(params.get_logging_config(), "calorie_ledger")

    storage_config = params.get_storage_config()
    if data_file:
        storage_config.data_file = data_file

    store = CalorieFileStore(storage_config)
    try:
        log = store.load()
        if not log.is_empty():
            typer.echo("Previous data loaded.")
    except StorageError as e:
        logger.error(f"Load failed: {e}")
        typer.echo(f"Warning: could not load data, starting empty: {e}", err=True)
        log = CalorieLog()

    return Session(params=params, store=store, log=log)


def save_session(session: Session) -> bool:
    """Persist the session log, reporting failure instead of raising."""
    try:
        session.store.save(session.log)
    except StorageError as e:
        logger.error(f"Save failed: {e}")
        typer.echo(f"Warning: error saving data: {e}", err=True)
        return False
    typer.echo("Data saved successfully.")
    return True


def _read_int(message: str) -> int | None:
    """Prompt for an integer, returning None (after a warning) on anything else."""
    raw = typer.prompt(message)
    try:
        return int(raw.strip())
    except ValueError:
        typer.echo("Invalid input. Please enter a number.")
        return None


def _menu_add(session: Session) -> None:
    typer.echo("Choose a day (1-7):")
    for day in Day:
        typer.echo(f"  {day.number}. {day.value}")

    day_index = _read_int("Enter choice")
    if day_index is None:
        return

    try:
        day = Day.from_index(day_index)
    except InvalidDayError:
        typer.echo("Invalid day choice.")
        return

    raw_amount = typer.prompt(f"Enter calorie intake for {day.value}")
    try:
        calories = session.log.add_entry(day, raw_amount)
    except InvalidAmountError:
        typer.echo("Invalid input. Please enter a number.")
        return

    typer.echo(f"{calories} calories added for {day.value}")


def run_menu(session: Session) -> None:
    """
    Run the numbered menu until the user chooses to save and exit.

    End of input is treated like the exit option.
    """
    reporting = session.reporting

    while True:
        typer.echo("\nCalorie Tracker Menu:")
        for number, label in enumerate(MENU_OPTIONS, start=1):
            typer.echo(f"  {number}. {label}")

        try:
            choice = _read_int("Choose an option")
            if choice is None:
                continue

            if choice == 1:
                _menu_add(session)
            elif choice == 2:
                typer.echo("\nWeekly Breakdown:")
                for line in reporting.format_breakdown():
                    typer.echo(line)
            elif choice == 3:
                typer.echo(reporting.format_weekly_total())
            elif choice == 4:
                typer.echo(reporting.format_monthly_estimate())
            elif choice == 5:
                typer.echo("\nAll Calorie Entries:")
                for line in reporting.format_all_entries():
                    typer.echo(line)
            elif choice == 6:
                break
            else:
                typer.echo("Invalid choice. Try again.")

        except typer.Abort:
            typer.echo("")
            break

    save_session(session)
    typer.echo("Exiting Calorie Tracker. Stay healthy!")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    config_path: str = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to configuration file"),
    data_file: str | None = typer.Option(None, help="Override calorie data file from config"),
) -> None:
    """
    Track calories per day of the week.

    Without a command, starts the interactive menu.
    """
    try:
        ctx.obj = init_session(config_path, data_file)
    except CalorieLedgerError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    if ctx.invoked_subcommand is None:
        run_menu(ctx.obj)


@app.command()
def menu(ctx: typer.Context) -> None:
    """Start the interactive menu."""
    run_menu(ctx.obj)


@app.command()
def add(
    ctx: typer.Context,
    day: str = typer.Argument(..., help="Day name or index 1-7"),
    calories: str = typer.Argument(..., help="Calorie amount"),
) -> None:
    """Add a calorie entry to a day and save."""
    session: Session = ctx.obj

    try:
        resolved = Day.coerce(day)
        recorded = session.log.add_entry(resolved, calories)
    except (InvalidDayError, InvalidAmountError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1) from e

    typer.echo(f"{recorded} calories added for {resolved.value}")

    if not save_session(session):
        raise typer.Exit(code=1)


@app.command()
def breakdown(ctx: typer.Context) -> None:
    """Show entries and totals for each day."""
    for line in ctx.obj.reporting.format_breakdown():
        typer.echo(line)


@app.command()
def total(ctx: typer.Context) -> None:
    """Show the weekly calorie total."""
    typer.echo(ctx.obj.reporting.format_weekly_total())


@app.command()
def estimate(ctx: typer.Context) -> None:
    """Show the estimated monthly calories."""
    typer.echo(ctx.obj.reporting.format_monthly_estimate())


@app.command()
def entries(ctx: typer.Context) -> None:
    """List all entries per day."""
    for line in ctx.obj.reporting.format_all_entries():
        typer.echo(line)


if __name__ == "__main__":
    app()
