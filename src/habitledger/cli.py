"""Command-line front end for the habit ledger."""

from __future__ import annotations

from contextlib import contextmanager
from datetime import date
from pathlib import Path
from typing import Iterator, Optional

import click

from .context import AppContext, create_app_context
from .domain.days import parse_day
from .errors import HabitError, InvalidDate
from .logging_config import setup_logging
from .services.export_csv import export_completions_csv
from .services.scoring import overall_current_streak
from .services.summary import calendar_grid, summarize_all


@contextmanager
def _domain_errors() -> Iterator[None]:
    """Report domain errors as CLI failures; store state is already unchanged."""

    try:
        yield
    except HabitError as exc:
        raise click.ClickException(str(exc)) from exc


def _day_option(ctx, param, value: Optional[str]) -> Optional[date]:
    if value is None:
        return None
    try:
        return parse_day(value)
    except InvalidDate as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


as_of_option = click.option(
    "--as-of",
    "as_of",
    callback=_day_option,
    default=None,
    help="Evaluate as of this day (YYYY-MM-DD); defaults to today.",
)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Track daily habits and their streak scores."""

    if ctx.obj is None:
        app = create_app_context()
        setup_logging(app.config)
        ctx.obj = app


@cli.command("add")
@click.argument("name")
@click.pass_obj
def add_habit(app: AppContext, name: str) -> None:
    """Create a habit."""

    with _domain_errors():
        habit = app.store.create_habit(name)
    click.echo(f"Created habit {habit.id}: {habit.name}")


@cli.command("log")
@click.argument("habit_id", type=int)
@click.pass_obj
def log_today(app: AppContext, habit_id: int) -> None:
    """Log today's completion for a habit."""

    with _domain_errors():
        logged = app.store.log_today(habit_id)
    click.echo("Logged today." if logged else "Already completed today.")


@cli.command("past")
@click.argument("habit_id", type=int)
@click.argument("day")
@click.pass_obj
def add_past(app: AppContext, habit_id: int, day: str) -> None:
    """Add a completion for a past day (YYYY-MM-DD)."""

    with _domain_errors():
        added = app.store.add_completion(habit_id, day)
    click.echo(f"Logged {added.isoformat()}.")


@cli.command("toggle")
@click.argument("habit_id", type=int)
@click.argument("day")
@click.pass_obj
def toggle(app: AppContext, habit_id: int, day: str) -> None:
    """Add a completion if missing, remove it if present."""

    with _domain_errors():
        logged = app.store.toggle_completion(habit_id, day)
    click.echo(f"{'Logged' if logged else 'Removed'} {parse_day(day).isoformat()}.")


@cli.command("remove")
@click.argument("habit_id", type=int)
@click.argument("day")
@click.pass_obj
def remove(app: AppContext, habit_id: int, day: str) -> None:
    """Remove a logged completion."""

    with _domain_errors():
        removed = app.store.remove_completion(habit_id, day)
    click.echo(f"Removed {removed.isoformat()}.")


@cli.command("delete")
@click.argument("habit_id", type=int)
@click.option("--yes", is_flag=True, default=False, help="Skip the confirmation prompt.")
@click.pass_obj
def delete(app: AppContext, habit_id: int, yes: bool) -> None:
    """Delete a habit and its history."""

    with _domain_errors():
        habit = app.store.get(habit_id)
        if not yes:
            click.confirm(f"Delete habit {habit.name!r}?", abort=True)
        app.store.delete_habit(habit_id)
    click.echo(f"Deleted habit {habit_id}.")


@cli.command("list")
@as_of_option
@click.pass_obj
def list_habits(app: AppContext, as_of: Optional[date]) -> None:
    """Show every habit with its score."""

    today = as_of or app.store.today()
    habits = app.store.habits
    if not habits:
        click.echo("No habits yet. Create one with `habitledger add NAME`.")
        return

    for row in summarize_all(habits, today, policy=app.policy):
        marker = "  [done today]" if row.completed_today else ""
        click.echo(
            f"{row.habit_id}  {row.name}  completions={row.completion_count}"
            f"  points={row.score.points}  golden={row.score.golden}"
            f"  streak={row.score.current_streak}  longest={row.score.longest_streak}{marker}"
        )
    click.echo(f"Overall streak: {overall_current_streak(habits, today)}")


@cli.command("calendar")
@click.argument("habit_id", type=int)
@click.option("--days", "n", type=click.IntRange(min=1), default=None, help="Number of days shown.")
@as_of_option
@click.pass_obj
def calendar(app: AppContext, habit_id: int, n: Optional[int], as_of: Optional[date]) -> None:
    """Print the recent day grid for a habit, one week per line."""

    with _domain_errors():
        habit = app.store.get(habit_id)
        grid = calendar_grid(habit, as_of or app.store.today(), n or app.config.DAY_WINDOW)

    click.echo(habit.name)
    for start in range(0, len(grid), 7):
        week = grid[start : start + 7]
        click.echo(" ".join(f"{day[5:]}{'#' if done else '.'}" for day, done in week))


@cli.command("export-csv")
@click.argument("output", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def export_csv(app: AppContext, output: Path) -> None:
    """Export every completion to a CSV file."""

    path = export_completions_csv(habits=app.store.habits, output_path=output)
    click.echo(f"Export written: {path}")


def main() -> None:  # pragma: no cover - console entry point
    cli()


if __name__ == "__main__":  # pragma: no cover
    main()
