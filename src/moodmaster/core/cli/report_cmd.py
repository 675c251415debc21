"""moodmaster insights / month / trend: read-only reports over a records file."""

from __future__ import annotations

from datetime import date

import click

from moodmaster.analytics.calendar_grid import build_month_grid, build_trend_series
from moodmaster.analytics.insights import InsightEngine, InsightThresholds
from moodmaster.core.exceptions import InvalidFieldError
from moodmaster.tracking.moods import lookup

from .common import load_records

RECORDS_FILE = click.argument("records_file", type=click.Path(exists=True, dir_okay=False))


@click.command()
@RECORDS_FILE
@click.pass_obj
def insights(config, records_file: str) -> None:
    """Print the insight banner for a records file."""
    records = load_records(records_file)
    engine = InsightEngine(InsightThresholds.from_config(config))
    messages = engine.derive_insights(records)
    if not messages:
        click.echo("No insights yet. Log a few days first.")
        return
    for message in messages:
        click.echo(f"- {message}")


@click.command()
@RECORDS_FILE
@click.option("--year", type=int, default=None, help="Defaults to the current year.")
@click.option("--month", "month_", type=int, default=None, help="1-12. Defaults to the current month.")
def month(records_file: str, year: int | None, month_: int | None) -> None:
    """Print a month grid with each day's mood valence (- when unset)."""
    today = date.today()
    year = year or today.year
    month_ = month_ or today.month
    try:
        cells = build_month_grid(year, month_, load_records(records_file))
    except InvalidFieldError as e:
        raise click.BadParameter(str(e)) from e

    click.echo(f"{year}-{month_:02d}")
    click.echo("  ".join(f"{d:>4}" for d in ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")))
    row: list[str] = []
    for cell in cells:
        if cell.is_blank:
            row.append("    ")
        else:
            mark = str(lookup(cell.mood).valence) if cell.mood else "-"
            row.append(f"{cell.day:>2}:{mark}")
        if len(row) == 7:
            click.echo("  ".join(row))
            row = []
    if row:
        click.echo("  ".join(row))


@click.command()
@RECORDS_FILE
@click.option("--window", type=int, default=None, help="Number of most recent records to chart.")
@click.pass_obj
def trend(config, records_file: str, window: int | None) -> None:
    """Print the mood valence series for the most recent records."""
    if window is None:
        window = config.settings.calendar.trend_window
    try:
        points = build_trend_series(load_records(records_file), window)
    except InvalidFieldError as e:
        raise click.BadParameter(str(e)) from e
    for point in points:
        click.echo(f"{point.date.isoformat()}  {'#' * point.valence} {point.valence}")
