"""CLI helpers for query options and reference date resolution."""

from datetime import date
from typing import Callable

import click

from finflow.domain.entities import LedgerQuery, Period, SortKey
from finflow.utils.date_parser import parse_date

PERIOD_CHOICES = [p.value for p in Period]
SORT_CHOICES = [s.value for s in SortKey]


def query_options(command: Callable) -> Callable:
    """Attach the shared --period/--date/--search/--sort options to a command."""
    options = [
        click.option(
            "--period",
            type=click.Choice(PERIOD_CHOICES, case_sensitive=False),
            default=Period.MONTH.value,
            show_default=True,
            help="Time window to show",
        ),
        click.option(
            "--date",
            "reference_date",
            help="Reference date the period is computed around (YYYY-MM-DD or 'today', 'last month', ...)",
        ),
        click.option("--search", default="", help="Text to find in description or category"),
        click.option(
            "--sort",
            type=click.Choice(SORT_CHOICES, case_sensitive=False),
            default=SortKey.DATE_DESC.value,
            show_default=True,
            help="Sort order",
        ),
    ]
    for option in reversed(options):
        command = option(command)
    return command


def resolve_reference_date(ctx: click.Context, value: str | None) -> date | None:
    """Parse the --date option, exiting with an error if it is invalid."""
    if not value:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        click.echo(f"Error: Invalid reference date: {e}", err=True)
        ctx.exit(1)


def build_query(
    ctx: click.Context,
    *,
    period: str,
    reference_date: str | None,
    search: str,
    sort: str,
) -> LedgerQuery:
    """Build a LedgerQuery from CLI option values."""
    return LedgerQuery(
        period=Period.parse(period),
        reference_date=resolve_reference_date(ctx, reference_date),
        search_text=search or "",
        sort_key=SortKey.parse(sort),
    )
