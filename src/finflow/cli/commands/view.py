"""Entry viewing commands."""

import click
from finflow.domain.entities import Period
from finflow.domain.ledger import LedgerService
from finflow.cli.date_filters import build_query, query_options
from finflow.cli.error_handling import handle_domain_error
from finflow.cli.formatting import echo_totals, echo_view, range_note


@click.command("view")
@query_options
@click.option("--verbose", "-v", is_flag=True, help="Show entry IDs")
@click.pass_context
def view_entries(ctx, period: str, reference_date: str | None, search: str, sort: str, verbose: bool):
    """View entries for a period with totals.

    Examples:
        finflow view --period week
        finflow view --period month --date 2024-01-15 --search rent --sort amount-desc
    """
    service = LedgerService(ctx.obj["db"])
    ledger_query = build_query(
        ctx, period=period, reference_date=reference_date, search=search, sort=sort
    )
    try:
        view = service.view(ledger_query)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    echo_view(view, ledger_query.period, verbose=verbose)


@click.command("summary")
@query_options
@click.pass_context
def summary(ctx, period: str, reference_date: str | None, search: str, sort: str):
    """Show income, outflow and net totals for a period."""
    service = LedgerService(ctx.obj["db"])
    ledger_query = build_query(
        ctx, period=period, reference_date=reference_date, search=search, sort=sort
    )
    try:
        view = service.view(ledger_query)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(range_note(Period.parse(period), view.bounds.label))
    echo_totals(view.totals)


def register_commands(cli):
    """Register view commands with main CLI."""
    cli.add_command(view_entries)
    cli.add_command(summary)
