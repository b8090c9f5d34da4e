"""Text rendering for ledger views."""

from decimal import Decimal

import click

from finflow.domain.entities import Entry, LedgerView, Period, Totals


def format_money(amount: Decimal) -> str:
    """Format an amount with thousands separators and up to two decimals."""
    text = f"{amount:,.2f}"
    if text.endswith(".00"):
        return text[:-3]
    return text.rstrip("0")


def format_signed(entry: Entry) -> str:
    """Format an entry amount with its +/- direction prefix."""
    prefix = "+ " if entry.is_income else "- "
    return prefix + format_money(entry.amount)


def range_note(period: Period, label: str) -> str:
    """Describe the range being shown."""
    if period is Period.ALL:
        return f"Showing: {label}"
    return f"Showing: {period.value.upper()} • {label}"


def echo_totals(totals: Totals) -> None:
    """Print the summary totals block."""
    click.echo(f"  Income:  {format_money(totals.income)}")
    click.echo(f"  Outflow: {format_money(totals.outflow)}")
    click.echo(f"  Net:     {format_money(totals.net)}")
    click.echo(f"  Entries: {totals.count}")


def echo_view(view: LedgerView, period: Period, verbose: bool = False) -> None:
    """Print the entries table followed by totals."""
    click.echo(range_note(period, view.bounds.label))

    if not view.entries:
        click.echo("No entries found.")
    else:
        click.echo("-" * 100)
        click.echo(
            f"{'Date':<12} {'Description':<40} {'Category':<18} {'Type':<8} {'Amount':>16}"
        )
        click.echo("-" * 100)
        for entry in view.entries:
            type_label = "Income" if entry.is_income else "Outflow"
            click.echo(
                f"{entry.date:<12} {entry.description[:40]:<40} {entry.category[:18]:<18} "
                f"{type_label:<8} {format_signed(entry):>16}"
            )
            if verbose:
                click.echo(f"{'':<12} ID: {entry.id}")
        click.echo("-" * 100)

    echo_totals(view.totals)
