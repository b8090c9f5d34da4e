"""Add entry command."""

import click
from finflow.domain.entities import EntryType
from finflow.domain.ledger import LedgerService
from finflow.cli.error_handling import handle_domain_error
from finflow.cli.formatting import format_money
from finflow.utils.date_parser import parse_date
from finflow.utils.amount_parser import parse_amount


@click.command("add")
@click.option(
    "--type",
    "entry_type",
    type=click.Choice([t.value for t in EntryType], case_sensitive=False),
    default=EntryType.INCOME.value,
    show_default=True,
    help="Entry type",
)
@click.option(
    "--date",
    "entry_date",
    default="today",
    show_default=True,
    help="Entry date (YYYY-MM-DD or relative like 'today', 'yesterday')",
)
@click.option("--amount", required=True, help="Positive amount (e.g., 123.45)")
@click.option("--description", required=True, help="What the entry is for")
@click.option("--category", help="Optional category")
@click.pass_context
def add_entry(
    ctx,
    entry_type: str,
    entry_date: str,
    amount: str,
    description: str,
    category: str | None,
):
    """Record an income or outflow entry.

    Examples:
        finflow add --type income --date 2024-01-15 --amount 1000 --description "Salary"
        finflow add --type outflow --amount 42.50 --description "Groceries" --category Food
    """
    service = LedgerService(ctx.obj["db"])

    try:
        parsed_date = parse_date(entry_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        parsed_amount = parse_amount(amount)
    except ValueError:
        click.echo("Error: Amount must be a positive number.", err=True)
        ctx.exit(1)

    try:
        entry = service.add_entry(
            entry_type=EntryType(entry_type.lower()),
            entry_date=parsed_date,
            amount=parsed_amount,
            description=description,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo(f"Created entry {entry.id}")
    click.echo(f"  Type: {entry.type.value.capitalize()}")
    click.echo(f"  Date: {entry.date}")
    click.echo(f"  Amount: {format_money(entry.amount)}")
    click.echo(f"  Description: {entry.description}")
    if entry.category:
        click.echo(f"  Category: {entry.category}")


def register_commands(cli):
    """Register add command with main CLI."""
    cli.add_command(add_entry)
