"""Entry management commands."""

import click
from finflow.domain.ledger import LedgerService
from finflow.cli.error_handling import handle_domain_error


@click.group()
def entry_group():
    """Manage individual entries."""
    pass


@entry_group.command("delete")
@click.argument("entry_id")
@click.pass_context
def delete_entry(ctx, entry_id: str):
    """Delete an entry by ID."""
    service = LedgerService(ctx.obj["db"])
    try:
        service.delete_entry(entry_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return
    click.echo(f"Deleted entry {entry_id}")


@entry_group.command("categorize")
@click.argument("entry_id")
@click.argument("category", required=False, default="")
@click.pass_context
def categorize_entry(ctx, entry_id: str, category: str):
    """Set an entry's category. Omit CATEGORY to clear it."""
    service = LedgerService(ctx.obj["db"])
    try:
        entry = service.update_category(entry_id, category)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    if entry.category:
        click.echo(f"Entry {entry_id} categorized as '{entry.category}'")
    else:
        click.echo(f"Entry {entry_id} is now uncategorized")


@click.command("clear")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear_entries(ctx, yes: bool):
    """Remove ALL entries."""
    if not yes and not click.confirm("Clear ALL entries from this device?"):
        click.echo("Aborted.")
        return

    service = LedgerService(ctx.obj["db"])
    removed = service.clear()
    click.echo(f"Cleared {removed} entries")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
    cli.add_command(clear_entries)
