"""JSON import command."""

from pathlib import Path

import click
from finflow.domain.ledger import LedgerService
from finflow.cli.error_handling import handle_domain_error


@click.command("import")
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def import_json(ctx, json_file: str):
    """Import entries from a JSON export, merging by entry ID.

    Imported entries replace existing entries with the same ID.
    """
    service = LedgerService(ctx.obj["db"])
    content = Path(json_file).read_bytes()

    try:
        report = service.import_json(content)
    except ValueError as e:
        handle_domain_error(ctx, e)
        return

    click.echo("\nImport complete:")
    click.echo(f"  Imported: {report.accepted} entries")
    click.echo(f"  Added: {report.added}")
    click.echo(f"  Replaced: {report.replaced}")
    if report.rejected:
        click.echo(f"  Skipped: {report.rejected} invalid records")


def register_commands(cli):
    """Register import command with main CLI."""
    cli.add_command(import_json)
