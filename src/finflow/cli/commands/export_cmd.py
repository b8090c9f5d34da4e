"""JSON export command."""

from datetime import date
from pathlib import Path

import click
from finflow.domain.exchange import export_filename
from finflow.domain.ledger import LedgerService


@click.command("export")
@click.argument("output", type=click.Path(dir_okay=False, writable=True), required=False)
@click.option("--stdout", "to_stdout", is_flag=True, help="Write the export to standard output")
@click.pass_context
def export_json(ctx, output: str | None, to_stdout: bool):
    """Export all entries as JSON.

    Writes to OUTPUT, or to financial-flow-export-<date>.json in the current
    directory when OUTPUT is omitted.
    """
    service = LedgerService(ctx.obj["db"])
    document = service.export_json()

    if to_stdout:
        click.echo(document)
        return

    path = Path(output or export_filename(date.today()))
    path.write_text(document + "\n", encoding="utf-8")
    click.echo(f"Exported {len(service.entries)} entries to {path}")


def register_commands(cli):
    """Register export command with main CLI."""
    cli.add_command(export_json)
