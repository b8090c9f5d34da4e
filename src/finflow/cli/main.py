"""Main CLI entry point."""

import logging

import click
from finflow.database.factories import create_sqlite_database

# Import and register all commands at module level
from finflow.cli.commands import (
    add,
    view,
    entry,
    export_cmd,
    import_cmd,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides FINFLOW_DB_PATH environment variable)",
    envvar="FINFLOW_DB_PATH",
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, debug: bool):
    """Financial Flow - personal income and outflow ledger.

    Record dated income and outflow entries and review them by day, week,
    month or year, with JSON export and import.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
add.register_commands(cli)
view.register_commands(cli)
entry.register_commands(cli)
export_cmd.register_commands(cli)
import_cmd.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
