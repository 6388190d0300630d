"""Main CLI entry point."""

import click
from spendly.database.factories import create_sqlite_database
from spendly.logging_setup import configure_logging

# Import and register all commands at module level
from spendly.cli.commands import (
    parse,
    categorize,
    import_cmd,
    view,
)

# Commands that read or write the ledger
DATABASE_COMMANDS = {"import", "list", "show"}


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SPENDLY_DB_PATH environment variable)",
    envvar="SPENDLY_DB_PATH",
)
@click.option(
    "--log-level",
    help="Logging level, e.g. DEBUG (overrides SPENDLY_LOG_LEVEL environment variable)",
    envvar="SPENDLY_LOG_LEVEL",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """Spendly - Bank SMS transaction tracker.

    Extract transactions from bank SMS notifications, categorize them and
    keep them in a local ledger.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Only open the ledger for commands that use it (not for help or parsing)
    if ctx.invoked_subcommand in DATABASE_COMMANDS:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
parse.register_commands(cli)
categorize.register_commands(cli)
import_cmd.register_commands(cli)
view.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
