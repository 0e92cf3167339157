"""Main CLI entry point."""

import logging

import click

from quickquote.database.factories import create_sqlite_database

# Import and register all commands at module level
from quickquote.cli.commands import business, service, customer, quote, dashboard


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides QUICKQUOTE_DB_PATH environment variable)",
    envvar="QUICKQUOTE_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Log quote activity to stderr")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """QuickQuote - Itemized quotes for service businesses.

    Keep a catalog of services and a list of customers, build priced quotes
    with discounts, and share them over WhatsApp.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        force=True,
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
business.register_commands(cli)
service.register_commands(cli)
customer.register_commands(cli)
quote.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
