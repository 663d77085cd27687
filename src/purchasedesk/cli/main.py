"""Main CLI entry point."""

import logging

import click
from purchasedesk.database.factories import create_sqlite_database
from purchasedesk.domain.lifecycle import DEFAULT_ACTOR

# Import and register all commands at module level
from purchasedesk.cli.commands import (
    bill,
    customer,
    dashboard,
    project,
    purchase_order,
    supplier,
)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("sqlalchemy").setLevel(logging.WARNING)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides PURCHASEDESK_DB_PATH environment variable)",
    envvar="PURCHASEDESK_DB_PATH",
)
@click.option(
    "--actor",
    default=DEFAULT_ACTOR,
    show_default=True,
    envvar="PURCHASEDESK_ACTOR",
    help="Name recorded on created, approved, rejected and paid records",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, actor: str, verbose: bool):
    """Purchasedesk - purchase order and bill approval back office.

    Manage customers, projects and suppliers, route purchase orders through
    approval, and import and pay the bills attached to them.
    """
    ctx.ensure_object(dict)
    _setup_logging(verbose)
    ctx.obj["actor"] = actor

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
customer.register_commands(cli)
project.register_commands(cli)
supplier.register_commands(cli)
purchase_order.register_commands(cli)
bill.register_commands(cli)
dashboard.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
