"""CLI helpers for timestamp options."""

from datetime import datetime

import click

from purchasedesk.utils.date_parser import parse_datetime


def resolve_cli_timestamp(ctx: click.Context, value: str | None) -> datetime | None:
    """Parse an ``--at`` option, or exit with a CLI error.

    Returns None when the option was not given, so services stamp the
    current time.
    """
    if not value:
        return None
    try:
        return parse_datetime(value)
    except ValueError as e:
        click.echo(f"Error: Invalid timestamp: {e}", err=True)
        ctx.exit(1)
