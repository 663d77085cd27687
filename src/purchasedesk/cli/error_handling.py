"""CLI error handling helpers."""

import click

from purchasedesk.domain.errors import DomainError, ValidationError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Validation errors list one line per offending field.
    """
    if isinstance(error, ValidationError):
        click.echo("Error: invalid input", err=True)
        for field, message in error.errors.items():
            click.echo(f"  {field}: {message}", err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
