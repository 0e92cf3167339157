"""CLI error handling helpers."""

import click

from quickquote.domain.errors import DomainError, ValidationError


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure.

    Field-level validation messages are listed below the main message.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, ValidationError):
        for field_name, message in error.fields.items():
            click.echo(f"  {field_name}: {message}", err=True)
    ctx.exit(1)
