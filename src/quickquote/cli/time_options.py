"""CLI helpers for reference times and dates."""

from datetime import datetime

import click

from quickquote.utils.date_parser import parse_datetime


def resolve_now(ctx: click.Context, now: str | None) -> datetime:
    """Resolve the --now option, defaulting to the current time."""
    if now is None:
        return parse_datetime("now")
    try:
        return parse_datetime(now)
    except ValueError as e:
        click.echo(f"Error: Invalid --now value: {e}", err=True)
        ctx.exit(1)


def resolve_date_option(
    ctx: click.Context, value: str | None, option_name: str, now: datetime
) -> datetime | None:
    """Parse an optional date option relative to now, or exit with a CLI error."""
    if value is None:
        return None
    try:
        return parse_datetime(value, now=now)
    except ValueError as e:
        click.echo(f"Error: Invalid {option_name} value: {e}", err=True)
        ctx.exit(1)
