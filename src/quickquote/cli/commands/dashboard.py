"""Dashboard command."""

import calendar

import click

from quickquote.cli.business_resolution import current_business_or_exit
from quickquote.cli.quote_display import echo_quote_rows
from quickquote.cli.time_options import resolve_now
from quickquote.domain.dashboard import DEFAULT_RECENT_COUNT
from quickquote.domain.quote import QuoteService
from quickquote.utils.formatting import format_price


@click.command("dashboard")
@click.option("--now", help="Reference time; stats cover its calendar month")
@click.option(
    "--recent",
    type=int,
    default=DEFAULT_RECENT_COUNT,
    show_default=True,
    help="Number of recent quotes to show",
)
@click.pass_context
def dashboard(ctx, now: str | None, recent: int):
    """Show this month's quote stats and the most recent quotes."""
    business = current_business_or_exit(ctx)
    reference = resolve_now(ctx, now)

    summary = QuoteService(ctx.obj["db"]).get_dashboard(
        business.id, now=reference, recent_count=recent
    )
    stats = summary.stats
    month = f"{calendar.month_name[reference.month]} {reference.year}"

    click.echo(f"\n{business.name} - {month}")
    click.echo("-" * 60)
    click.echo(f"{'Quotes this month':<40} {stats.total_quotes_this_month:>19}")
    click.echo(
        f"{'Accepted value this month':<40} "
        f"{format_price(stats.total_accepted_value_this_month):>19}"
    )
    click.echo(f"{'Pending amount':<40} {format_price(stats.total_pending_amount):>19}")

    if not summary.recent_quotes:
        click.echo("\nNo quotes yet.")
        return

    click.echo("\nRecent quotes:")
    echo_quote_rows(list(summary.recent_quotes))


def register_commands(cli):
    """Register dashboard command with main CLI."""
    cli.add_command(dashboard)
