"""Quote commands."""

from pathlib import Path

import click

from quickquote.cli.business_resolution import current_business_or_exit
from quickquote.cli.error_handling import handle_domain_error
from quickquote.cli.quote_display import echo_quote, echo_quote_rows
from quickquote.cli.time_options import resolve_date_option, resolve_now
from quickquote.domain.catalog import CatalogService
from quickquote.domain.customer import CustomerService
from quickquote.domain.entities import QuoteStatus
from quickquote.domain.errors import DomainError, MalformedInputError
from quickquote.domain.quote import QuoteService
from quickquote.domain.serialization import deserialize_quote, serialize_quote
from quickquote.domain.sharing import (
    generate_quote_link,
    generate_whatsapp_link,
    generate_whatsapp_message,
)
from quickquote.utils.discount_parser import parse_discount
from quickquote.utils.item_resolver import resolve_items

BASE_URL_ENV_VAR = "QUICKQUOTE_BASE_URL"
DEFAULT_BASE_URL = "http://localhost:3000"

STATUS_CHOICE = click.Choice([status.value for status in QuoteStatus], case_sensitive=False)


def _find_quote_or_exit(ctx, business_id: str, reference: str):
    try:
        return QuoteService(ctx.obj["db"]).find_quote(business_id, reference)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def quote_group():
    """Create, track and share quotes."""
    pass


@quote_group.command("create")
@click.option("--customer", help="Customer name or ID")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="Line item as NAME, NAME:QTY or NAME:QTY:PRICE (repeatable)",
)
@click.option("--discount", help="Discount as a percentage (10%) or an amount (25)")
@click.option("--notes", help="Notes shown on the quote")
@click.option("--terms", help="Terms (defaults to the business's default terms)")
@click.option(
    "--valid-until",
    help="Validity deadline (YYYY-MM-DD or relative like 'in 14 days'); "
    "defaults to the business's validity period",
)
@click.option("--now", help="Creation time (defaults to the current time)")
@click.pass_context
def create_quote(
    ctx,
    customer: str | None,
    items: tuple[str, ...],
    discount: str | None,
    notes: str | None,
    terms: str | None,
    valid_until: str | None,
    now: str | None,
):
    """Create a new quote.

    Items naming a catalog service use its price unless a price is given;
    other items need a price.

    Examples:
        quickquote quote create --customer "Jane Doe" --item "Lawn mowing:2"
        quickquote quote create --item "Lawn mowing" --item "Haul away:1:35" --discount 10%
    """
    db = ctx.obj["db"]
    business = current_business_or_exit(ctx)
    created_at = resolve_now(ctx, now)
    deadline = resolve_date_option(ctx, valid_until, "--valid-until", created_at)

    try:
        quote_discount = parse_discount(discount)
    except ValueError as e:
        click.echo(f"Error: Invalid discount: {e}", err=True)
        ctx.exit(1)

    try:
        customer_id = None
        if customer is not None:
            customer_id = CustomerService(db).find_customer(business.id, customer).id
        line_items = resolve_items(CatalogService(db), business.id, list(items))
        quote = QuoteService(db).create_quote(
            business_id=business.id,
            items=line_items,
            now=created_at,
            customer_id=customer_id,
            discount=quote_discount,
            notes=notes,
            terms=terms,
            valid_until=deadline,
        )
    except (DomainError, ValueError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created quote {quote.quote_number} (ID: {quote.id})")
    echo_quote(quote)


@quote_group.command("list")
@click.option("--status", type=STATUS_CHOICE, help="Only quotes with this status")
@click.option("--search", help="Quote number or customer name contains this text")
@click.pass_context
def list_quotes(ctx, status: str | None, search: str | None):
    """List quotes, newest first."""
    business = current_business_or_exit(ctx)
    service = QuoteService(ctx.obj["db"])

    quotes = service.list_quotes(
        business.id,
        status=QuoteStatus(status.lower()) if status else None,
        search=search,
    )
    if not quotes:
        click.echo("No quotes found.")
        return

    click.echo("\nQuotes:")
    echo_quote_rows(quotes)


@quote_group.command("show")
@click.argument("quote", metavar="QUOTE")
@click.pass_context
def show_quote(ctx, quote: str):
    """Show a quote with its line items.

    QUOTE can be a quote number (e.g., QQ-2025-001) or ID.
    """
    business = current_business_or_exit(ctx)
    echo_quote(_find_quote_or_exit(ctx, business.id, quote))


@quote_group.command("status")
@click.argument("quote", metavar="QUOTE")
@click.argument("status", type=STATUS_CHOICE)
@click.pass_context
def set_status(ctx, quote: str, status: str):
    """Change the status of a quote.

    Examples:
        quickquote quote status QQ-2025-001 accepted
    """
    business = current_business_or_exit(ctx)
    found = _find_quote_or_exit(ctx, business.id, quote)

    try:
        updated = QuoteService(ctx.obj["db"]).update_quote(found.id, status=status)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Quote {updated.quote_number} is now {updated.status.value}")


@quote_group.command("duplicate")
@click.argument("quote", metavar="QUOTE")
@click.option("--now", help="Creation time of the copy (defaults to the current time)")
@click.pass_context
def duplicate_quote(ctx, quote: str, now: str | None):
    """Copy a quote into a new pending quote with a fresh number."""
    business = current_business_or_exit(ctx)
    created_at = resolve_now(ctx, now)
    source = _find_quote_or_exit(ctx, business.id, quote)

    try:
        copy = QuoteService(ctx.obj["db"]).duplicate_quote(source.id, now=created_at)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Duplicated {source.quote_number} as {copy.quote_number} (ID: {copy.id})")


@quote_group.command("expire")
@click.option("--now", help="Reference time (defaults to the current time)")
@click.pass_context
def expire_quotes(ctx, now: str | None):
    """Mark pending quotes past their validity date as expired."""
    business = current_business_or_exit(ctx)
    reference = resolve_now(ctx, now)

    expired = QuoteService(ctx.obj["db"]).expire_overdue_quotes(business.id, now=reference)
    if not expired:
        click.echo("No overdue quotes.")
        return

    count = len(expired)
    click.echo(f"Expired {count} quote{'s' if count != 1 else ''}:")
    for quote in expired:
        click.echo(f"  {quote.quote_number}")


@quote_group.command("share")
@click.argument("quote", metavar="QUOTE")
@click.option(
    "--base-url",
    envvar=BASE_URL_ENV_VAR,
    default=DEFAULT_BASE_URL,
    show_default=True,
    help="Base URL of the public quote page (overrides QUICKQUOTE_BASE_URL)",
)
@click.option("--phone", help="WhatsApp number (defaults to the customer's phone)")
@click.pass_context
def share_quote(ctx, quote: str, base_url: str, phone: str | None):
    """Print the public link, WhatsApp message and WhatsApp link for a quote."""
    business = current_business_or_exit(ctx)
    found = _find_quote_or_exit(ctx, business.id, quote)

    link = generate_quote_link(found.id, base_url)
    message = generate_whatsapp_message(found, business, link)
    if phone is None and found.customer is not None:
        phone = found.customer.phone

    click.echo(f"Quote link: {link}")
    click.echo("\nMessage:")
    click.echo(message)
    click.echo(f"\nWhatsApp: {generate_whatsapp_link(message, phone)}")


@quote_group.command("export")
@click.argument("quote", metavar="QUOTE")
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True),
    help="Write JSON to this file instead of stdout",
)
@click.pass_context
def export_quote(ctx, quote: str, output: str | None):
    """Export a quote, with customer and items, as JSON."""
    business = current_business_or_exit(ctx)
    found = _find_quote_or_exit(ctx, business.id, quote)

    document = serialize_quote(found)
    if output is None:
        click.echo(document)
        return

    Path(output).write_text(document, encoding="utf-8")
    click.echo(f"Exported {found.quote_number} to {output}")


@quote_group.command("inspect")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def inspect_quote(ctx, path: str):
    """Read an exported quote file and print it."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        handle_domain_error(ctx, MalformedInputError(f"Quote file is not UTF-8 text: {e}"))

    try:
        quote = deserialize_quote(text)
    except DomainError as e:
        handle_domain_error(ctx, e)

    echo_quote(quote)


def register_commands(cli):
    """Register quote commands with main CLI."""
    cli.add_command(quote_group, name="quote")
