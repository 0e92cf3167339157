"""CLI helpers for printing quotes."""

import click

from quickquote.domain.entities import Quote
from quickquote.utils.formatting import (
    display_discount_amount,
    format_discount,
    format_long_date,
    format_price,
    format_short_date,
)

ROW_HEADER = f"{'Number':<14} {'Date':<10}  {'Customer':<24} {'Status':<9} {'Total':>12}"


def format_quote_row(quote: Quote) -> str:
    """One-line summary of a quote for lists."""
    customer_name = quote.customer.name if quote.customer else "-"
    return (
        f"{quote.quote_number:<14} {format_short_date(quote.created_at):<10}  "
        f"{customer_name[:24]:<24} {quote.status.value:<9} {format_price(quote.total):>12}"
    )


def echo_quote_rows(quotes: list[Quote]) -> None:
    """Print a table of quotes."""
    click.echo("-" * 74)
    click.echo(ROW_HEADER)
    click.echo("-" * 74)
    for quote in quotes:
        click.echo(format_quote_row(quote))


def echo_quote(quote: Quote) -> None:
    """Print a quote with its line items and totals."""
    click.echo(f"\nQuote {quote.quote_number} [{quote.status.value}]")
    click.echo("-" * 70)
    if quote.customer is not None:
        click.echo(f"Customer:    {quote.customer.name} ({quote.customer.phone})")
    else:
        click.echo("Customer:    -")
    click.echo(f"Date:        {format_long_date(quote.created_at)}")
    click.echo(f"Valid until: {format_long_date(quote.valid_until)}")

    click.echo("-" * 70)
    click.echo(f"{'Item':<32} {'Qty':>5} {'Unit price':>14} {'Total':>14}")
    for item in quote.items or ():
        click.echo(
            f"{item.service_name[:32]:<32} {item.quantity:>5} "
            f"{format_price(item.unit_price):>14} {format_price(item.total_price):>14}"
        )
    click.echo("-" * 70)

    click.echo(f"{'Subtotal':<52} {format_price(quote.subtotal):>17}")
    discount = quote.discount
    if discount is not None:
        amount = display_discount_amount(quote.subtotal, discount)
        label = f"Discount ({format_discount(discount)})"
        click.echo(f"{label:<52} {format_price(-amount):>17}")
    click.echo(f"{'Total':<52} {format_price(quote.total):>17}")

    if quote.notes:
        click.echo(f"\nNotes: {quote.notes}")
    if quote.terms:
        click.echo(f"Terms: {quote.terms}")
