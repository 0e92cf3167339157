"""Quote list utilities.

Pure transformations over in-memory quotes: ordering, filtering, searching,
duplication and expiry checks. Input sequences are never modified; every
function returns a new list or value.
"""

from datetime import datetime
from typing import Sequence

from quickquote.domain.entities import (
    DuplicateQuoteData,
    DuplicateQuoteItem,
    Quote,
    QuoteStatus,
)


def sort_quotes_by_date(quotes: Sequence[Quote]) -> list[Quote]:
    """Sort quotes newest first.

    Quotes created at the same instant are ordered by ascending id so the
    result does not depend on input order.
    """
    by_id = sorted(quotes, key=lambda quote: quote.id)
    return sorted(by_id, key=lambda quote: quote.created_at, reverse=True)


def filter_quotes_by_status(quotes: Sequence[Quote], status: QuoteStatus) -> list[Quote]:
    """Return quotes with exactly the given status, in input order."""
    return [quote for quote in quotes if quote.status == status]


def search_quotes(quotes: Sequence[Quote], query: str) -> list[Quote]:
    """Find quotes by quote number or customer name.

    Matching is a case-insensitive substring test. A blank query matches
    every quote.
    """
    needle = query.strip().lower()
    if not needle:
        return list(quotes)

    results = []
    for quote in quotes:
        if needle in quote.quote_number.lower():
            results.append(quote)
        elif quote.customer is not None and needle in quote.customer.name.lower():
            results.append(quote)
    return results


def create_duplicate_quote_data(quote: Quote) -> DuplicateQuoteData:
    """Copy the customer, items, pricing and text of a quote.

    The id, quote number, status, timestamps and validity window are left
    out; the caller assigns fresh ones when the copy is stored.
    """
    items = tuple(
        DuplicateQuoteItem(
            service_id=item.service_id,
            service_name=item.service_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            total_price=item.total_price,
        )
        for item in (quote.items or ())
    )
    return DuplicateQuoteData(
        customer_id=quote.customer_id,
        items=items,
        subtotal=quote.subtotal,
        discount_type=quote.discount_type,
        discount_value=quote.discount_value,
        total=quote.total,
        notes=quote.notes,
        terms=quote.terms,
    )


def is_quote_expired(quote: Quote, now: datetime) -> bool:
    """Check whether a quote's validity deadline lies strictly before now."""
    if quote.valid_until is None:
        return False
    return quote.valid_until < now


def get_expired_quotes(quotes: Sequence[Quote], now: datetime) -> list[Quote]:
    """Return pending quotes whose validity has passed.

    Statuses are not changed here; persisting the transition to
    ``expired`` is up to the caller.
    """
    return [
        quote
        for quote in quotes
        if quote.status == QuoteStatus.PENDING and is_quote_expired(quote, now)
    ]
