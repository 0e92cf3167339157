"""Dashboard statistics over a business's quotes."""

from datetime import datetime
from typing import Sequence

from quickquote.domain.entities import DashboardStats, Quote, QuoteStatus
from quickquote.domain.quote_management import sort_quotes_by_date

DEFAULT_RECENT_COUNT = 5


def is_quote_in_month(quote: Quote, year: int, month: int) -> bool:
    """Check if a quote was created in the given calendar month (1-12)."""
    return quote.created_at.year == year and quote.created_at.month == month


def get_quotes_in_month(quotes: Sequence[Quote], year: int, month: int) -> list[Quote]:
    """Get quotes created in a specific month."""
    return [quote for quote in quotes if is_quote_in_month(quote, year, month)]


def calculate_total_quotes_this_month(quotes: Sequence[Quote], now: datetime) -> int:
    """Count quotes created in now's calendar month."""
    return len(get_quotes_in_month(quotes, now.year, now.month))


def calculate_total_accepted_value_this_month(
    quotes: Sequence[Quote], now: datetime
) -> float:
    """Sum the totals of quotes accepted and created in now's calendar month."""
    return sum(
        (
            quote.total
            for quote in get_quotes_in_month(quotes, now.year, now.month)
            if quote.status == QuoteStatus.ACCEPTED
        ),
        0.0,
    )


def calculate_total_pending_amount(quotes: Sequence[Quote]) -> float:
    """Sum the totals of all pending quotes.

    Unlike the monthly figures this is not limited to a month: it is the
    value still awaiting a customer decision.
    """
    return sum(
        (quote.total for quote in quotes if quote.status == QuoteStatus.PENDING), 0.0
    )


def calculate_dashboard_stats(quotes: Sequence[Quote], now: datetime) -> DashboardStats:
    """Calculate all dashboard stats at once."""
    return DashboardStats(
        total_quotes_this_month=calculate_total_quotes_this_month(quotes, now),
        total_accepted_value_this_month=calculate_total_accepted_value_this_month(
            quotes, now
        ),
        total_pending_amount=calculate_total_pending_amount(quotes),
    )


def get_recent_quotes(
    quotes: Sequence[Quote], count: int = DEFAULT_RECENT_COUNT
) -> list[Quote]:
    """Get the newest quotes, at most ``count`` of them."""
    if count <= 0:
        return []
    return sort_quotes_by_date(quotes)[:count]
