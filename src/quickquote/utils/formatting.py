"""Display formatting for prices, dates and discounts."""

from datetime import datetime
from typing import Optional

from quickquote.domain.entities import Discount, DiscountType

NOT_AVAILABLE = "N/A"


def format_price(amount: float) -> str:
    """Format an amount as US dollars, e.g. ``$1,234.50``."""
    if amount < 0:
        return f"-${abs(amount):,.2f}"
    return f"${amount:,.2f}"


def format_long_date(value: Optional[datetime]) -> str:
    """Format a timestamp as ``January 5, 2025``; N/A when missing."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value.strftime('%B')} {value.day}, {value.year}"


def format_short_date(value: Optional[datetime]) -> str:
    """Format a timestamp as ``2025-01-05``; N/A when missing."""
    if value is None:
        return NOT_AVAILABLE
    return value.strftime("%Y-%m-%d")


def format_discount(discount: Optional[Discount]) -> str:
    """Describe a discount, e.g. ``10%`` or ``$25.00``."""
    if discount is None:
        return "none"
    if discount.kind == DiscountType.PERCENTAGE:
        return f"{discount.value:g}%"
    return format_price(discount.value)


def display_discount_amount(subtotal: float, discount: Optional[Discount]) -> float:
    """Discount amount as shown to the user.

    A fixed discount is capped at the subtotal for display. The calculation
    engine itself does not cap it; the total is floored at zero there.
    """
    if discount is None:
        return 0.0
    if discount.kind == DiscountType.PERCENTAGE:
        return subtotal * discount.value / 100
    return min(discount.value, subtotal)
