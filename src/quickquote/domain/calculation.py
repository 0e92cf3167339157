"""Quote calculation engine.

Pure functions that price line items and apply a discount. Inputs are
trusted: quantities and prices are expected to be validated upstream, and
no errors are raised here.

Arithmetic is plain float. Results carry ordinary floating-point rounding;
callers round to currency precision for display and compare totals with a
small tolerance.
"""

from typing import Optional, Sequence

from quickquote.domain.entities import (
    Discount,
    DiscountType,
    PricedLineItem,
    QuoteCalculationResult,
    QuoteLineItem,
)


def calculate_line_total(quantity: int, unit_price: float) -> float:
    """Return the line total (quantity x unit price)."""
    return quantity * unit_price


def calculate_subtotal(items: Sequence[QuoteLineItem]) -> float:
    """Return the sum of all line totals.

    Any item exposing ``quantity`` and ``unit_price`` is accepted, so
    persisted quote items can be re-priced as well.
    """
    return sum(
        (calculate_line_total(item.quantity, item.unit_price) for item in items), 0.0
    )


def calculate_discount(subtotal: float, discount: Discount) -> float:
    """Return the discount amount for a subtotal.

    A fixed discount is returned as-is, even when it exceeds the subtotal;
    ``calculate_total`` floors the result at zero.
    """
    if discount.kind == DiscountType.PERCENTAGE:
        return (subtotal * discount.value) / 100
    return discount.value


def calculate_total(subtotal: float, discount_amount: float) -> float:
    """Return the final total, never negative."""
    return max(0.0, subtotal - discount_amount)


def calculate_quote(
    items: Sequence[QuoteLineItem], discount: Optional[Discount] = None
) -> QuoteCalculationResult:
    """Price a complete quote.

    Args:
        items: Line items in display order
        discount: Optional discount applied once to the subtotal

    Returns:
        QuoteCalculationResult with priced line items, subtotal, discount
        amount and total
    """
    line_items = tuple(
        PricedLineItem(
            service_name=item.service_name,
            quantity=item.quantity,
            unit_price=item.unit_price,
            line_total=calculate_line_total(item.quantity, item.unit_price),
            service_id=item.service_id,
        )
        for item in items
    )

    subtotal = calculate_subtotal(items)
    discount_amount = (
        calculate_discount(subtotal, discount) if discount is not None else 0.0
    )
    total = calculate_total(subtotal, discount_amount)

    return QuoteCalculationResult(
        line_items=line_items,
        subtotal=subtotal,
        discount_amount=discount_amount,
        total=total,
    )
