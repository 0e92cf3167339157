"""Discount parsing utilities."""

from typing import Optional

from quickquote.domain.entities import Discount
from quickquote.utils.price_parser import parse_price


def parse_discount(discount_str: Optional[str]) -> Optional[Discount]:
    """Parse a discount option.

    "10%" is a percentage discount, "25" or "$25" a fixed amount.
    An empty value means no discount.

    Raises:
        ValueError: If the value cannot be parsed or the percentage exceeds 100
    """
    if discount_str is None or not discount_str.strip():
        return None

    text = discount_str.strip()
    if text.endswith("%"):
        percent = parse_price(text[:-1])
        if percent > 100:
            raise ValueError(f"Percentage discount cannot exceed 100: '{discount_str}'")
        return Discount.percentage(percent)
    return Discount.fixed(parse_price(text))
