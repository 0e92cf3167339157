"""Price parsing utilities."""

import math
import re

_CURRENCY = re.compile(r"[$€£¥]")


def parse_price(price_str: str) -> float:
    """Parse a price string into a non-negative float.

    Handles various formats:
    - "123.45"
    - "$123.45"
    - "1,234.56"

    Args:
        price_str: Price string

    Returns:
        Price as float

    Raises:
        ValueError: If the string is empty, not a number or negative
    """
    if not price_str or not price_str.strip():
        raise ValueError("Empty price string")

    cleaned = _CURRENCY.sub("", price_str.strip()).replace(",", "").strip()

    try:
        price = float(cleaned)
    except ValueError:
        raise ValueError(f"Could not parse price '{price_str}'")

    if not math.isfinite(price):
        raise ValueError(f"Could not parse price '{price_str}'")
    if price < 0:
        raise ValueError(f"Price cannot be negative: '{price_str}'")
    return price
