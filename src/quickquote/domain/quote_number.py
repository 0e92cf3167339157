"""Quote number formatting and parsing.

Quote numbers look like ``QQ-YYYY-NNN``: a four-digit year and a sequence
zero-padded to at least three digits. Sequences above 999 simply grow
wider, so ``QQ-2025-1000`` follows ``QQ-2025-999``.

These functions are stateless. Uniqueness against stored quotes is the
responsibility of the caller that persists the number.
"""

import re
from typing import Iterable, Optional

from quickquote.domain.entities import QuoteNumberParts
from quickquote.domain.errors import InvalidArgumentError

QUOTE_NUMBER_PREFIX = "QQ"
MIN_SEQUENCE_WIDTH = 3

_PARSE_PATTERN = re.compile(r"^QQ-(\d{4})-(\d+)$")
_STRICT_PATTERN = re.compile(r"^QQ-\d{4}-\d{3,}$")


def format_quote_number(year: int, sequence_number: int) -> str:
    """Build a quote number for a year and sequence.

    Args:
        year: Four-digit year (1000-9999)
        sequence_number: Sequence within the year, starting at 1

    Returns:
        Quote number such as ``QQ-2025-007``

    Raises:
        InvalidArgumentError: If year is not four digits or sequence_number < 1
    """
    if year < 1000 or year > 9999:
        raise InvalidArgumentError(f"Year must be a 4-digit number, got {year}")
    if sequence_number < 1:
        raise InvalidArgumentError(
            f"Sequence number must be positive, got {sequence_number}"
        )

    padded = str(sequence_number).zfill(MIN_SEQUENCE_WIDTH)
    return f"{QUOTE_NUMBER_PREFIX}-{year}-{padded}"


def parse_quote_number(quote_number: str) -> Optional[QuoteNumberParts]:
    """Split a quote number into year and sequence.

    Returns None instead of raising for text that is not a quote number,
    since legacy or hand-edited numbers are expected input.
    """
    match = _PARSE_PATTERN.match(quote_number)
    if match is None:
        return None
    return QuoteNumberParts(year=int(match.group(1)), sequence_number=int(match.group(2)))


def is_valid_quote_number_format(quote_number: str) -> bool:
    """Check that a quote number has a year and an at-least-three-digit sequence."""
    return _STRICT_PATTERN.match(quote_number) is not None


def get_next_sequence_number(existing_numbers: Iterable[str], year: int) -> int:
    """Return the next free sequence for a year.

    Only numbers from the same year are considered; numbers from other years
    and unparseable strings are ignored.
    """
    max_sequence = 0
    for quote_number in existing_numbers:
        parts = parse_quote_number(quote_number)
        if parts is not None and parts.year == year:
            max_sequence = max(max_sequence, parts.sequence_number)
    return max_sequence + 1
