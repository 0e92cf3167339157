"""Date parsing utilities."""

from datetime import datetime, timedelta, UTC
import re
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

_IN_DAYS = re.compile(r"^in (\d+) days?$")


def _start_of_day(value: datetime) -> datetime:
    return value.replace(hour=0, minute=0, second=0, microsecond=0)


def parse_datetime(value: str, now: Optional[datetime] = None) -> datetime:
    """Parse a date or timestamp string into a timezone-aware datetime.

    Supports various formats including relative dates:
    - Absolute: "2025-01-15", "2025-01-15T10:30:00Z", "January 15, 2025"
    - Relative: "now", "today", "yesterday", "tomorrow", "next week",
      "next month", "in 14 days"

    Relative dates other than "now" resolve to the start of the day.
    Timestamps without a timezone are taken to be UTC.

    Args:
        value: Date string in various formats
        now: Reference time for relative dates (defaults to the current time)

    Returns:
        Timezone-aware datetime

    Raises:
        ValueError: If the string cannot be parsed
    """
    text = value.strip().lower()
    if now is None:
        now = datetime.now(UTC)
    today = _start_of_day(now)

    relative_dates = {
        "now": now,
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
        "next week": today + timedelta(weeks=1),
        "next month": today + relativedelta(months=1),
    }
    if text in relative_dates:
        return relative_dates[text]

    match = _IN_DAYS.match(text)
    if match:
        return today + timedelta(days=int(match.group(1)))

    try:
        parsed = date_parser.parse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{value}': {e}")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
