"""Utility functions for quickquote."""

from quickquote.utils.date_parser import parse_datetime
from quickquote.utils.price_parser import parse_price

__all__ = ["parse_datetime", "parse_price"]
