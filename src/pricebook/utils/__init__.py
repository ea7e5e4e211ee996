"""Utility functions for pricebook."""

from pricebook.utils.amount_parser import parse_amount, parse_optional_amount
from pricebook.utils.timestamp_parser import parse_timestamp

__all__ = ["parse_amount", "parse_optional_amount", "parse_timestamp"]
