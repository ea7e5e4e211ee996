"""Timestamp parsing utilities."""

from datetime import datetime, UTC
from typing import Union

from dateutil import parser as date_parser


def parse_timestamp(value: Union[str, int, float, datetime]) -> datetime:
    """Parse a stored purchase timestamp into a datetime.

    Handles:
    - ISO 8601 strings, with or without offset ("2024-01-15T10:30:00.000Z")
    - Epoch milliseconds (what a JavaScript ``Date.now()`` produces)
    - datetime objects, returned unchanged

    Args:
        value: Timestamp in one of the supported forms

    Returns:
        datetime, timezone-aware when the input carried an offset

    Raises:
        ValueError: If the value cannot be parsed
    """
    if isinstance(value, datetime):
        return value

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value / 1000, tz=UTC)

    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Could not parse timestamp '{value}'")

    try:
        return date_parser.isoparse(value.strip())
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse timestamp '{value}': {e}")
