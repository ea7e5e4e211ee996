"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re
from typing import Optional


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "4.99"
    - "$4.99"
    - "1,234.56"
    - " 16 "

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string is empty, not a number, NaN or infinite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    # Remove whitespace
    amount_str = amount_str.strip()

    # Remove currency symbols
    amount_str = re.sub(r"[$€£¥]", "", amount_str)

    # Remove commas
    amount_str = amount_str.replace(",", "")

    # Remove whitespace again
    amount_str = amount_str.strip()

    try:
        amount = Decimal(amount_str)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str}'")

    if not amount.is_finite():
        raise ValueError(f"Amount must be a finite number (got '{amount_str}')")
    return amount


def parse_optional_amount(amount_str: Optional[str]) -> Decimal:
    """Parse an optional amount, treating blank input as zero.

    Raises:
        ValueError: If a non-blank string cannot be parsed
    """
    if amount_str is None or not amount_str.strip():
        return Decimal("0")
    return parse_amount(amount_str)
