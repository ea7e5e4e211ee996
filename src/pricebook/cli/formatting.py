"""CLI helpers for rendering money values."""

from decimal import Decimal

from pricebook.domain.entities import Unit


def format_unit_price(price: Decimal) -> str:
    """Format a unit price with 5 decimal places, e.g. "$0.31188"."""
    return f"${price:.5f}"


def format_currency(amount: Decimal) -> str:
    """Format a price paid, e.g. "$4.99"."""
    return f"${amount:,.2f}"


def format_per_unit(price: Decimal, unit: Unit) -> str:
    """Format a unit price with its unit, showing N/A for a zero target."""
    if price > 0:
        return f"{format_unit_price(price)} / {unit.value}"
    return f"N/A / {unit.value}"
