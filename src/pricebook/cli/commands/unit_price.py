"""Unit price preview command."""

import click

from pricebook.cli.formatting import format_unit_price
from pricebook.domain import pricing
from pricebook.domain.entities import DEFAULT_UNIT, Unit
from pricebook.utils.amount_parser import parse_amount


@click.command("unit-price")
@click.option("--price", required=True, help="Price paid (e.g., 4.99)")
@click.option("--quantity", required=True, help="Quantity purchased (e.g., 16)")
@click.option(
    "--unit",
    type=click.Choice([unit.value for unit in Unit]),
    default=DEFAULT_UNIT.value,
    show_default=True,
    help="Unit the quantity is measured in",
)
@click.pass_context
def preview_unit_price(ctx, price: str, quantity: str, unit: str):
    """Calculate a unit price without logging anything.

    Example:
        pricebook unit-price --price 4.99 --quantity 16
    """
    try:
        price_value = parse_amount(price)
        quantity_value = parse_amount(quantity)
    except ValueError as e:
        click.echo(f"Error: Invalid amount: {e}", err=True)
        ctx.exit(1)

    value = pricing.unit_price(price_value, quantity_value)
    click.echo(f"Calculated Unit Price: {format_unit_price(value)} / {unit}")


def register_commands(cli):
    """Register unit-price command with main CLI."""
    cli.add_command(preview_unit_price)
