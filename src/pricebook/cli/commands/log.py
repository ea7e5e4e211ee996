"""Log purchase command."""

import click

from pricebook.cli.error_handling import handle_domain_error
from pricebook.cli.formatting import format_currency, format_per_unit, format_unit_price
from pricebook.domain import pricing
from pricebook.domain.entities import DEFAULT_UNIT, Unit
from pricebook.domain.errors import DomainError
from pricebook.domain.purchase import PurchaseService
from pricebook.utils.amount_parser import parse_amount, parse_optional_amount

UNIT_CHOICES = [unit.value for unit in Unit]


@click.command("log")
@click.argument("name", metavar="ITEM_NAME")
@click.option("--price", required=True, help="Price paid (e.g., 4.99)")
@click.option("--quantity", required=True, help="Quantity purchased (e.g., 16)")
@click.option(
    "--unit",
    type=click.Choice(UNIT_CHOICES),
    default=DEFAULT_UNIT.value,
    show_default=True,
    help="Unit the quantity is measured in",
)
@click.option("--store", help="Store name (defaults to 'Unknown')")
@click.option(
    "--target",
    help="Personal rock bottom price per unit (defaults to the item's history)",
)
@click.pass_context
def log_purchase(
    ctx,
    name: str,
    price: str,
    quantity: str,
    unit: str,
    store: str | None,
    target: str | None,
):
    """Log a new purchase and track the deal.

    When --target is omitted for an item you have logged before, the
    historical low (or the last target) is used, the same as picking the
    item from history.

    Examples:
        pricebook log "Black Beans" --price 4.99 --quantity 16
        pricebook log "Coffee" --price 12.99 --quantity 2 --unit lb --store "Costco"
        pricebook log "Detergent" --price 9.49 --quantity 100 --unit ml --target 0.09
    """
    service = PurchaseService(ctx.obj["store"], ctx.obj["session"])

    try:
        price_value = parse_amount(price)
    except ValueError as e:
        click.echo(f"Error: Invalid price: {e}", err=True)
        ctx.exit(1)

    try:
        quantity_value = parse_amount(quantity)
    except ValueError as e:
        click.echo(f"Error: Invalid quantity: {e}", err=True)
        ctx.exit(1)

    try:
        target_value = parse_optional_amount(target)
    except ValueError as e:
        click.echo(f"Error: Invalid rock bottom price: {e}", err=True)
        ctx.exit(1)

    try:
        if target is None:
            defaults = service.item_defaults(name.strip())
            if defaults is not None and defaults.rock_bottom_price is not None:
                target_value = defaults.rock_bottom_price
                click.echo(
                    f"Using rock bottom target {format_unit_price(target_value)} from history"
                )

        record = service.log_purchase(
            name=name,
            price=price_value,
            quantity=quantity_value,
            unit=unit,
            store=store,
            rock_bottom_price=target_value,
        )
        status = pricing.classify_deal(record, service.historical_low(record.name))
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Logged purchase {record.id}")
    click.echo(f"  Item: {record.name}")
    click.echo(f"  Store: {record.store}")
    click.echo(
        f"  Price: {format_currency(record.price)} for {record.quantity.normalize():f} {record.unit.value}"
    )
    click.echo(f"  Unit price: {format_per_unit(record.unit_price, record.unit)}")
    click.echo(f"  Rock bottom: {format_per_unit(record.rock_bottom_price, record.unit)}")
    click.echo(f"  Deal: {status.label}")


def register_commands(cli):
    """Register log command with main CLI."""
    cli.add_command(log_purchase)
