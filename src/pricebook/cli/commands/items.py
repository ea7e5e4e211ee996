"""Item catalog commands."""

import click

from pricebook.cli.error_handling import handle_domain_error
from pricebook.cli.formatting import format_unit_price
from pricebook.domain.errors import DomainError
from pricebook.domain.purchase import PurchaseService


@click.command("items")
@click.pass_context
def list_items(ctx):
    """List every item you have logged, alphabetically."""
    service = PurchaseService(ctx.obj["store"], ctx.obj["session"])

    try:
        names = service.item_catalog()
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not names:
        click.echo("No purchases logged yet. Start tracking your deals!")
        return

    click.echo(f"\nTracked items ({len(names)}):")
    click.echo("-" * 40)
    for name in names:
        click.echo(name)


@click.command("item")
@click.argument("name", metavar="ITEM_NAME")
@click.pass_context
def show_item(ctx, name: str):
    """Show the historical low and suggested entry values for an item.

    ITEM_NAME must match the logged name exactly (case-sensitive).
    """
    service = PurchaseService(ctx.obj["store"], ctx.obj["session"])

    try:
        low = service.historical_low(name)
        defaults = service.item_defaults(name)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if defaults is None:
        click.echo(f"No history for '{name}'.")
        return

    click.echo(f"Item: {defaults.name}")
    click.echo(f"  Unit: {defaults.unit.label}")
    if low > 0:
        click.echo(f"  Prev. Low: {format_unit_price(low)} / {defaults.unit.value}")
    if defaults.rock_bottom_price is not None:
        click.echo(f"  Suggested rock bottom: ${defaults.rock_bottom_price:.4f}")
    else:
        click.echo("  Suggested rock bottom: none")


def register_commands(cli):
    """Register item catalog commands with main CLI."""
    cli.add_command(list_items)
    cli.add_command(show_item)
