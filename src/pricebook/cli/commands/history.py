"""Price history commands."""

import click

from pricebook.cli.error_handling import handle_domain_error
from pricebook.cli.formatting import format_currency, format_per_unit
from pricebook.domain.errors import DomainError
from pricebook.domain.purchase import PurchaseService


@click.command("history")
@click.option("--item", help="Only show purchases of this item (exact name)")
@click.option("--verbose", "-v", is_flag=True, help="Show price, quantity, date and ID for each entry")
@click.pass_context
def view_history(ctx, item: str | None, verbose: bool):
    """Show the price history and deal tracker.

    Each purchase is rated against the historical low of its own item:
    New Rock Bottom Price!, Good Deal!, Close Deal (within 10% of target),
    Bad Deal, or No Target Set.
    """
    session = ctx.obj["session"]
    service = PurchaseService(ctx.obj["store"], session)

    try:
        report = service.deal_report(item_name=item)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if session.is_demo:
        click.echo("Demo Mode - Data stored locally")
    click.echo(f"User ID: {session.user_id} | {len(report)} Entries Logged")

    if not report:
        click.echo("No purchases logged yet. Start tracking your deals!")
        return

    click.echo("\nPrice History & Deal Tracker:")
    if verbose:
        click.echo("=" * 100)
        for record, status in report:
            click.echo(f"\n{record.name} ({record.store})")
            click.echo(f"  Date: {record.timestamp:%Y-%m-%d %H:%M}")
            click.echo(
                f"  Paid: {format_currency(record.price)} for "
                f"{record.quantity.normalize():f} {record.unit.value}"
            )
            click.echo(f"  Unit price: {format_per_unit(record.unit_price, record.unit)}")
            click.echo(f"  Rock bottom: {format_per_unit(record.rock_bottom_price, record.unit)}")
            click.echo(f"  Deal: {status.label}")
            click.echo(f"  ID: {record.id}")
            click.echo("-" * 100)
        return

    click.echo("-" * 100)
    click.echo(f"{'Item':<24} {'Store':<16} {'Unit Price':<18} {'Rock Bottom':<18} {'Deal Status':<22}")
    click.echo("-" * 100)
    for record, status in report:
        click.echo(
            f"{record.name[:24]:<24} {record.store[:16]:<16} "
            f"{format_per_unit(record.unit_price, record.unit):<18} "
            f"{format_per_unit(record.rock_bottom_price, record.unit):<18} "
            f"{status.label:<22}"
        )


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(view_history)
