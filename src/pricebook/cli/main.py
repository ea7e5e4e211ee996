"""Main CLI entry point."""

import logging

import click

from pricebook.cli.error_handling import handle_domain_error
from pricebook.domain.errors import AuthError, DomainError
from pricebook.domain.session import UserSession
from pricebook.store.factories import create_record_store
from pricebook.store.json_store import JsonRecordStore

# Import and register all commands at module level
from pricebook.cli.commands import history, items, log, unit_price

logger = logging.getLogger(__name__)


def start_session(store, user_id: str | None) -> UserSession:
    """Sign in for the selected store.

    The local blob always runs as the demo user. The SQL collection needs a
    configured user ID; without one the session is left FAILED and only
    commands that do not touch the collection will work.
    """
    session = UserSession()
    if isinstance(store, JsonRecordStore):
        session.sign_in_demo()
        return session

    try:
        session.sign_in(user_id)
    except AuthError as e:
        logger.warning("Not authenticated: %s", e)
    return session


@click.group()
@click.option(
    "--database-url",
    help="SQLAlchemy URL of the shared purchase collection (overrides PRICEBOOK_DATABASE_URL)",
    envvar="PRICEBOOK_DATABASE_URL",
)
@click.option(
    "--data-path",
    type=click.Path(dir_okay=False),
    help="Path to the local JSON price book (overrides PRICEBOOK_DATA_PATH)",
    envvar="PRICEBOOK_DATA_PATH",
)
@click.option(
    "--app-id",
    help="Collection namespace in the shared database (overrides PRICEBOOK_APP_ID)",
    envvar="PRICEBOOK_APP_ID",
)
@click.option(
    "--user-id",
    help="User whose collection is used in the shared database (overrides PRICEBOOK_USER_ID)",
    envvar="PRICEBOOK_USER_ID",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(
    ctx,
    database_url: str | None,
    data_path: str | None,
    app_id: str | None,
    user_id: str | None,
    verbose: bool,
):
    """Pricebook - Digital price book.

    Log grocery and retail purchases, automate the unit price math and track
    your personal "Rock Bottom Price" for every item.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Select the store only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            store = create_record_store(
                database_url=database_url,
                data_path=data_path,
                user_id=user_id,
                app_id=app_id,
            )
            store.connect()
        except DomainError as e:
            handle_domain_error(ctx, e)
        ctx.call_on_close(store.disconnect)
        ctx.obj["store"] = store
        ctx.obj["session"] = start_session(store, user_id)


# Register all commands
log.register_commands(cli)
unit_price.register_commands(cli)
items.register_commands(cli)
history.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
