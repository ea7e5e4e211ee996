"""CLI error handling helpers."""

import logging

import click

from pricebook.domain.errors import AuthError, DomainError, PersistenceError

logger = logging.getLogger(__name__)

AUTH_HINT = (
    "Pass --user-id (or set PRICEBOOK_USER_ID) to use the shared price book, "
    "or leave out --database-url to use the local one."
)
PERSISTENCE_HINT = "Check the --data-path or --database-url setting. Nothing was saved."


def error_hint(error: DomainError | ValueError) -> str | None:
    """Return a follow-up line telling the user how to recover, if any."""
    if isinstance(error, AuthError):
        return AUTH_HINT
    if isinstance(error, PersistenceError):
        return PERSISTENCE_HINT
    return None


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print the error and a recovery hint to stderr, then exit with status 1."""
    logger.debug("Command %s failed", ctx.info_name, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    hint = error_hint(error)
    if hint:
        click.echo(hint, err=True)
    ctx.exit(1)
