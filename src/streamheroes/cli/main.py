"""Main CLI entry point."""

import click
from streamheroes import __version__
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.cli.logging_setup import LOG_LEVELS, configure_logging
from streamheroes.database.factories import create_database
from streamheroes.domain.context import resolve_actor
from streamheroes.domain.errors import ValidationError

# Import and register all commands at module level
from streamheroes.cli.commands import (
    category,
    donator,
    game,
    session,
    history,
    stats,
)


@click.group()
@click.version_option(version=__version__, prog_name="streamheroes")
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to SQLite database file (overrides STREAMHEROES_DB_PATH environment variable)",
    envvar="STREAMHEROES_DB_PATH",
)
@click.option(
    "--database-url",
    help="SQLAlchemy database URL; takes precedence over --db-path",
    envvar="STREAMHEROES_DATABASE_URL",
)
@click.option(
    "--actor",
    help="Email of the acting user; all records are scoped to it",
    envvar="STREAMHEROES_ACTOR",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="STREAMHEROES_LOG_LEVEL",
    help="Logging verbosity (default: WARNING)",
)
@click.pass_context
def cli(ctx, db_path: str | None, database_url: str | None, actor: str | None, log_level: str):
    """Stream Heroes - donation tracking for livestreamers.

    Manage supporter categories and donators, keep a current game roster of
    up to four donators, record played games and review donation statistics.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        try:
            ctx.obj["actor"] = resolve_actor(actor)
        except ValidationError as e:
            handle_domain_error(ctx, e)

        db = create_database(database_url=database_url, database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
category.register_commands(cli)
donator.register_commands(cli)
game.register_commands(cli)
session.register_commands(cli)
history.register_commands(cli)
stats.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
