"""CLI error handling helpers."""

import click

from streamheroes.domain.errors import AuthRequired, DomainError, NoGamesRemaining


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Print a domain error to stderr and exit with status 1.

    Errors the streamer can fix from the command line get a one-line hint.
    """
    click.echo(f"Error: {error}", err=True)
    if isinstance(error, AuthRequired):
        click.echo("Hint: pass --actor EMAIL or set STREAMHEROES_ACTOR.", err=True)
    elif isinstance(error, NoGamesRemaining):
        click.echo(
            f"Hint: top up with 'streamheroes donator add-games {error.donator_id} GAMES'.", err=True
        )
    ctx.exit(1)
