"""Game session commands."""

import click
from streamheroes.cli.commands.donator import resolve_donator_or_exit
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.donator import DonatorService
from streamheroes.domain.errors import DomainError
from streamheroes.domain.game_session import GameSessionService


@click.group()
def session_group():
    """Record and review played game sessions."""
    pass


@session_group.command("list")
@click.option("--limit", type=int, default=10, show_default=True, help="Number of sessions to show")
@click.pass_context
def list_sessions(ctx, limit: int):
    """List recent game sessions, newest first."""
    service = GameSessionService(ctx.obj["db"])

    try:
        sessions = service.get_recent_sessions(ctx.obj["actor"], limit=limit)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not sessions:
        click.echo("No game sessions found.")
        return

    click.echo("\nRecent sessions:")
    for summary in sessions:
        names = ", ".join(f"{d.donator.name} ({d.category_name})" for d in summary.donators)
        click.echo(f"{summary.played_at:%Y-%m-%d %H:%M} | {summary.session_id[:8]} | {names}")


@session_group.command("record")
@click.argument("donators", nargs=-1, metavar="DONATOR...")
@click.pass_context
def record_session(ctx, donators: tuple[str, ...]):
    """Record a game played by the given donators (names or IDs).

    Each donator uses up one remaining game. If any donator has no games
    left, nothing is recorded.
    """
    donator_service = DonatorService(ctx.obj["db"])
    service = GameSessionService(ctx.obj["db"])
    donator_ids = [resolve_donator_or_exit(ctx, donator_service, d) for d in donators]

    try:
        rows = service.record_session(ctx.obj["actor"], donator_ids)
        click.echo(f"Recorded session {rows[0].session_id} with {len(rows)} donator{'s' if len(rows) != 1 else ''}")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register session commands with main CLI."""
    cli.add_command(session_group, name="session")
