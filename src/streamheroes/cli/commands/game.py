"""Current game roster commands."""

import click
from streamheroes.cli.commands.donator import resolve_donator_or_exit
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.current_game import CurrentGameService, roster_by_position
from streamheroes.domain.donator import DonatorService
from streamheroes.domain.errors import DomainError
from streamheroes.domain.game_session import GameSessionService


@click.group()
def game_group():
    """Manage the current game roster (up to 4 donators)."""
    pass


@game_group.command("show")
@click.pass_context
def show_game(ctx):
    """Show the current game roster."""
    service = CurrentGameService(ctx.obj["db"])

    try:
        entries = service.list_roster(ctx.obj["actor"])
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("\nCurrent game:")
    for position, entry in roster_by_position(entries).items():
        if entry is None:
            click.echo(f"  {position}. (empty)")
            continue
        d = entry.details.donator
        click.echo(
            f"  {position}. {d.name} [{entry.details.category_name}] - {d.total_game} games left"
        )


@game_group.command("assign")
@click.argument("donator", metavar="DONATOR")
@click.argument("position", type=int)
@click.pass_context
def assign(ctx, donator: str, position: int):
    """Put DONATOR (name or ID) into POSITION (1-4).

    A donator already in that position is removed, and a donator already
    in another position is moved.
    """
    donator_service = DonatorService(ctx.obj["db"])
    service = CurrentGameService(ctx.obj["db"])
    donator_id = resolve_donator_or_exit(ctx, donator_service, donator)

    try:
        service.assign(ctx.obj["actor"], donator_id, position)
        name = donator_service.get_donator(ctx.obj["actor"], donator_id).donator.name
        click.echo(f"Assigned '{name}' to position {position}")
    except DomainError as e:
        handle_domain_error(ctx, e)


@game_group.command("remove")
@click.argument("position", type=int)
@click.pass_context
def remove(ctx, position: int):
    """Empty POSITION (1-4)."""
    service = CurrentGameService(ctx.obj["db"])

    try:
        removed = service.unassign_position(ctx.obj["actor"], position)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if removed:
        click.echo(f"Position {position} cleared")
    else:
        click.echo(f"Position {position} was already empty")


@game_group.command("clear")
@click.pass_context
def clear(ctx):
    """Remove every donator from the current game."""
    service = CurrentGameService(ctx.obj["db"])

    try:
        count = service.clear(ctx.obj["actor"])
        click.echo(f"Cleared current game ({count} donator{'s' if count != 1 else ''} removed)")
    except DomainError as e:
        handle_domain_error(ctx, e)


@game_group.command("play")
@click.option("--clear", "clear_after", is_flag=True, help="Empty the roster after recording")
@click.pass_context
def play(ctx, clear_after: bool):
    """Record a played game for everyone on the roster.

    Each donator on the roster uses up one remaining game.
    """
    service = GameSessionService(ctx.obj["db"])
    actor = ctx.obj["actor"]

    try:
        rows = service.record_current_game(actor)
        click.echo(f"Recorded session {rows[0].session_id} with {len(rows)} donator{'s' if len(rows) != 1 else ''}")
        if clear_after:
            CurrentGameService(ctx.obj["db"]).clear(actor)
            click.echo("Current game cleared")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register current game commands with main CLI."""
    cli.add_command(game_group, name="game")
