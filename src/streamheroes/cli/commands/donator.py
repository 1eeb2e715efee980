"""Donator management commands."""

import click
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.donator import DonatorService
from streamheroes.domain.entities import DonatorDetails
from streamheroes.domain.errors import DomainError
from streamheroes.utils.amount_parser import format_rupiah
from streamheroes.utils.donator_resolver import resolve_donator


def format_donator_line(details: DonatorDetails) -> str:
    """One-line summary of a donator for tables."""
    d = details.donator
    return (
        f"ID: {d.id:3d} | {d.name:20s} | {details.category_name:12s} | "
        f"Games: {d.total_game:3d} | Total: {format_rupiah(d.total_donation)}"
    )


def resolve_donator_or_exit(ctx: click.Context, service: DonatorService, donator: str) -> int:
    """Resolve donator name or ID, or exit with a CLI error."""
    try:
        return resolve_donator(service, ctx.obj["actor"], donator)
    except DomainError as e:
        handle_domain_error(ctx, e)


@click.group()
def donator_group():
    """Manage donators."""
    pass


@donator_group.command("list")
@click.pass_context
def list_donators(ctx):
    """List all donators."""
    service = DonatorService(ctx.obj["db"])

    try:
        donators = service.list_donators(ctx.obj["actor"])
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not donators:
        click.echo("No donators found.")
        return

    click.echo("\nDonators:")
    click.echo("-" * 80)
    for details in donators:
        click.echo(format_donator_line(details))


@donator_group.command("show")
@click.argument("donator", metavar="DONATOR")
@click.pass_context
def show_donator(ctx, donator: str):
    """Show one donator. DONATOR can be a name or ID."""
    service = DonatorService(ctx.obj["db"])
    donator_id = resolve_donator_or_exit(ctx, service, donator)

    try:
        details = service.get_donator(ctx.obj["actor"], donator_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    d = details.donator
    click.echo(f"Name:            {d.name}")
    click.echo(f"Category:        {details.category_name}")
    if details.category is not None:
        click.echo(f"Price per game:  {format_rupiah(details.category.price)}")
    click.echo(f"Games remaining: {d.total_game}")
    click.echo(f"Total donation:  {format_rupiah(d.total_donation)}")
    click.echo(f"Created:         {d.created_at:%Y-%m-%d %H:%M} by {d.created_by}")


@donator_group.command("create")
@click.argument("name")
@click.option("--category", "category_id", type=int, required=True, help="Category ID")
@click.option("--games", type=int, default=1, show_default=True, help="Number of games bought")
@click.pass_context
def create_donator(ctx, name: str, category_id: int, games: int):
    """Create a new donator.

    The total donation is the number of games times the category price.

    Examples:
        streamheroes donator create "Budi" --category 1 --games 3
    """
    service = DonatorService(ctx.obj["db"])

    try:
        details = service.create_donator(
            ctx.obj["actor"], name=name, category_id=category_id, total_game=games
        )
        click.echo(
            f"Created donator '{details.donator.name}' with {details.donator.total_game} games "
            f"({format_rupiah(details.donator.total_donation)}) (ID: {details.donator.id})"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@donator_group.command("update")
@click.argument("donator", metavar="DONATOR")
@click.option("--name", help="New name")
@click.option("--category", "category_id", type=int, help="New category ID")
@click.option("--games", type=int, help="New remaining game count")
@click.pass_context
def update_donator(ctx, donator: str, name: str | None, category_id: int | None, games: int | None):
    """Update a donator. DONATOR can be a name or ID.

    Setting --games recomputes the total donation from the current price.
    """
    if name is None and category_id is None and games is None:
        click.echo("Error: Nothing to update. Use --name, --category and/or --games.", err=True)
        ctx.exit(1)

    service = DonatorService(ctx.obj["db"])
    donator_id = resolve_donator_or_exit(ctx, service, donator)

    try:
        details = service.update_donator(
            ctx.obj["actor"], donator_id, name=name, category_id=category_id, total_game=games
        )
        click.echo(f"Updated donator '{details.donator.name}'")
        click.echo(format_donator_line(details))
    except DomainError as e:
        handle_domain_error(ctx, e)


@donator_group.command("add-games")
@click.argument("donator", metavar="DONATOR")
@click.argument("games", type=int)
@click.pass_context
def add_games(ctx, donator: str, games: int):
    """Add purchased games to a donator and log the donation."""
    service = DonatorService(ctx.obj["db"])
    donator_id = resolve_donator_or_exit(ctx, service, donator)

    try:
        details = service.add_games(ctx.obj["actor"], donator_id, games)
        click.echo(
            f"Added {games} game{'s' if games != 1 else ''} to '{details.donator.name}' "
            f"(now {details.donator.total_game} games, total {format_rupiah(details.donator.total_donation)})"
        )
    except DomainError as e:
        handle_domain_error(ctx, e)


@donator_group.command("delete")
@click.argument("donator", metavar="DONATOR")
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_donator(ctx, donator: str, yes: bool):
    """Delete a donator. Donation and session history are kept."""
    service = DonatorService(ctx.obj["db"])
    actor = ctx.obj["actor"]
    donator_id = resolve_donator_or_exit(ctx, service, donator)

    try:
        details = service.get_donator(actor, donator_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    name = details.donator.name
    if not yes and not click.confirm(f"Are you sure you want to delete donator '{name}' (ID: {donator_id})?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_donator(actor, donator_id)
        click.echo(f"Deleted donator '{name}'")
    except DomainError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register donator commands with main CLI."""
    cli.add_command(donator_group, name="donator")
