"""Donation history commands."""

import click
from streamheroes.cli.date_filters import date_range_options, resolve_cli_date_range
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.donation_history import DonationHistoryService
from streamheroes.domain.donator import DonatorService
from streamheroes.domain.errors import DomainError
from streamheroes.utils.amount_parser import format_rupiah


@click.group()
def history_group():
    """Review the donation history ledger."""
    pass


@history_group.command("list")
@date_range_options
@click.pass_context
def list_history(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """List donation history entries, oldest first."""
    actor = ctx.obj["actor"]
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date, period=period)
    service = DonationHistoryService(ctx.obj["db"])

    try:
        records = service.get_by_date_range(actor, start, end)
        names = {d.donator.id: d.donator.name for d in DonatorService(ctx.obj["db"]).list_donators(actor)}
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not records:
        click.echo("No donation history found.")
        return

    click.echo("\nDonation history:")
    click.echo("-" * 80)
    total = 0
    for record in records:
        name = names.get(record.donator_id, "Unknown")
        click.echo(
            f"{record.created_at:%Y-%m-%d %H:%M} | {name:20s} | {record.event_type.value:12s} | "
            f"+{record.games_added:3d} games | {format_rupiah(record.amount)}"
        )
        total += record.amount
    click.echo("-" * 80)
    click.echo(f"Total: {format_rupiah(total)}")


def register_commands(cli):
    """Register history commands with main CLI."""
    cli.add_command(history_group, name="history")
