"""Donation statistics commands."""

from datetime import timedelta

import click
from streamheroes.cli.date_filters import date_range_options, resolve_cli_date_range
from streamheroes.cli.error_handling import handle_domain_error
from streamheroes.domain.analytics import AnalyticsService
from streamheroes.domain.errors import DomainError
from streamheroes.utils.amount_parser import format_rupiah
from streamheroes.utils.date_parser import get_date_range, utc_today


@click.group()
def stats_group():
    """Show donation statistics."""
    pass


@stats_group.command("daily")
@date_range_options
@click.pass_context
def daily(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """Show donation totals per day (default: last 7 days)."""
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period=period,
        default_range=get_date_range("last-7-days"),
    )
    # Close open-ended ranges with a 7 day window
    if end is None:
        end = utc_today()
    if start is None:
        start = end - timedelta(days=6)

    service = AnalyticsService(ctx.obj["db"])
    try:
        totals = service.daily_totals(ctx.obj["actor"], start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\nDaily donations {start} to {end}:")
    for row in totals:
        click.echo(f"{row.day:%Y-%m-%d} | {format_rupiah(row.amount):>16s} | {row.count} donation{'s' if row.count != 1 else ''}")
    click.echo(f"Total: {format_rupiah(sum(row.amount for row in totals))}")


@stats_group.command("categories")
@date_range_options
@click.pass_context
def categories(ctx, start_date: str | None, end_date: str | None, period: str | None):
    """Show donations grouped by category."""
    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date, period=period)

    service = AnalyticsService(ctx.obj["db"])
    try:
        breakdown = service.category_breakdown(ctx.obj["actor"], start, end)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not breakdown:
        click.echo("No donations found.")
        return

    click.echo("\nDonations by category:")
    click.echo("-" * 70)
    for row in breakdown:
        click.echo(
            f"{row.category_name:20s} | {format_rupiah(row.amount):>16s} | {row.share:6.2f}% | "
            f"{row.donator_count} donator{'s' if row.donator_count != 1 else ''}"
        )


@stats_group.command("leaderboard")
@click.option("--limit", type=int, default=10, show_default=True, help="Number of donators to show")
@click.pass_context
def leaderboard(ctx, limit: int):
    """Rank donators by total donation."""
    service = AnalyticsService(ctx.obj["db"])
    try:
        entries = service.leaderboard(ctx.obj["actor"], limit=limit)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No donators found.")
        return

    click.echo("\nLeaderboard:")
    click.echo("-" * 80)
    for entry in entries:
        click.echo(
            f"{entry.rank:2d}. {entry.name:20s} | {entry.category_name:12s} | "
            f"{format_rupiah(entry.total_donation):>16s} | played {entry.games_played} | left {entry.total_game}"
        )


def register_commands(cli):
    """Register stats commands with main CLI."""
    cli.add_command(stats_group, name="stats")
