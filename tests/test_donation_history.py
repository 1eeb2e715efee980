"""Tests for the donation history ledger."""

from datetime import datetime, timedelta, UTC
from decimal import Decimal

import pytest

from streamheroes.cli.main import cli
from streamheroes.domain.entities import DonationEventType
from streamheroes.domain.errors import AuthRequired, NotFoundError, ValidationError


def test_add_record(history_service, sample_donators, actor):
    record = history_service.add_record(
        actor, sample_donators["Andi"], "Rp 30.000", DonationEventType.ADD_GAMES, games_added=2
    )

    assert record.amount == Decimal("30000")
    assert record.event_type == DonationEventType.ADD_GAMES
    assert record.games_added == 2
    assert record.created_by == actor.actor
    assert record.created_at.tzinfo is not None


def test_add_record_accepts_event_type_string(history_service, sample_donators, actor):
    record = history_service.add_record(actor, sample_donators["Andi"], 0, "new_donator")

    assert record.event_type == DonationEventType.NEW_DONATOR
    assert record.games_added == 0


@pytest.mark.parametrize(
    "amount,event_type,games",
    [
        (-1, "add_games", 1),
        ("abc", "add_games", 1),
        (1000, "refund", 1),
        (1000, "add_games", -1),
        (float("nan"), "add_games", 1),
        (float("-inf"), "add_games", 1),
        (Decimal("Infinity"), "add_games", 1),
    ],
)
def test_add_record_validation(history_service, sample_donators, actor, amount, event_type, games):
    with pytest.raises(ValidationError):
        history_service.add_record(actor, sample_donators["Andi"], amount, event_type, games_added=games)


def test_add_record_unknown_donator(history_service, actor):
    with pytest.raises(NotFoundError):
        history_service.add_record(actor, 999, 1000, "add_games", games_added=1)


def test_add_record_requires_actor(history_service, sample_donators, anonymous):
    with pytest.raises(AuthRequired):
        history_service.add_record(anonymous, sample_donators["Andi"], 1000, "add_games")


def test_get_by_date_range(history_service, sample_donators, actor):
    today = datetime.now(UTC).date()

    records = history_service.get_by_date_range(actor, today, today)

    assert len(records) == 5
    assert all(r.event_type == DonationEventType.NEW_DONATOR for r in records)
    assert records[0].donator_id == sample_donators["Andi"]


def test_get_by_date_range_excludes_other_days(history_service, sample_donators, actor):
    tomorrow = datetime.now(UTC).date() + timedelta(days=1)

    assert history_service.get_by_date_range(actor, tomorrow, None) == []
    assert len(history_service.get_by_date_range(actor, None, tomorrow)) == 5


def test_get_by_date_range_inverted(history_service, actor):
    today = datetime.now(UTC).date()

    with pytest.raises(ValidationError, match="after end date"):
        history_service.get_by_date_range(actor, today, today - timedelta(days=2))


def test_history_is_per_actor(history_service, sample_donators, other_actor):
    assert history_service.get_by_date_range(other_actor) == []


def test_history_survives_donator_deletion(history_service, donator_service, sample_donators, actor):
    donator_service.delete_donator(actor, sample_donators["Andi"])

    donator_ids = {r.donator_id for r in history_service.get_by_date_range(actor)}
    assert sample_donators["Andi"] in donator_ids


def test_cli_history_list(cli_runner, cli_args, sample_donators):
    today = str(datetime.now(UTC).date())
    result = cli_runner.invoke(
        cli, cli_args + ["history", "list", "--start-date", today, "--end-date", today]
    )

    assert result.exit_code == 0
    assert "Andi" in result.output
    assert "new_donator" in result.output
    assert "Total: Rp 320.000" in result.output


def test_cli_history_list_empty(cli_runner, cli_args):
    result = cli_runner.invoke(cli, cli_args + ["history", "list"])

    assert result.exit_code == 0
    assert "No donation history found." in result.output


def test_cli_history_rejects_period_with_dates(cli_runner, cli_args):
    result = cli_runner.invoke(
        cli, cli_args + ["history", "list", "--period", "today", "--start-date", "2024-01-01"]
    )

    assert result.exit_code == 1
    assert "--period cannot be combined" in result.output


def test_cli_history_period_today_matches_utc_day(cli_runner, cli_args, sample_donators):
    result = cli_runner.invoke(cli, cli_args + ["history", "list", "--period", "today"])

    assert result.exit_code == 0
    assert "Total: Rp 320.000" in result.output
