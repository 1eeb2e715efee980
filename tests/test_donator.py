"""Tests for donator service: derived totals, add-games and date ranges."""

from datetime import datetime, timedelta, UTC
from decimal import Decimal

import pytest

from streamheroes.domain.entities import DonationEventType
from streamheroes.domain.errors import AuthRequired, NotFoundError, ValidationError


def test_create_donator_derives_total(donator_service, sample_categories, actor):
    details = donator_service.create_donator(
        actor, name="Andi", category_id=sample_categories["Bronze"].id, total_game=3
    )

    assert details.donator.total_game == 3
    assert details.donator.total_donation == Decimal("45000")
    assert details.category.name == "Bronze"
    assert details.category_name == "Bronze"


def test_create_donator_writes_opening_history(
    donator_service, history_service, sample_categories, actor
):
    details = donator_service.create_donator(
        actor, name="Andi", category_id=sample_categories["Silver"].id, total_game=2
    )

    records = history_service.get_by_date_range(actor)
    assert len(records) == 1
    assert records[0].donator_id == details.donator.id
    assert records[0].event_type == DonationEventType.NEW_DONATOR
    assert records[0].amount == Decimal("50000")
    assert records[0].games_added == 2


@pytest.mark.parametrize("games", [0, -1, True, 1.5])
def test_create_donator_rejects_bad_game_count(donator_service, sample_categories, actor, games):
    with pytest.raises(ValidationError):
        donator_service.create_donator(
            actor, name="Andi", category_id=sample_categories["Bronze"].id, total_game=games
        )


def test_create_donator_unknown_category(donator_service, actor):
    with pytest.raises(NotFoundError, match="Category 42 not found"):
        donator_service.create_donator(actor, name="Andi", category_id=42, total_game=1)


def test_create_donator_with_foreign_category(donator_service, sample_categories, other_actor):
    with pytest.raises(NotFoundError):
        donator_service.create_donator(
            other_actor, name="Andi", category_id=sample_categories["Bronze"].id, total_game=1
        )


def test_update_total_game_recomputes_from_scratch(donator_service, sample_donators, actor):
    donator_id = sample_donators["Andi"]

    updated = donator_service.update_donator(actor, donator_id, total_game=5)

    assert updated.donator.total_game == 5
    assert updated.donator.total_donation == Decimal("75000")


def test_update_uses_current_category_price(
    donator_service, category_service, sample_categories, sample_donators, actor
):
    category_service.update_category(actor, sample_categories["Bronze"].id, price=20000)

    updated = donator_service.update_donator(actor, sample_donators["Andi"], total_game=3)

    assert updated.donator.total_donation == Decimal("60000")


def test_update_category_recomputes_with_stored_games(
    donator_service, sample_categories, sample_donators, actor
):
    updated = donator_service.update_donator(
        actor, sample_donators["Andi"], category_id=sample_categories["Gold"].id
    )

    assert updated.category.name == "Gold"
    assert updated.donator.total_donation == Decimal("150000")


def test_update_name_only_keeps_total(donator_service, sample_donators, actor):
    updated = donator_service.update_donator(actor, sample_donators["Andi"], name="Andi S.")

    assert updated.donator.name == "Andi S."
    assert updated.donator.total_donation == Decimal("45000")


def test_update_allows_zero_games(donator_service, sample_donators, actor):
    updated = donator_service.update_donator(actor, sample_donators["Andi"], total_game=0)

    assert updated.donator.total_game == 0
    assert updated.donator.total_donation == Decimal("0")


def test_update_rejects_negative_games(donator_service, sample_donators, actor):
    with pytest.raises(ValidationError):
        donator_service.update_donator(actor, sample_donators["Andi"], total_game=-1)


def test_add_games(donator_service, history_service, sample_donators, actor):
    donator_id = sample_donators["Budi"]

    details = donator_service.add_games(actor, donator_id, 3)

    assert details.donator.total_game == 5
    assert details.donator.total_donation == Decimal("125000")

    records = [r for r in history_service.get_by_date_range(actor) if r.donator_id == donator_id]
    assert [r.event_type for r in records] == [DonationEventType.NEW_DONATOR, DonationEventType.ADD_GAMES]
    assert records[-1].amount == Decimal("75000")
    assert records[-1].games_added == 3


def test_add_games_rolls_back_when_history_fails(
    donator_service, history_service, temp_db, sample_donators, actor, monkeypatch
):
    from streamheroes.domain.errors import BackendError

    def failing_record(*args, **kwargs):
        raise BackendError("ledger unavailable")

    monkeypatch.setattr(temp_db, "create_donation_record", failing_record)
    with pytest.raises(BackendError):
        donator_service.add_games(actor, sample_donators["Budi"], 3)
    monkeypatch.undo()

    details = donator_service.get_donator(actor, sample_donators["Budi"])
    assert details.donator.total_game == 2
    assert details.donator.total_donation == Decimal("50000")


def test_add_games_rejects_zero(donator_service, sample_donators, actor):
    with pytest.raises(ValidationError):
        donator_service.add_games(actor, sample_donators["Andi"], 0)


def test_list_donators_ordered_with_category(donator_service, sample_donators, actor, other_actor):
    donators = donator_service.list_donators(actor)

    assert [d.donator.name for d in donators] == ["Andi", "Budi", "Citra", "Dewi", "Eko"]
    assert donators[2].category_name == "Gold"
    assert donator_service.list_donators(other_actor) == []


def test_get_donator_of_other_actor(donator_service, sample_donators, other_actor):
    with pytest.raises(NotFoundError):
        donator_service.get_donator(other_actor, sample_donators["Andi"])


def test_delete_donator(donator_service, sample_donators, actor):
    donator_service.delete_donator(actor, sample_donators["Citra"])

    with pytest.raises(NotFoundError):
        donator_service.get_donator(actor, sample_donators["Citra"])


def test_delete_donator_requires_actor(donator_service, sample_donators, anonymous):
    with pytest.raises(AuthRequired):
        donator_service.delete_donator(anonymous, sample_donators["Citra"])


def test_donations_by_date_range(donator_service, sample_donators, actor):
    today = datetime.now(UTC).date()

    entries = donator_service.get_donations_by_date_range(actor, today, today)

    assert len(entries) == 5
    assert entries[0].donator_name == "Andi"
    assert entries[0].category_name == "Bronze"
    assert entries[0].amount == Decimal("45000")

    yesterday = today - timedelta(days=1)
    assert donator_service.get_donations_by_date_range(actor, yesterday, yesterday) == []


def test_donations_by_date_range_rejects_inverted_range(donator_service, actor):
    today = datetime.now(UTC).date()
    with pytest.raises(ValidationError):
        donator_service.get_donations_by_date_range(actor, today, today - timedelta(days=1))
