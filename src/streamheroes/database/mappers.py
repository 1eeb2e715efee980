"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic so services never touch ORM rows.
SQLite drops tzinfo on read, so timestamps are normalized to UTC here.
"""

from datetime import datetime, UTC
from decimal import Decimal
from typing import Optional

from streamheroes.domain import entities as domain
from streamheroes.database.models import (
    Category as ORMCategory,
    Donator as ORMDonator,
    CurrentGame as ORMCurrentGame,
    GameSession as ORMGameSession,
    DonationHistory as ORMDonationHistory,
)


def as_utc(value: datetime) -> datetime:
    """Attach UTC to naive datetimes read back from the database."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _money(value) -> Decimal:
    return Decimal(value if value is not None else 0).quantize(Decimal("0.01"))


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        price=_money(orm_category.price),
        created_at=as_utc(orm_category.created_at),
        created_by=orm_category.created_by,
        updated_at=as_utc(orm_category.updated_at),
        updated_by=orm_category.updated_by,
    )


def donator_to_domain(orm_donator: ORMDonator) -> domain.Donator:
    """Convert SQLAlchemy Donator model to domain Donator entity."""
    return domain.Donator(
        id=orm_donator.id,
        name=orm_donator.name,
        category_id=orm_donator.category_id,
        total_game=orm_donator.total_game,
        total_donation=_money(orm_donator.total_donation),
        created_at=as_utc(orm_donator.created_at),
        created_by=orm_donator.created_by,
        updated_at=as_utc(orm_donator.updated_at),
        updated_by=orm_donator.updated_by,
    )


def donator_details_to_domain(orm_donator: ORMDonator) -> domain.DonatorDetails:
    """Convert a Donator row and its loaded category to DonatorDetails."""
    category: Optional[domain.Category] = None
    if orm_donator.category is not None:
        category = category_to_domain(orm_donator.category)
    return domain.DonatorDetails(donator=donator_to_domain(orm_donator), category=category)


def slot_to_domain(orm_slot: ORMCurrentGame) -> domain.CurrentGameSlot:
    """Convert SQLAlchemy CurrentGame model to domain CurrentGameSlot entity."""
    return domain.CurrentGameSlot(
        id=orm_slot.id,
        donator_id=orm_slot.donator_id,
        position=orm_slot.position,
        created_at=as_utc(orm_slot.created_at),
        created_by=orm_slot.created_by,
    )


def roster_entry_to_domain(orm_slot: ORMCurrentGame) -> domain.RosterEntry:
    """Convert a CurrentGame row with its donator to a RosterEntry."""
    return domain.RosterEntry(
        slot=slot_to_domain(orm_slot),
        details=donator_details_to_domain(orm_slot.donator),
    )


def game_session_to_domain(orm_session: ORMGameSession) -> domain.GameSession:
    """Convert SQLAlchemy GameSession model to domain GameSession entity."""
    return domain.GameSession(
        id=orm_session.id,
        session_id=orm_session.session_id,
        donator_id=orm_session.donator_id,
        played_at=as_utc(orm_session.played_at),
        created_by=orm_session.created_by,
    )


def donation_record_to_domain(orm_record: ORMDonationHistory) -> domain.DonationRecord:
    """Convert SQLAlchemy DonationHistory model to domain DonationRecord entity."""
    return domain.DonationRecord(
        id=orm_record.id,
        donator_id=orm_record.donator_id,
        amount=_money(orm_record.amount),
        event_type=domain.DonationEventType(orm_record.event_type),
        games_added=orm_record.games_added,
        created_at=as_utc(orm_record.created_at),
        created_by=orm_record.created_by,
    )
