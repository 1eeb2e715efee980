"""Donation history (audit ledger) domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from streamheroes.database.base import Database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import DonationEventType, DonationRecord
from streamheroes.domain.errors import NotFoundError, ValidationError, donator_not_found
from streamheroes.utils.amount_parser import parse_amount
from streamheroes.utils.date_parser import to_utc_bounds

logger = logging.getLogger(__name__)


class DonationHistoryService:
    """Append-only access to the donation ledger."""

    def __init__(self, db: Database):
        self.db = db

    def add_record(
        self,
        ctx: ActorContext,
        donator_id: int,
        amount: str | int | Decimal,
        event_type: DonationEventType | str,
        games_added: int = 0,
    ) -> DonationRecord:
        """Append a ledger entry for one of the actor's donators.

        Raises:
            ValidationError: If amount or games_added is negative, or event_type is unknown
            NotFoundError: If the donator does not exist for this actor
        """
        actor = ctx.require_actor("add donation history")
        try:
            value = parse_amount(amount)
            event = DonationEventType(event_type)
        except ValueError as e:
            raise ValidationError(str(e))
        if value < 0:
            raise ValidationError("Donation amount must be 0 or greater")
        if isinstance(games_added, bool) or not isinstance(games_added, int) or games_added < 0:
            raise ValidationError("Games added must be a whole number, 0 or greater")

        if self.db.get_donator(actor, donator_id) is None:
            raise NotFoundError(donator_not_found(donator_id))

        record = self.db.create_donation_record(
            actor, donator_id=donator_id, amount=value, event_type=event, games_added=games_added
        )
        logger.info("Donation %s (%s) recorded for donator %s", record.id, event.value, donator_id)
        return record

    def get_by_date_range(
        self, ctx: ActorContext, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[DonationRecord]:
        """Ledger entries within an inclusive date range, oldest first."""
        actor = ctx.require_actor("view donation history")
        try:
            start, end = to_utc_bounds(start_date, end_date)
        except ValueError as e:
            raise ValidationError(str(e))
        return self.db.list_donation_records(actor, start, end)
