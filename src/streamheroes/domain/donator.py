"""Donator domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional
from streamheroes.database.base import Database
from streamheroes.domain.category import validate_name
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import (
    Category,
    DonationEntry,
    DonationEventType,
    DonatorDetails,
)
from streamheroes.domain.errors import (
    NotFoundError,
    ValidationError,
    category_not_found,
    donator_not_found,
)
from streamheroes.utils.date_parser import to_utc_bounds

logger = logging.getLogger(__name__)


def calculate_total_donation(total_game: int, price: Decimal) -> Decimal:
    """Total donation for a game count at a category price."""
    return (Decimal(total_game) * price).quantize(Decimal("0.01"))


def _validate_game_count(value, minimum: int, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{field} must be a whole number")
    if value < minimum:
        raise ValidationError(f"{field} must be at least {minimum}")
    return value


class DonatorService:
    """Service for managing donators and their derived donation totals.

    ``total_donation`` is never incremented. Whenever ``total_game`` changes
    it is recomputed from scratch as ``total_game * current category price``.
    """

    def __init__(self, db: Database):
        """Initialize donator service.

        Args:
            db: Database instance
        """
        self.db = db

    def _require_category(self, actor: str, category_id: int) -> Category:
        category = self.db.get_category(actor, category_id)
        if category is None:
            raise NotFoundError(category_not_found(category_id))
        return category

    def list_donators(self, ctx: ActorContext) -> list[DonatorDetails]:
        """List the actor's donators with their categories, ordered by name."""
        actor = ctx.require_actor("view their donators")
        return self.db.list_donators(actor)

    def get_donator(self, ctx: ActorContext, donator_id: int) -> DonatorDetails:
        """Get donator with category by ID.

        Raises:
            NotFoundError: If the donator does not exist for this actor
        """
        actor = ctx.require_actor("view a donator")
        details = self.db.get_donator(actor, donator_id)
        if details is None:
            raise NotFoundError(donator_not_found(donator_id))
        return details

    def create_donator(
        self, ctx: ActorContext, name: str, category_id: int, total_game: int
    ) -> DonatorDetails:
        """Create a donator and record the opening donation.

        Args:
            ctx: Acting user
            name: Donator name
            category_id: Category the donator belongs to
            total_game: Number of games bought (at least 1)

        Returns:
            Created donator with its category

        Raises:
            ValidationError: If name is empty or total_game is below 1
            NotFoundError: If the category does not exist for this actor
        """
        actor = ctx.require_actor("create a donator")
        name = validate_name(name, "Donator")
        total_game = _validate_game_count(total_game, 1, "Total games")
        category = self._require_category(actor, category_id)
        total_donation = calculate_total_donation(total_game, category.price)

        with self.db.transaction():
            donator_id = self.db.create_donator(
                actor,
                name=name,
                category_id=category.id,
                total_game=total_game,
                total_donation=total_donation,
            )
            self.db.create_donation_record(
                actor,
                donator_id=donator_id,
                amount=total_donation,
                event_type=DonationEventType.NEW_DONATOR,
                games_added=total_game,
            )

        logger.info(
            "Donator %s '%s' created by %s: %d games, total %s",
            donator_id, name, actor, total_game, total_donation,
        )
        return self.get_donator(ctx, donator_id)

    def update_donator(
        self,
        ctx: ActorContext,
        donator_id: int,
        name: Optional[str] = None,
        category_id: Optional[int] = None,
        total_game: Optional[int] = None,
    ) -> DonatorDetails:
        """Update a donator.

        If total_game or the category changes, total_donation is recomputed
        as ``total_game * price`` of the (new) category.

        Raises:
            NotFoundError: If the donator or new category does not exist
            ValidationError: If name is empty or total_game is negative
        """
        actor = ctx.require_actor("update a donator")
        if name is not None:
            name = validate_name(name, "Donator")
        if total_game is not None:
            total_game = _validate_game_count(total_game, 0, "Total games")

        current = self.get_donator(ctx, donator_id)
        category_changed = category_id is not None and category_id != current.donator.category_id

        total_donation = None
        if total_game is not None or category_changed:
            target_category_id = category_id if category_id is not None else current.donator.category_id
            category = self._require_category(actor, target_category_id)
            games = total_game if total_game is not None else current.donator.total_game
            total_donation = calculate_total_donation(games, category.price)

        self.db.update_donator(
            actor,
            donator_id,
            name=name,
            category_id=category_id,
            total_game=total_game,
            total_donation=total_donation,
        )
        logger.info("Donator %s updated by %s", donator_id, actor)
        return self.get_donator(ctx, donator_id)

    def add_games(self, ctx: ActorContext, donator_id: int, games: int) -> DonatorDetails:
        """Add purchased games to a donator and log the donation.

        The new total_game is ``current + games`` and total_donation is
        recomputed from it. A ledger entry of ``games * price`` is appended
        in the same transaction.

        Raises:
            NotFoundError: If the donator or its category does not exist
            ValidationError: If games is below 1
        """
        actor = ctx.require_actor("add games")
        games = _validate_game_count(games, 1, "Games to add")

        with self.db.transaction():
            current = self.get_donator(ctx, donator_id)
            category = self._require_category(actor, current.donator.category_id)
            new_total_game = current.donator.total_game + games
            amount = calculate_total_donation(games, category.price)

            self.db.update_donator(
                actor,
                donator_id,
                total_game=new_total_game,
                total_donation=calculate_total_donation(new_total_game, category.price),
            )
            self.db.create_donation_record(
                actor,
                donator_id=donator_id,
                amount=amount,
                event_type=DonationEventType.ADD_GAMES,
                games_added=games,
            )

        logger.info("Added %d games (%s) to donator %s", games, amount, donator_id)
        return self.get_donator(ctx, donator_id)

    def delete_donator(self, ctx: ActorContext, donator_id: int) -> None:
        """Delete a donator; its roster slot goes with it, its history stays.

        Raises:
            NotFoundError: If the donator does not exist for this actor
        """
        actor = ctx.require_actor("delete a donator")
        self.get_donator(ctx, donator_id)
        self.db.delete_donator(actor, donator_id)
        logger.info("Donator %s deleted by %s", donator_id, actor)

    def get_donations_by_date_range(
        self, ctx: ActorContext, start_date: Optional[date], end_date: Optional[date]
    ) -> list[DonationEntry]:
        """Donators created in an inclusive date range, flattened for charts.

        Raises:
            ValidationError: If start_date is after end_date
        """
        actor = ctx.require_actor("view donations")
        try:
            start, end = to_utc_bounds(start_date, end_date)
        except ValueError as e:
            raise ValidationError(str(e))

        return [
            DonationEntry(
                donator_id=details.donator.id,
                donator_name=details.donator.name,
                category_name=details.category_name,
                amount=details.donator.total_donation,
                created_at=details.donator.created_at,
            )
            for details in self.db.list_donators_created_between(actor, start, end)
        ]
