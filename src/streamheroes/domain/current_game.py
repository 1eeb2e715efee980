"""Current game roster domain service."""

import logging
from typing import Optional
from streamheroes.database.base import Database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import CurrentGameSlot, RosterEntry
from streamheroes.domain.errors import (
    NotFoundError,
    ValidationError,
    donator_not_found,
    invalid_position,
)

logger = logging.getLogger(__name__)

MAX_POSITIONS = 4
POSITIONS = tuple(range(1, MAX_POSITIONS + 1))


def roster_by_position(entries: list[RosterEntry]) -> dict[int, Optional[RosterEntry]]:
    """Expand a sparse roster into every position, None for empty slots."""
    by_position: dict[int, Optional[RosterEntry]] = {position: None for position in POSITIONS}
    for entry in entries:
        by_position[entry.position] = entry
    return by_position


class CurrentGameService:
    """Service for the four-slot current game roster.

    For each actor a donator holds at most one position and each position
    holds at most one donator.
    """

    def __init__(self, db: Database):
        """Initialize current game service.

        Args:
            db: Database instance
        """
        self.db = db

    def list_roster(self, ctx: ActorContext) -> list[RosterEntry]:
        """List occupied slots ordered by position.

        The result is sparse; see roster_by_position for a dense view.
        """
        actor = ctx.require_actor("view current game")
        return self.db.list_slots(actor)

    def assign(self, ctx: ActorContext, donator_id: int, position: int) -> CurrentGameSlot:
        """Put a donator into a roster position.

        Whoever occupies the position is evicted, and the donator is removed
        from any other position it held. Both removals and the insert happen
        in one transaction.

        Args:
            ctx: Acting user
            donator_id: Donator to place
            position: Position 1 to 4

        Returns:
            The created slot

        Raises:
            ValidationError: If position is outside 1..4
            NotFoundError: If the donator does not exist for this actor
        """
        actor = ctx.require_actor("add donator to current game")
        if isinstance(position, bool) or not isinstance(position, int) or position not in POSITIONS:
            raise ValidationError(invalid_position(position, MAX_POSITIONS))

        if self.db.get_donator(actor, donator_id) is None:
            raise NotFoundError(donator_not_found(donator_id))

        with self.db.transaction():
            occupant = self.db.get_slot_at_position(actor, position)
            if occupant is not None:
                self.db.delete_slot(actor, occupant.id)
                if occupant.donator_id != donator_id:
                    logger.info(
                        "Evicted donator %s from position %d", occupant.donator_id, position
                    )

            previous = self.db.get_slot_for_donator(actor, donator_id)
            if previous is not None:
                self.db.delete_slot(actor, previous.id)
                logger.info(
                    "Moved donator %s from position %d to %d", donator_id, previous.position, position
                )

            slot = self.db.create_slot(actor, donator_id=donator_id, position=position)

        logger.info("Donator %s assigned to position %d by %s", donator_id, position, actor)
        return slot

    def unassign(self, ctx: ActorContext, slot_id: int) -> None:
        """Remove one slot.

        Missing or foreign-owned slot IDs match nothing and still succeed.
        """
        actor = ctx.require_actor("remove donator from current game")
        deleted = self.db.delete_slot(actor, slot_id)
        if deleted:
            logger.info("Slot %s removed by %s", slot_id, actor)
        else:
            logger.debug("Slot %s not found for %s, nothing removed", slot_id, actor)

    def unassign_position(self, ctx: ActorContext, position: int) -> bool:
        """Empty a roster position.

        Returns:
            True if a donator was removed
        """
        actor = ctx.require_actor("remove donator from current game")
        if position not in POSITIONS:
            raise ValidationError(invalid_position(position, MAX_POSITIONS))
        slot = self.db.get_slot_at_position(actor, position)
        if slot is None:
            return False
        self.unassign(ctx, slot.id)
        return True

    def clear(self, ctx: ActorContext) -> int:
        """Remove every slot. Returns number of slots removed."""
        actor = ctx.require_actor("clear current game")
        deleted = self.db.clear_slots(actor)
        logger.info("Current game cleared by %s (%d slots)", actor, deleted)
        return deleted
