"""Game session domain service."""

import logging
import uuid
from datetime import datetime, UTC
from typing import Iterable
from streamheroes.database.base import Database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import GameSession, SessionSummary
from streamheroes.domain.errors import (
    EmptyRoster,
    NoGamesRemaining,
    NotFoundError,
    ValidationError,
    donator_not_found,
)

logger = logging.getLogger(__name__)


class GameSessionService:
    """Records play events and reads back session history."""

    def __init__(self, db: Database):
        """Initialize game session service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_session(self, ctx: ActorContext, donator_ids: Iterable[int]) -> list[GameSession]:
        """Record that the given donators played one game together.

        Every participant shares one new session ID and timestamp, and each
        participant's total_game drops by exactly 1 (total_donation is left
        alone). The whole batch is one transaction: if any participant is
        missing or out of games, nothing is written for anyone.

        Args:
            ctx: Acting user
            donator_ids: Participants; duplicates are ignored

        Returns:
            The session rows created, one per participant

        Raises:
            EmptyRoster: If no donator IDs are given
            NotFoundError: If a donator does not exist for this actor
            NoGamesRemaining: If a donator has no games left
        """
        actor = ctx.require_actor("create a game session")
        participants = list(dict.fromkeys(donator_ids))
        if not participants:
            raise EmptyRoster("At least one donator is required to record a game session")

        session_id = str(uuid.uuid4())
        played_at = datetime.now(UTC)

        with self.db.transaction():
            for donator_id in participants:
                details = self.db.get_donator(actor, donator_id)
                if details is None:
                    raise NotFoundError(donator_not_found(donator_id))
                if details.donator.total_game <= 0:
                    logger.warning("Donator %s has no remaining games", details.donator.name)
                    raise NoGamesRemaining(donator_id, details.donator.name)

            rows = self.db.create_game_sessions(
                actor, session_id=session_id, donator_ids=participants, played_at=played_at
            )

            for donator_id in participants:
                # Conditional decrement; a concurrent session may have taken the last game
                if not self.db.decrement_total_game(actor, donator_id):
                    details = self.db.get_donator(actor, donator_id)
                    name = details.donator.name if details is not None else None
                    raise NoGamesRemaining(donator_id, name)

        logger.info(
            "Game session %s recorded by %s with %d donators", session_id, actor, len(participants)
        )
        return rows

    def record_current_game(self, ctx: ActorContext) -> list[GameSession]:
        """Record a session for everyone on the actor's current roster.

        Raises:
            EmptyRoster: If the roster is empty
        """
        actor = ctx.require_actor("create a game session")
        roster = self.db.list_slots(actor)
        if not roster:
            raise EmptyRoster("Current game has no donators")
        return self.record_session(ctx, [entry.slot.donator_id for entry in roster])

    def get_recent_sessions(self, ctx: ActorContext, limit: int = 10) -> list[SessionSummary]:
        """Most recently played sessions with their participants.

        Participants show their current name and category, not the ones they
        had when the session was played.

        Raises:
            ValidationError: If limit is below 1
        """
        actor = ctx.require_actor("view game sessions")
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("Limit must be at least 1")

        return [
            SessionSummary(
                session_id=session_id,
                played_at=played_at,
                donators=tuple(self.db.list_session_donators(actor, session_id)),
            )
            for session_id, played_at in self.db.list_recent_session_ids(actor, limit)
        ]
