"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional
from datetime import datetime
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from streamheroes.domain.entities import (
    Category,
    CurrentGameSlot,
    DonationEventType,
    DonationRecord,
    DonatorDetails,
    GameSession,
    RosterEntry,
)


class Database(ABC):
    """Abstract database interface for streamheroes.

    Every operation takes the acting user's email as ``actor`` and only sees
    rows created by that actor. Rows owned by another actor behave as absent.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group several operations into one atomic unit.

        Operations inside the block are not committed individually. The
        outermost block commits on normal exit and rolls back if anything
        raises. Nested blocks join the enclosing one.
        """
        pass

    # Category operations
    @abstractmethod
    def create_category(self, actor: str, name: str, price: Decimal) -> int:
        """Create a category. Returns category ID."""
        pass

    @abstractmethod
    def get_category(self, actor: str, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def list_categories(self, actor: str) -> list[Category]:
        """List categories ordered by name."""
        pass

    @abstractmethod
    def update_category(
        self, actor: str, category_id: int, name: Optional[str] = None, price: Optional[Decimal] = None
    ) -> None:
        """Update category fields that are not None."""
        pass

    @abstractmethod
    def delete_category(self, actor: str, category_id: int) -> None:
        """Delete a category."""
        pass

    @abstractmethod
    def get_category_donator_count(self, actor: str, category_id: int) -> int:
        """Get count of donators in a category."""
        pass

    # Donator operations
    @abstractmethod
    def create_donator(
        self, actor: str, name: str, category_id: int, total_game: int, total_donation: Decimal
    ) -> int:
        """Create a donator. Returns donator ID."""
        pass

    @abstractmethod
    def get_donator(self, actor: str, donator_id: int) -> Optional[DonatorDetails]:
        """Get donator with its category by ID."""
        pass

    @abstractmethod
    def list_donators(self, actor: str) -> list[DonatorDetails]:
        """List donators with their categories, ordered by name."""
        pass

    @abstractmethod
    def list_donators_created_between(
        self, actor: str, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[DonatorDetails]:
        """List donators created in [start, end), oldest first."""
        pass

    @abstractmethod
    def update_donator(
        self,
        actor: str,
        donator_id: int,
        name: Optional[str] = None,
        category_id: Optional[int] = None,
        total_game: Optional[int] = None,
        total_donation: Optional[Decimal] = None,
    ) -> None:
        """Update donator fields that are not None."""
        pass

    @abstractmethod
    def decrement_total_game(self, actor: str, donator_id: int) -> bool:
        """Atomically decrement total_game if it is above zero.

        Returns:
            True if a game was taken, False if the donator is missing or has none left
        """
        pass

    @abstractmethod
    def delete_donator(self, actor: str, donator_id: int) -> None:
        """Delete a donator and its current game slot."""
        pass

    # Current game operations
    @abstractmethod
    def list_slots(self, actor: str) -> list[RosterEntry]:
        """List occupied roster slots ordered by position."""
        pass

    @abstractmethod
    def get_slot_at_position(self, actor: str, position: int) -> Optional[CurrentGameSlot]:
        """Get the slot occupying a position."""
        pass

    @abstractmethod
    def get_slot_for_donator(self, actor: str, donator_id: int) -> Optional[CurrentGameSlot]:
        """Get the slot a donator occupies."""
        pass

    @abstractmethod
    def create_slot(self, actor: str, donator_id: int, position: int) -> CurrentGameSlot:
        """Insert a roster slot."""
        pass

    @abstractmethod
    def delete_slot(self, actor: str, slot_id: int) -> int:
        """Delete a roster slot. Returns number of rows deleted."""
        pass

    @abstractmethod
    def clear_slots(self, actor: str) -> int:
        """Delete every roster slot. Returns number of rows deleted."""
        pass

    # Game session operations
    @abstractmethod
    def create_game_sessions(
        self, actor: str, session_id: str, donator_ids: list[int], played_at: datetime
    ) -> list[GameSession]:
        """Insert one session row per donator, all sharing session_id."""
        pass

    @abstractmethod
    def list_recent_session_ids(self, actor: str, limit: int) -> list[tuple[str, datetime]]:
        """List distinct (session_id, played_at), most recently played first."""
        pass

    @abstractmethod
    def list_session_donators(self, actor: str, session_id: str) -> list[DonatorDetails]:
        """List the donators who played in a session, in insertion order."""
        pass

    @abstractmethod
    def count_games_played(self, actor: str) -> dict[int, int]:
        """Map donator ID to number of session rows recorded for it."""
        pass

    # Donation history operations
    @abstractmethod
    def create_donation_record(
        self,
        actor: str,
        donator_id: int,
        amount: Decimal,
        event_type: DonationEventType,
        games_added: int,
    ) -> DonationRecord:
        """Append a donation ledger entry."""
        pass

    @abstractmethod
    def list_donation_records(
        self, actor: str, start: Optional[datetime] = None, end: Optional[datetime] = None
    ) -> list[DonationRecord]:
        """List ledger entries created in [start, end), oldest first."""
        pass
