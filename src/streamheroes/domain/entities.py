"""Domain model entities for streamheroes.

These are pure data classes representing business concepts, independent of
database schema. Services and the CLI only ever see these, never ORM rows.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class DonationEventType(str, Enum):
    """Kinds of entries in the donation history ledger."""

    NEW_DONATOR = "new_donator"
    ADD_GAMES = "add_games"


@dataclass(frozen=True)
class Category:
    """Supporter tier with a per-game price."""

    id: int
    name: str
    price: Decimal
    created_at: datetime
    created_by: Optional[str]
    updated_at: datetime
    updated_by: Optional[str]


@dataclass(frozen=True)
class Donator:
    """Supporter with a remaining-game counter and lifetime donation total."""

    id: int
    name: str
    category_id: int
    total_game: int
    total_donation: Decimal
    created_at: datetime
    created_by: Optional[str]
    updated_at: datetime
    updated_by: Optional[str]


@dataclass(frozen=True)
class DonatorDetails:
    """Donator together with its category (None if the category is gone)."""

    donator: Donator
    category: Optional[Category]

    @property
    def category_name(self) -> str:
        return self.category.name if self.category is not None else "Unknown"


@dataclass(frozen=True)
class CurrentGameSlot:
    """One occupied position of the current game roster."""

    id: int
    donator_id: int
    position: int
    created_at: datetime
    created_by: Optional[str]


@dataclass(frozen=True)
class RosterEntry:
    """Occupied roster slot with the donator playing in it."""

    slot: CurrentGameSlot
    details: DonatorDetails

    @property
    def position(self) -> int:
        return self.slot.position


@dataclass(frozen=True)
class DonationRecord:
    """Append-only donation ledger entry."""

    id: int
    donator_id: int
    amount: Decimal
    event_type: DonationEventType
    games_added: int
    created_at: datetime
    created_by: Optional[str]


@dataclass(frozen=True)
class GameSession:
    """One donator's participation in a recorded play event."""

    id: int
    session_id: str
    donator_id: int
    played_at: datetime
    created_by: Optional[str]


@dataclass(frozen=True)
class SessionSummary:
    """All donators who played together in one session."""

    session_id: str
    played_at: datetime
    donators: tuple[DonatorDetails, ...]


@dataclass(frozen=True)
class DonationEntry:
    """Donator flattened for charting donations over time."""

    donator_id: int
    donator_name: str
    category_name: str
    amount: Decimal
    created_at: datetime


@dataclass(frozen=True)
class DailyTotal:
    """Donation ledger total for one calendar day."""

    day: date
    amount: Decimal
    count: int


@dataclass(frozen=True)
class CategoryTotal:
    """Donation ledger total for one category."""

    category_id: Optional[int]
    category_name: str
    amount: Decimal
    donator_count: int
    share: Decimal


@dataclass(frozen=True)
class LeaderboardEntry:
    """Donator ranked by lifetime donation."""

    rank: int
    donator_id: int
    name: str
    category_name: str
    total_donation: Decimal
    total_game: int
    games_played: int
