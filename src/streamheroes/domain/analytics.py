"""Analytics domain service: daily totals, category breakdown, leaderboard."""

from collections import defaultdict
from datetime import date, timedelta
from decimal import Decimal
from typing import Any, Optional

from streamheroes.database.base import Database
from streamheroes.domain.context import ActorContext
from streamheroes.domain.entities import (
    CategoryTotal,
    DailyTotal,
    DonationRecord,
    LeaderboardEntry,
)
from streamheroes.domain.errors import ValidationError
from streamheroes.utils.date_parser import to_utc_bounds

_CENT = Decimal("0.01")


class AnalyticsService:
    """Service for reshaping the donation ledger into chart-ready series."""

    def __init__(self, db: Database):
        """Initialize analytics service.

        Args:
            db: Database instance
        """
        self.db = db

    def _records_in_range(
        self, actor: str, start_date: Optional[date], end_date: Optional[date]
    ) -> list[DonationRecord]:
        try:
            start, end = to_utc_bounds(start_date, end_date)
        except ValueError as e:
            raise ValidationError(str(e))
        return self.db.list_donation_records(actor, start, end)

    def daily_totals(self, ctx: ActorContext, start_date: date, end_date: date) -> list[DailyTotal]:
        """Sum ledger amounts per UTC day.

        Every day from start_date to end_date (inclusive) is present so the
        series can be plotted on a continuous axis; days without donations
        are zero.

        Raises:
            ValidationError: If start_date is after end_date
        """
        actor = ctx.require_actor("view donation statistics")
        records = self._records_in_range(actor, start_date, end_date)

        totals: dict[date, dict[str, Any]] = defaultdict(lambda: {"amount": Decimal("0"), "count": 0})
        for record in records:
            day = record.created_at.date()
            totals[day]["amount"] += record.amount
            totals[day]["count"] += 1

        result = []
        day = start_date
        while day <= end_date:
            data = totals.get(day, {"amount": Decimal("0"), "count": 0})
            result.append(DailyTotal(day=day, amount=data["amount"].quantize(_CENT), count=data["count"]))
            day += timedelta(days=1)
        return result

    def category_breakdown(
        self, ctx: ActorContext, start_date: Optional[date] = None, end_date: Optional[date] = None
    ) -> list[CategoryTotal]:
        """Group ledger amounts by each donator's current category.

        Donators or categories that no longer exist are grouped as "Unknown".
        Results are sorted by amount, highest first, then by name.
        """
        actor = ctx.require_actor("view donation statistics")
        records = self._records_in_range(actor, start_date, end_date)
        donators = {details.donator.id: details for details in self.db.list_donators(actor)}

        summary_dict: dict[Optional[int], dict[str, Any]] = defaultdict(
            lambda: {"name": "Unknown", "amount": Decimal("0"), "donators": set()}
        )
        for record in records:
            details = donators.get(record.donator_id)
            category = details.category if details is not None else None
            group_id = category.id if category is not None else None
            summary_dict[group_id]["name"] = category.name if category is not None else "Unknown"
            summary_dict[group_id]["amount"] += record.amount
            summary_dict[group_id]["donators"].add(record.donator_id)

        grand_total = sum((data["amount"] for data in summary_dict.values()), Decimal("0"))
        results = []
        for group_id, data in summary_dict.items():
            share = (data["amount"] * 100 / grand_total).quantize(_CENT) if grand_total else Decimal("0.00")
            results.append(
                CategoryTotal(
                    category_id=group_id,
                    category_name=data["name"],
                    amount=data["amount"].quantize(_CENT),
                    donator_count=len(data["donators"]),
                    share=share,
                )
            )
        results.sort(key=lambda total: (-total.amount, total.category_name))
        return results

    def leaderboard(self, ctx: ActorContext, limit: int = 10) -> list[LeaderboardEntry]:
        """Rank donators by lifetime donation, ties broken by name.

        Raises:
            ValidationError: If limit is below 1
        """
        actor = ctx.require_actor("view donation statistics")
        if isinstance(limit, bool) or not isinstance(limit, int) or limit < 1:
            raise ValidationError("Limit must be at least 1")

        games_played = self.db.count_games_played(actor)
        ranked = sorted(
            self.db.list_donators(actor),
            key=lambda d: (-d.donator.total_donation, d.donator.name.lower(), d.donator.id),
        )
        return [
            LeaderboardEntry(
                rank=rank,
                donator_id=details.donator.id,
                name=details.donator.name,
                category_name=details.category_name,
                total_donation=details.donator.total_donation,
                total_game=details.donator.total_game,
                games_played=games_played.get(details.donator.id, 0),
            )
            for rank, details in enumerate(ranked[:limit], start=1)
        ]
