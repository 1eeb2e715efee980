"""Date parsing utilities."""

import re
from datetime import date, datetime, time, timedelta, UTC
from typing import Optional
from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

PERIODS = (
    "today",
    "yesterday",
    "this-week",
    "last-week",
    "this-month",
    "last-month",
    "this-year",
    "last-7-days",
    "last-30-days",
)

_DAYS_AGO = re.compile(r"^(\d+) days? ago$")


def utc_today() -> date:
    """Current calendar day in UTC, the day boundary the ledger is grouped by."""
    return datetime.now(UTC).date()


def parse_date(date_str: str) -> date:
    """Parse a date string into a date object.

    Supports:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "3 days ago" (relative to the UTC day)

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = utc_today()

    if date_str == "today":
        return today
    if date_str == "yesterday":
        return today - timedelta(days=1)

    match = _DAYS_AGO.match(date_str)
    if match:
        return today - timedelta(days=int(match.group(1)))

    try:
        return date_parser.parse(date_str).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def get_date_range(period: str) -> tuple[date, date]:
    """Get inclusive start and end dates for a named period.

    Args:
        period: One of PERIODS

    Returns:
        Tuple of (start_date, end_date)

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = utc_today()

    if period == "today":
        return (today, today)
    elif period == "yesterday":
        yesterday = today - timedelta(days=1)
        return (yesterday, yesterday)
    elif period == "this-week":
        return (today - timedelta(days=today.weekday()), today)
    elif period == "last-week":
        # Monday through Sunday of last week
        start_date = today - timedelta(days=today.weekday() + 7)
        return (start_date, start_date + timedelta(days=6))
    elif period == "this-month":
        return (today.replace(day=1), today)
    elif period == "last-month":
        start_date = (today - relativedelta(months=1)).replace(day=1)
        return (start_date, today.replace(day=1) - timedelta(days=1))
    elif period == "this-year":
        return (today.replace(month=1, day=1), today)
    elif period == "last-7-days":
        return (today - timedelta(days=6), today)
    elif period == "last-30-days":
        return (today - timedelta(days=29), today)

    raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")


def to_utc_bounds(
    start_date: Optional[date], end_date: Optional[date]
) -> tuple[Optional[datetime], Optional[datetime]]:
    """Convert an inclusive date range to half-open UTC datetime bounds.

    Returns:
        (start of start_date, start of the day after end_date); None stays None

    Raises:
        ValueError: If start_date is after end_date
    """
    if start_date is not None and end_date is not None and start_date > end_date:
        raise ValueError(f"Start date {start_date} is after end date {end_date}")

    start = datetime.combine(start_date, time.min, tzinfo=UTC) if start_date is not None else None
    end = (
        datetime.combine(end_date + timedelta(days=1), time.min, tzinfo=UTC)
        if end_date is not None
        else None
    )
    return start, end
