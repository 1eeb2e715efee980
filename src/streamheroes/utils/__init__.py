"""Utility functions for streamheroes."""

from streamheroes.utils.date_parser import parse_date, get_date_range, to_utc_bounds, utc_today
from streamheroes.utils.amount_parser import parse_amount, format_rupiah
from streamheroes.utils.donator_resolver import resolve_donator

__all__ = [
    "parse_date",
    "get_date_range",
    "to_utc_bounds",
    "utc_today",
    "parse_amount",
    "format_rupiah",
    "resolve_donator",
]
