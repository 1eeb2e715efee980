"""Database layer for streamheroes application."""

from streamheroes.database.base import Database
from streamheroes.database.factories import create_database, create_sqlite_database

__all__ = ["Database", "create_database", "create_sqlite_database"]
