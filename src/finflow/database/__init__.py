"""Database layer for finflow application."""

from finflow.database.base import Database, ENTRIES_KEY
from finflow.database.factories import create_sqlite_database

__all__ = ["Database", "ENTRIES_KEY", "create_sqlite_database"]
