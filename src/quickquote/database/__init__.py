"""Database layer for quickquote application."""

from quickquote.database.base import Database
from quickquote.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
