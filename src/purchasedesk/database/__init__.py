"""Database layer for purchasedesk application."""

from purchasedesk.database.base import Database
from purchasedesk.database.factories import create_memory_database, create_sqlite_database

__all__ = ["Database", "create_memory_database", "create_sqlite_database"]
