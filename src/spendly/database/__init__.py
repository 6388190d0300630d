"""Ledger storage for spendly."""

from spendly.database.base import Database
from spendly.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
