"""Database layer for finance-wrapped."""

from finance_wrapped.database.base import Database
from finance_wrapped.database.json_db import JSONDatabase
from finance_wrapped.database.factories import create_json_database

__all__ = ["Database", "JSONDatabase", "create_json_database"]
