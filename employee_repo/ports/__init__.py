"""Public port exports for concrete adapter implementations."""

from .db_api import Database, Dialect, MySQLDialect, PostgresDialect, SQLiteDialect, dialect_for

__all__ = [
    "Database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "dialect_for",
]
