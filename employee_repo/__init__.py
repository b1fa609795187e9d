"""Data access for the EMPLOYEES table over DB-API connections."""

import logging

from .core import (
    DELETE,
    FIND_ALL,
    FIND_BY_ID,
    INSERT,
    UPDATE,
    Employee,
    EmployeeRepository,
    EmployeeRowMapper,
    RowMapper,
    SqlExecutor,
    apply_schema,
    create_employees_table_sql,
    employee_to_params,
    id_params,
    map_employee_row,
)
from .ports import Database, Dialect, MySQLDialect, PostgresDialect, SQLiteDialect, dialect_for

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Employee",
    "EmployeeRepository",
    "EmployeeRowMapper",
    "map_employee_row",
    "RowMapper",
    "SqlExecutor",
    "Database",
    "Dialect",
    "SQLiteDialect",
    "PostgresDialect",
    "MySQLDialect",
    "dialect_for",
    "apply_schema",
    "create_employees_table_sql",
    "employee_to_params",
    "id_params",
    "FIND_ALL",
    "FIND_BY_ID",
    "INSERT",
    "UPDATE",
    "DELETE",
]
