"""Schema helpers for creating the `EMPLOYEES` table."""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Union, get_args, get_origin

from .models import TABLE, column_name, employee_fields, employee_type_hints, unwrap_optional


def create_employees_table_sql(dialect_name: str = "generic", *, if_not_exists: bool = True) -> str:
    """Build `CREATE TABLE` statement for `EMPLOYEES`.

    Args:
        dialect_name: `Dialect.name` of the target database; selects column
            types where SQLite, PostgreSQL, and MySQL disagree.
        if_not_exists: Emit `IF NOT EXISTS`.
    """

    hints = employee_type_hints()
    column_definitions = []
    for f in employee_fields():
        annotation = hints[f.name]
        parts = [column_name(f), resolve_sql_type(annotation, dialect_name)]
        parts.append("NULL" if _is_optional(annotation) else "NOT NULL")
        if f.metadata.get("pk"):
            parts.append("PRIMARY KEY")
        column_definitions.append(" ".join(parts))

    prefix = "CREATE TABLE IF NOT EXISTS" if if_not_exists else "CREATE TABLE"
    return f"{prefix} {TABLE} (\n  " + ",\n  ".join(column_definitions) + "\n)"


def resolve_sql_type(annotation: Any, dialect_name: str = "generic") -> str:
    """Map Python annotation to SQL scalar type for a dialect."""

    base_type = unwrap_optional(annotation)

    if base_type is bool:
        return "BOOLEAN"
    if base_type is datetime:
        return "DATETIME" if dialect_name.lower() == "mysql" else "TIMESTAMP"
    if base_type is date:
        return "DATE"
    if base_type is time:
        return "TIME"
    if base_type is int:
        return "INTEGER"
    if base_type is float:
        return "DOUBLE PRECISION"
    return "VARCHAR(255)"


def apply_schema(db: Any, *, if_not_exists: bool = True) -> str:
    """Create the `EMPLOYEES` table on a `Database` and return the DDL."""

    dialect_name = getattr(db.dialect, "name", "generic")
    sql = create_employees_table_sql(dialect_name, if_not_exists=if_not_exists)
    with db.transaction():
        db.execute(sql)
    return sql


def _is_optional(annotation: Any) -> bool:
    return get_origin(annotation) is Union and type(None) in get_args(annotation)
