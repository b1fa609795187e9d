"""Public core API for the employee model, mapping, and repository."""

from .contracts import DialectPort, RowMapper, SqlExecutor
from .models import Employee, employee_columns, employee_to_params, id_params
from .repository import DELETE, FIND_ALL, FIND_BY_ID, INSERT, UPDATE, EmployeeRepository
from .row_mapper import EmployeeRowMapper, deserialize_column, map_employee_row
from .schema import apply_schema, create_employees_table_sql

__all__ = [
    "DialectPort",
    "RowMapper",
    "SqlExecutor",
    "Employee",
    "EmployeeRepository",
    "EmployeeRowMapper",
    "map_employee_row",
    "deserialize_column",
    "employee_columns",
    "employee_to_params",
    "id_params",
    "apply_schema",
    "create_employees_table_sql",
    "FIND_ALL",
    "FIND_BY_ID",
    "INSERT",
    "UPDATE",
    "DELETE",
]
