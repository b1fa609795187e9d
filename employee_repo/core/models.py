"""Employee entity and named-parameter mapping helpers."""

from __future__ import annotations

from dataclasses import Field, dataclass, field, fields
from datetime import date, datetime, time
from functools import lru_cache
from typing import Any, Dict, List, Optional, Tuple, Union, get_args, get_origin, get_type_hints

from .types import NamedParams

TABLE = "EMPLOYEES"
ID_PARAM = "ID"


@dataclass
class Employee:
    """One row of the `EMPLOYEES` table.

    Each field carries its column name in `metadata["column"]`; that name is
    also the SQL placeholder the field binds to.
    """

    id: int = field(metadata={"column": "ID", "pk": True})
    first_name: str = field(metadata={"column": "FIRST_NAME"})
    middle_name: Optional[str] = field(metadata={"column": "MIDDLE_NAME"})
    last_name: str = field(metadata={"column": "LAST_NAME"})
    salary: float = field(metadata={"column": "SALARY"})
    some_date: date = field(metadata={"column": "SOME_DATE"})
    some_time: time = field(metadata={"column": "SOME_TIME"})
    some_datetime: datetime = field(metadata={"column": "SOME_DATETIME"})
    active: bool = field(metadata={"column": "ACTIVE"})


@lru_cache(maxsize=None)
def employee_fields() -> Tuple[Field[Any], ...]:
    """Return `Employee` dataclass fields in declaration order."""

    return tuple(fields(Employee))


@lru_cache(maxsize=None)
def employee_type_hints() -> Dict[str, Any]:
    """Return resolved `Employee` field annotations."""

    return dict(get_type_hints(Employee))


def unwrap_optional(annotation: Any) -> Any:
    """Extract wrapped type from `Optional[T]` annotations."""

    if get_origin(annotation) is not Union:
        return annotation
    args = [arg for arg in get_args(annotation) if arg is not type(None)]
    return args[0] if len(args) == 1 else annotation


def column_name(f: Field[Any]) -> str:
    """Resolve column/placeholder name for an `Employee` field."""

    return f.metadata.get("column", f.name.upper())


def employee_columns() -> List[str]:
    """Return table column names in declaration order."""

    return [column_name(f) for f in employee_fields()]


def employee_to_params(employee: Employee) -> NamedParams:
    """Build the nine-key named parameter mapping for INSERT/UPDATE."""

    return {column_name(f): getattr(employee, f.name) for f in employee_fields()}


def id_params(employee_id: Any) -> NamedParams:
    """Build the single-key mapping used by lookups and deletes.

    The identifier is bound as given; no coercion to the column type.
    """

    return {ID_PARAM: employee_id}
