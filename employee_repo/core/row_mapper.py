"""Row mapping from raw DB rows to `Employee` values.

Drivers disagree on how they hand back temporal and boolean columns: sqlite3
returns ISO strings and 0/1 integers, pymysql returns `timedelta` for TIME
and single bytes for BIT(1), psycopg returns native objects. The mapper
normalizes all of them into the annotated field types.
"""

from __future__ import annotations

from datetime import date, datetime, time, timedelta
from decimal import Decimal
from typing import Any, Callable, Dict, Type

from .models import Employee, column_name, employee_fields, employee_type_hints, unwrap_optional
from .types import RowMapping

_TRUE_STRINGS = frozenset({"1", "true", "t", "yes", "y"})
_FALSE_STRINGS = frozenset({"0", "false", "f", "no", "n"})


class EmployeeRowMapper:
    """Callable mapper turning one row mapping into an `Employee`.

    Column lookup is case-insensitive. A missing column raises `KeyError`;
    a value that cannot be converted to the field type raises `ValueError`.
    """

    def __call__(self, row: RowMapping) -> Employee:
        normalized = {str(key).upper(): value for key, value in row.items()}
        hints = employee_type_hints()
        values: Dict[str, Any] = {}
        for f in employee_fields():
            column = column_name(f)
            if column not in normalized:
                raise KeyError(f"Row has no column {column!r} for Employee.{f.name}.")
            values[f.name] = deserialize_column(column, normalized[column], hints[f.name])
        return Employee(**values)


map_employee_row = EmployeeRowMapper()


def deserialize_column(column: str, value: Any, annotation: Any) -> Any:
    """Convert one DB value into the Python type named by `annotation`."""

    if value is None:
        return None

    target = unwrap_optional(annotation)
    converter = _CONVERTERS.get(target)
    if converter is None:
        return value
    try:
        return converter(value)
    except (TypeError, ValueError, ArithmeticError) as exc:
        raise ValueError(
            f"Cannot convert column {column!r} value {value!r} "
            f"to {getattr(target, '__name__', target)}."
        ) from exc


def _to_int(value: Any) -> int:
    if isinstance(value, bool):
        raise TypeError("bool is not an identifier")
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        if value != int(value):
            raise ValueError("non-integral value")
        return int(value)
    if isinstance(value, str):
        return int(value.strip())
    raise TypeError(type(value).__name__)


def _to_float(value: Any) -> float:
    if isinstance(value, bool):
        raise TypeError("bool is not a number")
    if isinstance(value, (int, float, Decimal, str)):
        return float(value)
    raise TypeError(type(value).__name__)


def _to_str(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8")
    raise TypeError(type(value).__name__)


def _to_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, Decimal)) and value in (0, 1):
        return bool(value)
    if isinstance(value, (bytes, bytearray)) and len(value) == 1:
        return value != b"\x00"
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_STRINGS:
            return True
        if lowered in _FALSE_STRINGS:
            return False
    raise ValueError("not a boolean flag")


def _to_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        if len(text) > 10:
            return datetime.fromisoformat(text).date()
        return date.fromisoformat(text)
    raise TypeError(type(value).__name__)


def _to_time(value: Any) -> time:
    if isinstance(value, time):
        return value
    if isinstance(value, datetime):
        return value.time()
    if isinstance(value, timedelta):
        if not timedelta(0) <= value < timedelta(days=1):
            raise ValueError("TIME value out of day range")
        return (datetime.min + value).time()
    if isinstance(value, str):
        return time.fromisoformat(value.strip())
    raise TypeError(type(value).__name__)


def _to_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        return datetime.fromisoformat(value.strip())
    raise TypeError(type(value).__name__)


_CONVERTERS: Dict[Type[Any], Callable[[Any], Any]] = {
    int: _to_int,
    float: _to_float,
    str: _to_str,
    bool: _to_bool,
    date: _to_date,
    time: _to_time,
    datetime: _to_datetime,
}
