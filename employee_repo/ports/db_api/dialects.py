"""Concrete SQL dialect implementations for DB-API adapters.

SQL templates are written once with `:NAME` placeholders; each dialect
rewrites them into the paramstyle its driver expects.
"""

from __future__ import annotations

import re
from datetime import date, time
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple, Type

from ...core.types import NamedParams, QueryParams

# Single-quoted literals are matched first so placeholders inside them are
# left alone. `::` casts are skipped by the lookbehind.
_PLACEHOLDER_RE = re.compile(r"'(?:[^']|'')*'|(?<!:):([A-Za-z_][A-Za-z0-9_]*)")
_PARAMSTYLES = frozenset({"named", "pyformat", "qmark", "format"})


def _escape(text: str, escape_percent: bool) -> str:
    return text.replace("%", "%%") if escape_percent else text


class Dialect:
    """Base dialect that defines placeholder and value binding behavior."""

    name: str = "generic"
    paramstyle: str = "named"

    def placeholder(self, key: str) -> str:
        """Return parameter placeholder for current param style."""

        if self.paramstyle == "named":
            return f":{key}"
        if self.paramstyle == "pyformat":
            return f"%({key})s"
        if self.paramstyle == "qmark":
            return "?"
        if self.paramstyle == "format":
            return "%s"
        raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def compile(self, sql: str, params: Optional[NamedParams]) -> Tuple[str, QueryParams]:
        """Rewrite `:NAME` placeholders and bind `params` for the driver.

        Returns the driver SQL plus either a dict (`named`/`pyformat`) or a
        positional list (`qmark`/`format`), or `None` when `params` is `None`.

        Raises:
            ValueError: If a placeholder has no value in `params`, or the
                paramstyle is unsupported.
        """

        if self.paramstyle not in _PARAMSTYLES:
            raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")
        if params is None:
            return sql, None

        escape_percent = self.paramstyle in {"format", "pyformat"}
        parts: List[str] = []
        ordered: List[Any] = []
        used: NamedParams = {}
        last = 0
        for match in _PLACEHOLDER_RE.finditer(sql):
            parts.append(_escape(sql[last : match.start()], escape_percent))
            key = match.group(1)
            if key is None:
                parts.append(_escape(match.group(0), escape_percent))
            else:
                if key not in params:
                    raise ValueError(f"Missing value for SQL parameter {key!r}.")
                value = self.adapt_value(params[key])
                used[key] = value
                ordered.append(value)
                parts.append(self.placeholder(key))
            last = match.end()
        parts.append(_escape(sql[last:], escape_percent))

        compiled = "".join(parts)
        if self.paramstyle in {"qmark", "format"}:
            return compiled, ordered
        return compiled, used

    def adapt_value(self, value: Any) -> Any:
        """Convert one bound value into a type the driver accepts."""

        return value


class SQLiteDialect(Dialect):
    """SQLite dialect (`:name` parameters, ISO text for temporal values)."""

    name = "sqlite"
    paramstyle = "named"

    def adapt_value(self, value: Any) -> Any:
        if isinstance(value, (date, time)):
            return value.isoformat()
        if isinstance(value, Decimal):
            return str(value)
        return value


class PostgresDialect(Dialect):
    """PostgreSQL dialect (`%s` positional parameters)."""

    name = "postgres"
    paramstyle = "format"


class MySQLDialect(Dialect):
    """MySQL dialect (`%s` positional parameters)."""

    name = "mysql"
    paramstyle = "format"


_DIALECTS: Dict[str, Type[Dialect]] = {
    "sqlite": SQLiteDialect,
    "postgres": PostgresDialect,
    "postgresql": PostgresDialect,
    "mysql": MySQLDialect,
}


def dialect_for(name: str) -> Dialect:
    """Resolve a dialect instance by name.

    Raises:
        ValueError: If `name` is not a known dialect.
    """

    try:
        return _DIALECTS[name.strip().lower()]()
    except KeyError:
        allowed = ", ".join(sorted(_DIALECTS))
        raise ValueError(f"Unknown dialect {name!r}; expected one of: {allowed}.") from None
