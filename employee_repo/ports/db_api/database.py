"""DB-API adapter implementing the `SqlExecutor` contract."""

from __future__ import annotations

import contextlib
import logging
from typing import Any, Iterator, List, Mapping, Optional, TypeVar

from ...core.contracts import DialectPort, RowMapper
from ...core.types import MaybeRow, NamedParams, RowMapping, Rows

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Database:
    """Thin DB-API wrapper that binds named parameters and normalizes rows.

    With `autocommit=True` (the default) every `query`/`update` call outside
    a `transaction()` block is committed, or rolled back on error, as its own
    unit of work.
    """

    def __init__(self, conn: Any, dialect: DialectPort, *, autocommit: bool = True):
        """Create database adapter.

        Args:
            conn: DB-API connection object.
            dialect: Concrete SQL dialect instance.
            autocommit: Commit each standalone `query`/`update` call.
        """

        self.conn: Any | None = conn
        self.dialect = dialect
        self.autocommit = autocommit
        self._closed = False
        self._transaction_depth = 0

    def _require_open_connection(self) -> Any:
        if self._closed or self.conn is None:
            raise RuntimeError("connection is closed")
        return self.conn

    def _should_begin_sqlite_transaction(self, conn: Any) -> bool:
        if getattr(self.dialect, "name", "").lower() != "sqlite":
            return False
        if getattr(conn, "isolation_level", None) is not None:
            return False
        return not bool(getattr(conn, "in_transaction", False))

    @contextlib.contextmanager
    def transaction(self) -> Iterator[None]:
        """Provide commit/rollback transaction scope.

        Nested scopes join the outermost one.
        """

        conn = self._require_open_connection()
        if self._transaction_depth:
            self._transaction_depth += 1
            try:
                yield
            finally:
                self._transaction_depth -= 1
            return

        self._transaction_depth = 1
        try:
            if self._should_begin_sqlite_transaction(conn):
                conn.execute("BEGIN")
            yield
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            self._transaction_depth = 0

    @contextlib.contextmanager
    def _unit_of_work(self) -> Iterator[None]:
        if not self.autocommit or self._transaction_depth:
            yield
            return
        with self.transaction():
            yield

    def execute(self, sql: str, params: Optional[NamedParams] = None) -> Any:
        """Execute SQL with optional named parameters and return cursor."""

        conn = self._require_open_connection()
        compiled, bound = self.dialect.compile(sql, params)
        logger.debug(
            "execute %s params=%s", compiled, sorted(params) if params else []
        )
        cur = conn.cursor()
        if bound is None:
            cur.execute(compiled)
        else:
            cur.execute(compiled, bound)
        return cur

    def _row_to_mapping(self, cursor: Any, row: Any) -> RowMapping:
        """Normalize row object to mapping.

        Supports mapping rows directly and tuple/list rows via
        `cursor.description`.
        """

        if isinstance(row, Mapping):
            return row

        if isinstance(row, (tuple, list)):
            desc = getattr(cursor, "description", None)
            if not desc:
                raise TypeError(
                    "Cursor has no description; cannot map tuple rows to dict."
                )
            cols = [d[0] for d in desc]
            return dict(zip(cols, row))

        keys = getattr(row, "keys", None)
        if callable(keys):
            return {key: row[key] for key in keys()}

        raise TypeError(f"Unsupported row type: {type(row)}")

    def fetchone(self, sql: str, params: Optional[NamedParams] = None) -> MaybeRow:
        """Execute query and return one normalized row mapping."""

        cur = self.execute(sql, params)
        row = cur.fetchone()
        if row is None:
            return None
        return self._row_to_mapping(cur, row)

    def fetchall(self, sql: str, params: Optional[NamedParams] = None) -> Rows:
        """Execute query and return all rows as normalized mappings."""

        cur = self.execute(sql, params)
        rows = cur.fetchall()
        return [self._row_to_mapping(cur, r) for r in rows]

    def query(
        self,
        sql: str,
        row_mapper: RowMapper[T],
        params: Optional[NamedParams] = None,
    ) -> List[T]:
        """Execute query and map every row through `row_mapper`."""

        with self._unit_of_work():
            rows = self.fetchall(sql, params)
        return [row_mapper(row) for row in rows]

    def update(self, sql: str, params: Optional[NamedParams] = None) -> int:
        """Execute a DML statement and return the affected-row count."""

        with self._unit_of_work():
            cur = self.execute(sql, params)
        rowcount = getattr(cur, "rowcount", None)
        if rowcount is None or rowcount < 0:
            return 0
        return rowcount

    def close(self) -> None:
        """Close underlying connection."""

        if self._closed:
            return
        conn = self.conn
        self._closed = True
        self.conn = None
        close = getattr(conn, "close", None)
        if callable(close):
            close()

    def __enter__(self) -> Database:
        return self

    def __exit__(self, exc_type: Any, exc: Any, tb: Any) -> None:
        self.close()
