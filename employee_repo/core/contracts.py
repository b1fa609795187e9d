"""Collaborator contracts consumed by `EmployeeRepository`."""

from __future__ import annotations

from typing import Any, List, Optional, Protocol, TypeVar

from .types import NamedParams, QueryParams, RowMapping

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


class RowMapper(Protocol[T_co]):
    """Pure function converting one result row into a domain value."""

    def __call__(self, row: RowMapping) -> T_co: ...


class DialectPort(Protocol):
    """Dialect behavior required to bind named parameters for a driver."""

    name: str
    paramstyle: str

    def compile(self, sql: str, params: Optional[NamedParams]) -> tuple[str, QueryParams]: ...

    def adapt_value(self, value: Any) -> Any: ...


class SqlExecutor(Protocol):
    """Executes SQL templates with `:NAME` placeholders against a store.

    `query` maps each result row through `row_mapper`; `update` returns the
    affected-row count reported by the driver.
    """

    def query(
        self,
        sql: str,
        row_mapper: RowMapper[T],
        params: Optional[NamedParams] = None,
    ) -> List[T]: ...

    def update(self, sql: str, params: Optional[NamedParams] = None) -> int: ...
