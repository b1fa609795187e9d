"""Repository for CRUD operations on the `EMPLOYEES` table."""

from __future__ import annotations

import logging
from typing import List

from .contracts import RowMapper, SqlExecutor
from .models import Employee, employee_to_params, id_params

logger = logging.getLogger(__name__)

FIND_ALL = "SELECT * FROM EMPLOYEES"
FIND_BY_ID = "SELECT * FROM EMPLOYEES WHERE ID = :ID"
INSERT = (
    "INSERT INTO EMPLOYEES (ID, FIRST_NAME, MIDDLE_NAME, LAST_NAME, SALARY, SOME_DATE, SOME_TIME, SOME_DATETIME, ACTIVE) "
    " VALUES (:ID, :FIRST_NAME, :MIDDLE_NAME, :LAST_NAME, :SALARY, :SOME_DATE, :SOME_TIME, :SOME_DATETIME, :ACTIVE)"
)
UPDATE = (
    "UPDATE EMPLOYEES SET FIRST_NAME = :FIRST_NAME, MIDDLE_NAME = :MIDDLE_NAME, LAST_NAME = :LAST_NAME, "
    "SALARY = :SALARY, SOME_DATE = :SOME_DATE, SOME_TIME = :SOME_TIME, SOME_DATETIME = :SOME_DATETIME, ACTIVE = :ACTIVE WHERE ID = :ID"
)
DELETE = "DELETE FROM EMPLOYEES WHERE ID = :ID"


class EmployeeRepository:
    """CRUD repository backed by a `SqlExecutor` and an `Employee` row mapper.

    Each call issues exactly one statement. The repository holds no state of
    its own, does not open transactions, and lets store errors propagate.
    """

    def __init__(self, executor: SqlExecutor, row_mapper: RowMapper[Employee]):
        """Create repository.

        Args:
            executor: Executes SQL templates with named parameters.
            row_mapper: Maps one result row to an `Employee`.
        """

        self.executor = executor
        self.row_mapper = row_mapper

    def find_all(self) -> List[Employee]:
        """Return every employee in store order."""

        logger.debug("find_all")
        return self.executor.query(FIND_ALL, self.row_mapper)

    def find_by_id(self, id: str) -> Employee:
        """Return the first employee matching `id`.

        Raises:
            IndexError: If no row matches.
        """

        logger.debug("find_by_id")
        return self.executor.query(FIND_BY_ID, self.row_mapper, id_params(id))[0]

    def save(self, employee: Employee) -> None:
        """Insert `employee`; the caller supplies its `id`."""

        logger.debug("save")
        self.executor.update(INSERT, employee_to_params(employee))

    def update(self, employee: Employee) -> None:
        """Overwrite the row with `employee.id`; no-op when it does not exist."""

        logger.debug("update")
        self.executor.update(UPDATE, employee_to_params(employee))

    def delete(self, id: str) -> None:
        """Delete the row with `id`; no-op when it does not exist."""

        logger.debug("delete")
        self.executor.update(DELETE, id_params(id))
