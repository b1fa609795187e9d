"""Basic CRUD example for `EmployeeRepository` on SQLite."""

from __future__ import annotations

import logging
import sqlite3
import sys
from datetime import date, datetime, time
from pathlib import Path

# Allow running this script directly from repository root.
PROJECT_ROOT = next(
    (parent for parent in Path(__file__).resolve().parents if (parent / "employee_repo").exists()),
    None,
)
if PROJECT_ROOT and str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from employee_repo import (
    Database,
    Employee,
    EmployeeRepository,
    SQLiteDialect,
    apply_schema,
    map_employee_row,
)


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    # 1) Create DB adapter and repository.
    db = Database(sqlite3.connect(":memory:"), SQLiteDialect())
    repo = EmployeeRepository(db, map_employee_row)

    try:
        # 2) Create the EMPLOYEES table.
        apply_schema(db)

        # 3) Insert a row; the caller chooses the id.
        nikki = Employee(
            id=1,
            first_name="Nikki Nicholas",
            middle_name="Domingo",
            last_name="Romero",
            salary=15000.0,
            some_date=date(2020, 7, 2),
            some_time=time(7, 9),
            some_datetime=datetime(2020, 7, 2, 7, 9),
            active=True,
        )
        repo.save(nikki)

        # 4) Lookups take the id as a string.
        print("Fetched by id:", repo.find_by_id("1"))

        # 5) Update every column of the row with the same id.
        nikki.salary = 16500.0
        repo.update(nikki)
        print("All employees:", repo.find_all())

        # 6) Delete; deleting again is a no-op.
        repo.delete("1")
        repo.delete("1")
        print("After delete:", repo.find_all())
    finally:
        db.close()


if __name__ == "__main__":
    main()
