from __future__ import annotations

import unittest
from datetime import date, datetime, time
from unittest.mock import MagicMock, sentinel

from employee_repo import Employee, EmployeeRepository


def _employee() -> Employee:
    return Employee(
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


EXPECTED_EMPLOYEE_PARAMS = {
    "ID": 1,
    "FIRST_NAME": "Nikki Nicholas",
    "MIDDLE_NAME": "Domingo",
    "LAST_NAME": "Romero",
    "SALARY": 15000.0,
    "SOME_DATE": date(2020, 7, 2),
    "SOME_TIME": time(7, 9),
    "SOME_DATETIME": datetime(2020, 7, 2, 7, 9),
    "ACTIVE": True,
}


class EmployeeRepositoryTests(unittest.TestCase):
    def setUp(self) -> None:
        self.executor = MagicMock()
        self.row_mapper = MagicMock()
        self.employees = [sentinel.first, sentinel.second]
        self.executor.query.return_value = self.employees
        self.repo = EmployeeRepository(self.executor, self.row_mapper)

    def test_find_all(self) -> None:
        actual = self.repo.find_all()

        self.assertIs(actual, self.employees)
        self.executor.query.assert_called_once_with("SELECT * FROM EMPLOYEES", self.row_mapper)
        self.executor.update.assert_not_called()

    def test_find_all_empty_table_returns_empty_list(self) -> None:
        self.executor.query.return_value = []
        self.assertEqual(self.repo.find_all(), [])

    def test_find_by_id(self) -> None:
        actual = self.repo.find_by_id("1")

        self.assertIs(actual, sentinel.first)
        self.executor.query.assert_called_once()
        sql, mapper, params = self.executor.query.call_args.args
        self.assertEqual(sql, "SELECT * FROM EMPLOYEES WHERE ID = :ID")
        self.assertIs(mapper, self.row_mapper)
        self.assertEqual(params, {"ID": "1"})
        self.assertIsInstance(params["ID"], str)

    def test_find_by_id_without_match_raises_index_error(self) -> None:
        self.executor.query.return_value = []
        with self.assertRaises(IndexError):
            self.repo.find_by_id("404")

    def test_save(self) -> None:
        self.assertIsNone(self.repo.save(_employee()))

        self.executor.update.assert_called_once()
        sql, params = self.executor.update.call_args.args
        self.assertEqual(
            sql,
            "INSERT INTO EMPLOYEES (ID, FIRST_NAME, MIDDLE_NAME, LAST_NAME, "
            "SALARY, SOME_DATE, SOME_TIME, SOME_DATETIME, ACTIVE)  VALUES "
            "(:ID, :FIRST_NAME, :MIDDLE_NAME, :LAST_NAME, :SALARY, "
            ":SOME_DATE, :SOME_TIME, :SOME_DATETIME, :ACTIVE)",
        )
        self.assertEqual(len(params), 9)
        self.assertEqual(params, EXPECTED_EMPLOYEE_PARAMS)

    def test_update(self) -> None:
        self.assertIsNone(self.repo.update(_employee()))

        self.executor.update.assert_called_once()
        sql, params = self.executor.update.call_args.args
        self.assertEqual(
            sql,
            "UPDATE EMPLOYEES SET FIRST_NAME = :FIRST_NAME, MIDDLE_NAME = :MIDDLE_NAME, "
            "LAST_NAME = :LAST_NAME, SALARY = :SALARY, SOME_DATE = :SOME_DATE, "
            "SOME_TIME = :SOME_TIME, SOME_DATETIME = :SOME_DATETIME, ACTIVE = :ACTIVE WHERE ID = :ID",
        )
        self.assertEqual(params, EXPECTED_EMPLOYEE_PARAMS)

    def test_update_ignores_affected_row_count(self) -> None:
        self.executor.update.return_value = 0
        self.assertIsNone(self.repo.update(_employee()))

    def test_delete(self) -> None:
        self.assertIsNone(self.repo.delete("1"))

        self.executor.update.assert_called_once_with(
            "DELETE FROM EMPLOYEES WHERE ID = :ID", {"ID": "1"}
        )

    def test_delete_twice_is_harmless(self) -> None:
        self.executor.update.side_effect = [1, 0]

        self.repo.delete("1")
        self.repo.delete("1")

        self.assertEqual(self.executor.update.call_count, 2)

    def test_store_errors_propagate_unchanged(self) -> None:
        error = RuntimeError("duplicate key")
        self.executor.update.side_effect = error

        with self.assertRaises(RuntimeError) as ctx:
            self.repo.save(_employee())
        self.assertIs(ctx.exception, error)

    def test_debug_records_carry_operation_names_only(self) -> None:
        with self.assertLogs("employee_repo.core.repository", level="DEBUG") as logs:
            self.repo.find_by_id("1")
            self.repo.save(_employee())
            self.repo.update(_employee())
            self.repo.delete("1")

        messages = [record.getMessage() for record in logs.records]
        self.assertEqual(messages, ["find_by_id", "save", "update", "delete"])
        for record in logs.records:
            self.assertEqual(record.args, ())

    def test_each_call_builds_a_fresh_mapping(self) -> None:
        self.repo.delete("1")
        self.repo.delete("2")

        first = self.executor.update.call_args_list[0].args[1]
        second = self.executor.update.call_args_list[1].args[1]
        self.assertIsNot(first, second)
        self.assertEqual(first, {"ID": "1"})


if __name__ == "__main__":
    unittest.main()
