"""
repositories/employee_repo.py
-----------------------------
Data access layer for employee records.
All SQL queries related to the `employees` table live here.
"""

from db.connection import get_connection, release_connection
from models.employee import Employee
from models.result import OperationResult
from repositories.base import db_operation
from utils.logger import get_logger

logger = get_logger(__name__)

INSERT_SQL = "INSERT INTO employees (name, department, salary) VALUES (%s, %s, %s) RETURNING id;"
SELECT_BY_ID_SQL = "SELECT id, name, department, salary FROM employees WHERE id = %s;"
SELECT_ALL_SQL = "SELECT id, name, department, salary FROM employees ORDER BY id;"
UPDATE_SQL = "UPDATE employees SET name = %s, department = %s, salary = %s WHERE id = %s;"
DELETE_SQL = "DELETE FROM employees WHERE id = %s;"


class EmployeeRepository:
    """Repository for CRUD operations on the employees table."""

    # ── CREATE ────────────────────────────────────────────

    @db_operation("add employee")
    def create(self, employee: Employee) -> OperationResult:
        """
        Insert a new employee record.

        Args:
            employee: The Employee to persist (id must be None).

        Returns:
            OK with the same Employee, its `id` now populated.
        """
        if employee.is_persisted():
            raise ValueError(f"Employee #{employee.id} is already persisted")

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(INSERT_SQL, (employee.name, employee.department, employee.salary))
                new_id = cur.fetchone()[0]
            conn.commit()
            employee.id = new_id
            logger.info(f"Added employee #{employee.id} ({employee.name})")
            return OperationResult.success(employee, rows_affected=1)
        except Exception:
            if not conn.closed:
                conn.rollback()
            raise
        finally:
            release_connection(conn)

    # ── READ ──────────────────────────────────────────────

    @db_operation("list employees", default=list)
    def read_all(self) -> OperationResult:
        """
        Fetch every employee.

        Returns:
            OK with a list of Employee objects ordered by id ascending
            (possibly empty).
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(SELECT_ALL_SQL)
                employees = [self._row_to_employee(r) for r in cur.fetchall()]
            return OperationResult.success(employees)
        finally:
            release_connection(conn)

    @db_operation("fetch employee")
    def read_by_id(self, employee_id: int) -> OperationResult:
        """
        Fetch a single employee by ID.

        Returns:
            OK with the Employee, or NOT_FOUND if no row matches.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(SELECT_BY_ID_SQL, (employee_id,))
                row = cur.fetchone()
            if row is None:
                return OperationResult.missing()
            return OperationResult.success(self._row_to_employee(row))
        finally:
            release_connection(conn)

    # ── UPDATE ────────────────────────────────────────────

    @db_operation("update employee")
    def update(self, employee: Employee) -> OperationResult:
        """
        Update an existing employee record.

        Args:
            employee: Employee with updated fields (must have id set).

        Returns:
            OK with rows_affected if a row changed, NOT_FOUND otherwise.
        """
        if not employee.is_persisted():
            raise ValueError("Cannot update an employee without an id")

        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(UPDATE_SQL, (
                    employee.name, employee.department, employee.salary, employee.id,
                ))
                affected = cur.rowcount
            conn.commit()
        except Exception:
            if not conn.closed:
                conn.rollback()
            raise
        finally:
            release_connection(conn)

        if affected > 0:
            logger.info(f"Updated employee #{employee.id}")
            return OperationResult.success(employee, rows_affected=affected)
        return OperationResult.missing()

    # ── DELETE ────────────────────────────────────────────

    @db_operation("delete employee")
    def delete(self, employee_id: int) -> OperationResult:
        """
        Delete an employee by ID.

        Returns:
            OK with rows_affected if a row was deleted, NOT_FOUND otherwise.
        """
        conn = get_connection()
        try:
            with conn.cursor() as cur:
                cur.execute(DELETE_SQL, (employee_id,))
                affected = cur.rowcount
            conn.commit()
        except Exception:
            if not conn.closed:
                conn.rollback()
            raise
        finally:
            release_connection(conn)

        if affected > 0:
            logger.info(f"Deleted employee #{employee_id}")
            return OperationResult.success(rows_affected=affected)
        return OperationResult.missing()

    # ── HELPERS ───────────────────────────────────────────

    @staticmethod
    def _row_to_employee(row: tuple) -> Employee:
        """Convert a database row tuple to an Employee domain object."""
        return Employee(
            id=row[0],
            name=row[1],
            department=row[2],
            salary=float(row[3]),
        )
