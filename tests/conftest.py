"""
Shared test fixtures for the employee manager tests.

The database is replaced by an in-memory stand-in for a psycopg2
connection, installed by patching ``psycopg2.connect``. It understands
exactly the statements the application issues.
"""
import io
from decimal import Decimal

import psycopg2
import psycopg2.errors
import pytest

from handlers.console import Console
from services.employee_service import EmployeeService


class FakeCursor:
    def __init__(self, conn: "FakeConnection"):
        self.conn = conn
        self.db = conn.db
        self.rowcount = -1
        self._rows: list[tuple] = []

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def execute(self, sql, params=None):
        params = tuple(params or ())
        self.db.statements.append((sql, params))
        if self.db.drop_with is not None:
            # server went away mid-statement; psycopg2 marks the connection broken
            self.conn.closed = 2
            raise self.db.drop_with
        if self.db.fail_with is not None:
            raise self.db.fail_with

        code = "\n".join(l for l in sql.splitlines() if not l.strip().startswith("--"))
        stmt = " ".join(code.split()).upper()
        if stmt.startswith("CREATE TABLE"):
            self.db.schema_created = True
            self._set([], -1)
        elif stmt.startswith("INSERT INTO EMPLOYEES"):
            name, department, salary = params
            if name is None or salary is None:
                raise psycopg2.errors.NotNullViolation(
                    'null value in column "name" violates not-null constraint'
                )
            self.db.next_id += 1
            self.db.rows[self.db.next_id] = (name, department, _numeric(salary))
            self._set([(self.db.next_id,)], 1)
        elif stmt.startswith("SELECT") and "WHERE ID" in stmt:
            (emp_id,) = params
            row = self.db.rows.get(emp_id)
            self._set([(emp_id, *row)] if row else [], 1 if row else 0)
        elif stmt.startswith("SELECT") and "ORDER BY ID" in stmt:
            rows = [(k, *v) for k, v in sorted(self.db.rows.items())]
            self._set(rows, len(rows))
        elif stmt.startswith("UPDATE EMPLOYEES"):
            name, department, salary, emp_id = params
            if emp_id in self.db.rows:
                self.db.rows[emp_id] = (name, department, _numeric(salary))
                self._set([], 1)
            else:
                self._set([], 0)
        elif stmt.startswith("DELETE FROM EMPLOYEES"):
            (emp_id,) = params
            self._set([], 1 if self.db.rows.pop(emp_id, None) else 0)
        else:
            raise psycopg2.ProgrammingError(f"unexpected statement: {sql}")

    def fetchone(self):
        return self._rows.pop(0) if self._rows else None

    def fetchall(self):
        rows, self._rows = self._rows, []
        return rows

    def _set(self, rows, rowcount):
        self._rows = list(rows)
        self.rowcount = rowcount


class FakeConnection:
    def __init__(self, db: "FakeDatabase"):
        self.db = db
        self.closed = False
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        if self.closed:
            raise psycopg2.InterfaceError("connection already closed")
        self.rollbacks += 1

    def close(self):
        self.closed = True


class FakeDatabase:
    """In-memory employees table plus bookkeeping for assertions."""

    def __init__(self):
        self.rows: dict[int, tuple] = {}
        self.next_id = 0
        self.connections: list[FakeConnection] = []
        self.statements: list[tuple] = []
        self.schema_created = False
        self.connect_error = None
        self.fail_with = None
        self.drop_with = None

    def connect(self, *args, **kwargs):
        if self.connect_error is not None:
            raise self.connect_error
        conn = FakeConnection(self)
        self.connections.append(conn)
        return conn


def _numeric(value):
    # NUMERIC(10,2) comes back from psycopg2 as Decimal
    return Decimal(f"{value:.2f}")


@pytest.fixture
def fake_db(monkeypatch):
    """Route every psycopg2.connect() call to an in-memory database."""
    db = FakeDatabase()
    monkeypatch.setattr(psycopg2, "connect", db.connect)
    return db


@pytest.fixture
def unreachable_db(fake_db):
    """A database whose connect() always fails."""
    fake_db.connect_error = psycopg2.OperationalError(
        'connection to server at "localhost", port 5432 failed: Connection refused'
    )
    return fake_db


@pytest.fixture
def service(fake_db):
    return EmployeeService()


@pytest.fixture
def make_console():
    """Build a Console fed by the given input lines; returns (console, stdout, stderr)."""
    def _make(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout, stderr = io.StringIO(), io.StringIO()
        return Console(stdin=stdin, stdout=stdout, stderr=stderr), stdout, stderr

    return _make
