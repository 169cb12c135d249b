"""
models/result.py
----------------
Typed outcomes returned by the data-access layer.
Driver exceptions never leave a repository; they are converted into
an OperationResult carrying a DbError instead.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import psycopg2


class Status(str, Enum):
    OK = "ok"
    NOT_FOUND = "not_found"
    CONSTRAINT_VIOLATION = "constraint_violation"
    CONNECTION_FAILURE = "connection_failure"
    DATABASE_ERROR = "database_error"


@dataclass(frozen=True)
class DbError:
    """
    Diagnostic details of a failed statement.

    Attributes:
        sqlstate: Five-character SQLSTATE, or None if the server never answered.
        error_code: Driver exception class name (e.g. 'UniqueViolation').
        message: Primary error message.
    """
    sqlstate: Optional[str]
    error_code: str
    message: str

    @classmethod
    def from_exception(cls, exc: psycopg2.Error) -> "DbError":
        message = (getattr(exc, "pgerror", None) or str(exc)).strip()
        return cls(
            sqlstate=getattr(exc, "pgcode", None),
            error_code=type(exc).__name__,
            message=message.splitlines()[0] if message else "unknown error",
        )

    def __str__(self) -> str:
        return f"SQL State: {self.sqlstate or 'n/a'} | Error Code: {self.error_code} | Message: {self.message}"


def classify(exc: psycopg2.Error) -> Status:
    """Map a psycopg2 exception onto a failure status."""
    if isinstance(exc, psycopg2.IntegrityError):
        return Status.CONSTRAINT_VIOLATION
    if isinstance(exc, psycopg2.OperationalError):
        return Status.CONNECTION_FAILURE
    return Status.DATABASE_ERROR


@dataclass
class OperationResult:
    """
    Outcome of one repository call.

    `value` holds the record for single-row reads and creates, the list of
    records for read_all, and None otherwise.
    """
    status: Status
    value: Any = None
    rows_affected: int = 0
    error: Optional[DbError] = None

    @property
    def ok(self) -> bool:
        return self.status is Status.OK

    @property
    def not_found(self) -> bool:
        return self.status is Status.NOT_FOUND

    @property
    def failed(self) -> bool:
        return self.error is not None

    @classmethod
    def success(cls, value: Any = None, rows_affected: int = 0) -> "OperationResult":
        return cls(Status.OK, value=value, rows_affected=rows_affected)

    @classmethod
    def missing(cls) -> "OperationResult":
        return cls(Status.NOT_FOUND)

    @classmethod
    def failure(cls, exc: psycopg2.Error, value: Any = None) -> "OperationResult":
        return cls(classify(exc), value=value, error=DbError.from_exception(exc))
