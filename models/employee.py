"""
models/employee.py
------------------
Domain model for employee records.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Employee:
    """
    Represents a single employee row.

    Attributes:
        name: Full name (required).
        salary: Salary amount (required).
        department: Department name, or None when not set.
        id: Database primary key (None for new records). Once the
            database has assigned it, it can no longer be changed.
    """
    name: str
    salary: float
    department: Optional[str] = None
    id: Optional[int] = None

    def __setattr__(self, key, value):
        if key == "id" and getattr(self, "id", None) is not None:
            raise AttributeError(
                f"Employee id {self.id} is assigned by the database and cannot change"
            )
        super().__setattr__(key, value)

    def is_persisted(self) -> bool:
        """Returns True once the database has assigned an id."""
        return self.id is not None

    def __str__(self) -> str:
        emp_id = "" if self.id is None else self.id
        return (
            f"| ID: {emp_id:<4} | Name: {self.name:<20} | "
            f"Dept: {self.department or '':<15} | Salary: ${self.salary:,.2f} |"
        )
