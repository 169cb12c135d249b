"""
services/employee_service.py
----------------------------
Business logic for managing employee records.
Sits between the console handlers and the EmployeeRepository and turns
repository outcomes into user-facing messages.
"""

from typing import Optional

from models.employee import Employee
from models.result import OperationResult, Status
from repositories.employee_repo import EmployeeRepository
from utils.logger import get_logger

logger = get_logger(__name__)

RULE = "-" * 87

_FAILURE_LABELS = {
    Status.CONSTRAINT_VIOLATION: "Constraint violation",
    Status.CONNECTION_FAILURE: "Database unreachable",
    Status.DATABASE_ERROR: "Database error",
}


class EmployeeService:
    """
    Handles all business logic related to employees.

    Workflow:
        1. Receive parsed field values from the handler.
        2. Persist or query via the repository.
        3. Return a user-friendly response line.
    """

    def __init__(self, repo: Optional[EmployeeRepository] = None):
        self.repo = repo or EmployeeRepository()

    def add_employee(self, name: str, department: Optional[str], salary: float) -> str:
        """
        Persist a new employee.

        Returns:
            Success message with the new ID, or an [ERROR] line.
        """
        employee = Employee(name=name, department=department or None, salary=salary)
        result = self.repo.create(employee)
        if result.ok:
            return f"[SUCCESS] Employee added successfully (ID {result.value.id})."
        return self.describe_failure(result, "add employee")

    def list_employees(self) -> str:
        """Render every employee as a fixed-width table."""
        result = self.repo.read_all()
        if result.failed:
            return self.describe_failure(result, "load employees")
        if not result.value:
            return "No employees found in the database."

        lines = [RULE]
        lines.extend(str(e) for e in result.value)
        lines.append(RULE)
        return "\n".join(lines)

    def find_employee(self, employee_id: int) -> OperationResult:
        """Look up one employee; the caller inspects the tagged result."""
        return self.repo.read_by_id(employee_id)

    def update_employee(self, employee: Employee) -> str:
        """Save the employee's current field values."""
        result = self.repo.update(employee)
        if result.ok:
            return f"[SUCCESS] Employee ID {employee.id} updated successfully."
        if result.not_found:
            return f"[FAILURE] Employee ID {employee.id} not found or no changes made."
        return self.describe_failure(result, f"update employee ID {employee.id}")

    def delete_employee(self, employee_id: int) -> str:
        """Delete an employee by ID."""
        result = self.repo.delete(employee_id)
        if result.ok:
            return f"[SUCCESS] Employee ID {employee_id} deleted successfully."
        if result.not_found:
            return f"[FAILURE] Employee ID {employee_id} not found."
        return self.describe_failure(result, f"delete employee ID {employee_id}")

    @staticmethod
    def describe_failure(result: OperationResult, action: str) -> str:
        """One-line console message for a failed repository call."""
        label = _FAILURE_LABELS.get(result.status, "Database error")
        detail = result.error.message if result.error else "unknown error"
        return f"[ERROR] Could not {action}. {label}: {detail}"
