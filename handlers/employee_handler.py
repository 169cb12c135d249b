"""
handlers/employee_handler.py
----------------------------
Handles the add / view / update / delete menu actions.
Collects field values from the console and delegates to EmployeeService.
"""

import math
from typing import Optional

from handlers.console import Console
from services.employee_service import EmployeeService
from utils.logger import get_logger

logger = get_logger(__name__)

PG_INT_MIN = -(2 ** 31)
PG_INT_MAX = 2 ** 31 - 1


def parse_salary(text: str) -> float:
    """
    Parse a salary typed by the user.

    Raises:
        ValueError: If the text is not a finite number.
    """
    text = text.strip()
    if "_" in text:
        raise ValueError(f"salary must be a plain number, got {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"salary must be a finite number, got {text!r}")
    return value


def parse_employee_id(text: str) -> int:
    """
    Parse an employee ID typed by the user.

    Raises:
        ValueError: If the text is not a plain integer that fits the
            id column (PostgreSQL `integer`).
    """
    text = text.strip()
    if "_" in text:
        raise ValueError(f"employee id must be a plain integer, got {text!r}")
    value = int(text)
    if not PG_INT_MIN <= value <= PG_INT_MAX:
        raise ValueError(f"employee id out of range: {value}")
    return value


def _ask_employee_id(console: Console, prompt: str) -> Optional[int]:
    raw = console.ask(prompt)
    try:
        return parse_employee_id(raw)
    except ValueError:
        console.error("[ERROR] Invalid ID format.")
        return None


def add_employee(console: Console, service: EmployeeService) -> None:
    """Menu 1: prompt for a new employee and save it."""
    console.say("\n--- ADD EMPLOYEE ---")
    name = console.ask("Enter Name: ").strip()
    department = console.ask("Enter Department: ").strip()
    raw_salary = console.ask("Enter Salary: ")

    try:
        salary = parse_salary(raw_salary)
    except ValueError:
        console.error("[ERROR] Invalid salary format. Aborting addition.")
        return

    console.say()
    console.report(service.add_employee(name, department, salary))


def view_all_employees(console: Console, service: EmployeeService) -> None:
    """Menu 2: print the employee table."""
    console.say("\n--- ALL EMPLOYEES ---")
    console.report(service.list_employees())


def update_employee(console: Console, service: EmployeeService) -> None:
    """
    Menu 3: edit an existing employee.

    Blank answers keep the current value; an unparseable salary keeps
    the current salary and the update still goes ahead.
    """
    console.say("\n--- UPDATE EMPLOYEE ---")
    employee_id = _ask_employee_id(console, "Enter Employee ID to update: ")
    if employee_id is None:
        return

    result = service.find_employee(employee_id)
    if result.not_found:
        console.say(f"[WARNING] Employee with ID {employee_id} not found.")
        return
    if result.failed:
        console.error(service.describe_failure(result, f"load employee ID {employee_id}"))
        return

    employee = result.value
    console.say(f"\nCurrent Data: {employee}")

    new_name = console.ask(f"Enter new Name (Current: {employee.name}): ")
    if new_name.strip():
        employee.name = new_name.strip()

    new_dept = console.ask(f"Enter new Department (Current: {employee.department or ''}): ")
    if new_dept.strip():
        employee.department = new_dept.strip()

    new_salary = console.ask(f"Enter new Salary (Current: {employee.salary:.2f}): ")
    if new_salary.strip():
        try:
            employee.salary = parse_salary(new_salary)
        except ValueError:
            console.error("[ERROR] Invalid salary format. Keeping original salary.")

    console.say()
    console.report(service.update_employee(employee))


def delete_employee(console: Console, service: EmployeeService) -> None:
    """Menu 4: delete an employee by ID."""
    console.say("\n--- DELETE EMPLOYEE ---")
    employee_id = _ask_employee_id(console, "Enter Employee ID to delete: ")
    if employee_id is None:
        return

    console.say()
    console.report(service.delete_employee(employee_id))
