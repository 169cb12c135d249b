"""
handlers/menu_handler.py
------------------------
The interactive menu loop.
"""

from handlers.console import Console
from handlers.employee_handler import (
    add_employee,
    delete_employee,
    update_employee,
    view_all_employees,
)
from services.employee_service import EmployeeService
from utils.logger import get_logger

logger = get_logger(__name__)

EXIT_CHOICE = 5

ACTIONS = {
    1: add_employee,
    2: view_all_employees,
    3: update_employee,
    4: delete_employee,
}

MENU_TEXT = (
    "\n--- Menu ---\n"
    "1. Add New Employee (Create)\n"
    "2. View All Employees (Read)\n"
    "3. Update Employee\n"
    "4. Delete Employee\n"
    "5. Exit"
)

BANNER = (
    "=================================================\n"
    "       EMPLOYEE DATABASE CRUD APPLICATION\n"
    "================================================="
)


def run_menu(console: Console, service: EmployeeService) -> None:
    """
    Show the menu until the user picks Exit or input ends.

    Invalid selections print an error and redisplay the menu.
    EOF and Ctrl-C are treated as Exit.
    """
    console.say(BANNER)
    try:
        while True:
            console.say(MENU_TEXT)
            raw = console.ask("Enter your choice: ")
            try:
                choice = int(raw.strip())
            except ValueError:
                console.say("\n[ERROR] Invalid input. Please enter a number.")
                continue

            if choice == EXIT_CHOICE:
                break

            action = ACTIONS.get(choice)
            if action is None:
                console.say("\n[ERROR] Invalid choice. Please select 1-5.")
                continue

            logger.debug(f"Menu choice {choice}: {action.__name__}")
            action(console, service)
    except (EOFError, KeyboardInterrupt):
        # end of input behaves like Exit
        console.say()

    console.say("\nApplication shutdown complete. Goodbye!")
