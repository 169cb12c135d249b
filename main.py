"""
main.py
-------
Entry point for the employee manager console application.

Responsibilities:
    - Create the employees table if configured to do so.
    - Build the console and service used for the whole session.
    - Run the interactive menu until the user exits.
"""

import psycopg2

from config import INIT_SCHEMA
from db.init_db import create_tables
from handlers.console import Console
from handlers.menu_handler import run_menu
from services.employee_service import EmployeeService
from utils.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Initialize and run the console application."""

    # ── 1. Database setup ─────────────────────────────────
    if INIT_SCHEMA:
        logger.info("Initializing database schema...")
        try:
            create_tables()
        except psycopg2.Error as e:
            # Not fatal: every menu action reports its own database errors.
            logger.warning(f"Schema initialization skipped: {e}")

    # ── 2. Session-wide collaborators ─────────────────────
    console = Console()
    service = EmployeeService()

    # ── 3. Run the menu ───────────────────────────────────
    run_menu(console, service)
    logger.info("Employee manager stopped.")


if __name__ == "__main__":
    main()
