"""
db/init_db.py
-------------
Creates the database schema (tables) if they do not already exist.
Run this module directly to initialize a fresh database:
    python -m db.init_db
"""

from db.connection import connection_scope
from utils.logger import get_logger

logger = get_logger(__name__)

SCHEMA_SQL = """
-- Employees table: one row per employee record
CREATE TABLE IF NOT EXISTS employees (
    id              SERIAL PRIMARY KEY,
    name            VARCHAR(100) NOT NULL,
    department      VARCHAR(50),
    salary          NUMERIC(10,2) NOT NULL
);
"""


def create_tables() -> None:
    """
    Execute the schema SQL to create all tables.
    Safe to call multiple times (uses IF NOT EXISTS).

    Raises:
        psycopg2.Error: If the database is unreachable or the DDL fails.
    """
    with connection_scope() as conn:
        try:
            with conn.cursor() as cur:
                cur.execute(SCHEMA_SQL)
            conn.commit()
            logger.info("Database schema initialized successfully.")
        except Exception as e:
            if not conn.closed:
                conn.rollback()
            logger.error(f"Failed to initialize schema: {e}")
            raise


if __name__ == "__main__":
    create_tables()
    print("Database schema created successfully.")
