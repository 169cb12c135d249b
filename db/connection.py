"""
db/connection.py
----------------
Opens and releases PostgreSQL connections.
Every data-access operation acquires its own connection and releases it
before returning; nothing is pooled or shared between operations.
"""

from contextlib import contextmanager

import psycopg2

from config import DATABASE_URL, DB_CONNECT_TIMEOUT
from utils.logger import get_logger

logger = get_logger(__name__)


def get_connection():
    """
    Open a new connection to the employees database.

    Returns:
        A psycopg2 connection object.

    Raises:
        psycopg2.OperationalError: If the database is unreachable or
            rejects the credentials.
    """
    kwargs = {}
    if DB_CONNECT_TIMEOUT > 0:
        kwargs["connect_timeout"] = DB_CONNECT_TIMEOUT
    conn = psycopg2.connect(DATABASE_URL, **kwargs)
    logger.debug("Opened database connection.")
    return conn


def release_connection(conn) -> None:
    """
    Close a connection opened by get_connection().

    Args:
        conn: The psycopg2 connection to release.
    """
    if conn is not None and not conn.closed:
        conn.close()
        logger.debug("Closed database connection.")


@contextmanager
def connection_scope():
    """Yield a fresh connection and close it on every exit path."""
    conn = get_connection()
    try:
        yield conn
    finally:
        release_connection(conn)
