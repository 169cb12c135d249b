"""
repositories/base.py
--------------------
Shared error boundary for repository methods.
"""

from functools import wraps
from typing import Any, Callable, Optional

import psycopg2

from models.result import OperationResult
from utils.logger import get_logger

logger = get_logger(__name__)


def db_operation(action: str, default: Optional[Callable[[], Any]] = None):
    """
    Decorator that converts psycopg2 errors raised by a repository method
    into a failed OperationResult.

    Usage:
        @db_operation("list employees", default=list)
        def read_all(self) -> OperationResult:
            ...

    Args:
        action: Human-readable description used in the diagnostic log line.
        default: Factory for the value carried by the failed result
            (e.g. ``list`` so callers still receive an empty sequence).
    """
    def decorator(func: Callable):
        @wraps(func)
        def wrapper(*args, **kwargs) -> OperationResult:
            try:
                return func(*args, **kwargs)
            except psycopg2.Error as e:
                result = OperationResult.failure(e, default() if default else None)
                logger.error(
                    f"Failed to {action}: status={result.status.value} "
                    f"sqlstate={result.error.sqlstate} code={result.error.error_code} "
                    f"message={result.error.message}"
                )
                return result

        return wrapper

    return decorator
