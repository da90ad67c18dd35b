from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, List, Optional

import mysql.connector

from ..core.constants import EMAIL_UNIQUE_KEY, MYSQL_DUPLICATE_ENTRY
from ..core.exceptions import ConflictError, DomainError, StorageError
from .connection import DatabaseConnection

logger = logging.getLogger(__name__)


def _translate(exc: mysql.connector.Error) -> DomainError:
    if isinstance(exc, mysql.connector.IntegrityError) and exc.errno == MYSQL_DUPLICATE_ENTRY:
        # MySQL names the violated key: "Duplicate entry '...' for key 'employees.uq_employees_email'".
        if EMAIL_UNIQUE_KEY in (exc.msg or ""):
            return ConflictError("Email is already registered")
        return ConflictError("A credential of this kind already exists for the employee")
    return StorageError(exc.msg or str(exc))


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    """Yield ``(conn, cursor)``; commit on success, roll back on error.

    Driver errors are re-raised as ``ConflictError`` (duplicate key) or
    ``StorageError`` so callers never see ``mysql.connector`` types.
    """
    try:
        conn = conn_factory.connect()
    except mysql.connector.Error as e:
        logger.error("Could not connect to database: %s", e)
        raise StorageError(f"Could not connect to database: {e.msg or e}") from e

    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except mysql.connector.Error as e:
        conn.rollback()
        raise _translate(e) from e
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])
