from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..common.validators import require_non_empty
from ..core.enums import EmployeeStatus
from ..core.exceptions import NotFoundError, StorageError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, EmployeePatch
from .repository import EmployeeRepository

_COLUMNS = "id, name, email, department, role, status, created_at"

# Column names are never taken from request data.
_UPDATABLE_COLUMNS = ("name", "email", "department", "role")


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    return Employee(
        id=int(row["id"]),
        name=row["name"],
        email=row["email"],
        department=row["department"],
        role=row["role"],
        status=EmployeeStatus(row.get("status") or EmployeeStatus.ACTIVE.value),
        created_at=row.get("created_at"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create(self, *, name: str, email: str, department: str, role: str) -> int:
        values = (
            require_non_empty(name, "name"),
            require_non_empty(email, "email"),
            require_non_empty(department, "department"),
            require_non_empty(role, "role"),
        )
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, department, role)
                VALUES(%s,%s,%s,%s)
                """,
                values,
            )
            new_id = cur.lastrowid
            if not new_id:
                raise StorageError("Could not obtain an id for the new employee")
            return int(new_id)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id=%s AND status=%s",
                (employee_id, EmployeeStatus.ACTIVE.value),
            )
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_active(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE status=%s", (EmployeeStatus.ACTIVE.value,))
            return [_row_to_employee(r) for r in fetchall(cur)]

    def find_active_by_name(self, name: str) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE name=%s AND status=%s",
                (name, EmployeeStatus.ACTIVE.value),
            )
            return [_row_to_employee(r) for r in fetchall(cur)]

    def update(self, employee_id: int, patch: EmployeePatch) -> Employee:
        changes = patch.changes()
        assignments = [f"{col}=%s" for col in _UPDATABLE_COLUMNS if col in changes]
        params = [changes[col] for col in _UPDATABLE_COLUMNS if col in changes]

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM employees WHERE id=%s AND status=%s",
                (employee_id, EmployeeStatus.ACTIVE.value),
            )
            row = fetchone(cur)
            if not row:
                raise NotFoundError("Employee not found")
            if not assignments:
                return _row_to_employee(row)

            cur.execute(
                f"UPDATE employees SET {', '.join(assignments)} WHERE id=%s",
                (*params, employee_id),
            )
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (employee_id,))
            return _row_to_employee(fetchone(cur))

    def soft_delete(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE employees SET status=%s WHERE id=%s",
                (EmployeeStatus.INACTIVE.value, employee_id),
            )
            return cur.rowcount > 0
