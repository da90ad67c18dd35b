from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeePatch


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Services depend on this protocol, never on a concrete database.
    """

    def create(self, *, name: str, email: str, department: str, role: str) -> int:
        raise NotImplementedError

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        """Active employees only."""
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        """Any status; used for login and uniqueness checks."""
        raise NotImplementedError

    def list_active(self) -> Sequence[Employee]:
        raise NotImplementedError

    def find_active_by_name(self, name: str) -> Sequence[Employee]:
        raise NotImplementedError

    def update(self, employee_id: int, patch: EmployeePatch) -> Employee:
        raise NotImplementedError

    def soft_delete(self, employee_id: int) -> bool:
        raise NotImplementedError
