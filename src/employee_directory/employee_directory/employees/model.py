from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Optional

from ..common.serialization import isoformat
from ..core.enums import EmployeeStatus


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object; it holds no database access code.
    """

    id: int
    name: str
    email: str
    department: str
    role: str
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    created_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "role": self.role,
            "status": self.status.value,
            "createdAt": isoformat(self.created_at),
        }

    def view(self) -> "EmployeeView":
        return EmployeeView(
            id=self.id,
            name=self.name,
            email=self.email,
            department=self.department,
            role=self.role,
        )


@dataclass(frozen=True)
class EmployeeView:
    """Reduced employee returned after a successful login."""

    id: int
    name: str
    email: str
    department: str
    role: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "role": self.role,
        }


@dataclass(frozen=True)
class EmployeePatch:
    """Updatable fields; ``None`` leaves the stored value unchanged."""

    name: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    role: Optional[str] = None

    def changes(self) -> Dict[str, str]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self) -> bool:
        return not self.changes()
