from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, List, Mapping, Sequence

from ..common.serialization import as_sample_string
from ..common.validators import optional_non_empty, require_max_length, require_non_empty, require_positive_int
from ..core.constants import MAX_DEPARTMENT_LENGTH, MAX_EMAIL_LENGTH, MAX_NAME_LENGTH, MAX_ROLE_LENGTH
from ..core.enums import CredentialKind
from ..core.exceptions import ConflictError, NotFoundError, StorageError, ValidationError
from ..credentials.hashing import PasswordHasher
from ..credentials.model import CredentialResult
from ..credentials.repository import CredentialRepository
from .model import Employee, EmployeePatch
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_MAX_LENGTHS = {
    "name": MAX_NAME_LENGTH,
    "email": MAX_EMAIL_LENGTH,
    "department": MAX_DEPARTMENT_LENGTH,
    "role": MAX_ROLE_LENGTH,
}


@dataclass(frozen=True)
class CreatedEmployee:
    employee: Employee
    credentials: List[CredentialResult] = field(default_factory=list)

    @property
    def fully_stored(self) -> bool:
        return all(r.stored for r in self.credentials)


def _supplied(value: Any) -> bool:
    return value is not None and value != ""


def build_patch(data: Mapping[str, Any]) -> EmployeePatch:
    """Validate a partial update body into an ``EmployeePatch``.

    Absent or null keys mean "unchanged"; any other value must be a
    non-blank string.
    """
    values = {}
    for key, max_len in _MAX_LENGTHS.items():
        value = optional_non_empty(data.get(key), key)
        if value is not None:
            require_max_length(value, key, max_len)
        values[key] = value
    return EmployeePatch(**values)


class EmployeeService:
    """Use cases: manage employees and attach credentials (admin)."""

    def __init__(self, employees: EmployeeRepository, credentials: CredentialRepository, hasher: PasswordHasher):
        self._employees = employees
        self._credentials = credentials
        self._hasher = hasher

    def create_employee(
        self,
        *,
        name: Any,
        email: Any,
        department: Any,
        role: Any,
        password: Any = None,
        fingerprint_sample: Any = None,
        face_sample: Any = None,
    ) -> CreatedEmployee:
        raw = {"name": name, "email": email, "department": department, "role": role}
        if any(not isinstance(v, str) or not v.strip() for v in raw.values()):
            raise ValidationError("name, email, department and role are required")
        fields_ = {
            key: require_max_length(require_non_empty(v, key), key, _MAX_LENGTHS[key]) for key, v in raw.items()
        }

        if self._employees.get_by_email(fields_["email"]):
            raise ConflictError("Email is already registered")

        employee_id = self._employees.create(**fields_)
        logger.info("Employee created with id %s", employee_id)

        results: List[CredentialResult] = []
        if _supplied(password):
            results.append(
                self._attempt(CredentialKind.EMAIL, employee_id, lambda: self.add_email_credential(employee_id, password))
            )
        if _supplied(fingerprint_sample):
            results.append(
                self._attempt(
                    CredentialKind.FINGERPRINT,
                    employee_id,
                    lambda: self.add_fingerprint_credential(employee_id, fingerprint_sample),
                )
            )
        if _supplied(face_sample):
            results.append(
                self._attempt(
                    CredentialKind.FACE, employee_id, lambda: self.add_face_credential(employee_id, face_sample)
                )
            )

        employee = self._employees.get_by_id(employee_id)
        if employee is None:
            raise StorageError(f"Employee {employee_id} was not readable after creation")
        return CreatedEmployee(employee=employee, credentials=results)

    def _attempt(self, kind: CredentialKind, employee_id: int, step: Callable[[], None]) -> CredentialResult:
        # Best effort: a failed credential never undoes the employee or the other credentials.
        try:
            step()
        except Exception as e:
            logger.exception("Could not store %s credential for employee %s", kind.value, employee_id)
            return CredentialResult(method=kind, stored=False, error=str(e))
        logger.info("Stored %s credential for employee %s", kind.value, employee_id)
        return CredentialResult(method=kind, stored=True)

    def add_email_credential(self, employee_id: Any, plain_password: Any) -> None:
        employee_id = require_positive_int(employee_id, "employee id")
        if not isinstance(plain_password, str) or not plain_password:
            raise ValidationError("password must be a non-empty string")
        self._credentials.add_email_credential(employee_id, self._hasher.hash(plain_password))

    def add_fingerprint_credential(self, employee_id: Any, sample: Any) -> None:
        self._credentials.add_sample_credential(
            require_positive_int(employee_id, "employee id"), CredentialKind.FINGERPRINT, as_sample_string(sample)
        )

    def add_face_credential(self, employee_id: Any, sample: Any) -> None:
        self._credentials.add_sample_credential(
            require_positive_int(employee_id, "employee id"), CredentialKind.FACE, as_sample_string(sample)
        )

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_active()

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def update_employee(self, employee_id: int, patch: EmployeePatch) -> Employee:
        existing = self.get_employee(employee_id)

        if patch.email is not None and patch.email != existing.email:
            # The column collation is case-insensitive, so a case-only change finds this same row.
            holder = self._employees.get_by_email(patch.email)
            if holder and holder.id != existing.id:
                raise ConflictError("Email is already registered by another employee")

        if patch.is_empty():
            return existing
        return self._employees.update(employee_id, patch)

    def delete_employee(self, employee_id: int) -> None:
        self.get_employee(employee_id)
        self._employees.soft_delete(employee_id)
        logger.info("Employee %s deactivated", employee_id)

    def email_exists(self, email: str) -> bool:
        return self._employees.get_by_email(email.strip()) is not None

    def name_exists(self, name: str) -> bool:
        return bool(self._employees.find_active_by_name(name.strip()))
