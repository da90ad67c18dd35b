from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from employee_directory.container import build_services
from employee_directory.core.enums import CredentialKind, EmployeeStatus
from employee_directory.core.exceptions import ConflictError, NotFoundError
from employee_directory.credentials.hashing import PasswordHasher
from employee_directory.credentials.model import EmailCredential, SampleCredential
from employee_directory.employees.model import Employee, EmployeePatch
from employee_directory.main import create_app


class InMemoryEmployees:
    """Keeps every row, inactive ones included, like the real table."""

    def __init__(self):
        self.rows: dict[int, Employee] = {}
        self._next_id = 1
        self._clock = datetime(2026, 1, 5, 9, 0, 0)

    def create(self, *, name, email, department, role) -> int:
        if self.get_by_email(email):
            raise ConflictError("Email is already registered")
        new_id = self._next_id
        self._next_id += 1
        self._clock += timedelta(minutes=1)
        self.rows[new_id] = Employee(
            id=new_id,
            name=name,
            email=email,
            department=department,
            role=role,
            status=EmployeeStatus.ACTIVE,
            created_at=self._clock,
        )
        return new_id

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        emp = self.rows.get(employee_id)
        return emp if emp and emp.is_active else None

    def get_by_email(self, email: str) -> Optional[Employee]:
        # Mirrors the case-insensitive collation of employees.email.
        return next((e for e in self.rows.values() if e.email.casefold() == email.casefold()), None)

    def list_active(self):
        return [e for e in self.rows.values() if e.is_active]

    def find_active_by_name(self, name: str):
        return [e for e in self.rows.values() if e.is_active and e.name == name]

    def update(self, employee_id: int, patch: EmployeePatch) -> Employee:
        emp = self.get_by_id(employee_id)
        if not emp:
            raise NotFoundError("Employee not found")
        self.rows[employee_id] = replace(emp, **patch.changes())
        return self.rows[employee_id]

    def soft_delete(self, employee_id: int) -> bool:
        emp = self.rows.get(employee_id)
        if not emp:
            return False
        self.rows[employee_id] = replace(emp, status=EmployeeStatus.INACTIVE)
        return True


class InMemoryCredentials:
    def __init__(self):
        self.email: dict[int, EmailCredential] = {}
        self.samples: dict[CredentialKind, dict[int, str]] = {
            CredentialKind.FINGERPRINT: {},
            CredentialKind.FACE: {},
        }
        self.fail_kinds: set[CredentialKind] = set()

    def add_email_credential(self, employee_id: int, password_hash: str) -> None:
        if CredentialKind.EMAIL in self.fail_kinds:
            raise RuntimeError("email_credentials insert failed")
        self.email[employee_id] = EmailCredential(employee_id=employee_id, password_hash=password_hash)

    def add_sample_credential(self, employee_id: int, kind: CredentialKind, sample: str) -> None:
        if kind in self.fail_kinds:
            raise RuntimeError(f"{kind.value} insert failed")
        self.samples[kind][employee_id] = sample

    def get_email_credential(self, employee_id: int) -> Optional[EmailCredential]:
        return self.email.get(employee_id)

    def find_owner_by_sample(self, kind: CredentialKind, sample: str) -> Optional[int]:
        return next((emp_id for emp_id, s in self.samples[kind].items() if s == sample), None)

    def list_samples(self, kind: CredentialKind):
        return [SampleCredential(employee_id=i, kind=kind, sample=s) for i, s in self.samples[kind].items()]


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def credentials_repo():
    return InMemoryCredentials()


@pytest.fixture
def hasher():
    return PasswordHasher(method="pbkdf2:sha256:1000")


@pytest.fixture
def container(employees_repo, credentials_repo, hasher):
    return build_services(employees_repo=employees_repo, credentials_repo=credentials_repo, hasher=hasher)


@pytest.fixture
def app(container):
    app = create_app(container, settings_module="config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()
