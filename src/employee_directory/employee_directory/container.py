from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .auth.service import AuthService
from .core.constants import DEFAULT_PASSWORD_HASH_METHOD
from .credentials.hashing import PasswordHasher
from .credentials.matchers import ExactSampleMatcher, SampleMatcher
from .credentials.mysql_credential_repository import MySQLCredentialRepository
from .credentials.repository import CredentialRepository
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository
    credentials_repo: CredentialRepository

    hasher: PasswordHasher
    auth_service: AuthService
    employee_service: EmployeeService


def build_services(
    *,
    employees_repo: EmployeeRepository,
    credentials_repo: CredentialRepository,
    hasher: PasswordHasher,
    matcher: Optional[SampleMatcher] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services over any repositories satisfying the protocols."""
    return Container(
        conn=conn,
        employees_repo=employees_repo,
        credentials_repo=credentials_repo,
        hasher=hasher,
        auth_service=AuthService(employees_repo, credentials_repo, hasher, matcher or ExactSampleMatcher()),
        employee_service=EmployeeService(employees_repo, credentials_repo, hasher),
    )


def build_container(*, db_config: dict, password_hash_method: str = DEFAULT_PASSWORD_HASH_METHOD) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))

    return build_services(
        employees_repo=MySQLEmployeeRepository(conn),
        credentials_repo=MySQLCredentialRepository(conn),
        hasher=PasswordHasher(method=password_hash_method),
        conn=conn,
    )
