from __future__ import annotations

import logging
from typing import Any, Mapping, Optional

from ..common.serialization import as_sample_string
from ..core.enums import CredentialKind
from ..core.exceptions import BadRequest, InvalidCredentials, NoSuchAuthMethod
from ..credentials.hashing import PasswordHasher
from ..credentials.matchers import ExactSampleMatcher, SampleMatcher
from ..credentials.repository import CredentialRepository
from ..employees.model import EmployeeView
from ..employees.repository import EmployeeRepository

logger = logging.getLogger(__name__)


def _supplied(value: Any) -> bool:
    return value is not None and value != ""


class AuthService:
    """Use case: authenticate an employee with one credential.

    Accepted shapes, checked in this order:

    - ``{"email", "password"}``
    - ``{"fingerprintSample"}``
    - ``{"faceSample"}``
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        credentials: CredentialRepository,
        hasher: PasswordHasher,
        matcher: Optional[SampleMatcher] = None,
    ):
        self._employees = employees
        self._credentials = credentials
        self._hasher = hasher
        self._matcher = matcher or ExactSampleMatcher()

    def authenticate(self, credentials: Mapping[str, Any]) -> EmployeeView:
        email = credentials.get("email")
        password = credentials.get("password")

        if _supplied(email) and _supplied(password):
            return self._by_password(email, password)
        if _supplied(credentials.get("fingerprintSample")):
            return self._by_sample(CredentialKind.FINGERPRINT, credentials["fingerprintSample"])
        if _supplied(credentials.get("faceSample")):
            return self._by_sample(CredentialKind.FACE, credentials["faceSample"])

        raise BadRequest("Provide email and password, a fingerprint sample or a face sample")

    def _by_password(self, email: Any, password: Any) -> EmployeeView:
        if not isinstance(email, str) or not isinstance(password, str):
            raise BadRequest("email and password must be strings")

        employee = self._employees.get_by_email(email.strip())
        if not employee:
            raise InvalidCredentials("Invalid credentials")

        credential = self._credentials.get_email_credential(employee.id)
        if not credential:
            raise NoSuchAuthMethod("This employee has no email authentication configured")

        if not self._hasher.verify(password, credential.password_hash):
            raise InvalidCredentials("Invalid credentials")

        return employee.view()

    def _by_sample(self, kind: CredentialKind, sample: Any) -> EmployeeView:
        owner_id = self._matcher.find_owner(self._credentials, kind, as_sample_string(sample))
        if owner_id is None:
            raise InvalidCredentials(f"{kind.value.capitalize()} authentication failed")

        employee = self._employees.get_by_id(owner_id)
        if not employee:
            # Sample belongs to a deactivated employee.
            logger.info("%s sample matched inactive employee %s", kind.value, owner_id)
            raise InvalidCredentials(f"{kind.value.capitalize()} authentication failed")

        return employee.view()
