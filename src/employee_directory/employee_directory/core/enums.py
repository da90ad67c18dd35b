from __future__ import annotations

from enum import Enum


class EmployeeStatus(str, Enum):
    """Visibility flag; INACTIVE means soft-deleted."""

    ACTIVE = "Active"
    INACTIVE = "Inactive"


class CredentialKind(str, Enum):
    """Credential tables attached to an employee."""

    EMAIL = "email"
    FINGERPRINT = "fingerprint"
    FACE = "face"
