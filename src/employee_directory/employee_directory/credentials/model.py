from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..core.enums import CredentialKind


@dataclass(frozen=True)
class EmailCredential:
    employee_id: int
    password_hash: str


@dataclass(frozen=True)
class SampleCredential:
    """Fingerprint or face sample; compared verbatim by the default matcher."""

    employee_id: int
    kind: CredentialKind
    sample: str


@dataclass(frozen=True)
class CredentialResult:
    """Outcome of one credential insert during employee creation."""

    method: CredentialKind
    stored: bool
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {"method": self.method.value, "stored": self.stored, "error": self.error}
