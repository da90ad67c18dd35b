from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import CredentialKind
from .model import EmailCredential, SampleCredential


class CredentialRepository(Protocol):
    def add_email_credential(self, employee_id: int, password_hash: str) -> None:
        raise NotImplementedError

    def add_sample_credential(self, employee_id: int, kind: CredentialKind, sample: str) -> None:
        raise NotImplementedError

    def get_email_credential(self, employee_id: int) -> Optional[EmailCredential]:
        raise NotImplementedError

    def find_owner_by_sample(self, kind: CredentialKind, sample: str) -> Optional[int]:
        """Exact match on the stored sample text."""
        raise NotImplementedError

    def list_samples(self, kind: CredentialKind) -> Sequence[SampleCredential]:
        raise NotImplementedError
