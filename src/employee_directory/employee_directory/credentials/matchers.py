from __future__ import annotations

from typing import Optional, Protocol

from ..core.enums import CredentialKind
from .repository import CredentialRepository


class SampleMatcher(Protocol):
    """Finds which employee owns a presented fingerprint/face sample.

    A similarity-scoring matcher can walk ``credentials.list_samples(kind)``
    instead of asking storage for an exact hit.
    """

    def find_owner(self, credentials: CredentialRepository, kind: CredentialKind, sample: str) -> Optional[int]:
        raise NotImplementedError


class ExactSampleMatcher:
    """Verbatim string equality; no tolerance for sensor noise."""

    def find_owner(self, credentials: CredentialRepository, kind: CredentialKind, sample: str) -> Optional[int]:
        return credentials.find_owner_by_sample(kind, sample)
