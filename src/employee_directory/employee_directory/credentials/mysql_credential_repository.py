from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import CredentialKind
from ..core.exceptions import ValidationError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import EmailCredential, SampleCredential
from .repository import CredentialRepository

_SAMPLE_TABLES = {
    CredentialKind.FINGERPRINT: "fingerprint_credentials",
    CredentialKind.FACE: "face_credentials",
}


def _sample_table(kind: CredentialKind) -> str:
    table = _SAMPLE_TABLES.get(kind)
    if not table:
        raise ValidationError(f"Unsupported sample credential: {kind}")
    return table


class MySQLCredentialRepository(CredentialRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_email_credential(self, employee_id: int, password_hash: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO email_credentials(employee_id, password_hash) VALUES(%s,%s)",
                (employee_id, password_hash),
            )

    def add_sample_credential(self, employee_id: int, kind: CredentialKind, sample: str) -> None:
        table = _sample_table(kind)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"INSERT INTO {table}(employee_id, sample) VALUES(%s,%s)", (employee_id, sample))

    def get_email_credential(self, employee_id: int) -> Optional[EmailCredential]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT employee_id, password_hash FROM email_credentials WHERE employee_id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
            if not row:
                return None
            return EmailCredential(employee_id=int(row["employee_id"]), password_hash=row["password_hash"])

    def find_owner_by_sample(self, kind: CredentialKind, sample: str) -> Optional[int]:
        table = _sample_table(kind)
        with db_cursor(self._conn_factory) as (_, cur):
            # BINARY keeps the comparison byte-for-byte (no collation folding).
            cur.execute(f"SELECT employee_id FROM {table} WHERE sample = CAST(%s AS BINARY) LIMIT 1", (sample,))
            row = fetchone(cur)
            return int(row["employee_id"]) if row else None

    def list_samples(self, kind: CredentialKind) -> Sequence[SampleCredential]:
        table = _sample_table(kind)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT employee_id, sample FROM {table}")
            return [
                SampleCredential(employee_id=int(r["employee_id"]), kind=kind, sample=r["sample"])
                for r in fetchall(cur)
            ]
