from __future__ import annotations

from datetime import datetime

import mysql.connector
import pytest

from employee_directory.core.enums import CredentialKind, EmployeeStatus
from employee_directory.core.exceptions import ConflictError, NotFoundError, StorageError
from employee_directory.credentials.mysql_credential_repository import MySQLCredentialRepository
from employee_directory.employees.model import EmployeePatch
from employee_directory.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = None
        self.rowcount = 0
        self._result = []

    def execute(self, sql, params=None):
        self._conn.executed.append((" ".join(sql.split()), params))
        if self._conn.error is not None:
            raise self._conn.error
        self._result = list(self._conn.results.pop(0)) if self._conn.results else []
        self.lastrowid = self._conn.lastrowid
        self.rowcount = self._conn.rowcount

    def fetchone(self):
        return self._result[0] if self._result else None

    def fetchall(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, results=None, *, lastrowid=None, rowcount=0, error=None):
        self.results = list(results or [])
        self.lastrowid = lastrowid
        self.rowcount = rowcount
        self.error = error
        self.executed = []
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self)

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, conn):
        self.conn = conn

    def connect(self):
        return self.conn


def _row(**overrides):
    row = {
        "id": 7,
        "name": "Ana",
        "email": "ana@x.com",
        "department": "Tech",
        "role": "Eng",
        "status": "Active",
        "created_at": datetime(2026, 1, 5, 9, 0),
    }
    row.update(overrides)
    return row


def test_create_inserts_and_returns_id():
    conn = FakeConnection(lastrowid=7)
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    new_id = repo.create(name=" Ana ", email="ana@x.com", department="Tech", role="Eng")

    assert new_id == 7
    sql, params = conn.executed[0]
    assert sql.startswith("INSERT INTO employees(name, email, department, role)")
    assert params == ("Ana", "ana@x.com", "Tech", "Eng")
    assert conn.committed and conn.closed


def test_get_by_id_filters_active():
    conn = FakeConnection([[_row()]])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    emp = repo.get_by_id(7)

    sql, params = conn.executed[0]
    assert "WHERE id=%s AND status=%s" in sql
    assert params == (7, "Active")
    assert emp.status == EmployeeStatus.ACTIVE
    assert emp.to_dict()["createdAt"] == "2026-01-05T09:00:00"


def test_get_by_email_ignores_status():
    conn = FakeConnection([[_row(status="Inactive")]])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    emp = repo.get_by_email("ana@x.com")

    assert "status" not in conn.executed[0][0].split("WHERE", 1)[1]
    assert emp.status == EmployeeStatus.INACTIVE


def test_update_sets_only_supplied_columns():
    conn = FakeConnection([[_row()], [], [_row(department="Sales")]])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    emp = repo.update(7, EmployeePatch(department="Sales"))

    update_sql, update_params = conn.executed[1]
    assert update_sql == "UPDATE employees SET department=%s WHERE id=%s"
    assert update_params == ("Sales", 7)
    assert emp.department == "Sales"


def test_update_missing_employee_raises_not_found():
    conn = FakeConnection([[]])
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    with pytest.raises(NotFoundError):
        repo.update(7, EmployeePatch(name="X"))
    assert conn.rolled_back


def test_soft_delete_flips_status():
    conn = FakeConnection(rowcount=1)
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    assert repo.soft_delete(7) is True
    assert conn.executed[0] == ("UPDATE employees SET status=%s WHERE id=%s", ("Inactive", 7))


def test_duplicate_key_becomes_conflict():
    error = mysql.connector.IntegrityError(msg="Duplicate entry 'ana@x.com' for key 'employees.uq_employees_email'", errno=1062)
    conn = FakeConnection(error=error)
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    with pytest.raises(ConflictError, match="Email is already registered"):
        repo.create(name="Ana", email="ana@x.com", department="Tech", role="Eng")
    assert conn.rolled_back and conn.closed


def test_driver_error_becomes_storage_error():
    conn = FakeConnection(error=mysql.connector.OperationalError(msg="Lost connection", errno=2013))
    repo = MySQLEmployeeRepository(FakeConnFactory(conn))

    with pytest.raises(StorageError, match="Lost connection"):
        repo.list_active()


def test_sample_lookup_is_binary_exact():
    conn = FakeConnection([[{"employee_id": 7}]])
    repo = MySQLCredentialRepository(FakeConnFactory(conn))

    owner = repo.find_owner_by_sample(CredentialKind.FACE, "face-1")

    sql, params = conn.executed[0]
    assert sql == "SELECT employee_id FROM face_credentials WHERE sample = CAST(%s AS BINARY) LIMIT 1"
    assert params == ("face-1",)
    assert owner == 7


def test_add_sample_credential_targets_kind_table():
    conn = FakeConnection()
    repo = MySQLCredentialRepository(FakeConnFactory(conn))

    repo.add_sample_credential(7, CredentialKind.FINGERPRINT, "fp-1")

    assert conn.executed[0] == (
        "INSERT INTO fingerprint_credentials(employee_id, sample) VALUES(%s,%s)",
        (7, "fp-1"),
    )


def test_get_email_credential_none_when_missing():
    conn = FakeConnection([[]])
    repo = MySQLCredentialRepository(FakeConnFactory(conn))

    assert repo.get_email_credential(7) is None


def test_duplicate_credential_key_is_not_reported_as_email():
    error = mysql.connector.IntegrityError(
        msg="Duplicate entry '7' for key 'face_credentials.PRIMARY'", errno=1062
    )
    conn = FakeConnection(error=error)
    repo = MySQLCredentialRepository(FakeConnFactory(conn))

    with pytest.raises(ConflictError, match="credential of this kind already exists") as exc_info:
        repo.add_sample_credential(7, CredentialKind.FACE, "face-1")
    assert "Email" not in str(exc_info.value)
