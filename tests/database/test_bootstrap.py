from __future__ import annotations

from pathlib import Path

from employee_directory.database.bootstrap import _exec_script, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


class RecordingCursor:
    def __init__(self):
        self.statements = []

    def execute(self, stmt):
        self.statements.append(stmt)


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); INSERT INTO t VALUES (\"c;d\");\nSELECT 1"

    assert list(iter_sql_statements(sql)) == [
        "INSERT INTO t VALUES ('a;b')",
        'INSERT INTO t VALUES ("c;d")',
        "SELECT 1",
    ]


def test_schema_creates_four_tables_without_database_switch():
    cur = RecordingCursor()

    count = _exec_script(cur, SCHEMA.read_text(encoding="utf-8"))

    assert count == 4
    assert all(s.startswith("CREATE TABLE IF NOT EXISTS") for s in cur.statements)
    for table in ("employees", "email_credentials", "fingerprint_credentials", "face_credentials"):
        assert any(f"CREATE TABLE IF NOT EXISTS {table} " in s for s in cur.statements)
