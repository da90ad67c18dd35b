from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "employee_directory"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from employee_directory.container import build_container
from employee_directory.database.bootstrap import apply_seed_sql
from employee_directory.database.connection import DBConfig

DEMO_PASSWORDS = {
    "ana.torres@example.com": "secret1",
    "marta.ruiz@example.com": "secret2",
}


def ensure_demo_passwords(container) -> int:
    """Attach demo passwords through the service so hashes use the configured method."""
    added = 0
    for email, password in DEMO_PASSWORDS.items():
        employee = container.employees_repo.get_by_email(email)
        if not employee or container.credentials_repo.get_email_credential(employee.id):
            continue
        container.employee_service.add_email_credential(employee.id, password)
        added += 1
    return added


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_seed_sql(db_config, seed_path=REPO_ROOT / "database" / "seed.sql")
    container = build_container(db_config=db_config, password_hash_method=settings.PASSWORD_HASH_METHOD)
    added = ensure_demo_passwords(container)

    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()} (passwords added={added})")


if __name__ == "__main__":
    main()
