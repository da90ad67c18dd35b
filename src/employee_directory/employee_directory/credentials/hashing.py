from __future__ import annotations

from werkzeug.security import check_password_hash, generate_password_hash

from ..core.constants import DEFAULT_PASSWORD_HASH_METHOD, DEFAULT_SALT_LENGTH


class PasswordHasher:
    """One-way password hashing backed by werkzeug.

    ``method`` carries the cost factor, e.g. ``pbkdf2:sha256:600000`` or
    ``scrypt:32768:8:1``.
    """

    def __init__(self, method: str = DEFAULT_PASSWORD_HASH_METHOD, salt_length: int = DEFAULT_SALT_LENGTH):
        self._method = method
        self._salt_length = int(salt_length)

    def hash(self, password: str) -> str:
        return generate_password_hash(password, method=self._method, salt_length=self._salt_length)

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return check_password_hash(password_hash, password)
        except ValueError:
            # Malformed or unsupported hash stored in the table.
            return False
