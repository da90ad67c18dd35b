"""Constants and defaults."""

DEFAULT_PASSWORD_HASH_METHOD = "pbkdf2:sha256:600000"
DEFAULT_SALT_LENGTH = 16
DEFAULT_DB_PORT = 3306

MAX_NAME_LENGTH = 150
MAX_EMAIL_LENGTH = 255
MAX_DEPARTMENT_LENGTH = 100
MAX_ROLE_LENGTH = 100

# MySQL error code for a duplicate key on a UNIQUE/PRIMARY index.
MYSQL_DUPLICATE_ENTRY = 1062

# Name of the UNIQUE constraint on employees.email in schema.sql.
EMAIL_UNIQUE_KEY = "uq_employees_email"
