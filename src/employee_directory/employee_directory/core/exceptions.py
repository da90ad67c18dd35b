class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or malformed."""


class BadRequest(ValidationError):
    """Raised when a request does not carry any usable shape."""


class ConflictError(DomainError):
    """Raised when a unique field (email) is already taken."""


class NotFoundError(DomainError):
    """Raised when an employee id is unknown or inactive."""


class AuthenticationError(DomainError):
    """Base for authentication failures."""


class InvalidCredentials(AuthenticationError):
    """Raised when credentials do not match any employee."""


class NoSuchAuthMethod(AuthenticationError):
    """Raised when the employee has no credential of the requested kind."""


class StorageError(DomainError):
    """Raised when the underlying database fails."""
