class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is missing or invalid."""


class EmployeeNotFoundError(DomainError):
    """Raised when no employee record exists under an identifier."""


class StorageError(DomainError):
    """Raised when the record store cannot read or write a record."""
